"""
Workout session controller.

Tracks which exercise and which set the user is on, holds the sets they log,
runs the rest countdown between sets, and persists everything when the
session ends.

State machine:
    initializing -> active <-> resting -> finishing -> completed
                                             |
                                             +-> save_failed -> finishing (retry)

    initializing -> unavailable   (plan has no exercises)
    active | resting | save_failed -> abandoned

A session belongs to exactly one user and one plan. All mutations happen on
the event loop; the repositories are synchronous and are called through
`asyncio.to_thread` so a slow write never blocks countdown ticks.
"""

import asyncio
import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field

from application.exceptions import (
    ExerciseNotFoundError,
    SessionSaveError,
    SessionStateError,
    SessionValidationError,
)
from application.ports import ExerciseLogRepository, PlanRepository
from application.session.rest_timer import RestTimer
from domain.models import Exercise, Plan, SetLogRecord, WorkingSet

logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    INITIALIZING = "initializing"
    ACTIVE = "active"
    RESTING = "resting"
    FINISHING = "finishing"
    COMPLETED = "completed"
    SAVE_FAILED = "save_failed"
    UNAVAILABLE = "unavailable"
    ABANDONED = "abandoned"


class InputField(str, Enum):
    REPS = "reps"
    WEIGHT = "weight"


class FinishOutcome(str, Enum):
    SAVED = "saved"
    ALREADY_COMPLETED = "already_completed"
    IN_PROGRESS = "in_progress"


@dataclass
class FinishResult:
    """What a call to `finish()` did."""

    outcome: FinishOutcome
    records: List[SetLogRecord] = field(default_factory=list)

    @property
    def saved(self) -> bool:
        return self.outcome == FinishOutcome.SAVED


class ExerciseProgress(BaseModel):
    index: int
    name: str
    target_sets: int
    target_reps: str
    rest_seconds: int
    sets: List[WorkingSet] = Field(default_factory=list)

    @property
    def completed_sets(self) -> int:
        return sum(1 for s in self.sets if s.completed)


class SessionSnapshot(BaseModel):
    """Read-only view of a session for API responses."""

    plan_id: Optional[str] = None
    plan_title: Optional[str] = None
    status: SessionStatus
    current_exercise_index: int = 0
    current_set_index: int = 0
    total_exercises: int = 0
    rest_seconds_remaining: Optional[int] = None
    current_exercise: Optional[Exercise] = None
    current_set: Optional[WorkingSet] = None
    exercises: List[ExerciseProgress] = Field(default_factory=list)


# Editing is allowed while resting; the user may pre-fill the next set.
_EDITABLE = (SessionStatus.ACTIVE,)
_FINISHABLE = (SessionStatus.ACTIVE, SessionStatus.SAVE_FAILED)


class WorkoutSession:
    """
    Drives one user through one plan.

    Args:
        log_repo: Where finished sets are written
        plan_repo: Where the completion flag is set
        user_id: Session owner
        timer: Optional timer that calls `countdown_tick()` every second.
            Without one, the caller drives the countdown.
        rest_between_exercises: Also count down the finished exercise's rest
            when moving to the next exercise
        detect_personal_records: Compare each exercise's best completed set
            against the user's history when saving

    Usage:
        session = WorkoutSession(log_repo, plan_repo, user_id=user_id)
        session.initialize(plan)
        session.record_input("reps", "10")
        session.record_input("weight", "60")
        await session.complete_current_set()
    """

    def __init__(
        self,
        log_repo: ExerciseLogRepository,
        plan_repo: PlanRepository,
        *,
        user_id: str,
        timer: Optional[RestTimer] = None,
        rest_between_exercises: bool = False,
        detect_personal_records: bool = True,
    ):
        if not user_id:
            raise ValueError("user_id is required")
        self._log_repo = log_repo
        self._plan_repo = plan_repo
        self._user_id = user_id
        self._timer = timer
        self._rest_between_exercises = rest_between_exercises
        self._detect_personal_records = detect_personal_records

        self._plan: Optional[Plan] = None
        self._working_sets: Dict[int, List[WorkingSet]] = {}
        self._exercise_index = 0
        self._set_index = 0
        self._rest_remaining: Optional[int] = None
        self._phase = SessionStatus.INITIALIZING
        self._finish_in_flight = False
        self._saved_records: Optional[List[SetLogRecord]] = None

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def plan(self) -> Optional[Plan]:
        return self._plan

    @property
    def status(self) -> SessionStatus:
        if self._phase == SessionStatus.ACTIVE and self._rest_remaining is not None:
            return SessionStatus.RESTING
        return self._phase

    @property
    def current_exercise_index(self) -> int:
        return self._exercise_index

    @property
    def current_set_index(self) -> int:
        return self._set_index

    @property
    def position(self) -> Tuple[int, int]:
        return self._exercise_index, self._set_index

    @property
    def rest_seconds_remaining(self) -> Optional[int]:
        return self._rest_remaining

    @property
    def total_exercises(self) -> int:
        return len(self._plan.exercises) if self._plan else 0

    @property
    def current_exercise(self) -> Exercise:
        self._require_exercises()
        return self._plan.exercises[self._exercise_index]

    @property
    def current_set(self) -> WorkingSet:
        self._require_exercises()
        return self._active_set().snapshot()

    def working_sets(self, exercise_index: int) -> List[WorkingSet]:
        """Copies of the logged sets for one exercise."""
        self._require_exercises()
        if exercise_index not in self._working_sets:
            raise ExerciseNotFoundError(
                f"No exercise at position {exercise_index}",
                plan_id=self._plan.id,
            )
        return [s.snapshot() for s in self._working_sets[exercise_index]]

    def snapshot(self) -> SessionSnapshot:
        plan = self._plan
        if plan is None:
            return SessionSnapshot(status=self.status)

        exercises = [
            ExerciseProgress(
                index=index,
                name=exercise.name,
                target_sets=exercise.sets,
                target_reps=exercise.reps,
                rest_seconds=exercise.rest_seconds,
                sets=[s.snapshot() for s in self._working_sets.get(index, [])],
            )
            for index, exercise in enumerate(plan.exercises)
        ]
        has_exercises = bool(plan.exercises) and bool(self._working_sets)
        return SessionSnapshot(
            plan_id=plan.id,
            plan_title=plan.title,
            status=self.status,
            current_exercise_index=self._exercise_index,
            current_set_index=self._set_index,
            total_exercises=len(plan.exercises),
            rest_seconds_remaining=self._rest_remaining,
            current_exercise=plan.exercises[self._exercise_index] if has_exercises else None,
            current_set=self._active_set().snapshot() if has_exercises else None,
            exercises=exercises,
        )

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def initialize(self, plan: Plan) -> SessionStatus:
        """
        Load a plan and build one empty working set per target set.

        Re-initializing resets all progress and cancels any running countdown.
        A plan with no exercises leaves the session unavailable.
        """
        if self._finish_in_flight:
            raise SessionStateError("Cannot re-initialize while the session is being saved")
        if not plan.id:
            raise SessionStateError("Plan must be saved before starting a session")

        self._clear_countdown()
        self._plan = plan
        self._working_sets = {
            index: [WorkingSet() for _ in range(exercise.sets)]
            for index, exercise in enumerate(plan.exercises)
        }
        self._exercise_index = 0
        self._set_index = 0
        self._saved_records = None

        if not plan.exercises:
            self._phase = SessionStatus.UNAVAILABLE
            logger.warning(f"Plan {plan.id} has no exercises; session unavailable")
        else:
            self._phase = SessionStatus.ACTIVE
            logger.info(
                f"Session started for user {self._user_id}: plan {plan.id} "
                f"({len(plan.exercises)} exercises, {plan.total_sets} sets)"
            )
        return self.status

    def record_input(self, input_field: Union[InputField, str], value) -> WorkingSet:
        """
        Update reps or weight on the current set.

        Reps are kept as free text. Weight must be a finite, non-negative
        number; an empty value clears it back to 0.

        Returns:
            Copy of the updated set

        Raises:
            SessionValidationError: Unknown field or unusable weight
            SessionStateError: Session is finishing or over
        """
        self._require_editable()
        input_field = self._coerce_field(input_field)
        active = self._active_set()

        if input_field == InputField.WEIGHT:
            active.weight = self._coerce_weight(value)
        else:
            active.reps = "" if value is None else str(value)
        return active.snapshot()

    async def complete_current_set(self) -> SessionStatus:
        """
        Mark the current set completed and move on.

        Not the last set: advance to the next set and start the exercise's
        rest countdown. Last set of a non-final exercise: move to the next
        exercise. Last set of the last exercise: finish the session.

        Raises:
            SessionValidationError: Reps empty or weight not positive
            SessionSaveError: Finishing was triggered and persisting failed
        """
        self._require_editable()
        exercise = self.current_exercise
        active = self._active_set()

        if not active.reps.strip():
            raise SessionValidationError("Enter reps before completing the set", field="reps")
        if not active.weight > 0:
            raise SessionValidationError(
                "Enter a weight above zero before completing the set", field="weight"
            )

        active.completed = True
        logger.debug(
            f"Completed set {self._set_index + 1}/{exercise.sets} of {exercise.name} "
            f"({active.reps} x {active.weight})"
        )

        if self._set_index < len(self._working_sets[self._exercise_index]) - 1:
            self._set_index += 1
            self._start_countdown(exercise.rest_seconds)
        elif self._exercise_index < len(self._plan.exercises) - 1:
            self._exercise_index += 1
            self._set_index = 0
            if self._rest_between_exercises:
                self._start_countdown(exercise.rest_seconds)
            else:
                self._clear_countdown()
        else:
            await self.finish()

        return self.status

    def countdown_tick(self) -> Optional[int]:
        """
        Advance the rest countdown by one second.

        Returns:
            Seconds remaining, or None when no countdown is running.
            Reaching zero clears the countdown.
        """
        self._require_exercises()
        if self._rest_remaining is None:
            return None

        self._rest_remaining -= 1
        if self._rest_remaining <= 0:
            self._clear_countdown()
            logger.debug("Rest finished")
        return self._rest_remaining

    def skip_rest(self) -> None:
        """Drop the countdown early."""
        self._require_exercises()
        self._clear_countdown()

    async def finish(self) -> FinishResult:
        """
        Persist the session: one log row per exercise, then the plan's
        completion flag.

        Calling again after success, or while a finish is already running,
        performs no writes. After a failure the in-memory log is kept; a
        retry skips the log write if it already succeeded.

        Raises:
            SessionSaveError: A write failed (`stage` is "logs" or "completion")
            SessionStateError: Session was abandoned
        """
        self._require_exercises()
        if self._phase == SessionStatus.COMPLETED:
            logger.info(f"Plan {self._plan.id} already completed; finish is a no-op")
            return FinishResult(FinishOutcome.ALREADY_COMPLETED, list(self._saved_records or []))
        if self._finish_in_flight:
            logger.info(f"Finish already running for plan {self._plan.id}")
            return FinishResult(FinishOutcome.IN_PROGRESS)
        if self._phase not in _FINISHABLE:
            raise SessionStateError(f"Cannot finish a session that is {self._phase.value}")

        self._finish_in_flight = True
        self._phase = SessionStatus.FINISHING
        self._clear_countdown()
        stage = "logs"
        try:
            if self._saved_records is None:
                records = await self.build_set_logs()
                inserted = await asyncio.to_thread(
                    self._log_repo.bulk_insert, [r.to_row() for r in records]
                )
                if inserted is None:
                    raise SessionSaveError("Failed to save exercise logs", stage=stage)
                self._saved_records = records
                logger.info(f"Saved {len(records)} exercise logs for plan {self._plan.id}")

            stage = "completion"
            updated = await asyncio.to_thread(
                self._plan_repo.mark_completed, self._plan.id, self._user_id
            )
            if not updated:
                raise SessionSaveError("Failed to mark workout as completed", stage=stage)
        except SessionSaveError as e:
            self._phase = SessionStatus.SAVE_FAILED
            logger.error(f"Finishing plan {self._plan.id} failed at {e.stage}: {e.message}")
            raise
        except Exception as e:
            self._phase = SessionStatus.SAVE_FAILED
            logger.exception(f"Unexpected error finishing plan {self._plan.id}")
            raise SessionSaveError(f"Failed to save workout: {e}", stage=stage) from e
        finally:
            self._finish_in_flight = False

        self._phase = SessionStatus.COMPLETED
        self._plan = self._plan.with_completed()
        logger.info(f"Workout {self._plan.id} completed by user {self._user_id}")
        return FinishResult(FinishOutcome.SAVED, list(self._saved_records))

    def abandon(self) -> None:
        """Stop the session without saving anything."""
        if self._finish_in_flight:
            raise SessionStateError("Cannot abandon while the session is being saved")
        if self._phase in (SessionStatus.COMPLETED, SessionStatus.ABANDONED):
            return
        self._clear_countdown()
        self._working_sets = {}
        self._phase = SessionStatus.ABANDONED
        logger.info(
            f"Session abandoned by user {self._user_id}"
            + (f" (plan {self._plan.id})" if self._plan else "")
        )

    async def build_set_logs(self) -> List[SetLogRecord]:
        """
        Build one SetLogRecord per exercise from the logged sets.

        Every exercise gets a record, including ones with no completed sets.
        """
        self._require_exercises()
        created_at = datetime.now(timezone.utc)
        records = []
        for index, exercise in enumerate(self._plan.exercises):
            record = SetLogRecord(
                user_id=self._user_id,
                plan_id=self._plan.id,
                exercise_name=exercise.name,
                sets=[s.snapshot() for s in self._working_sets[index]],
                created_at=created_at,
            )
            if self._detect_personal_records:
                record.personal_record = await self._is_personal_record(record)
            records.append(record)
        return records

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    async def _is_personal_record(self, record: SetLogRecord) -> bool:
        best = record.best_weight
        if best is None:
            return False
        previous = await asyncio.to_thread(
            self._log_repo.get_best_weight, self._user_id, record.exercise_name
        )
        return previous is not None and best > previous

    def _require_exercises(self) -> None:
        if self._plan is None:
            raise SessionStateError("Session has not been initialized")
        if not self._plan.exercises:
            raise ExerciseNotFoundError(
                "This workout has no exercises", plan_id=self._plan.id
            )

    def _require_editable(self) -> None:
        self._require_exercises()
        if self._phase not in _EDITABLE:
            raise SessionStateError(f"Session is {self.status.value}; sets can no longer be changed")

    def _active_set(self) -> WorkingSet:
        sets = self._working_sets.get(self._exercise_index)
        if not sets:
            raise SessionStateError(f"Session is {self.status.value}; no active set")
        return sets[self._set_index]

    @staticmethod
    def _coerce_field(input_field: Union[InputField, str]) -> InputField:
        try:
            return InputField(input_field)
        except ValueError:
            raise SessionValidationError(f"Unknown input field: {input_field}", field=str(input_field))

    @staticmethod
    def _coerce_weight(value) -> float:
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0.0
        if isinstance(value, bool):
            raise SessionValidationError("Weight must be a number", field="weight")
        try:
            weight = float(value)
        except (TypeError, ValueError):
            raise SessionValidationError(f"Weight must be a number, got {value!r}", field="weight")
        if not math.isfinite(weight) or weight < 0:
            raise SessionValidationError("Weight must be zero or more", field="weight")
        return weight

    def _start_countdown(self, seconds: int) -> None:
        if seconds <= 0:
            self._clear_countdown()
            return
        self._rest_remaining = seconds
        if self._timer is not None:
            self._timer.start(self._on_timer_tick)

    def _clear_countdown(self) -> None:
        self._rest_remaining = None
        if self._timer is not None:
            self._timer.cancel()

    def _on_timer_tick(self) -> bool:
        if self._plan is None or not self._plan.exercises:
            return False
        return self.countdown_tick() is not None

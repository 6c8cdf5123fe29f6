"""
SwapExercise Use Case.

Replaces one exercise of a plan with another. Candidates come from the
user's own plans of the same week, or from the AI generator.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import List, Optional

from application.exceptions import ExerciseNotFoundError, PlanNotFoundError, PlanUpdateError
from application.ports import PlanRepository, WorkoutPlanGenerator
from application.use_cases.weekly_plans import plans_in_week
from domain.converters import exercises_to_rows, row_to_plan
from domain.models import AlternativesResult, Exercise, Plan
from shared.ai_context import AIRequestContext

logger = logging.getLogger(__name__)

DEFAULT_TARGET_MUSCLE = "full body"


@dataclass
class SwapCandidates:
    """Exercise being replaced and what it can be replaced with."""

    exercise: Exercise
    alternatives: List[Exercise] = field(default_factory=list)


class SwapExerciseUseCase:
    """
    Use case for swapping an exercise inside a plan.

    Usage:
        >>> use_case = SwapExerciseUseCase(plan_repo)
        >>> candidates = use_case.find_alternatives("user-123", "w-1", 0)
        >>> plan = use_case.swap("user-123", "w-1", 0, candidates.alternatives[0])
    """

    def __init__(
        self,
        plan_repo: PlanRepository,
        generator: Optional[WorkoutPlanGenerator] = None,
    ) -> None:
        self._plan_repo = plan_repo
        self._generator = generator

    def find_alternatives(
        self,
        user_id: str,
        plan_id: str,
        index: int,
        day: Optional[date] = None,
    ) -> SwapCandidates:
        """
        Unique exercises (by name) from the user's plans in the week of `day`,
        excluding the one being replaced.

        Raises:
            PlanNotFoundError: Unknown plan
            ExerciseNotFoundError: No exercise at `index`
        """
        plan = self._load(user_id, plan_id)
        current = self._exercise_at(plan, index)
        day = day or plan.date or datetime.now(timezone.utc).date()

        seen = {current.name}
        alternatives: List[Exercise] = []
        for week_plan in plans_in_week(self._plan_repo, user_id, day):
            for exercise in week_plan.exercises:
                if exercise.name in seen:
                    continue
                seen.add(exercise.name)
                alternatives.append(exercise)

        logger.debug(f"{len(alternatives)} alternative(s) for {current.name} in plan {plan_id}")
        return SwapCandidates(exercise=current, alternatives=alternatives)

    async def suggest_alternatives(
        self,
        user_id: str,
        plan_id: str,
        index: int,
        context: Optional[AIRequestContext] = None,
    ) -> AlternativesResult:
        """
        Ask the AI generator for exercises hitting the same muscle group.

        Raises:
            PlanNotFoundError: Unknown plan
            ExerciseNotFoundError: No exercise at `index`
        """
        if self._generator is None:
            raise RuntimeError("No plan generator configured")

        plan = self._load(user_id, plan_id)
        current = self._exercise_at(plan, index)
        if current.muscle_groups:
            target = current.muscle_groups[0]
        elif plan.muscle_groups:
            target = plan.muscle_groups[0]
        else:
            target = DEFAULT_TARGET_MUSCLE

        names = await self._generator.suggest_alternatives(current.name, target, context=context)
        return AlternativesResult(exercise_name=current.name, alternatives=names, source="ai")

    def swap(
        self,
        user_id: str,
        plan_id: str,
        index: int,
        exercise: Exercise,
    ) -> Plan:
        """
        Replace the exercise at `index` and persist the plan's exercise list.

        Returns:
            The updated plan

        Raises:
            PlanNotFoundError: Unknown plan
            ExerciseNotFoundError: No exercise at `index`
            PlanUpdateError: The write failed
        """
        plan = self._load(user_id, plan_id)
        previous = self._exercise_at(plan, index)
        updated = plan.with_exercise(index, exercise)

        saved = self._plan_repo.update_exercises(
            plan_id, user_id, exercises_to_rows(updated.exercises)
        )
        if not saved:
            logger.error(f"Failed to save exercise swap for plan {plan_id}")
            raise PlanUpdateError("Failed to update workout")

        logger.info(f"Plan {plan_id}: swapped {previous.name} -> {exercise.name} at {index}")
        return row_to_plan(saved)

    def _load(self, user_id: str, plan_id: str) -> Plan:
        row = self._plan_repo.get(plan_id, user_id)
        if not row:
            raise PlanNotFoundError(f"Workout {plan_id} not found", plan_id=plan_id)
        return row_to_plan(row)

    @staticmethod
    def _exercise_at(plan: Plan, index: int) -> Exercise:
        if index < 0 or index >= len(plan.exercises):
            raise ExerciseNotFoundError(
                f"Workout {plan.id} has no exercise at position {index}",
                plan_id=plan.id,
            )
        return plan.exercises[index]

"""
Plan aggregate - a stored, ordered workout.

A Plan is read once when a session starts and is never revalidated during the
session. It is frozen: the only sanctioned changes (completion, exercise swap)
go through `with_completed()` / `with_exercise()` which return copies.
"""

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from domain.models.exercise import Exercise

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 2000


class Plan(BaseModel):
    """
    Aggregate root representing a workout plan owned by one user.

    Examples:
        >>> plan = Plan(
        ...     id="w-1",
        ...     title="Monday Chest Power Session",
        ...     exercises=[Exercise(name="Push-ups", sets=3, reps="8-12")],
        ... )
        >>> plan.total_sets
        3
    """

    id: Optional[str] = Field(
        default=None,
        description="Unique identifier (UUID). None for unsaved plans.",
    )
    user_id: Optional[str] = Field(default=None, description="Owning user ID")
    title: str = Field(default="Custom Workout", min_length=1, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    exercises: List[Exercise] = Field(
        default_factory=list, description="Ordered exercises"
    )
    estimated_duration: Optional[int] = Field(
        default=None, ge=1, description="Estimated duration in minutes"
    )
    difficulty: Optional[str] = None
    warm_up: List[str] = Field(default_factory=list)
    cool_down: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    muscle_groups: List[str] = Field(default_factory=list)
    goal: Optional[str] = None
    ai_generated: bool = False
    completed: bool = False
    date: Optional[dt.date] = Field(default=None, description="Scheduled day")
    created_at: Optional[dt.datetime] = None

    @field_validator("muscle_groups")
    @classmethod
    def normalize_muscle_groups(cls, v: List[str]) -> List[str]:
        """Lowercase, strip and deduplicate muscle group tags."""
        seen = set()
        unique = []
        for group in v:
            tag = group.lower().strip()
            if tag and tag not in seen:
                seen.add(tag)
                unique.append(tag)
        return unique

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def exercise_count(self) -> int:
        return len(self.exercises)

    @property
    def total_sets(self) -> int:
        return sum(exercise.sets for exercise in self.exercises)

    @property
    def exercise_names(self) -> List[str]:
        return [exercise.name for exercise in self.exercises]

    # -------------------------------------------------------------------------
    # Copy-on-write helpers
    # -------------------------------------------------------------------------

    def with_completed(self, completed: bool = True) -> "Plan":
        """Return a copy with the completion flag set."""
        return self.model_copy(update={"completed": completed})

    def with_exercise(self, index: int, exercise: Exercise) -> "Plan":
        """
        Return a copy with the exercise at `index` replaced.

        Raises:
            IndexError: If index is out of range
        """
        if index < 0 or index >= len(self.exercises):
            raise IndexError(f"Exercise index {index} out of range")
        exercises = list(self.exercises)
        exercises[index] = exercise
        return self.model_copy(update={"exercises": exercises})

    def with_id(self, plan_id: str) -> "Plan":
        return self.model_copy(update={"id": plan_id})

    model_config = {"frozen": True}

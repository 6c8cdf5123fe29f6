"""
Models for AI workout plan generation.

`WorkoutRequest` is what the client asks for; `GeneratedPlan` is the
normalized result of an LLM call (or of the mock/fallback path).
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from domain.models.exercise import Exercise
from domain.models.plan import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH


MUSCLE_GROUPS = (
    "chest",
    "back",
    "shoulders",
    "biceps",
    "triceps",
    "legs",
    "core",
    "cardio",
)


class FitnessGoal(str, Enum):
    MUSCLE_GAIN = "muscle_gain"
    FAT_LOSS = "fat_loss"
    STRENGTH = "strength"
    MAINTENANCE = "maintenance"

    @property
    def label(self) -> str:
        """Human-readable form used in prompts ("muscle gain")."""
        return self.value.replace("_", " ")


class ExperienceLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class WorkoutRequest(BaseModel):
    """Parameters for generating a single workout plan."""

    goal: FitnessGoal
    experience: ExperienceLevel
    target_muscles: List[str] = Field(..., min_length=1)
    duration: int = Field(default=45, ge=10, le=180, description="Minutes")
    equipment: List[str] = Field(default_factory=lambda: ["bodyweight"])
    day_of_week: str = Field(default="Monday")

    @field_validator("target_muscles")
    @classmethod
    def normalize_muscles(cls, v: List[str]) -> List[str]:
        return [m.lower().strip() for m in v if m.strip()]

    @property
    def bodyweight_only(self) -> bool:
        return "bodyweight" in self.equipment


class GeneratedPlan(BaseModel):
    """A workout plan as produced by the generator, before it is saved."""

    title: str = "Custom Workout"
    description: str = "AI-generated workout plan"
    estimated_duration: int = 45
    difficulty: str = "intermediate"
    exercises: List[Exercise] = Field(default_factory=list)
    warm_up: List[str] = Field(default_factory=lambda: ["5 minutes dynamic warm-up"])
    cool_down: List[str] = Field(default_factory=lambda: ["5 minutes stretching"])
    notes: str = "Focus on proper form and gradual progression."
    source: str = Field(
        default="ai",
        description="Where the plan came from: ai, mock or fallback",
    )

    @field_validator("title")
    @classmethod
    def clip_title(cls, v: str) -> str:
        """Keep model-written titles within what a saved Plan accepts."""
        return v.strip()[:TITLE_MAX_LENGTH] or "Custom Workout"

    @field_validator("description")
    @classmethod
    def clip_description(cls, v: str) -> str:
        return v[:DESCRIPTION_MAX_LENGTH]

    @property
    def is_fallback(self) -> bool:
        return self.source != "ai"


class AlternativesResult(BaseModel):
    """Alternative exercise names suggested for a swap."""

    exercise_name: str
    alternatives: List[str] = Field(default_factory=list)
    source: Optional[str] = None

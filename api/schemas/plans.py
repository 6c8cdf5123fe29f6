"""
Plan Schemas.

Schemas for:
- GeneratePlanRequest: Request body for POST /plans/generate
- WeeklyPlansResponse: Weekly planner view
- AlternativesResponse / SwapExerciseRequest: Exercise swap
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models import Exercise, ExperienceLevel, FitnessGoal, Plan, WorkoutRequest


class GeneratePlanRequest(BaseModel):
    """Request body for POST /plans/generate."""
    goal: FitnessGoal = Field(..., description="Training goal (overridden by the stored profile)")
    experience: ExperienceLevel = Field(..., description="Experience level (overridden by the stored profile)")
    target_muscles: List[str] = Field(..., min_length=1, max_length=8)
    duration: int = Field(default=45, ge=10, le=180, description="Minutes")
    equipment: List[str] = Field(default_factory=lambda: ["bodyweight"], max_length=20)

    def to_workout_request(self) -> WorkoutRequest:
        return WorkoutRequest(
            goal=self.goal,
            experience=self.experience,
            target_muscles=self.target_muscles,
            duration=self.duration,
            equipment=self.equipment,
        )


class PlanResponse(BaseModel):
    plan: Plan
    source: Optional[str] = Field(
        default=None,
        description="For generated plans: ai, mock or fallback",
    )


class DayPlans(BaseModel):
    day: date
    weekday: str
    plans: List[Plan] = Field(default_factory=list)


class WeeklyPlansResponse(BaseModel):
    week_start: date
    week_end: date
    total: int
    days: List[DayPlans]
    muscle_groups: List[str] = Field(default_factory=list)
    goals: List[str] = Field(default_factory=list)


class AlternativesResponse(BaseModel):
    """Swap candidates for one exercise."""
    exercise_name: str
    source: str = Field(..., description="week or ai")
    alternatives: List[Exercise] = Field(
        default_factory=list,
        description="Exercises from the user's plans this week",
    )
    suggestions: List[str] = Field(
        default_factory=list,
        description="Exercise names suggested by the AI",
    )


class SwapExerciseRequest(BaseModel):
    """Request body for PUT /plans/{plan_id}/exercises/{index}."""
    exercise: Exercise

"""
User profile stored in the `users` table.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from domain.models.generation import ExperienceLevel, FitnessGoal


class UserProfile(BaseModel):
    """Training preferences used to personalise generated plans."""

    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    fitness_goal: Optional[FitnessGoal] = None
    experience_level: Optional[ExperienceLevel] = None
    age: Optional[int] = Field(default=None, ge=0, le=120)
    height_cm: Optional[float] = Field(default=None, ge=0)
    target_weight_kg: Optional[float] = Field(default=None, ge=0)
    gym_frequency: int = Field(default=3, ge=0, le=14)
    created_at: Optional[datetime] = None

    model_config = {"extra": "ignore"}

"""
Domain layer for the RepCoach API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    Exercise,
    GeneratedPlan,
    Plan,
    SetLogRecord,
    UserProfile,
    WorkingSet,
    WorkoutRequest,
)

__all__ = [
    "Exercise",
    "GeneratedPlan",
    "Plan",
    "SetLogRecord",
    "UserProfile",
    "WorkingSet",
    "WorkoutRequest",
]

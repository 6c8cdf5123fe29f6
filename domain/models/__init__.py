"""
Domain models for the RepCoach API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- Plan: A stored, ordered workout owned by a user
- Exercise: A single exercise with target sets, reps and rest
- WorkingSet: What the user logged for one set during a session
- SetLogRecord: Persisted working sets for one exercise
- UserProfile: Training preferences
- WorkoutRequest / GeneratedPlan: AI plan generation input and output

Usage:
    >>> from domain.models import Plan, Exercise

    >>> plan = Plan(
    ...     id="w-1",
    ...     title="Leg Power Session",
    ...     exercises=[Exercise(name="Lunges", sets=3, reps="10-12 each leg")],
    ... )
    >>> plan.model_dump_json()
"""

from domain.models.exercise import DEFAULT_REST_SECONDS, Exercise
from domain.models.generation import (
    MUSCLE_GROUPS,
    AlternativesResult,
    ExperienceLevel,
    FitnessGoal,
    GeneratedPlan,
    WorkoutRequest,
)
from domain.models.plan import Plan
from domain.models.set_log import SetLogRecord
from domain.models.user_profile import UserProfile
from domain.models.working_set import WorkingSet

__all__ = [
    # Main entities
    "Plan",
    "Exercise",
    "WorkingSet",
    "SetLogRecord",
    "UserProfile",
    # Generation
    "WorkoutRequest",
    "GeneratedPlan",
    "AlternativesResult",
    # Enums and constants
    "FitnessGoal",
    "ExperienceLevel",
    "MUSCLE_GROUPS",
    "DEFAULT_REST_SECONDS",
]

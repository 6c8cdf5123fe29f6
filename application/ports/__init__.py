"""
Repository Interfaces (Ports) for the RepCoach API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer and in backend.services.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import PlanRepository, ExerciseLogRepository

    class WorkoutSession:
        def __init__(self, log_repo: ExerciseLogRepository, plan_repo: PlanRepository):
            self._log_repo = log_repo
            self._plan_repo = plan_repo
"""

# Plan persistence
from application.ports.plan_repository import PlanRepository

# Logged sets
from application.ports.exercise_log_repository import ExerciseLogRepository

# Profiles
from application.ports.user_profile_repository import UserProfileRepository

# AI plan generation
from application.ports.workout_generator import WorkoutPlanGenerator

__all__ = [
    "PlanRepository",
    "ExerciseLogRepository",
    "UserProfileRepository",
    "WorkoutPlanGenerator",
]

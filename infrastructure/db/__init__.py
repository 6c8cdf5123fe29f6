"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into services
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabasePlanRepository,
        SupabaseExerciseLogRepository,
        SupabaseUserProfileRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    plan_repo = SupabasePlanRepository(client)
    log_repo = SupabaseExerciseLogRepository(client)
    profile_repo = SupabaseUserProfileRepository(client)
"""

from infrastructure.db.plan_repository import SupabasePlanRepository
from infrastructure.db.exercise_log_repository import SupabaseExerciseLogRepository
from infrastructure.db.user_profile_repository import SupabaseUserProfileRepository

__all__ = [
    # Plan persistence
    "SupabasePlanRepository",

    # Logged sets
    "SupabaseExerciseLogRepository",

    # Profiles
    "SupabaseUserProfileRepository",
]

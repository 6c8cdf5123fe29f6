"""
Infrastructure Layer for the RepCoach API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabasePlanRepository,
    SupabaseExerciseLogRepository,
    SupabaseUserProfileRepository,
)

__all__ = [
    "SupabasePlanRepository",
    "SupabaseExerciseLogRepository",
    "SupabaseUserProfileRepository",
]

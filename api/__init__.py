"""
API package for the RepCoach API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- session_store.py: Registry of active workout sessions
- routers/: API route handlers
- schemas/: Request and response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_plan_repo,
    get_exercise_log_repo,
    get_user_profile_repo,
    get_plan_generator,
    get_session_store,
    get_current_user,
    get_optional_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_plan_repo",
    "get_exercise_log_repo",
    "get_user_profile_repo",
    # Services
    "get_plan_generator",
    "get_session_store",
    # Authentication
    "get_current_user",
    "get_optional_user",
]

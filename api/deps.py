"""
FastAPI Dependency Providers for the RepCoach API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with in-memory fakes.

Architecture:
- Settings, the Supabase client, the plan generator and the session store
  are cached per-process (lru_cache)
- Repository and use case providers create new instances per-request
- Auth providers wrap backend.auth

Usage in routers:
    from api.deps import get_plan_repo, get_current_user
    from application.ports import PlanRepository

    @router.get("/plans/{plan_id}")
    def get_plan(
        plan_id: str,
        user_id: str = Depends(get_current_user),
        plan_repo: PlanRepository = Depends(get_plan_repo),
    ):
        return plan_repo.get(plan_id, user_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_plan_repo] = lambda: FakePlanRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    ExerciseLogRepository,
    PlanRepository,
    UserProfileRepository,
    WorkoutPlanGenerator,
)
from application.use_cases import (
    GeneratePlanUseCase,
    ListWeeklyPlansUseCase,
    SwapExerciseUseCase,
)

# Concrete implementations
from infrastructure import (
    SupabaseExerciseLogRepository,
    SupabasePlanRepository,
    SupabaseUserProfileRepository,
)
from backend.ai.client_factory import AIClientFactory
from backend.services.llm import OpenAIWorkoutGenerator

from api.session_store import InMemorySessionStore
from backend.settings import Settings, get_settings as _get_settings

# Auth from existing module (wrap to maintain single source of truth)
from backend.auth import (
    get_current_user as _get_current_user,
    get_optional_user as _get_optional_user,
)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_plan_repo(
    client: Client = Depends(get_supabase_client_required),
) -> PlanRepository:
    """
    Get plan repository instance.

    Returns:
        PlanRepository: Plan repository implementation
    """
    return SupabasePlanRepository(client)


def get_exercise_log_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ExerciseLogRepository:
    """
    Get exercise log repository instance.

    Returns:
        ExerciseLogRepository: Exercise log repository implementation
    """
    return SupabaseExerciseLogRepository(client)


def get_user_profile_repo(
    client: Client = Depends(get_supabase_client_required),
) -> UserProfileRepository:
    """
    Get user profile repository instance.

    Returns:
        UserProfileRepository: User profile repository implementation
    """
    return SupabaseUserProfileRepository(client)


# =============================================================================
# AI Providers
# =============================================================================


@lru_cache
def _build_plan_generator() -> OpenAIWorkoutGenerator:
    settings = _get_settings()
    client = AIClientFactory.create_openai_client(settings) if settings.ai_enabled else None
    return OpenAIWorkoutGenerator(
        client,
        model=settings.plan_generation_model,
        temperature=settings.plan_generation_temperature,
        max_tokens=settings.plan_generation_max_tokens,
        max_attempts=settings.ai_max_attempts,
    )


def get_plan_generator() -> WorkoutPlanGenerator:
    """
    Get the plan generator (cached per-process).

    Without an OpenAI key the generator serves mock plans.
    """
    return _build_plan_generator()


# =============================================================================
# Session Registry
# =============================================================================


@lru_cache
def get_session_store() -> InMemorySessionStore:
    """Get the process-wide registry of active workout sessions."""
    return InMemorySessionStore()


# =============================================================================
# Use Case Providers
# =============================================================================


def get_generate_plan_use_case(
    plan_repo: PlanRepository = Depends(get_plan_repo),
    profile_repo: UserProfileRepository = Depends(get_user_profile_repo),
    generator: WorkoutPlanGenerator = Depends(get_plan_generator),
) -> GeneratePlanUseCase:
    return GeneratePlanUseCase(plan_repo, profile_repo, generator)


def get_weekly_plans_use_case(
    plan_repo: PlanRepository = Depends(get_plan_repo),
) -> ListWeeklyPlansUseCase:
    return ListWeeklyPlansUseCase(plan_repo)


def get_swap_exercise_use_case(
    plan_repo: PlanRepository = Depends(get_plan_repo),
    generator: WorkoutPlanGenerator = Depends(get_plan_generator),
) -> SwapExerciseUseCase:
    return SwapExerciseUseCase(plan_repo, generator)


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> str:
    """
    Get the current authenticated user ID.

    Wraps backend.auth.get_current_user for dependency injection.
    Supports Supabase access tokens and API keys.

    Returns:
        str: User ID from authentication

    Raises:
        HTTPException: 401 if authentication fails
    """
    return await _get_current_user(authorization=authorization, x_api_key=x_api_key)


async def get_optional_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> Optional[str]:
    """
    Get the current user ID if authenticated, None otherwise.

    Returns:
        Optional[str]: User ID if authenticated, None otherwise
    """
    return await _get_optional_user(authorization=authorization, x_api_key=x_api_key)

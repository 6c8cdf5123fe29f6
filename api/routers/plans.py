"""
Plans router.

This router provides:
- AI plan generation
- The weekly planner view
- Plan lookup
- Exercise swap candidates and the swap itself
"""

import asyncio
import logging
from datetime import date, datetime, timezone
from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import (
    get_current_user,
    get_generate_plan_use_case,
    get_plan_repo,
    get_settings,
    get_swap_exercise_use_case,
    get_weekly_plans_use_case,
)
from api.schemas.plans import (
    AlternativesResponse,
    DayPlans,
    GeneratePlanRequest,
    PlanResponse,
    SwapExerciseRequest,
    WeeklyPlansResponse,
)
from application.exceptions import PlanGenerationError, PlanNotFoundError, PlanUpdateError
from application.ports import PlanRepository
from application.use_cases import (
    GeneratePlanUseCase,
    ListWeeklyPlansUseCase,
    SwapExerciseUseCase,
)
from backend.settings import Settings
from domain.converters import row_to_plan
from shared.ai_context import AIRequestContext

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/plans",
    tags=["Plans"],
)


def _today() -> date:
    return datetime.now(timezone.utc).date()


# =============================================================================
# Generation
# =============================================================================


@router.post("/generate", response_model=PlanResponse, status_code=201)
async def generate_plan(
    request: GeneratePlanRequest,
    user_id: str = Depends(get_current_user),
    use_case: GeneratePlanUseCase = Depends(get_generate_plan_use_case),
    settings: Settings = Depends(get_settings),
) -> PlanResponse:
    """
    Generate a workout with AI and save it to today's schedule.

    The user's stored goal and experience level take precedence over the
    request. When the model is unavailable a canned plan is saved instead
    (`source` says which).
    """
    context = AIRequestContext(
        user_id=user_id,
        feature_name="plan_generation",
        environment=settings.environment,
    )
    try:
        result = await use_case.execute(
            user_id,
            request.to_workout_request(),
            context=context,
        )
    except PlanGenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return PlanResponse(plan=result.plan, source=result.source)


# =============================================================================
# Weekly planner
# =============================================================================


@router.get("/week", response_model=WeeklyPlansResponse)
def list_week(
    day: Optional[date] = Query(None, description="Any day of the wanted week (default: today)"),
    muscle_group: Optional[str] = Query(None, max_length=50),
    goal: Optional[str] = Query(None, max_length=50),
    user_id: str = Depends(get_current_user),
    use_case: ListWeeklyPlansUseCase = Depends(get_weekly_plans_use_case),
) -> WeeklyPlansResponse:
    """List the plans of one Monday-Sunday week, grouped by day."""
    result = use_case.execute(
        user_id,
        day or _today(),
        muscle_group=muscle_group,
        goal=goal,
    )
    return WeeklyPlansResponse(
        week_start=result.week_start,
        week_end=result.week_end,
        total=result.total,
        days=[
            DayPlans(day=d, weekday=d.strftime("%A"), plans=plans)
            for d, plans in sorted(result.days.items())
        ],
        muscle_groups=result.muscle_groups,
        goals=result.goals,
    )


# =============================================================================
# Plan lookup
# =============================================================================


@router.get("/{plan_id}", response_model=PlanResponse)
def get_plan(
    plan_id: str,
    user_id: str = Depends(get_current_user),
    plan_repo: PlanRepository = Depends(get_plan_repo),
) -> PlanResponse:
    row = plan_repo.get(plan_id, user_id)
    if not row:
        raise HTTPException(status_code=404, detail="Workout not found")
    return PlanResponse(plan=row_to_plan(row))


# =============================================================================
# Exercise swap
# =============================================================================


@router.get("/{plan_id}/exercises/{index}/alternatives", response_model=AlternativesResponse)
async def get_alternatives(
    plan_id: str,
    index: int,
    source: Literal["week", "ai"] = Query("week"),
    day: Optional[date] = Query(None, description="Week to search (default: the plan's date)"),
    user_id: str = Depends(get_current_user),
    use_case: SwapExerciseUseCase = Depends(get_swap_exercise_use_case),
    settings: Settings = Depends(get_settings),
) -> AlternativesResponse:
    """
    Swap candidates for one exercise.

    - source=week: other exercises from the user's plans of the same week
    - source=ai: exercise names suggested for the same muscle group
    """
    try:
        if source == "ai":
            context = AIRequestContext(
                user_id=user_id,
                feature_name="exercise_alternatives",
                environment=settings.environment,
            )
            result = await use_case.suggest_alternatives(user_id, plan_id, index, context=context)
            return AlternativesResponse(
                exercise_name=result.exercise_name,
                source="ai",
                suggestions=result.alternatives,
            )

        candidates = await asyncio.to_thread(
            use_case.find_alternatives, user_id, plan_id, index, day
        )
    except PlanNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)

    return AlternativesResponse(
        exercise_name=candidates.exercise.name,
        source="week",
        alternatives=candidates.alternatives,
    )


@router.put("/{plan_id}/exercises/{index}", response_model=PlanResponse)
def swap_exercise(
    plan_id: str,
    index: int,
    request: SwapExerciseRequest,
    user_id: str = Depends(get_current_user),
    use_case: SwapExerciseUseCase = Depends(get_swap_exercise_use_case),
) -> PlanResponse:
    """Replace the exercise at `index` and save the plan."""
    try:
        plan = use_case.swap(user_id, plan_id, index, request.exercise)
    except PlanNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except PlanUpdateError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return PlanResponse(plan=plan)

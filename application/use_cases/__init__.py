"""
Application Use Cases for the RepCoach API.

Use cases orchestrate domain objects and repository ports. Dependencies are
injected via constructors for testability, and use cases return domain
models, not API responses. The guided workout session lives in
application.session.

Usage:
    from application.use_cases import (
        GeneratePlanUseCase,
        ListWeeklyPlansUseCase,
        SwapExerciseUseCase,
    )

    # Generate and save a plan
    generate = GeneratePlanUseCase(plan_repo, profile_repo, generator)
    result = await generate.execute("user-123", request)

    # Weekly planner
    week = ListWeeklyPlansUseCase(plan_repo).execute("user-123", date.today())

    # Swap an exercise
    swap = SwapExerciseUseCase(plan_repo)
    plan = swap.swap("user-123", "w-1", 0, replacement)
"""

from application.use_cases.generate_plan import GeneratePlanResult, GeneratePlanUseCase
from application.use_cases.swap_exercise import SwapCandidates, SwapExerciseUseCase
from application.use_cases.weekly_plans import (
    ListWeeklyPlansUseCase,
    WeeklyPlansResult,
    plans_in_week,
    week_bounds,
)

__all__ = [
    # GeneratePlan
    "GeneratePlanUseCase",
    "GeneratePlanResult",
    # Weekly planner
    "ListWeeklyPlansUseCase",
    "WeeklyPlansResult",
    "week_bounds",
    "plans_in_week",
    # Swap
    "SwapExerciseUseCase",
    "SwapCandidates",
]

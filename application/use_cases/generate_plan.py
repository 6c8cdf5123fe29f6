"""
GeneratePlan Use Case.

Generates a workout with the AI plan generator, personalised with the user's
stored profile, and saves it to the user's schedule for today.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional

from pydantic import ValidationError

from application.exceptions import PlanGenerationError
from application.ports import PlanRepository, UserProfileRepository, WorkoutPlanGenerator
from domain.converters import generated_plan_to_row, row_to_plan
from domain.models import GeneratedPlan, Plan, UserProfile, WorkoutRequest
from shared.ai_context import AIRequestContext

logger = logging.getLogger(__name__)


@dataclass
class GeneratePlanResult:
    """Result of the GeneratePlan use case execution."""

    plan: Plan
    source: str
    request: WorkoutRequest

    @property
    def is_fallback(self) -> bool:
        return self.source != "ai"


class GeneratePlanUseCase:
    """
    Use case for generating and saving an AI workout plan.

    Orchestrates the following workflow:
    1. Load the user's profile; its goal and experience override the request
    2. Stamp the request with today's weekday
    3. Generate the plan (the generator falls back on its own)
    4. Save it as an AI-generated, not yet completed plan dated today

    Usage:
        >>> use_case = GeneratePlanUseCase(plan_repo, profile_repo, generator)
        >>> result = await use_case.execute("user-123", request)
        >>> result.plan.id
    """

    def __init__(
        self,
        plan_repo: PlanRepository,
        profile_repo: UserProfileRepository,
        generator: WorkoutPlanGenerator,
    ) -> None:
        self._plan_repo = plan_repo
        self._profile_repo = profile_repo
        self._generator = generator

    async def execute(
        self,
        user_id: str,
        request: WorkoutRequest,
        *,
        context: Optional[AIRequestContext] = None,
        today: Optional[date] = None,
    ) -> GeneratePlanResult:
        """
        Generate and persist a plan.

        Args:
            user_id: Owning user ID
            request: Requested goal, experience, muscles, duration, equipment
            context: AI request context for observability
            today: Schedule date (defaults to today, UTC)

        Returns:
            GeneratePlanResult with the saved plan

        Raises:
            PlanGenerationError: If the plan could not be saved
        """
        today = today or datetime.now(timezone.utc).date()
        effective = self._personalise(user_id, request, today)

        logger.info(
            f"Generating plan for user {user_id}: goal={effective.goal.value} "
            f"experience={effective.experience.value} muscles={effective.target_muscles}"
        )
        generated: GeneratedPlan = await self._generator.generate(effective, context=context)
        if generated.is_fallback:
            logger.warning(f"Plan for user {user_id} came from the {generated.source} path")

        row = generated_plan_to_row(
            generated,
            user_id=user_id,
            muscle_groups=effective.target_muscles,
            goal=effective.goal.value,
            day=today,
        )
        saved = self._plan_repo.create(row)
        if not saved:
            logger.error(f"Failed to save generated plan for user {user_id}")
            raise PlanGenerationError("Failed to save generated workout")

        plan = row_to_plan(saved)
        logger.info(f"Saved generated plan {plan.id} ({plan.exercise_count} exercises)")
        return GeneratePlanResult(plan=plan, source=generated.source, request=effective)

    def _personalise(self, user_id: str, request: WorkoutRequest, today: date) -> WorkoutRequest:
        updates = {"day_of_week": today.strftime("%A")}

        row = self._profile_repo.get(user_id)
        if row:
            try:
                profile = UserProfile.model_validate(row)
            except ValidationError as e:
                logger.warning(f"Ignoring unreadable profile for user {user_id}: {e.error_count()} error(s)")
                profile = None
            if profile is not None:
                if profile.fitness_goal is not None:
                    updates["goal"] = profile.fitness_goal
                if profile.experience_level is not None:
                    updates["experience"] = profile.experience_level

        return request.model_copy(update=updates)

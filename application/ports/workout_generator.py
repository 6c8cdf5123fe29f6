"""
Workout Plan Generator Interface (Port).

Implemented by backend.services.llm.OpenAIWorkoutGenerator and by
tests.fakes.FakeWorkoutGenerator.
"""
from typing import Protocol, Optional, List

from domain.models import GeneratedPlan, WorkoutRequest
from shared.ai_context import AIRequestContext


class WorkoutPlanGenerator(Protocol):
    """Abstract interface for AI workout plan generation."""

    async def generate(
        self,
        request: WorkoutRequest,
        context: Optional[AIRequestContext] = None,
    ) -> GeneratedPlan:
        """
        Generate a workout plan.

        Implementations never raise for upstream failures; they return a
        mock or fallback plan instead (GeneratedPlan.source tells which).

        Args:
            request: Generation parameters
            context: AI request context for observability

        Returns:
            GeneratedPlan
        """
        ...

    async def suggest_alternatives(
        self,
        exercise_name: str,
        target_muscle: str,
        context: Optional[AIRequestContext] = None,
    ) -> List[str]:
        """
        Suggest alternative exercises that target the same muscle group.

        Args:
            exercise_name: Exercise being replaced
            target_muscle: Muscle group to preserve
            context: AI request context for observability

        Returns:
            List of exercise names
        """
        ...

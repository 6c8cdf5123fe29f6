"""
Fake Workout Plan Generator for testing.

Returns canned plans and alternatives without any OpenAI calls, and records
what it was asked for.
"""
from typing import Optional, List

from domain.models import Exercise, GeneratedPlan, WorkoutRequest
from shared.ai_context import AIRequestContext


def default_generated_plan() -> GeneratedPlan:
    return GeneratedPlan(
        title="Monday Leg Power Session",
        description="Lower body strength",
        estimated_duration=40,
        difficulty="intermediate",
        exercises=[
            Exercise(name="Squats", sets=3, reps="8-10", rest_seconds=90, muscle_groups=["legs"]),
            Exercise(name="Lunges", sets=3, reps="10-12 each leg", rest_seconds=60, muscle_groups=["legs"]),
        ],
        source="ai",
    )


class FakeWorkoutGenerator:
    """
    In-memory fake implementation of WorkoutPlanGenerator.

    Usage:
        generator = FakeWorkoutGenerator()
        generator.plan = GeneratedPlan(..., source="fallback")
        generator.alternatives = ["Dips", "Push-ups"]
    """

    def __init__(
        self,
        plan: Optional[GeneratedPlan] = None,
        alternatives: Optional[List[str]] = None,
    ):
        self.plan = plan or default_generated_plan()
        self.alternatives = alternatives if alternatives is not None else ["Dips", "Push-ups"]
        self.requests: List[WorkoutRequest] = []
        self.contexts: List[Optional[AIRequestContext]] = []
        self.alternative_calls: List[tuple] = []

    async def generate(
        self,
        request: WorkoutRequest,
        context: Optional[AIRequestContext] = None,
    ) -> GeneratedPlan:
        self.requests.append(request)
        self.contexts.append(context)
        return self.plan

    async def suggest_alternatives(
        self,
        exercise_name: str,
        target_muscle: str,
        context: Optional[AIRequestContext] = None,
    ) -> List[str]:
        self.alternative_calls.append((exercise_name, target_muscle))
        return list(self.alternatives)

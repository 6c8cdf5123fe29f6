"""
Tests for GeneratePlanUseCase.
"""
import pytest
from datetime import date

from application.exceptions import PlanGenerationError
from application.use_cases import GeneratePlanUseCase
from domain.models import ExperienceLevel, FitnessGoal, GeneratedPlan, WorkoutRequest
from shared.ai_context import AIRequestContext
from tests.fakes import (
    FakePlanRepository,
    FakeUserProfileRepository,
    FakeWorkoutGenerator,
    create_user_profile_repo,
)

pytestmark = pytest.mark.unit

TODAY = date(2024, 5, 15)  # a Wednesday


@pytest.fixture
def request_body():
    return WorkoutRequest(
        goal=FitnessGoal.STRENGTH,
        experience=ExperienceLevel.INTERMEDIATE,
        target_muscles=["legs"],
        duration=40,
        equipment=["dumbbells"],
    )


@pytest.fixture
def plan_repo():
    return FakePlanRepository()


@pytest.fixture
def generator():
    return FakeWorkoutGenerator()


class TestGeneratePlanUseCase:
    """Tests for GeneratePlanUseCase."""

    @pytest.mark.asyncio
    async def test_generates_and_saves_plan(self, plan_repo, generator, request_body):
        use_case = GeneratePlanUseCase(plan_repo, FakeUserProfileRepository(), generator)

        result = await use_case.execute("user-1", request_body, today=TODAY)

        assert result.source == "ai"
        assert result.is_fallback is False
        assert result.plan.id is not None
        assert result.plan.exercise_names == ["Squats", "Lunges"]
        assert result.plan.date == TODAY

        stored = plan_repo.get_all()
        assert len(stored) == 1
        assert stored[0]["user_id"] == "user-1"
        assert stored[0]["ai_generated"] is True
        assert stored[0]["completed"] is False
        assert stored[0]["muscle_groups"] == ["legs"]
        assert stored[0]["goal"] == "strength"

    @pytest.mark.asyncio
    async def test_request_stamped_with_weekday(self, plan_repo, generator, request_body):
        use_case = GeneratePlanUseCase(plan_repo, FakeUserProfileRepository(), generator)

        await use_case.execute("user-1", request_body, today=TODAY)

        assert generator.requests[0].day_of_week == "Wednesday"

    @pytest.mark.asyncio
    async def test_profile_overrides_goal_and_experience(self, plan_repo, generator, request_body):
        profile_repo = create_user_profile_repo(
            user_id="user-1", fitness_goal="muscle_gain", experience_level="beginner"
        )
        use_case = GeneratePlanUseCase(plan_repo, profile_repo, generator)

        result = await use_case.execute("user-1", request_body, today=TODAY)

        sent = generator.requests[0]
        assert sent.goal == FitnessGoal.MUSCLE_GAIN
        assert sent.experience == ExperienceLevel.BEGINNER
        assert sent.target_muscles == ["legs"]
        assert result.request.goal == FitnessGoal.MUSCLE_GAIN
        assert plan_repo.get_all()[0]["goal"] == "muscle_gain"

    @pytest.mark.asyncio
    async def test_partial_profile_keeps_request_values(self, plan_repo, generator, request_body):
        profile_repo = create_user_profile_repo(user_id="user-1", experience_level="advanced")
        use_case = GeneratePlanUseCase(plan_repo, profile_repo, generator)

        await use_case.execute("user-1", request_body, today=TODAY)

        sent = generator.requests[0]
        assert sent.goal == FitnessGoal.STRENGTH
        assert sent.experience == ExperienceLevel.ADVANCED

    @pytest.mark.asyncio
    async def test_unreadable_profile_ignored(self, plan_repo, generator, request_body):
        profile_repo = FakeUserProfileRepository()
        profile_repo.seed([{"id": "user-1", "fitness_goal": "yoga"}])
        use_case = GeneratePlanUseCase(plan_repo, profile_repo, generator)

        await use_case.execute("user-1", request_body, today=TODAY)

        assert generator.requests[0].goal == FitnessGoal.STRENGTH

    @pytest.mark.asyncio
    async def test_fallback_plan_is_still_saved(self, plan_repo, request_body):
        generator = FakeWorkoutGenerator(plan=GeneratedPlan(title="Basic Strength Training", source="fallback"))
        use_case = GeneratePlanUseCase(plan_repo, FakeUserProfileRepository(), generator)

        result = await use_case.execute("user-1", request_body, today=TODAY)

        assert result.source == "fallback"
        assert result.is_fallback is True
        assert len(plan_repo.get_all()) == 1

    @pytest.mark.asyncio
    async def test_context_passed_to_generator(self, plan_repo, generator, request_body):
        use_case = GeneratePlanUseCase(plan_repo, FakeUserProfileRepository(), generator)
        context = AIRequestContext(user_id="user-1", feature_name="plan_generation")

        await use_case.execute("user-1", request_body, context=context, today=TODAY)

        assert generator.contexts == [context]

    @pytest.mark.asyncio
    async def test_save_failure_raises(self, plan_repo, generator, request_body):
        plan_repo.fail_create = True
        use_case = GeneratePlanUseCase(plan_repo, FakeUserProfileRepository(), generator)

        with pytest.raises(PlanGenerationError):
            await use_case.execute("user-1", request_body, today=TODAY)

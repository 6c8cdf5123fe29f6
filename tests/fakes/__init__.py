"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of the repository and
generator interfaces for fast, isolated testing. No database, OpenAI key or
network access required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakePlanRepository, create_plan_repo

    # Direct instantiation
    repo = FakePlanRepository()
    repo.seed([make_plan_row(plan_id="w1", user_id="user1")])

    # Factory function with pre-populated data
    repo = create_plan_repo(user_id="user1", num_plans=3)
"""
from typing import Optional, Dict, Any, List
from datetime import date, timedelta

# Import all fake implementations
from tests.fakes.plan_repository import FakePlanRepository
from tests.fakes.exercise_log_repository import FakeExerciseLogRepository
from tests.fakes.user_profile_repository import FakeUserProfileRepository
from tests.fakes.workout_generator import FakeWorkoutGenerator, default_generated_plan


# =============================================================================
# Test Data Builders
# =============================================================================


def make_exercise_row(
    name: str = "Push-ups",
    *,
    sets: int = 3,
    reps: str = "8-12",
    rest_seconds: int = 60,
    muscle_groups: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """Build one entry of a `workouts.exercises` column."""
    return {
        "name": name,
        "sets": sets,
        "reps": reps,
        "rest_seconds": rest_seconds,
        "instructions": f"Perform {name.lower()} with control.",
        "tips": "Keep your core tight.",
        "muscle_groups": muscle_groups if muscle_groups is not None else ["chest"],
    }


def make_plan_row(
    *,
    plan_id: str = "plan-1",
    user_id: str = "test_user",
    title: str = "Monday Chest Power Session",
    day: Optional[date] = None,
    exercises: Optional[List[Dict[str, Any]]] = None,
    muscle_groups: Optional[List[str]] = None,
    goal: str = "strength",
    completed: bool = False,
) -> Dict[str, Any]:
    """Build a `workouts` row."""
    return {
        "id": plan_id,
        "user_id": user_id,
        "date": (day or date(2024, 5, 13)).isoformat(),
        "title": title,
        "description": "Test workout",
        "muscle_groups": muscle_groups if muscle_groups is not None else ["chest"],
        "exercises": exercises if exercises is not None else [
            make_exercise_row("Push-ups", sets=2, rest_seconds=60),
            make_exercise_row("Dips", sets=2, rest_seconds=90, muscle_groups=["triceps"]),
        ],
        "estimated_duration": 30,
        "difficulty": "intermediate",
        "warm_up": ["5 minutes dynamic warm-up"],
        "cool_down": ["5 minutes stretching"],
        "notes": None,
        "ai_generated": True,
        "completed": completed,
        "goal": goal,
        "created_at": "2024-05-13T08:00:00+00:00",
    }


# =============================================================================
# Factory Functions
# =============================================================================


def create_plan_repo(
    *,
    user_id: str = "test_user",
    num_plans: int = 0,
    week_start: date = date(2024, 5, 13),
) -> FakePlanRepository:
    """
    Create a FakePlanRepository with optional pre-populated plans.

    Plans are dated on consecutive days starting at `week_start`.

    Args:
        user_id: User ID for generated plans
        num_plans: Number of sample plans to create
        week_start: Date of the first plan

    Returns:
        Pre-populated FakePlanRepository
    """
    repo = FakePlanRepository()

    if num_plans > 0:
        repo.seed([
            make_plan_row(
                plan_id=f"plan-{i + 1}",
                user_id=user_id,
                title=f"Test Workout {i + 1}",
                day=week_start + timedelta(days=i),
            )
            for i in range(num_plans)
        ])

    return repo


def create_user_profile_repo(
    *,
    user_id: str = "test_user",
    fitness_goal: Optional[str] = None,
    experience_level: Optional[str] = None,
) -> FakeUserProfileRepository:
    """
    Create a FakeUserProfileRepository with a pre-created profile.

    Args:
        user_id: User ID
        fitness_goal: Stored goal (e.g., "muscle_gain")
        experience_level: Stored level (e.g., "beginner")

    Returns:
        Pre-populated FakeUserProfileRepository
    """
    repo = FakeUserProfileRepository()
    repo.seed([{
        "id": user_id,
        "email": "test@example.com",
        "full_name": "Test User",
        "fitness_goal": fitness_goal,
        "experience_level": experience_level,
        "gym_frequency": 3,
    }])
    return repo


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Fake implementations
    "FakePlanRepository",
    "FakeExerciseLogRepository",
    "FakeUserProfileRepository",
    "FakeWorkoutGenerator",
    # Builders
    "make_exercise_row",
    "make_plan_row",
    "default_generated_plan",
    # Factory functions
    "create_plan_repo",
    "create_user_profile_repo",
]

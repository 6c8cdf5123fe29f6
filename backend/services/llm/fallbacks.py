"""
Deterministic plans used when the LLM is unavailable or returns garbage.

- `build_mock_plan`: no API key, or the API call failed. Keyed by the first
  target muscle (chest, back, legs; chest otherwise).
- `fallback_plan`: the API answered but the response had no usable exercises.
"""

from typing import Dict, List

from domain.models import Exercise, ExperienceLevel, GeneratedPlan, WorkoutRequest

MOCK_WARM_UP = [
    "5 minutes light cardio (marching in place, arm circles)",
    "Dynamic stretching - leg swings, arm circles",
    "Bodyweight movement prep",
]

MOCK_COOL_DOWN = [
    "5 minutes walking or light movement",
    "Static stretching - hold each stretch 30 seconds",
    "Deep breathing and relaxation",
]


def _mock_exercises(request: WorkoutRequest) -> Dict[str, tuple]:
    beginner = request.experience == ExperienceLevel.BEGINNER
    level = request.experience.value

    return {
        "chest": ("Chest Power Session", [
            Exercise(
                name="Push-ups",
                sets=3,
                reps="8-12" if beginner else "12-15",
                rest_seconds=60,
                instructions=(
                    "Start in plank position with hands slightly wider than shoulders. "
                    "Lower chest to ground, keeping body straight. Push back up to starting position."
                ),
                tips="Keep core engaged, don't let hips sag. Focus on controlled movement.",
                muscle_groups=["chest", "triceps", "shoulders"],
                difficulty=level,
            ),
            Exercise(
                name="Incline Push-ups",
                sets=3,
                reps="10-15",
                rest_seconds=60,
                instructions="Place hands on elevated surface (bench, step). Perform push-up motion.",
                tips="Higher elevation = easier. Lower elevation = harder.",
                muscle_groups=["chest", "triceps"],
                difficulty=level,
            ),
        ]),
        "back": ("Back Builder Workout", [
            Exercise(
                name="Pull-ups/Assisted Pull-ups",
                sets=3,
                reps="3-6" if beginner else "6-10",
                rest_seconds=120,
                instructions="Hang from bar with hands shoulder-width apart. Pull body up until chin clears bar.",
                tips="Use assistance band if needed. Focus on full range of motion.",
                muscle_groups=["back", "biceps"],
                difficulty=level,
            ),
            Exercise(
                name="Bent-over Rows",
                sets=3,
                reps="8-12",
                rest_seconds=90,
                instructions="Hinge at hips, keep back straight. Pull weights to lower chest.",
                tips="Squeeze shoulder blades together. Don't round your back.",
                muscle_groups=["back", "biceps"],
                difficulty=level,
            ),
        ]),
        "legs": ("Leg Power Session", [
            Exercise(
                name="Bodyweight Squats",
                sets=3,
                reps="12-15" if beginner else "15-20",
                rest_seconds=90,
                instructions=(
                    "Stand with feet shoulder-width apart. "
                    "Lower hips back and down as if sitting in chair."
                ),
                tips="Keep chest up, knees track over toes. Go as low as comfortable.",
                muscle_groups=["quadriceps", "glutes"],
                difficulty=level,
            ),
            Exercise(
                name="Lunges",
                sets=3,
                reps="10-12 each leg",
                rest_seconds=90,
                instructions="Step forward with one leg, lower back knee toward ground.",
                tips="Keep front knee over ankle. Push through front heel to return.",
                muscle_groups=["quadriceps", "glutes", "hamstrings"],
                difficulty=level,
            ),
        ]),
    }


def build_mock_plan(request: WorkoutRequest) -> GeneratedPlan:
    """Canned plan for the request's primary muscle group."""
    catalog = _mock_exercises(request)
    primary = request.target_muscles[0] if request.target_muscles else "chest"
    title, exercises = catalog.get(primary, catalog["chest"])
    goal = request.goal.label

    return GeneratedPlan(
        title=f"{request.day_of_week} {title}",
        description=f"{goal} focused workout for {request.experience.value} level",
        estimated_duration=request.duration,
        difficulty=request.experience.value,
        exercises=exercises,
        warm_up=list(MOCK_WARM_UP),
        cool_down=list(MOCK_COOL_DOWN),
        notes=(
            f"Great {goal} workout! Focus on proper form over speed. "
            "Progress gradually by increasing reps or sets each week."
        ),
        source="mock",
    )


def fallback_plan() -> GeneratedPlan:
    """Minimal full-body plan."""
    return GeneratedPlan(
        title="Basic Strength Training",
        description="A fundamental full-body workout",
        estimated_duration=45,
        difficulty="beginner",
        exercises=[
            Exercise(
                name="Push-ups",
                sets=3,
                reps="8-12",
                rest_seconds=60,
                instructions="Standard push-up form with proper alignment",
                tips="Keep core engaged throughout the movement",
                muscle_groups=["chest", "triceps", "shoulders"],
                difficulty="beginner",
            )
        ],
        warm_up=["5 minutes light movement"],
        cool_down=["5 minutes stretching"],
        notes="Focus on form and gradual progression",
        source="fallback",
    )


def fallback_alternatives(exercise_name: str) -> List[str]:
    return [f"{exercise_name} variation 1", f"{exercise_name} variation 2"]


def mock_alternatives() -> List[str]:
    return ["Alternative exercise 1", "Alternative exercise 2", "Alternative exercise 3"]

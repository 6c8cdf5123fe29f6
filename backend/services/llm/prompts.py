"""
LLM prompt templates for workout plan generation.

User-supplied values are sanitized before they are interpolated.
"""

from domain.models import WorkoutRequest
from shared.sanitization import sanitize_user_input

WORKOUT_SYSTEM_PROMPT = (
    "You are a certified personal trainer and exercise physiologist with 10+ years "
    "of experience. Create safe, effective, evidence-based workout plans tailored to "
    "individual needs. Always prioritize proper form and injury prevention."
)

WORKOUT_USER_PROMPT = """Create a detailed {duration}-minute workout plan in JSON format for:

**User Profile:**
- Goal: {goal}
- Experience Level: {experience}
- Target Muscles: {muscles}
- Available Equipment: {equipment}
- Workout Day: {day}

**Requirements:**
1. Include 4-6 exercises appropriate for {experience} level
2. Provide specific sets, reps, and rest periods
3. Include detailed form instructions for safety
4. Add warm-up and cool-down recommendations
5. Focus on {goal} goals
6. Ensure exercises target: {muscles_and}

**JSON Response Format:**
{{
  "title": "Workout name for {day}",
  "description": "Brief description of workout focus",
  "estimated_duration": {duration},
  "difficulty": "{experience}",
  "exercises": [
    {{
      "name": "Exercise name",
      "sets": 3,
      "reps": "8-10",
      "rest_seconds": 90,
      "instructions": "Detailed step-by-step form instructions",
      "tips": "Key safety tips and form cues",
      "muscle_groups": ["primary", "secondary"],
      "difficulty": "{experience}"
    }}
  ],
  "warm_up": ["5 minutes light cardio", "Dynamic stretching routine", "Activation exercises"],
  "cool_down": ["5 minutes walking", "Static stretching routine", "Breathing exercises"],
  "notes": "Important workout notes and progression tips"
}}

Focus on evidence-based exercises that are safe and effective for {goal}.
"""

ALTERNATIVES_PROMPT = (
    'Provide {count} alternative exercises for "{exercise}" that target the same '
    "muscle group ({muscle}). Return only a JSON array of exercise names: "
    '["exercise1", "exercise2", "exercise3", "exercise4"]'
)


def _clean_list(values: list[str]) -> list[str]:
    cleaned = [sanitize_user_input(v) for v in values if v]
    return [v for v in cleaned if v]


def build_workout_prompt(request: WorkoutRequest) -> str:
    """
    Build the user prompt for plan generation.

    Args:
        request: Generation parameters

    Returns:
        Formatted user prompt string
    """
    muscles = _clean_list(request.target_muscles) or ["full body"]
    if request.bodyweight_only:
        equipment = "bodyweight exercises only"
    else:
        equipment = "gym equipment: " + (", ".join(_clean_list(request.equipment)) or "standard gym")

    return WORKOUT_USER_PROMPT.format(
        duration=request.duration,
        goal=request.goal.label,
        experience=request.experience.value,
        muscles=", ".join(muscles),
        muscles_and=" and ".join(muscles),
        equipment=equipment,
        day=sanitize_user_input(request.day_of_week) or "today",
    )


def build_alternatives_prompt(exercise_name: str, target_muscle: str, count: int = 4) -> str:
    return ALTERNATIVES_PROMPT.format(
        count=count,
        exercise=sanitize_user_input(exercise_name),
        muscle=sanitize_user_input(target_muscle) or "same",
    )

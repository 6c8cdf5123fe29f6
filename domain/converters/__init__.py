"""
Domain converters for loosely typed plan payloads.

All converters are pure functions with no side effects:

- decode_exercises: list / JSON text / LLM object -> validated Exercise tuple
- row_to_plan: `workouts` row (from Supabase) -> Plan
- generated_plan_to_row: GeneratedPlan -> `workouts` insert payload
- exercises_to_rows: Exercise list -> JSON-ready dicts

Examples:
    >>> from domain.converters import decode_exercises
    >>> result = decode_exercises('[{"name": "Push-ups", "sets": 3, "reps": "8-12"}]')
    >>> [e.name for e in result.exercises]
    ['Push-ups']
    >>> decode_exercises("not json").exercises
    ()
"""

from domain.converters.plan_decoding import (
    ExerciseDecodeResult,
    decode_exercises,
    exercises_to_rows,
    generated_plan_to_row,
    row_to_plan,
)

__all__ = [
    "ExerciseDecodeResult",
    "decode_exercises",
    "exercises_to_rows",
    "generated_plan_to_row",
    "row_to_plan",
]

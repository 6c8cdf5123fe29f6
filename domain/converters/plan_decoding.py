"""
Decode loosely typed exercise payloads into validated domain models.

Exercise lists reach us as:
- a JSON array already decoded by the Supabase client,
- a JSON string of that array (older rows stored text),
- a JSON object with an "exercises" key (raw LLM responses).

Nothing here trusts the shape implicitly. `decode_exercises` never raises:
undecodable input produces an empty sequence and an error message, and
individual items that fail validation are skipped and counted.
"""

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from domain.models.exercise import Exercise
from domain.models.generation import GeneratedPlan
from domain.models.plan import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, Plan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExerciseDecodeResult:
    """Outcome of decoding an exercise payload."""

    exercises: Tuple[Exercise, ...] = ()
    error: Optional[str] = None
    skipped: int = 0


def _load_payload(raw: Any) -> Tuple[Optional[List[Any]], Optional[str]]:
    """Reduce the accepted shapes to a plain list."""
    if raw is None:
        return None, "No exercises payload"

    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return None, f"Exercises payload is not valid JSON: {e}"

    if isinstance(raw, dict):
        raw = raw.get("exercises")
        if raw is None:
            return None, "Object payload has no 'exercises' key"

    if not isinstance(raw, (list, tuple)):
        return None, f"Exercises payload must be a list, got {type(raw).__name__}"

    return list(raw), None


def decode_exercises(raw: Any) -> ExerciseDecodeResult:
    """
    Decode an exercises payload into a validated Exercise sequence.

    Args:
        raw: List, JSON string, or object with an "exercises" list

    Returns:
        ExerciseDecodeResult. `exercises` is empty when decoding failed;
        `error` then explains why.
    """
    items, error = _load_payload(raw)
    if error is not None:
        logger.warning(f"Could not decode exercises: {error}")
        return ExerciseDecodeResult(error=error)

    exercises: List[Exercise] = []
    skipped = 0
    for position, item in enumerate(items):
        if isinstance(item, Exercise):
            exercises.append(item)
            continue
        if not isinstance(item, dict):
            skipped += 1
            logger.warning(f"Skipping exercise #{position}: expected object, got {type(item).__name__}")
            continue
        try:
            exercises.append(Exercise.model_validate(item))
        except ValidationError as e:
            skipped += 1
            logger.warning(
                f"Skipping invalid exercise #{position} ({item.get('name', '<unnamed>')}): "
                f"{e.error_count()} validation error(s)"
            )

    if not exercises and items:
        return ExerciseDecodeResult(
            error="No valid exercises in payload",
            skipped=skipped,
        )

    return ExerciseDecodeResult(exercises=tuple(exercises), skipped=skipped)


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v is not None]
    return []


def _clipped_text(value: Any, limit: int) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text[:limit] or None


def _optional_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _positive_int(value: Any) -> Optional[int]:
    """Whole minutes from an int, integral float or digit string; else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, str) and value.strip().isdecimal():
        value = int(value.strip())
    if isinstance(value, int) and value >= 1:
        return value
    return None


def _as_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def row_to_plan(row: Dict[str, Any]) -> Plan:
    """
    Convert a `workouts` row to a Plan.

    Never raises on row content. A row whose exercises cannot be decoded
    produces a Plan with no exercises; a session started from it has no
    current exercise. Over-long title and description are clipped, and an
    unusable duration or date becomes None. Any other column that still
    fails validation falls back to the Plan default.
    """
    decoded = decode_exercises(row.get("exercises"))
    if decoded.error:
        logger.warning(f"Plan {row.get('id')} has unusable exercises: {decoded.error}")

    fields: Dict[str, Any] = {
        "id": _optional_text(row.get("id")),
        "user_id": _optional_text(row.get("user_id")),
        "title": _clipped_text(row.get("title"), TITLE_MAX_LENGTH) or "Custom Workout",
        "description": _clipped_text(row.get("description"), DESCRIPTION_MAX_LENGTH),
        "exercises": list(decoded.exercises),
        "estimated_duration": _positive_int(row.get("estimated_duration")),
        "difficulty": _optional_text(row.get("difficulty")),
        "warm_up": _as_str_list(row.get("warm_up")),
        "cool_down": _as_str_list(row.get("cool_down")),
        "notes": _optional_text(row.get("notes")),
        "muscle_groups": _as_str_list(row.get("muscle_groups")),
        "goal": _optional_text(row.get("goal")),
        "ai_generated": bool(row.get("ai_generated", False)),
        "completed": bool(row.get("completed", False)),
        "date": _as_date(row.get("date")),
        "created_at": row.get("created_at"),
    }

    try:
        return Plan(**fields)
    except ValidationError as e:
        invalid = {err["loc"][0] for err in e.errors() if err["loc"]}
        logger.warning(f"Plan {fields['id']} has invalid columns {sorted(invalid)}; using defaults")
        return Plan(**{name: value for name, value in fields.items() if name not in invalid})


def exercises_to_rows(exercises: List[Exercise]) -> List[Dict[str, Any]]:
    return [exercise.model_dump() for exercise in exercises]


def generated_plan_to_row(
    plan: GeneratedPlan,
    *,
    user_id: str,
    muscle_groups: List[str],
    goal: str,
    day: Optional[date] = None,
) -> Dict[str, Any]:
    """Build the `workouts` insert payload for a freshly generated plan."""
    day = day or datetime.now(timezone.utc).date()
    return {
        "user_id": user_id,
        "date": day.isoformat(),
        "title": plan.title,
        "description": plan.description,
        "muscle_groups": muscle_groups,
        "exercises": exercises_to_rows(plan.exercises),
        "estimated_duration": plan.estimated_duration,
        "difficulty": plan.difficulty,
        "warm_up": plan.warm_up,
        "cool_down": plan.cool_down,
        "notes": plan.notes,
        "ai_generated": True,
        "completed": False,
        "goal": goal,
    }

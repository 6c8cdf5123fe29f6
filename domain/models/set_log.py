"""
SetLogRecord - the persisted form of one exercise's working sets.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from domain.models.working_set import WorkingSet


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SetLogRecord(BaseModel):
    """
    Flattened record of all working sets for one exercise at session completion.

    `exercise_name` is denormalized on purpose: plans can be edited (swapped)
    after the fact and logs must keep pointing at what was actually lifted.
    """

    user_id: str
    plan_id: str
    exercise_name: str = Field(..., min_length=1)
    sets: List[WorkingSet] = Field(default_factory=list)
    personal_record: bool = False
    created_at: datetime = Field(default_factory=_utcnow)

    @property
    def completed_sets(self) -> List[WorkingSet]:
        return [s for s in self.sets if s.completed]

    @property
    def best_weight(self) -> Optional[float]:
        """Heaviest completed set, or None if nothing was completed."""
        weights = [s.weight for s in self.completed_sets]
        return max(weights) if weights else None

    def to_row(self) -> Dict[str, Any]:
        """Convert to an `exercise_logs` row."""
        return {
            "user_id": self.user_id,
            "workout_id": self.plan_id,
            "exercise_name": self.exercise_name,
            "sets": [
                {"reps": s.reps, "weight": s.weight, "completed": s.completed}
                for s in self.sets
            ],
            "personal_record": self.personal_record,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "SetLogRecord":
        """Build a record from an `exercise_logs` row."""
        return cls(
            user_id=row["user_id"],
            plan_id=row.get("workout_id") or row.get("plan_id"),
            exercise_name=row["exercise_name"],
            sets=[WorkingSet.model_validate(s) for s in row.get("sets") or []],
            personal_record=bool(row.get("personal_record")),
            created_at=row.get("created_at") or _utcnow(),
        )

"""Exercise log (progress) schemas."""

from typing import List, Optional

from pydantic import BaseModel

from domain.models import SetLogRecord


class ExerciseLogsResponse(BaseModel):
    logs: List[SetLogRecord]
    total: int


class BestWeightResponse(BaseModel):
    exercise_name: str
    best_weight: Optional[float] = None

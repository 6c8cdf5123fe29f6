"""
Exercise logs router.

This router provides read access to the sets saved at the end of a workout
session, for progress charts and "beat your best" hints in the client.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError

from api.deps import get_current_user, get_exercise_log_repo
from api.schemas.exercise_logs import BestWeightResponse, ExerciseLogsResponse
from application.ports import ExerciseLogRepository
from domain.models import SetLogRecord
from infrastructure.db.exercise_log_repository import MAX_LIMIT

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/exercise-logs",
    tags=["Exercise Logs"],
)


@router.get("", response_model=ExerciseLogsResponse)
def list_exercise_logs(
    exercise_name: Optional[str] = Query(None, min_length=1, max_length=100),
    limit: int = Query(50, ge=1, le=MAX_LIMIT),
    user_id: str = Depends(get_current_user),
    log_repo: ExerciseLogRepository = Depends(get_exercise_log_repo),
) -> ExerciseLogsResponse:
    """
    Get the user's logged exercises, newest first.

    Rows that no longer parse are skipped.
    """
    rows = log_repo.get_for_user(user_id, exercise_name=exercise_name, limit=limit)

    logs: List[SetLogRecord] = []
    for row in rows:
        try:
            logs.append(SetLogRecord.from_row(row))
        except (KeyError, ValidationError) as e:
            logger.warning(f"Skipping malformed exercise log {row.get('id')}: {e}")

    return ExerciseLogsResponse(logs=logs, total=len(logs))


@router.get("/best", response_model=BestWeightResponse)
def get_best_weight(
    exercise_name: str = Query(..., min_length=1, max_length=100),
    user_id: str = Depends(get_current_user),
    log_repo: ExerciseLogRepository = Depends(get_exercise_log_repo),
) -> BestWeightResponse:
    """Heaviest completed set ever logged for one exercise."""
    return BestWeightResponse(
        exercise_name=exercise_name,
        best_weight=log_repo.get_best_weight(user_id, exercise_name),
    )

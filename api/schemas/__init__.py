"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- plans: Generation, weekly planner and exercise swap
- sessions: Guided workout sessions
- exercise_logs: Progress history
"""

from api.schemas.exercise_logs import BestWeightResponse, ExerciseLogsResponse
from api.schemas.plans import (
    AlternativesResponse,
    DayPlans,
    GeneratePlanRequest,
    PlanResponse,
    SwapExerciseRequest,
    WeeklyPlansResponse,
)
from api.schemas.sessions import (
    FinishResponse,
    RecordInputRequest,
    SessionResponse,
    StartSessionRequest,
    TickResponse,
)

__all__ = [
    # Plans
    "GeneratePlanRequest",
    "PlanResponse",
    "DayPlans",
    "WeeklyPlansResponse",
    "AlternativesResponse",
    "SwapExerciseRequest",
    # Sessions
    "StartSessionRequest",
    "RecordInputRequest",
    "SessionResponse",
    "TickResponse",
    "FinishResponse",
    # Progress
    "ExerciseLogsResponse",
    "BestWeightResponse",
]

"""
Workout Session Schemas.

The session body in every response is the controller's SessionSnapshot.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field

from application.session import FinishOutcome, InputField, SessionSnapshot, SessionStatus


class StartSessionRequest(BaseModel):
    """Request body for POST /sessions."""
    plan_id: str = Field(..., min_length=1, max_length=64)


class RecordInputRequest(BaseModel):
    """Request body for PUT /sessions/{session_id}/input."""
    field: InputField
    value: Optional[Union[str, float]] = Field(
        default=None,
        description="Reps as free text, or weight as a number (empty clears it)",
    )


class SessionResponse(BaseModel):
    session_id: str
    session: SessionSnapshot


class TickResponse(BaseModel):
    session_id: str
    status: SessionStatus
    rest_seconds_remaining: Optional[int] = None


class FinishResponse(BaseModel):
    session_id: str
    outcome: FinishOutcome
    logs_saved: int = 0
    personal_records: int = 0
    session: SessionSnapshot

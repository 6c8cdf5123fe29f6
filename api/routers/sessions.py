"""
Workout sessions router.

Drives the guided workout: start a session from a stored plan, log reps and
weight, complete sets, tick the rest countdown, and finish.

All handlers run on the event loop so a session is never touched from two
threads. The API does not run a server-side rest timer. The client shows the
countdown and calls POST /sessions/{id}/tick once per second, so the
server state always matches what the user sees.

Endpoints:
- POST   /sessions
- GET    /sessions/{session_id}
- PUT    /sessions/{session_id}/input
- POST   /sessions/{session_id}/complete-set
- POST   /sessions/{session_id}/tick
- POST   /sessions/{session_id}/finish
- DELETE /sessions/{session_id}
"""

import asyncio
import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Response, status

from api.deps import (
    get_current_user,
    get_exercise_log_repo,
    get_plan_repo,
    get_session_store,
    get_settings,
)
from api.schemas.sessions import (
    FinishResponse,
    RecordInputRequest,
    SessionResponse,
    StartSessionRequest,
    TickResponse,
)
from api.session_store import InMemorySessionStore
from application.exceptions import (
    PlanNotFoundError,
    SessionError,
    SessionNotFoundError,
    SessionSaveError,
    SessionStateError,
    SessionValidationError,
)
from application.ports import ExerciseLogRepository, PlanRepository
from application.session import SessionStatus, WorkoutSession
from backend.settings import Settings
from domain.converters import row_to_plan

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/sessions",
    tags=["Sessions"],
)


# =============================================================================
# Error translation
# =============================================================================


def _raise_http(e: SessionError) -> NoReturn:
    """Translate a session error into the matching HTTP response."""
    if isinstance(e, SessionValidationError):
        raise HTTPException(
            status_code=422,
            detail={"message": e.message, "field": e.field},
        )
    if isinstance(e, (SessionNotFoundError, PlanNotFoundError)):
        raise HTTPException(status_code=404, detail=e.message)
    if isinstance(e, SessionStateError):
        raise HTTPException(status_code=409, detail=e.message)
    if isinstance(e, SessionSaveError):
        raise HTTPException(
            status_code=502,
            detail={"message": e.message, "stage": e.stage, "retryable": e.retryable},
        )
    raise HTTPException(status_code=500, detail=e.message)


def _session_response(session_id: str, session: WorkoutSession) -> SessionResponse:
    return SessionResponse(session_id=session_id, session=session.snapshot())


# =============================================================================
# Endpoints
# =============================================================================


@router.post("", response_model=SessionResponse, status_code=201)
async def start_session(
    request: StartSessionRequest,
    user_id: str = Depends(get_current_user),
    plan_repo: PlanRepository = Depends(get_plan_repo),
    log_repo: ExerciseLogRepository = Depends(get_exercise_log_repo),
    store: InMemorySessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
) -> SessionResponse:
    """
    Start a guided session for one of the user's plans.

    Returns 404 when the plan does not exist or has no exercises.
    """
    row = await asyncio.to_thread(plan_repo.get, request.plan_id, user_id)
    if not row:
        raise HTTPException(status_code=404, detail="Workout not found")

    plan = row_to_plan(row)
    session = WorkoutSession(
        log_repo,
        plan_repo,
        user_id=user_id,
        rest_between_exercises=settings.rest_between_exercises,
        detect_personal_records=settings.detect_personal_records,
    )
    if session.initialize(plan) == SessionStatus.UNAVAILABLE:
        raise HTTPException(status_code=404, detail="This workout has no exercises")

    entry = store.add(session)
    return _session_response(entry.session_id, session)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    user_id: str = Depends(get_current_user),
    store: InMemorySessionStore = Depends(get_session_store),
) -> SessionResponse:
    try:
        session = store.get(session_id, user_id)
    except SessionError as e:
        _raise_http(e)
    return _session_response(session_id, session)


@router.put("/{session_id}/input", response_model=SessionResponse)
async def record_input(
    session_id: str,
    request: RecordInputRequest,
    user_id: str = Depends(get_current_user),
    store: InMemorySessionStore = Depends(get_session_store),
) -> SessionResponse:
    """Set reps or weight on the active set."""
    try:
        session = store.get(session_id, user_id)
        session.record_input(request.field, request.value)
    except SessionError as e:
        _raise_http(e)
    return _session_response(session_id, session)


@router.post("/{session_id}/complete-set", response_model=SessionResponse)
async def complete_set(
    session_id: str,
    user_id: str = Depends(get_current_user),
    store: InMemorySessionStore = Depends(get_session_store),
) -> SessionResponse:
    """
    Complete the active set.

    Completing the last set of the last exercise saves the workout; a save
    failure returns 502 with `retryable: true` and the session can be
    finished again with POST /sessions/{id}/finish.
    """
    try:
        session = store.get(session_id, user_id)
        await session.complete_current_set()
    except SessionError as e:
        _raise_http(e)
    return _session_response(session_id, session)


@router.post("/{session_id}/tick", response_model=TickResponse)
async def tick(
    session_id: str,
    user_id: str = Depends(get_current_user),
    store: InMemorySessionStore = Depends(get_session_store),
) -> TickResponse:
    """Advance the rest countdown by one second."""
    try:
        session = store.get(session_id, user_id)
        remaining = session.countdown_tick()
    except SessionError as e:
        _raise_http(e)
    return TickResponse(
        session_id=session_id,
        status=session.status,
        rest_seconds_remaining=remaining,
    )


@router.post("/{session_id}/finish", response_model=FinishResponse)
async def finish_session(
    session_id: str,
    user_id: str = Depends(get_current_user),
    store: InMemorySessionStore = Depends(get_session_store),
) -> FinishResponse:
    """Save the logged sets and mark the plan completed."""
    try:
        session = store.get(session_id, user_id)
        result = await session.finish()
    except SessionError as e:
        _raise_http(e)
    return FinishResponse(
        session_id=session_id,
        outcome=result.outcome,
        logs_saved=len(result.records),
        personal_records=sum(1 for r in result.records if r.personal_record),
        session=session.snapshot(),
    )


@router.delete("/{session_id}", status_code=204)
async def abandon_session(
    session_id: str,
    user_id: str = Depends(get_current_user),
    store: InMemorySessionStore = Depends(get_session_store),
) -> Response:
    """Abandon a session without saving."""
    try:
        store.remove(session_id, user_id)
    except SessionError as e:
        _raise_http(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""
Workout session runtime.

Usage:
    from application.session import WorkoutSession, AsyncioRestTimer

    session = WorkoutSession(log_repo, plan_repo, user_id=user_id, timer=AsyncioRestTimer())
    session.initialize(plan)
"""

from application.session.controller import (
    ExerciseProgress,
    FinishOutcome,
    FinishResult,
    InputField,
    SessionSnapshot,
    SessionStatus,
    WorkoutSession,
)
from application.session.rest_timer import AsyncioRestTimer, RestTimer

__all__ = [
    "WorkoutSession",
    "SessionStatus",
    "SessionSnapshot",
    "ExerciseProgress",
    "InputField",
    "FinishOutcome",
    "FinishResult",
    "RestTimer",
    "AsyncioRestTimer",
]

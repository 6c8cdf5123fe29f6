"""
Application-layer exceptions.

These exceptions are raised by the session controller and use cases and
translated to HTTP responses by the routers. None of them is fatal to the
process: every failure is scoped to one session or one request.
"""

from typing import Optional


class SessionError(Exception):
    """Base class for workout session failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SessionValidationError(SessionError):
    """User input rejected; nothing in the session changed.

    Raised for empty reps or non-positive weight when completing a set,
    and for weight input that does not coerce to a non-negative number.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class PlanNotFoundError(SessionError):
    """The requested plan does not exist or is not visible to the user."""

    def __init__(self, message: str, plan_id: Optional[str] = None):
        super().__init__(message)
        self.plan_id = plan_id


class ExerciseNotFoundError(PlanNotFoundError):
    """The plan has no exercise at the requested position.

    A session initialized from a plan with zero exercises raises this on
    every operation; the caller can only offer to go back.
    """


class SessionSaveError(SessionError):
    """Persisting the finished session failed.

    The in-memory log is kept so `finish()` can be retried without the user
    re-entering anything.
    """

    retryable = True

    def __init__(self, message: str, stage: str):
        super().__init__(message)
        self.stage = stage


class SessionStateError(SessionError):
    """The operation is not allowed in the session's current status."""


class PlanGenerationError(Exception):
    """A generated plan could not be stored."""

    pass


class PlanUpdateError(Exception):
    """A plan change (exercise swap) could not be stored."""

    pass


class SessionNotFoundError(SessionError):
    """No active session with this id for this user."""

    def __init__(self, message: str, session_id: Optional[str] = None):
        super().__init__(message)
        self.session_id = session_id

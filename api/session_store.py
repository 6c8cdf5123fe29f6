"""
Process-local registry of active workout sessions.

Sessions are held in memory only. Starting a session for a plan the user
already has an active session for replaces the old one; a restart of the
process loses all sessions (logs are only persisted on finish).
"""

import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from application.exceptions import SessionNotFoundError, SessionStateError
from application.session import SessionStatus, WorkoutSession

logger = logging.getLogger(__name__)

DEFAULT_MAX_SESSIONS = 1000

_FINISHED = (SessionStatus.COMPLETED, SessionStatus.ABANDONED)


@dataclass
class SessionEntry:
    session_id: str
    session: WorkoutSession
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def owner_key(self) -> Tuple[str, Optional[str]]:
        plan = self.session.plan
        return self.session.user_id, plan.id if plan else None


class InMemorySessionStore:
    """
    Registry of active sessions keyed by a random session id.

    Every lookup is scoped to the owning user; another user's session id
    behaves exactly like an unknown one.
    """

    def __init__(self, max_sessions: int = DEFAULT_MAX_SESSIONS):
        if max_sessions < 1:
            raise ValueError("max_sessions must be >= 1")
        self._max_sessions = max_sessions
        self._entries: "OrderedDict[str, SessionEntry]" = OrderedDict()
        self._by_owner: Dict[Tuple[str, Optional[str]], str] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, session: WorkoutSession) -> SessionEntry:
        """Register an initialized session, replacing the user's previous session for the same plan."""
        owner_key = (session.user_id, session.plan.id if session.plan else None)
        previous_id = self._by_owner.get(owner_key)
        if previous_id is not None:
            self._discard(previous_id, reason="replaced")

        self._evict_if_full()

        entry = SessionEntry(session_id=uuid.uuid4().hex, session=session)
        self._entries[entry.session_id] = entry
        self._by_owner[owner_key] = entry.session_id
        logger.info(f"Registered session {entry.session_id} for user {session.user_id}")
        return entry

    def get(self, session_id: str, user_id: str) -> WorkoutSession:
        """
        Raises:
            SessionNotFoundError: Unknown id, or the session belongs to someone else
        """
        entry = self._entries.get(session_id)
        if entry is None or entry.session.user_id != user_id:
            raise SessionNotFoundError(f"Session {session_id} not found", session_id=session_id)
        return entry.session

    def remove(self, session_id: str, user_id: str) -> WorkoutSession:
        """Abandon and drop a session."""
        session = self.get(session_id, user_id)
        session.abandon()
        self._drop(session_id)
        return session

    def list_for_user(self, user_id: str) -> List[SessionEntry]:
        return [e for e in self._entries.values() if e.session.user_id == user_id]

    def clear(self) -> None:
        self._entries.clear()
        self._by_owner.clear()

    def _drop(self, session_id: str) -> None:
        entry = self._entries.pop(session_id, None)
        if entry is None:
            return
        if self._by_owner.get(entry.owner_key) == session_id:
            del self._by_owner[entry.owner_key]

    def _discard(self, session_id: str, reason: str) -> None:
        entry = self._entries.get(session_id)
        if entry is None:
            return
        try:
            entry.session.abandon()
        except SessionStateError as e:
            logger.warning(f"Dropping session {session_id} ({reason}) while it is saving: {e.message}")
        self._drop(session_id)
        logger.info(f"Session {session_id} {reason}")

    def _evict_if_full(self) -> None:
        while len(self._entries) >= self._max_sessions:
            victim = next(
                (sid for sid, e in self._entries.items() if e.session.status in _FINISHED),
                next(iter(self._entries)),
            )
            self._discard(victim, reason="evicted")

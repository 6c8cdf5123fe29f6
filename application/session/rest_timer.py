"""
Rest countdown timer.

The session controller owns at most one timer. The timer only decides *when*
to tick; all countdown state lives in the controller, which is ticked through
its public `countdown_tick()` like any other caller.
"""

import asyncio
import logging
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)

# Returns True while the countdown is still running.
TickCallback = Callable[[], bool]


class RestTimer(Protocol):
    """Interface for the timer driving a session's rest countdown."""

    @property
    def is_running(self) -> bool:
        ...

    def start(self, on_tick: TickCallback) -> None:
        """Start ticking, replacing any countdown already running."""
        ...

    def cancel(self) -> None:
        """Stop ticking. Safe to call when nothing is running."""
        ...


class AsyncioRestTimer:
    """
    Rest timer backed by a single asyncio task.

    `start()` must be called from inside a running event loop. The task calls
    `on_tick` once per interval and stops on its own as soon as the callback
    reports that the countdown is over.

    Usage:
        timer = AsyncioRestTimer()
        session = WorkoutSession(log_repo, plan_repo, user_id="u1", timer=timer)
    """

    DEFAULT_INTERVAL_SECONDS = 1.0

    def __init__(self, interval_seconds: float = DEFAULT_INTERVAL_SECONDS):
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval_seconds}")
        self._interval = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, on_tick: TickCallback) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run(on_tick))
        logger.debug(f"Rest timer started (interval={self._interval}s)")

    async def _run(self, on_tick: TickCallback) -> None:
        while True:
            await asyncio.sleep(self._interval)
            if not on_tick():
                return

    def cancel(self) -> None:
        task, self._task = self._task, None
        if task is None or task.done():
            return

        try:
            current = asyncio.current_task()
        except RuntimeError:
            current = None

        # A tick that ends the countdown cancels the timer from inside its own
        # task; that task exits by itself once the callback returns.
        if task is not current:
            task.cancel()
            logger.debug("Rest timer cancelled")

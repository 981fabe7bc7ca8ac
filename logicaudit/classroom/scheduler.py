"""
CooperativeScheduler - One-shot delayed callbacks on a single thread.

Tasks never run on their own: the owner calls run_pending() (or
wait_and_run()) and due callbacks fire in the calling thread. This fits
Streamlit, where each interaction re-runs the page script and background
timers cannot touch the page.
"""

import heapq
import itertools
import logging
import time
from typing import Callable, Optional


logger = logging.getLogger(__name__)


class ScheduledTask:
    """Handle for a scheduled callback."""

    def __init__(self, due_at: float, callback: Callable[[], None]):
        self.due_at = due_at
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        """Prevent the callback from firing. Safe to call more than once."""
        self.cancelled = True


class CooperativeScheduler:
    """
    Delayed-callback queue driven by its owner.

    Tasks fire in due-time order; ties fire in the order they were scheduled.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """
        Initialize scheduler.

        Args:
            clock: Monotonic time source in seconds
        """
        self.clock = clock
        self._queue: list[tuple[float, int, ScheduledTask]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        """
        Schedule a callback to fire after a delay.

        Args:
            delay: Delay in seconds (must be >= 0)
            callback: Zero-argument callable

        Returns:
            ScheduledTask handle that can be cancelled
        """
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        task = ScheduledTask(self.clock() + delay, callback)
        heapq.heappush(self._queue, (task.due_at, next(self._counter), task))
        return task

    def _drop_cancelled(self):
        while self._queue and self._queue[0][2].cancelled:
            heapq.heappop(self._queue)

    def has_pending(self) -> bool:
        """Check if any non-cancelled task is waiting."""
        self._drop_cancelled()
        return bool(self._queue)

    def next_due(self) -> Optional[float]:
        """Get the due time of the earliest live task, or None."""
        self._drop_cancelled()
        return self._queue[0][0] if self._queue else None

    def run_pending(self) -> int:
        """
        Fire every live task whose due time has passed.

        Returns:
            Number of callbacks fired
        """
        fired = 0
        now = self.clock()
        while self._queue and self._queue[0][0] <= now:
            _, _, task = heapq.heappop(self._queue)
            if task.cancelled:
                continue
            task.callback()
            fired += 1
        if fired:
            logger.debug(f"Fired {fired} scheduled task(s)")
        return fired

    def wait_and_run(self, sleep: Callable[[float], None] = time.sleep) -> int:
        """
        Sleep until the earliest task is due, then run due tasks.

        Returns:
            Number of callbacks fired (0 if nothing was scheduled)
        """
        due = self.next_due()
        if due is None:
            return 0
        remaining = due - self.clock()
        if remaining > 0:
            sleep(remaining)
        return self.run_pending()

"""Cancellable one-shot timers driven by an external millisecond clock.

Nothing here knows about pygame: the game window passes in
``pygame.time.get_ticks`` and calls :meth:`Scheduler.run_pending` once per
frame, tests pass in a fake clock.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Callable, List, Tuple

Clock = Callable[[], int]


class TimerHandle:
    """A pending callback; ``cancel()`` stops it from ever firing."""

    __slots__ = ("due_ms", "callback", "cancelled")

    def __init__(self, due_ms: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "pending"
        return f"<TimerHandle due={self.due_ms} {state}>"


class Scheduler:
    def __init__(self, clock: Clock) -> None:
        self.clock = clock
        self._queue: List[Tuple[int, int, TimerHandle]] = []
        self._counter = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {delay_ms}")
        handle = TimerHandle(self.clock() + delay_ms, callback)
        heapq.heappush(self._queue, (handle.due_ms, next(self._counter), handle))
        return handle

    def run_pending(self) -> int:
        """Fire every callback already due when called. Returns how many ran."""
        now = self.clock()
        due: List[TimerHandle] = []
        while self._queue and self._queue[0][0] <= now:
            _, _, handle = heapq.heappop(self._queue)
            due.append(handle)

        fired = 0
        for handle in due:
            # an earlier callback in this batch may have cancelled it
            if handle.cancelled:
                continue
            handle.callback()
            fired += 1
        return fired

    def cancel_all(self) -> None:
        for _, _, handle in self._queue:
            handle.cancel()
        self._queue.clear()

    @property
    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)

"""Delayed-callback scheduling.

Game code never touches a wall clock directly; it asks a ``Scheduler`` to
run an action after a delay and keeps the returned ``Handle`` so it can
cancel it.  ``TickScheduler`` is a virtual clock driven by explicit
``advance()`` calls, which is what both the frame-loop frontends and the
tests use.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Callable, Protocol

Action = Callable[[], None]


class Handle(Protocol):
    @property
    def cancelled(self) -> bool: ...

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule_after(self, delay_ms: int, action: Action) -> Handle: ...


class TimerHandle:
    """Cancelable reference to one scheduled action."""

    __slots__ = ("due_ms", "action", "_cancelled")

    def __init__(self, due_ms: int, action: Action) -> None:
        self.due_ms = due_ms
        self.action = action
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class TickScheduler:
    """Virtual-clock scheduler.

    Time only moves when ``advance`` is called.  Actions due at the same
    instant run in the order they were scheduled.
    """

    def __init__(self, start_ms: int = 0) -> None:
        self._now = start_ms
        self._seq = itertools.count()
        self._queue: list[tuple[int, int, TimerHandle]] = []

    @property
    def now_ms(self) -> int:
        return self._now

    @property
    def pending(self) -> int:
        """Number of scheduled actions that have not fired or been cancelled."""
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def schedule_after(self, delay_ms: int, action: Action) -> TimerHandle:
        if delay_ms < 0:
            raise ValueError(f"Delay must be non-negative, got {delay_ms} ms.")
        handle = TimerHandle(self._now + delay_ms, action)
        heapq.heappush(self._queue, (handle.due_ms, next(self._seq), handle))
        return handle

    def advance(self, ms: int) -> int:
        """Move the clock forward by *ms* and run everything that falls due.

        Actions scheduled while advancing run in the same call if their due
        time is inside the window.  Returns the number of actions run.
        """
        if ms < 0:
            raise ValueError(f"Cannot move the clock backwards ({ms} ms).")
        target = self._now + ms
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now = due
            # A fired handle is spent; cancelling it later is a no-op.
            handle.cancel()
            handle.action()
            ran += 1
        self._now = target
        return ran

    def clear(self) -> None:
        """Cancel everything still queued."""
        for _, _, handle in self._queue:
            handle.cancel()
        self._queue.clear()

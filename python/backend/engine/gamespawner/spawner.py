"""Self-rescheduling spawn timer."""

from __future__ import annotations

import logging
from typing import Callable

from backend.engine.gameclock import Action, Handle, Scheduler

logger = logging.getLogger(__name__)


class Spawner:
    """Runs *action* repeatedly with a delay read fresh before every wait.

    This is not a fixed-rate timer: each firing acts, then asks *interval*
    for the current delay and schedules the next firing, so a shorter
    interval takes effect on the very next spawn.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        action: Action,
        interval: Callable[[], int],
    ) -> None:
        self._scheduler = scheduler
        self._action = action
        self._interval = interval
        self._handle: Handle | None = None
        self._generation = 0
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def scheduled(self) -> bool:
        return self._handle is not None and not self._handle.cancelled

    def start(self) -> None:
        """(Re)start: act immediately, then keep going."""
        self.cancel()
        self._running = True
        self._fire(self._generation)

    def cancel(self) -> None:
        """Stop for good; nothing already scheduled will run."""
        self._running = False
        self._generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    # -- internals ------------------------------------------------------------

    def _fire(self, generation: int) -> None:
        # A stale callback from an earlier start() must not act even if the
        # scheduler failed to drop it.
        if generation != self._generation or not self._running:
            logger.debug("Dropping stale spawn callback (gen %d)", generation)
            return
        self._handle = None
        self._action()
        if generation != self._generation or not self._running:
            return
        delay = self._interval()
        self._handle = self._scheduler.schedule_after(
            delay, lambda: self._fire(generation)
        )

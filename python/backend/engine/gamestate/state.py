"""Tracks the mutable state of a round."""

from __future__ import annotations

from dataclasses import dataclass, field

from backend.models.circle import Circle
from backend.models.color import Color
from backend.models.snapshot import Phase


@dataclass
class RoundState:
    """Score, target, spawn pace and the active circles of one round.

    Circles are stored by id; ids only grow, so iteration order of
    ``circles`` is spawn order.
    """

    spawn_interval_ms: int
    score: int = 0
    target: Color | None = None
    phase: Phase = Phase.IDLE
    circles: dict[int, Circle] = field(default_factory=dict)
    next_id: int = 0

    @property
    def in_progress(self) -> bool:
        return self.phase is Phase.IN_PROGRESS

    # -- circles --------------------------------------------------------------

    def allocate_id(self) -> int:
        circle_id = self.next_id
        self.next_id += 1
        return circle_id

    def add_circle(self, circle: Circle) -> None:
        self.circles[circle.id] = circle

    def remove_circle(self, circle_id: int) -> Circle | None:
        return self.circles.pop(circle_id, None)

    def clear_circles(self) -> None:
        self.circles.clear()

    def find_hit(self, x: float, y: float) -> Circle | None:
        """Return the newest circle containing (x, y), if any."""
        for circle in reversed(tuple(self.circles.values())):
            if circle.contains(x, y):
                return circle
        return None

    # -- lifecycle ------------------------------------------------------------

    def reset(self, spawn_interval_ms: int) -> None:
        self.score = 0
        self.spawn_interval_ms = spawn_interval_ms
        self.target = None
        self.circles.clear()
        self.next_id = 0

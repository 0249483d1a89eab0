"""Circle primitive with hit testing."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.color import Color


@dataclass(frozen=True)
class Circle:
    """A spawned circle.

    ``id`` is unique within a round and grows with every spawn, so a larger
    id always means a more recently added circle.
    """

    id: int
    color: Color
    x: float
    y: float
    radius: float

    def contains(self, px: float, py: float) -> bool:
        """Return True if (px, py) lies inside the circle or on its edge."""
        dx = px - self.x
        dy = py - self.y
        return dx * dx + dy * dy <= self.radius * self.radius

    @property
    def center(self) -> tuple[float, float]:
        return self.x, self.y

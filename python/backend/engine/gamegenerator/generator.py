"""Generates circles at random in-bounds positions."""

from __future__ import annotations

import logging
import random

from backend.models.circle import Circle
from backend.models.color import Color

logger = logging.getLogger(__name__)


class CircleGenerator:
    """Draws colours and positions from an injected random source."""

    def __init__(
        self,
        rng: random.Random,
        palette: tuple[Color, ...],
        radius: float,
    ) -> None:
        if not palette:
            raise ValueError("Palette must contain at least one colour.")
        if radius <= 0:
            raise ValueError(f"Circle radius must be positive, got {radius}.")
        self.rng = rng
        self.palette = palette
        self.radius = radius

    def pick_color(self) -> Color:
        """Uniform pick from the palette."""
        return self.rng.choice(self.palette)

    def make(self, circle_id: int, bounds: tuple[float, float]) -> Circle:
        """Return a new circle that lies fully inside *bounds*.

        Colour is drawn first, then x, then y.
        """
        color = self.pick_color()
        width, height = bounds
        x = self._coord(width)
        y = self._coord(height)
        return Circle(id=circle_id, color=color, x=x, y=y, radius=self.radius)

    # -- helpers --------------------------------------------------------------

    def _coord(self, dimension: float) -> float:
        lo, hi = self.radius, dimension - self.radius
        if hi < lo:
            logger.debug(
                "Playfield dimension %.1f is narrower than a circle; centring",
                dimension,
            )
            return dimension / 2
        return self.rng.uniform(lo, hi)

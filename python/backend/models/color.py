"""Palette of target / circle colours."""

from __future__ import annotations

from enum import StrEnum


class Color(StrEnum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    MAGENTA = "magenta"
    CYAN = "cyan"


PALETTE: tuple[Color, ...] = tuple(Color)

# Pure RGB values, matching the platform colour constants of the same name.
RGB: dict[Color, tuple[int, int, int]] = {
    Color.RED: (255, 0, 0),
    Color.GREEN: (0, 255, 0),
    Color.BLUE: (0, 0, 255),
    Color.YELLOW: (255, 255, 0),
    Color.MAGENTA: (255, 0, 255),
    Color.CYAN: (0, 255, 255),
}


def hex_code(color: Color) -> str:
    """Return ``#rrggbb`` for *color* (used by Qt style sheets and Rich)."""
    r, g, b = RGB[color]
    return f"#{r:02x}{g:02x}{b:02x}"

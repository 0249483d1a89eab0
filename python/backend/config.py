"""Game tuning constants and their validated container."""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction

from backend.models.color import PALETTE, Color
from backend.models.labels import LABEL_SETS

INITIAL_SPAWN_INTERVAL_MS = 2000
MIN_SPAWN_INTERVAL_MS = 1      # keeps the interval positive
CIRCLE_RADIUS = 60.0
POINTS_PER_HIT = 10
SPEEDUP_EVERY = 50       # points
SPEEDUP_FACTOR = 0.8
DEFAULT_LANG = "en"


@dataclass(frozen=True)
class GameConfig:
    """Rules of a round.

    Invalid values raise ``ValueError`` on construction; gameplay assumes
    every field below is a sane constant.
    """

    initial_spawn_interval_ms: int = INITIAL_SPAWN_INTERVAL_MS
    min_spawn_interval_ms: int = MIN_SPAWN_INTERVAL_MS
    circle_radius: float = CIRCLE_RADIUS
    points_per_hit: int = POINTS_PER_HIT
    speedup_every: int = SPEEDUP_EVERY
    speedup_factor: float = SPEEDUP_FACTOR
    palette: tuple[Color, ...] = field(default=PALETTE)
    lang: str = DEFAULT_LANG

    def __post_init__(self) -> None:
        if not self.palette:
            raise ValueError("Palette must contain at least one colour.")
        if self.circle_radius <= 0:
            raise ValueError(
                f"Circle radius must be positive, got {self.circle_radius}."
            )
        if self.initial_spawn_interval_ms <= 0:
            raise ValueError(
                "Initial spawn interval must be positive, "
                f"got {self.initial_spawn_interval_ms} ms."
            )
        if not 0 < self.min_spawn_interval_ms <= self.initial_spawn_interval_ms:
            raise ValueError(
                f"Minimum spawn interval must be in "
                f"(0, {self.initial_spawn_interval_ms}] ms, "
                f"got {self.min_spawn_interval_ms} ms."
            )
        if self.points_per_hit <= 0 or self.speedup_every <= 0:
            raise ValueError("Scoring constants must be positive.")
        if not 0 < self.speedup_factor <= 1:
            raise ValueError(
                f"Speed-up factor must be in (0, 1], got {self.speedup_factor}."
            )
        if self.lang not in LABEL_SETS:
            raise ValueError(
                f"Unknown language {self.lang!r}; "
                f"expected one of {sorted(LABEL_SETS)}."
            )

    # -- derived --------------------------------------------------------------

    @property
    def speedup_ratio(self) -> Fraction:
        """Exact form of ``speedup_factor`` (0.8 -> 4/5)."""
        return Fraction(str(self.speedup_factor))

    def next_interval(self, interval_ms: int) -> int:
        """Interval after one speed-up: truncated, never below the floor."""
        return max(self.min_spawn_interval_ms, int(interval_ms * self.speedup_ratio))

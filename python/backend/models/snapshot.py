"""Read-only view of a round, handed to the frontends."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.models.circle import Circle
from backend.models.color import Color


class Phase(StrEnum):
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    GAME_OVER = "game_over"


class TapOutcome(StrEnum):
    IGNORED = "ignored"  # round not in progress
    EMPTY = "empty"      # nothing under the point
    HIT = "hit"
    WRONG = "wrong"


@dataclass(frozen=True)
class Snapshot:
    """Everything a frontend needs to draw one frame.

    ``circles`` is ordered oldest first, i.e. in paint order.
    """

    circles: tuple[Circle, ...]
    target: Color | None
    target_label: str
    score: int
    phase: Phase
    spawn_interval_ms: int

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

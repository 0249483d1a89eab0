"""Shared fixtures: a virtual clock and a random source with scripted colours."""

from __future__ import annotations

import random
from typing import Callable, Sequence

import pytest

from backend.config import GameConfig
from backend.engine.gameclock import TickScheduler
from backend.engine.gameplay import ColorRush
from backend.models.color import Color

FIELD = (480.0, 800.0)


class ScriptedRandom(random.Random):
    """``random.Random`` whose colour picks follow a script.

    Once the script runs out, picks fall back to the seeded generator.
    Positions always come from the seeded generator.
    """

    def __init__(self, colors: Sequence[Color] = (), seed: int = 1234) -> None:
        super().__init__(seed)
        self.colors = list(colors)

    def choice(self, seq):
        if self.colors:
            color = self.colors.pop(0)
            assert color in seq, f"scripted {color} not in palette {seq}"
            return color
        return super().choice(seq)


GameFactory = Callable[..., tuple[ColorRush, TickScheduler]]


@pytest.fixture
def make_game() -> GameFactory:
    """Build a game on a fresh ``TickScheduler``.

    Keyword arguments: ``colors`` (scripted picks, in call order: target
    first, then each spawned circle or new target as they happen),
    ``config`` and ``bounds``.
    """

    def _make(
        colors: Sequence[Color] = (),
        config: GameConfig | None = None,
        bounds: tuple[float, float] = FIELD,
    ) -> tuple[ColorRush, TickScheduler]:
        scheduler = TickScheduler()
        game = ColorRush(
            scheduler,
            lambda: bounds,
            config=config,
            rng=ScriptedRandom(colors),
        )
        return game, scheduler

    return _make


@pytest.fixture
def red_only() -> GameConfig:
    """Every pick is RED, so every circle matches the target."""
    return GameConfig(palette=(Color.RED,))

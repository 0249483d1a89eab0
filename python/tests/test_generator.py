"""Random circle placement."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import CircleGenerator
from backend.models.color import PALETTE


@pytest.mark.parametrize("bounds", [(480.0, 800.0), (121.0, 5000.0), (1080.0, 1920.0)])
def test_circles_stay_inside_bounds(bounds: tuple[float, float]) -> None:
    gen = CircleGenerator(random.Random(7), PALETTE, 60.0)
    w, h = bounds
    for i in range(500):
        c = gen.make(i, bounds)
        assert 60.0 <= c.x <= w - 60.0
        assert 60.0 <= c.y <= h - 60.0
        assert c.id == i
        assert c.color in PALETTE


def test_same_seed_same_circles() -> None:
    a = CircleGenerator(random.Random(99), PALETTE, 60.0)
    b = CircleGenerator(random.Random(99), PALETTE, 60.0)
    assert [a.make(i, (480.0, 800.0)) for i in range(20)] == [
        b.make(i, (480.0, 800.0)) for i in range(20)
    ]


def test_every_colour_shows_up() -> None:
    gen = CircleGenerator(random.Random(3), PALETTE, 60.0)
    seen = {gen.pick_color() for _ in range(600)}
    assert seen == set(PALETTE)


def test_too_small_field_centres_the_circle() -> None:
    gen = CircleGenerator(random.Random(0), PALETTE, 60.0)
    c = gen.make(0, (100.0, 800.0))
    assert c.x == 50.0
    assert 60.0 <= c.y <= 740.0


@pytest.mark.parametrize("palette, radius", [((), 60.0), (PALETTE, 0.0)])
def test_invalid_arguments(palette: tuple, radius: float) -> None:
    with pytest.raises(ValueError):
        CircleGenerator(random.Random(0), palette, radius)

"""Hit testing on the circle primitive."""

from __future__ import annotations

import math

import pytest

from backend.models.circle import Circle
from backend.models.color import Color


def _circle(radius: float = 60.0) -> Circle:
    return Circle(id=0, color=Color.RED, x=100.0, y=200.0, radius=radius)


# -- tests --------------------------------------------------------------------


def test_centre_is_inside() -> None:
    assert _circle().contains(100.0, 200.0)


@pytest.mark.parametrize(
    "dx, dy",
    [(60.0, 0.0), (0.0, -60.0), (-36.0, 48.0)],  # 3-4-5 triangle scaled by 12
    ids=["right", "top", "diagonal"],
)
def test_edge_counts_as_hit(dx: float, dy: float) -> None:
    assert _circle().contains(100.0 + dx, 200.0 + dy)


@pytest.mark.parametrize("angle", [0.0, math.pi / 3, math.pi, 4.0])
def test_just_outside_is_a_miss(angle: float) -> None:
    r = 60.0 + 1e-6
    px = 100.0 + r * math.cos(angle)
    py = 200.0 + r * math.sin(angle)
    assert not _circle().contains(px, py)


def test_circle_is_immutable() -> None:
    c = _circle()
    with pytest.raises(AttributeError):
        c.x = 0.0  # type: ignore[misc]
    assert c.center == (100.0, 200.0)

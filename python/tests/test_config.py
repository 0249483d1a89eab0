"""Configuration validation and the speed-up arithmetic."""

from __future__ import annotations

import pytest

from backend.config import GameConfig
from backend.models.color import PALETTE, Color
from backend.models.labels import get_labels


def test_defaults() -> None:
    cfg = GameConfig()
    assert cfg.initial_spawn_interval_ms == 2000
    assert cfg.points_per_hit == 10
    assert cfg.speedup_every == 50
    assert cfg.min_spawn_interval_ms == 1
    assert cfg.palette == PALETTE
    assert len(cfg.palette) == 6


@pytest.mark.parametrize(
    "kwargs",
    [
        {"palette": ()},
        {"circle_radius": 0},
        {"circle_radius": -5.0},
        {"initial_spawn_interval_ms": 0},
        {"min_spawn_interval_ms": 0},
        {"min_spawn_interval_ms": 2001},
        {"points_per_hit": 0},
        {"speedup_every": -50},
        {"speedup_factor": 0},
        {"speedup_factor": 1.2},
        {"lang": "xx"},
    ],
    ids=lambda kw: next(iter(kw)),
)
def test_invalid_config_fails_fast(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


@pytest.mark.parametrize(
    "before, after",
    [(2000, 1600), (1600, 1280), (1280, 1024), (1024, 819), (819, 655)],
)
def test_next_interval_truncates(before: int, after: int) -> None:
    cfg = GameConfig(min_spawn_interval_ms=1)
    assert cfg.next_interval(before) == after


def test_next_interval_respects_floor() -> None:
    cfg = GameConfig(min_spawn_interval_ms=1500)
    assert cfg.next_interval(2000) == 1600
    assert cfg.next_interval(1600) == 1500
    assert cfg.next_interval(1500) == 1500


def test_tiny_interval_never_reaches_zero() -> None:
    cfg = GameConfig(min_spawn_interval_ms=1)
    assert cfg.next_interval(1) == 1


def test_label_tables_cover_the_palette() -> None:
    for lang in ("en", "ru"):
        labels = get_labels(lang)
        assert set(labels.colors) == set(Color)
    assert get_labels("en").prompt_text(Color.RED) == "Tap RED"
    assert get_labels("ru").game_over_text(30) == "Игра окончена! Очки: 30"
    with pytest.raises(ValueError):
        get_labels("de")

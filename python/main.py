#!/usr/bin/env python3
"""Color Rush: tap the circles of the target colour.

Usage::

    python main.py                    # interactive menu
    python main.py -f pygame          # Pygame GUI
    python main.py -f pyqt --lang ru  # PyQt6 GUI, Russian labels
    python main.py -f rich --seed 7   # Rich terminal, reproducible round
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import (  # noqa: E402
    CIRCLE_RADIUS,
    INITIAL_SPAWN_INTERVAL_MS,
    MIN_SPAWN_INTERVAL_MS,
    GameConfig,
)

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    pygame = "pygame"
    pyqt = "pyqt"
    rich = "rich"


class Theme(StrEnum):
    dark = "dark"
    light = "light"


class Lang(StrEnum):
    en = "en"
    ru = "ru"


_RUNNERS = {
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _ask_frontend() -> Frontend | None:
    print()
    print("  ====================================")
    print("           C O L O R   R U S H        ")
    print("  ====================================")
    print()
    print("  1.  Play  (Pygame GUI)")
    print("  2.  Play  (PyQt GUI)")
    print("  3.  Play  (Rich Terminal)")
    print("  0.  Quit")
    print()

    while True:
        choice = input("  Select: ").strip()
        if choice == "0":
            print("\n  Goodbye!\n")
            return None
        picked = {"1": Frontend.pygame, "2": Frontend.pyqt, "3": Frontend.rich}.get(
            choice
        )
        if picked is not None:
            return picked
        print("  Unknown option.")


def _launch(frontend: Frontend, config: GameConfig, seed: int | None, theme: Theme) -> None:
    try:
        mod = importlib.import_module(_RUNNERS[frontend])
    except ImportError as exc:
        raise typer.BadParameter(
            f"The {frontend.value} frontend is not available ({exc}). "
            f"Install it with: pip install 'color-rush[{frontend.value}]'",
            param_hint="--frontend",
        ) from exc
    logger.info("Launching %s frontend (seed=%s)", frontend.value, seed)
    mod.run(config=config, seed=seed, theme=theme.value)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for colours and positions (reproducible rounds).",
    ),
    lang: Lang = typer.Option(Lang.en, "--lang", help="Label language."),
    theme: Theme = typer.Option(Theme.dark, "--theme", help="Colour theme."),
    radius: float = typer.Option(
        CIRCLE_RADIUS, "--radius", help="Circle radius in pixels (GUI only).",
    ),
    interval: int = typer.Option(
        INITIAL_SPAWN_INTERVAL_MS, "--interval",
        help="Initial spawn interval in ms.",
    ),
    min_interval: int = typer.Option(
        MIN_SPAWN_INTERVAL_MS, "--min-interval",
        help="Floor for the spawn interval in ms.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    """Color Rush."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        config = GameConfig(
            initial_spawn_interval_ms=interval,
            min_spawn_interval_ms=min_interval,
            circle_radius=radius,
            lang=lang.value,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if frontend is None:
        frontend = _ask_frontend()
        if frontend is None:
            return

    _launch(frontend, config, seed, theme)


if __name__ == "__main__":
    app()

"""Rich terminal frontend.

The playfield is a grid of character cells.  Every circle is drawn as a
coloured cell carrying a key; pressing that key taps that circle.
Time is driven by a ``TickScheduler`` that is advanced by the real elapsed
time between key polls.
"""

from __future__ import annotations

import dataclasses
import logging
import random
import time

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from backend.config import GameConfig
from backend.engine.gameclock import TickScheduler
from backend.engine.gameplay import ColorRush
from backend.models.circle import Circle
from backend.models.color import hex_code
from backend.models.snapshot import Snapshot, TapOutcome
from frontend.cli.input_handler import get_key_timeout

logger = logging.getLogger(__name__)

console = Console()

# Playfield size in cells.  One cell is one unit of game space and a circle
# covers exactly its own cell.
COLS, ROWS = 24, 10
CELL_RADIUS = 0.5
POLL_S = 0.05

# q and r are taken by quit / restart.
_KEYS = "123456789abcdefghijklmnopstuvwxyz"

_THEMES: dict[str, dict[str, str]] = {
    "dark": {"field": "on #1e1e2e", "border": "bright_blue", "dim": "#6c7086"},
    "light": {"field": "on #eff1f5", "border": "blue", "dim": "#8c8fa1"},
}


# -- key assignment -----------------------------------------------------------


class KeyRing:
    """Hands each visible circle its own key for as long as it is on screen.

    A key is freed when its circle disappears and goes to the next new
    circle.  Circles beyond the number of keys wait, unkeyed, until one is
    freed.
    """

    def __init__(self, keys: str = _KEYS) -> None:
        self._keys = keys
        self._by_id: dict[int, str] = {}

    def sync(self, snap: Snapshot) -> dict[int, str]:
        """Refresh the assignment against *snap*; return ``{id: key}``."""
        live = {circle.id for circle in snap.circles}
        self._by_id = {cid: k for cid, k in self._by_id.items() if cid in live}
        taken = set(self._by_id.values())
        free = [k for k in self._keys if k not in taken]
        for circle in snap.circles:
            if not free:
                break
            if circle.id not in self._by_id:
                self._by_id[circle.id] = free.pop(0)
        return dict(self._by_id)

    def circle_id(self, key: str) -> int | None:
        for cid, k in self._by_id.items():
            if k == key:
                return cid
        return None


def press(game: ColorRush, keys: KeyRing, key: str) -> TapOutcome | None:
    """Tap the circle holding *key*; ``None`` if no circle holds it."""
    keys.sync(game.snapshot())
    circle_id = keys.circle_id(key)
    if circle_id is None:
        return None
    return game.resolve_circle(circle_id)


# -- rendering ----------------------------------------------------------------


def _render_field(
    snap: Snapshot, keys: dict[int, str], theme: dict[str, str]
) -> Text:
    cells: dict[tuple[int, int], Circle] = {}
    # Paint order: later (newer) circles overwrite older ones.
    for circle in snap.circles:
        cells[(int(circle.x), int(circle.y))] = circle

    field = Text()
    for row in range(ROWS):
        for col in range(COLS):
            circle = cells.get((col, row))
            if circle is None:
                field.append("   ", style=theme["field"])
            else:
                field.append(
                    f" {keys.get(circle.id, '·')} ",
                    style=f"bold black on {hex_code(circle.color)}",
                )
        if row < ROWS - 1:
            field.append("\n")
    return field


def _draw(
    game: ColorRush, snap: Snapshot, keys: KeyRing, theme: dict[str, str]
) -> None:
    console.clear()
    labels = game.labels

    header = Text()
    if snap.game_over:
        header.append(labels.game_over_text(snap.score), style="bold red")
    elif snap.target is not None:
        header.append(labels.prompt_prefix, style="bold")
        header.append(
            snap.target_label, style=f"bold {hex_code(snap.target)}"
        )
        header.append("    ")
        header.append(labels.score_text(snap.score), style="bold yellow")

    controls = Text()
    controls.append("  key", style="bold cyan")
    controls.append("  tap circle   ", style=theme["dim"])
    controls.append("R", style="bold cyan")
    controls.append(f"  {labels.restart.lower()}   ", style=theme["dim"])
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style=theme["dim"])

    panel = Panel(
        Align.center(_render_field(snap, keys.sync(snap), theme)),
        title="[bold]C O L O R   R U S H[/bold]",
        border_style="red" if snap.game_over else theme["border"],
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(Group(Align.center(header), Text(""), panel)))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _play(game: ColorRush, scheduler: TickScheduler, theme: dict[str, str]) -> None:
    latest: list[Snapshot] = []
    keys = KeyRing()
    game.subscribe(latest.append)

    game.start()
    started = time.monotonic()

    while True:
        if latest:
            snap = latest[-1]
            latest.clear()
            _draw(game, snap, keys, theme)

        key = get_key_timeout(POLL_S)
        elapsed_ms = int((time.monotonic() - started) * 1000)
        scheduler.advance(max(0, elapsed_ms - scheduler.now_ms))

        if key is None or key == "":
            continue
        if key == "quit":
            game.spawner.cancel()
            return
        if key == "restart":
            game.restart()
            continue

        outcome = press(game, keys, key)
        if outcome is TapOutcome.WRONG:
            logger.debug("Round lost on key %r", key)


# -- public entry point -------------------------------------------------------


def run(
    config: GameConfig,
    seed: int | None = None,
    theme: str = "dark",
) -> None:
    """Launch the Rich terminal game.

    The playfield is measured in cells, so the circle radius from *config*
    is replaced by one that fits a single cell.
    """
    config = dataclasses.replace(config, circle_radius=CELL_RADIUS)
    scheduler = TickScheduler()
    game = ColorRush(
        scheduler,
        lambda: (float(COLS), float(ROWS)),
        config=config,
        rng=random.Random(seed),
    )
    try:
        _play(game, scheduler, _THEMES[theme])
    finally:
        console.clear()
        console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))

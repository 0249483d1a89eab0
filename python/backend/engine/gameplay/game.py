"""Core gameplay logic: spawning, tap resolution and scoring."""

from __future__ import annotations

import logging
import random
from typing import Callable

from backend.config import GameConfig
from backend.engine.gameclock import Scheduler
from backend.engine.gamegenerator import CircleGenerator
from backend.engine.gamespawner import Spawner
from backend.engine.gamestate import RoundState
from backend.models.color import Color
from backend.models.labels import get_labels
from backend.models.snapshot import Phase, Snapshot, TapOutcome

logger = logging.getLogger(__name__)

BoundsProvider = Callable[[], tuple[float, float]]
Listener = Callable[[Snapshot], None]


class ColorRush:
    """Orchestrates rounds of the game.

    The frontend supplies a scheduler, the current playfield size and taps;
    it gets a ``Snapshot`` back through ``subscribe`` after every change.
    All entry points are single steps on one thread: each one reads and
    mutates ``state`` completely before returning.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        bounds_provider: BoundsProvider,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.labels = get_labels(self.config.lang)
        self.rng = rng if rng is not None else random.Random()
        self.generator = CircleGenerator(
            self.rng, self.config.palette, self.config.circle_radius
        )
        self.state = RoundState(
            spawn_interval_ms=self.config.initial_spawn_interval_ms
        )
        self._bounds = bounds_provider
        self._listeners: list[Listener] = []
        self.spawner = Spawner(
            scheduler, self.spawn_circle, lambda: self.state.spawn_interval_ms
        )

    # -- observers ------------------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def snapshot(self) -> Snapshot:
        state = self.state
        return Snapshot(
            circles=tuple(state.circles.values()),
            target=state.target,
            target_label=self.labels.color_name(state.target),
            score=state.score,
            phase=state.phase,
            spawn_interval_ms=state.spawn_interval_ms,
        )

    # -- round lifecycle ------------------------------------------------------

    def start(self) -> None:
        """Begin a fresh round and spawn the first circle right away."""
        self.spawner.cancel()
        self.state.reset(self.config.initial_spawn_interval_ms)
        self.state.phase = Phase.IN_PROGRESS
        self._choose_target()
        logger.info(
            "Round started: target=%s interval=%d ms",
            self.state.target,
            self.state.spawn_interval_ms,
        )
        self._publish()
        self.spawner.start()

    def restart(self) -> None:
        self.state.clear_circles()
        self.start()

    def game_over(self) -> None:
        """End the round; nothing spawns until ``restart``."""
        self.spawner.cancel()
        if not self.state.in_progress:
            return
        self.state.phase = Phase.GAME_OVER
        logger.info("Game over: score=%d", self.state.score)
        self._publish()

    # -- rules ----------------------------------------------------------------

    def pick_new_target(self) -> Color:
        """Choose a new target colour (may repeat) and announce it."""
        color = self._choose_target()
        self._publish()
        return color

    def spawn_circle(self) -> None:
        """Add one random circle; ignored unless a round is running."""
        state = self.state
        if not state.in_progress:
            return
        circle = self.generator.make(state.allocate_id(), self._bounds())
        state.add_circle(circle)
        logger.debug(
            "Spawned circle #%d %s at (%.1f, %.1f)",
            circle.id,
            circle.color,
            circle.x,
            circle.y,
        )
        self._publish()

    def resolve_tap(self, x: float, y: float) -> TapOutcome:
        """Apply a tap at (x, y) in playfield coordinates."""
        state = self.state
        if not state.in_progress:
            return TapOutcome.IGNORED

        circle = state.find_hit(x, y)
        if circle is None:
            return TapOutcome.EMPTY
        return self.resolve_circle(circle.id)

    def resolve_circle(self, circle_id: int) -> TapOutcome:
        """Apply a tap on the circle *circle_id*, wherever it lies.

        For frontends that pick circles directly (keys, not coordinates).
        An id that is not on the field counts as an empty tap.
        """
        state = self.state
        if not state.in_progress:
            return TapOutcome.IGNORED

        circle = state.remove_circle(circle_id)
        if circle is None:
            return TapOutcome.EMPTY

        if circle.color != state.target:
            logger.debug(
                "Wrong tap: circle #%d is %s, target was %s",
                circle.id,
                circle.color,
                state.target,
            )
            self.game_over()
            return TapOutcome.WRONG

        state.score += self.config.points_per_hit
        self._choose_target()
        if state.score % self.config.speedup_every == 0:
            previous = state.spawn_interval_ms
            state.spawn_interval_ms = self.config.next_interval(previous)
            logger.debug(
                "Speed-up at %d points: %d -> %d ms",
                state.score,
                previous,
                state.spawn_interval_ms,
            )
        self._publish()
        return TapOutcome.HIT

    # Frontends forward raw taps through here.
    tap = resolve_tap

    # -- queries --------------------------------------------------------------

    @property
    def in_progress(self) -> bool:
        return self.state.in_progress

    @property
    def is_over(self) -> bool:
        return self.state.phase is Phase.GAME_OVER

    # -- helpers --------------------------------------------------------------

    def _choose_target(self) -> Color:
        self.state.target = self.generator.pick_color()
        return self.state.target

    def _publish(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

"""Pygame GUI frontend.

A header with the target prompt and score sits above the playfield.  Left
clicks inside the playfield are forwarded to the game in playfield
coordinates; the restart button only appears once the round is lost.
"""

from __future__ import annotations

import logging
import random

import pygame

from backend.config import GameConfig
from backend.engine.gameclock import TickScheduler
from backend.engine.gameplay import ColorRush
from backend.models.color import RGB
from backend.models.snapshot import Snapshot

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin palettes (Mocha for dark, Latte for light)
# ---------------------------------------------------------------------------
_THEMES: dict[str, dict[str, tuple[int, int, int]]] = {
    "dark": {
        "base": (30, 30, 46),
        "mantle": (24, 24, 37),
        "surface0": (49, 50, 68),
        "surface1": (69, 71, 90),
        "text": (205, 214, 244),
        "subtext": (166, 173, 200),
        "red": (243, 139, 168),
        "yellow": (249, 226, 175),
    },
    "light": {
        "base": (239, 241, 245),
        "mantle": (230, 233, 239),
        "surface0": (204, 208, 218),
        "surface1": (188, 192, 204),
        "text": (76, 79, 105),
        "subtext": (92, 95, 119),
        "red": (210, 15, 57),
        "yellow": (223, 142, 29),
    },
}

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 540, 800
HEADER_H = 96
FPS = 60


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "radius", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple,
        hover: tuple,
        fg: tuple,
        radius: int = 8,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self.radius = radius
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=self.radius)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, config: GameConfig, seed: int | None, theme: str) -> None:
        self._col = _THEMES[theme]

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H), pygame.RESIZABLE)
        pygame.display.set_caption("Color Rush")
        self._clock = pygame.time.Clock()

        self._f_title = pygame.font.SysFont("Helvetica", 26, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 18)
        self._f_btn = pygame.font.SysFont("Helvetica", 18, bold=True)

        self._scheduler = TickScheduler()
        self._game = ColorRush(
            self._scheduler,
            self._field_size,
            config=config,
            rng=random.Random(seed),
        )
        self._snap: Snapshot = self._game.snapshot()
        self._game.subscribe(self._on_change)

        self._restart_btn = _Btn(
            (0, 0, 220, 52),
            self._game.labels.restart.upper(),
            self._f_btn,
            bg=self._col["surface0"],
            hover=self._col["surface1"],
            fg=self._col["text"],
        )

    # ── adapter hooks ───────────────────────────────────────────────────────

    def _field_size(self) -> tuple[float, float]:
        w, h = self._surf.get_size()
        return float(w), float(max(0, h - HEADER_H))

    def _on_change(self, snap: Snapshot) -> None:
        self._snap = snap

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw(self) -> None:
        snap = self._snap
        labels = self._game.labels
        w, h = self._surf.get_size()
        self._surf.fill(self._col["base"])

        # header
        pygame.draw.rect(self._surf, self._col["mantle"], pygame.Rect(0, 0, w, HEADER_H))
        if snap.game_over:
            title = self._f_title.render(
                labels.game_over_text(snap.score), True, self._col["red"]
            )
        else:
            title = self._f_title.render(
                labels.prompt_text(snap.target), True, self._col["text"]
            )
        self._surf.blit(title, ((w - title.get_width()) // 2, 16))

        if snap.target is not None and not snap.game_over:
            pygame.draw.circle(
                self._surf, RGB[snap.target], (w // 2, 66), 10
            )
        score = self._f_body.render(
            labels.score_text(snap.score), True, self._col["yellow"]
        )
        self._surf.blit(score, (16, HEADER_H - score.get_height() - 8))

        # circles, oldest first so the newest is drawn on top
        for circle in snap.circles:
            pygame.draw.circle(
                self._surf,
                RGB[circle.color],
                (int(circle.x), int(circle.y) + HEADER_H),
                int(circle.radius),
            )

        if snap.game_over:
            self._restart_btn.rect.center = (w // 2, HEADER_H + (h - HEADER_H) // 2)
            self._restart_btn.draw(self._surf)

    # ── event handling ──────────────────────────────────────────────────────

    def _handle(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.QUIT:
            return False
        if ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_ESCAPE, pygame.K_q):
                return False
            if ev.key == pygame.K_r:
                self._game.restart()
        elif ev.type == pygame.MOUSEMOTION:
            self._restart_btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._snap.game_over and self._restart_btn.hit(ev.pos):
                self._game.restart()
                return True
            x, y = ev.pos
            if y >= HEADER_H:
                self._game.tap(float(x), float(y - HEADER_H))
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        self._game.start()
        running = True
        while running:
            dt = self._clock.tick(FPS)
            self._scheduler.advance(dt)

            for ev in pygame.event.get():
                if not self._handle(ev):
                    running = False
                    break

            self._draw()
            pygame.display.flip()

        self._game.spawner.cancel()
        logger.info("Window closed with score %d", self._snap.score)
        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: GameConfig, seed: int | None = None, theme: str = "dark") -> None:
    """Launch the Pygame GUI; a round starts immediately."""
    app = PygameApp(config, seed, theme)
    app.run_loop()

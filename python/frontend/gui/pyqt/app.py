"""PyQt6 GUI frontend.

Task label, score label and a painted playfield stacked vertically, with a
restart button that is only shown after the round is lost.  Spawns are
driven by real single-shot ``QTimer``s through ``QtScheduler``.
"""

from __future__ import annotations

import logging
import random
import sys

from PyQt6.QtCore import QObject, QPointF, Qt, QTimer
from PyQt6.QtGui import QColor, QFont, QKeyEvent, QMouseEvent, QPainter, QPaintEvent
from PyQt6.QtWidgets import (
    QApplication,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from backend.config import GameConfig
from backend.engine.gameclock import Action
from backend.engine.gameplay import ColorRush
from backend.models.color import RGB
from backend.models.snapshot import Snapshot

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin CSS colours (Mocha / Latte)
# ---------------------------------------------------------------------------
_THEMES: dict[str, dict[str, str]] = {
    "dark": {
        "base": "#1e1e2e",
        "mantle": "#181825",
        "surface0": "#313244",
        "surface1": "#45475a",
        "text": "#cdd6f4",
        "yellow": "#f9e2af",
        "red": "#f38ba8",
    },
    "light": {
        "base": "#eff1f5",
        "mantle": "#e6e9ef",
        "surface0": "#ccd0da",
        "surface1": "#bcc0cc",
        "text": "#4c4f69",
        "yellow": "#df8e1d",
        "red": "#d20f39",
    },
}


# ---------------------------------------------------------------------------
# Scheduler backed by Qt timers
# ---------------------------------------------------------------------------
class _QtHandle:
    __slots__ = ("_timer", "_cancelled")

    def __init__(self, timer: QTimer) -> None:
        self._timer = timer
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        self._timer.stop()
        self._timer.deleteLater()


class QtScheduler:
    """``Scheduler`` running each action from its own single-shot QTimer."""

    def __init__(self, parent: QObject) -> None:
        self._parent = parent

    def schedule_after(self, delay_ms: int, action: Action) -> _QtHandle:
        if delay_ms < 0:
            raise ValueError(f"Delay must be non-negative, got {delay_ms} ms.")
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        handle = _QtHandle(timer)

        def _fire() -> None:
            if handle.cancelled:
                return
            handle.cancel()
            action()

        timer.timeout.connect(_fire)
        timer.start(delay_ms)
        return handle


# ---------------------------------------------------------------------------
# Playfield
# ---------------------------------------------------------------------------
class _Board(QWidget):
    """Paints the active circles and forwards clicks as taps."""

    def __init__(self, background: str) -> None:
        super().__init__()
        self._background = QColor(background)
        self.game: ColorRush | None = None
        self.snap: Snapshot | None = None
        self.setMinimumSize(320, 420)

    def field_size(self) -> tuple[float, float]:
        return float(self.width()), float(self.height())

    def paintEvent(self, event: QPaintEvent | None) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), self._background)
        painter.setPen(Qt.PenStyle.NoPen)
        if self.snap is not None:
            for circle in self.snap.circles:
                painter.setBrush(QColor(*RGB[circle.color]))
                painter.drawEllipse(
                    QPointF(circle.x, circle.y), circle.radius, circle.radius
                )
        painter.end()

    def mousePressEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is None or self.game is None:
            return
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self.game.tap(pos.x(), pos.y())


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------
class _MainWindow(QMainWindow):
    def __init__(self, config: GameConfig, seed: int | None, theme: str) -> None:
        super().__init__()
        col = _THEMES[theme]
        self._col = col

        self.setWindowTitle("Color Rush")
        self.setStyleSheet(
            f"QMainWindow, QWidget#page {{ background: {col['base']}; }}"
            f" QLabel {{ color: {col['text']}; }}"
        )
        self.setMinimumSize(360, 560)

        page = QWidget()
        page.setObjectName("page")
        root = QVBoxLayout(page)
        root.setSpacing(8)
        root.setContentsMargins(12, 12, 12, 12)

        self._task = QLabel()
        self._task.setFont(QFont("Helvetica", 20, QFont.Weight.Bold))
        self._task.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._task)

        self._score = QLabel()
        self._score.setFont(QFont("Helvetica", 14))
        self._score.setStyleSheet(f"color:{col['yellow']};")
        self._score.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._score)

        self._board = _Board(col["mantle"])
        root.addWidget(self._board, stretch=1)

        self._game = ColorRush(
            QtScheduler(self),
            self._board.field_size,
            config=config,
            rng=random.Random(seed),
        )
        self._board.game = self._game
        self._game.subscribe(self._on_change)

        self._restart = QPushButton(self._game.labels.restart)
        self._restart.setFont(QFont("Helvetica", 14, QFont.Weight.Bold))
        self._restart.setMinimumHeight(44)
        self._restart.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self._restart.setStyleSheet(
            f"QPushButton {{ background:{col['surface0']}; color:{col['text']};"
            f" border:none; border-radius:8px; padding:6px 18px; }}"
            f" QPushButton:hover {{ background:{col['surface1']}; }}"
        )
        self._restart.clicked.connect(self._game.restart)
        self._restart.setVisible(False)
        root.addWidget(self._restart)

        self.setCentralWidget(page)
        self._on_change(self._game.snapshot())

    def start(self) -> None:
        self._game.start()

    # -- rendering --

    def _on_change(self, snap: Snapshot) -> None:
        labels = self._game.labels
        self._board.snap = snap
        if snap.game_over:
            self._task.setText(labels.game_over_text(snap.score))
            self._task.setStyleSheet(f"color:{self._col['red']};")
        else:
            self._task.setText(labels.prompt_text(snap.target))
            if snap.target is not None:
                r, g, b = RGB[snap.target]
                self._task.setStyleSheet(f"color:rgb({r},{g},{b});")
        self._score.setText(labels.score_text(snap.score))
        self._restart.setVisible(snap.game_over)
        self._board.update()

    # -- keyboard --

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        if key == Qt.Key.Key_R:
            self._game.restart()
        elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
        else:
            super().keyPressEvent(event)

    def closeEvent(self, event) -> None:  # noqa: N802
        self._game.spawner.cancel()
        logger.info("Window closed with score %d", self._game.state.score)
        super().closeEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: GameConfig, seed: int | None = None, theme: str = "dark") -> None:
    """Launch the PyQt6 GUI; a round starts once the window is laid out."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(config, seed, theme)
    window.show()
    # Defer so the playfield has its real size before the first spawn.
    QTimer.singleShot(0, window.start)
    qapp.exec()

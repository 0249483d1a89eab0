"""Fixed label tables shown by the frontends."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.color import Color


@dataclass(frozen=True)
class Labels:
    colors: dict[Color, str]
    prompt: str
    score: str
    game_over: str
    restart: str

    def color_name(self, color: Color | None) -> str:
        if color is None:
            return ""
        return self.colors[color]

    @property
    def prompt_prefix(self) -> str:
        """Prompt text before the colour name (e.g. "Tap ")."""
        return self.prompt.split("{color}")[0]

    def prompt_text(self, color: Color | None) -> str:
        return self.prompt.format(color=self.color_name(color))

    def score_text(self, score: int) -> str:
        return self.score.format(score=score)

    def game_over_text(self, score: int) -> str:
        return self.game_over.format(score=score)


EN = Labels(
    colors={
        Color.RED: "RED",
        Color.GREEN: "GREEN",
        Color.BLUE: "BLUE",
        Color.YELLOW: "YELLOW",
        Color.MAGENTA: "MAGENTA",
        Color.CYAN: "CYAN",
    },
    prompt="Tap {color}",
    score="Score: {score}",
    game_over="Game over! Score: {score}",
    restart="Restart",
)

RU = Labels(
    colors={
        Color.RED: "КРАСНЫЙ",
        Color.GREEN: "ЗЕЛЁНЫЙ",
        Color.BLUE: "СИНИЙ",
        Color.YELLOW: "ЖЁЛТЫЙ",
        Color.MAGENTA: "МАГЕНТА",
        Color.CYAN: "ЦИАН",
    },
    prompt="Нажми на {color}",
    score="Очки: {score}",
    game_over="Игра окончена! Очки: {score}",
    restart="Заново",
)

LABEL_SETS: dict[str, Labels] = {"en": EN, "ru": RU}


def get_labels(lang: str) -> Labels:
    """Return the label set for *lang*."""
    try:
        return LABEL_SETS[lang]
    except KeyError:
        raise ValueError(
            f"Unknown language {lang!r}; expected one of {sorted(LABEL_SETS)}."
        ) from None

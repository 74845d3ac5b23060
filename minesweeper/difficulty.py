from __future__ import annotations
from dataclasses import dataclass
from typing import Dict

MIN_WIDTH = 9
MAX_WIDTH = 30
MIN_HEIGHT = 9
MAX_HEIGHT = 24


@dataclass(frozen=True)
class Difficulty:
    width: int
    height: int
    mines: int

    @classmethod
    def custom(cls, width: int, height: int, mines: int) -> Difficulty:
        """Clamp a user-entered size into the range the front ends can show."""
        width = min(max(width, MIN_WIDTH), MAX_WIDTH)
        height = min(max(height, MIN_HEIGHT), MAX_HEIGHT)
        mines = min(mines, (width - 1) * (height - 1))
        mines = max(mines, 1)
        return cls(width, height, mines)

    def __str__(self) -> str:
        return f'{self.width} {self.height} {self.mines}'


EASY = Difficulty(9, 9, 10)
MEDIUM = Difficulty(16, 16, 40)
HARD = Difficulty(30, 16, 99)

PRESETS: Dict[str, Difficulty] = {
    'easy': EASY,
    'medium': MEDIUM,
    'hard': HARD,
}


def get_difficulty(name: str) -> Difficulty:
    try:
        return PRESETS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown difficulty {name!r}; choose one of {', '.join(PRESETS)}") from None

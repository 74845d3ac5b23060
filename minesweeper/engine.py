from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple, Optional, Sequence

import numpy as np

from .errors import InvalidBoardError, NotRevealedError, OutOfBoundsError
from .rng import PyRandomSource, RandomSource

log = logging.getLogger(__name__)

Coordinate = Tuple[int, int]

NEIGHBOR_OFFSETS: List[Coordinate] = [
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
]


@dataclass(frozen=True)
class Tile:
    is_mine: bool = False
    adj_mines: int = 0

    @classmethod
    def safe(cls, adj_mines: int) -> Tile:
        if not 0 <= adj_mines <= 8:
            raise ValueError(f"adjacent mine count must be within 0..8, got {adj_mines}")
        return cls(is_mine=False, adj_mines=adj_mines)

    def __str__(self) -> str:
        if self.is_mine:
            return '|*|'
        if self.adj_mines == 0:
            return '|_|'
        return f'|{self.adj_mines}|'


MINE = Tile(is_mine=True)


class DisplayState(IntEnum):
    HIDDEN = 0
    FLAGGED = 1
    QUESTIONED = 2
    REVEALED = 3

    def toggled(self) -> DisplayState:
        return _TOGGLE_CYCLE[self]


_TOGGLE_CYCLE = {
    DisplayState.HIDDEN: DisplayState.FLAGGED,
    DisplayState.FLAGGED: DisplayState.QUESTIONED,
    DisplayState.QUESTIONED: DisplayState.HIDDEN,
    DisplayState.REVEALED: DisplayState.REVEALED,
}

_DISPLAY_TEXT = {
    DisplayState.HIDDEN: '| |',
    DisplayState.FLAGGED: '|!|',
    DisplayState.QUESTIONED: '|?|',
}


def count_adjacent_mines(mines: np.ndarray) -> np.ndarray:
    """Number of mines among the 8 neighbours of every cell.

    `mines` is a boolean (height, width) grid. Mine cells get 0 in the result;
    only the counts of safe cells are meaningful.
    """
    h, w = mines.shape
    padded = np.pad(mines.astype(np.int8), 1)
    counts = np.zeros((h, w), dtype=np.int8)
    for dx, dy in NEIGHBOR_OFFSETS:
        counts += padded[1 + dy:1 + dy + h, 1 + dx:1 + dx + w]
    counts[mines] = 0
    return counts


class Board:
    def __init__(self, width: int, height: int, mines: int, seed: Optional[int] = None,
                 rng: Optional[RandomSource] = None):
        if width < 1 or height < 1:
            raise InvalidBoardError(f"board must be at least 1x1, got {width}x{height}")
        if not 0 <= mines <= width * height:
            raise InvalidBoardError(f"cannot place {mines} mines on a {width}x{height} board")
        self.width = width
        self.height = height
        self.mines = mines
        self.rng: RandomSource = rng if rng is not None else PyRandomSource(seed)
        # Grids are indexed [y, x]
        self._mines = np.zeros((height, width), dtype=bool)
        self._display = np.full((height, width), DisplayState.HIDDEN, dtype=np.int8)
        self.first_reveal_done = False
        self._place_mines()
        self._digits = count_adjacent_mines(self._mines)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

    def neighbors(self, x: int, y: int) -> List[Coordinate]:
        coords = []
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                coords.append((nx, ny))
        return coords

    def _place_mines(self) -> None:
        placed = 0
        while placed < self.mines:
            x = self.rng.pick_index(self.width)
            y = self.rng.pick_index(self.height)
            if self._mines[y, x]:
                continue
            self._mines[y, x] = True
            placed += 1
        log.debug("placed %d mines on %dx%d board", placed, self.width, self.height)

    @staticmethod
    def _relocation_ranges(c: int, size: int) -> List[range]:
        # Coordinates strictly before c-1 and strictly after c+1 along one axis
        return [r for r in (range(0, c - 1), range(c + 2, size)) if len(r) > 0]

    def _pick_from(self, ranges: Sequence[range]) -> int:
        if len(ranges) == 2:
            r = ranges[self.rng.pick_index(2)]
        else:
            r = ranges[0]
        return r[self.rng.pick_index(len(r))]

    def _guarantee_safe_start(self, x: int, y: int) -> None:
        removed = 0
        for cx, cy in [(x, y)] + self.neighbors(x, y):
            if self._mines[cy, cx]:
                self._mines[cy, cx] = False
                removed += 1

        if removed:
            xs = self._relocation_ranges(x, self.width)
            ys = self._relocation_ranges(y, self.height)
            if xs and ys:
                cols = [i for r in xs for i in r]
                rows = [j for r in ys for j in r]
                free = int(np.count_nonzero(~self._mines[np.ix_(rows, cols)]))
            else:
                free = 0
            while removed > 0 and free > 0:
                mx = self._pick_from(xs)
                my = self._pick_from(ys)
                if self._mines[my, mx]:
                    continue
                self._mines[my, mx] = True
                removed -= 1
                free -= 1
            log.debug("relocated mines away from first reveal at (%d, %d)", x, y)
            if removed:
                log.warning("no room to relocate %d mine(s) around (%d, %d); board has %d of %d mines",
                            removed, x, y, self.mine_count(), self.mines)

        self._digits = count_adjacent_mines(self._mines)

    def _tile_at(self, x: int, y: int) -> Tile:
        if self._mines[y, x]:
            return MINE
        return Tile.safe(int(self._digits[y, x]))

    def _is_zero(self, x: int, y: int) -> bool:
        return not self._mines[y, x] and self._digits[y, x] == 0

    def reveal(self, x: int, y: int) -> Tile:
        self._check_bounds(x, y)
        if not self.first_reveal_done:
            self._guarantee_safe_start(x, y)
            self.first_reveal_done = True
        self._display[y, x] = DisplayState.REVEALED
        if self._is_zero(x, y):
            self._cascade(x, y)
        return self._tile_at(x, y)

    def _cascade(self, x: int, y: int) -> None:
        stack = [(x, y)]
        opened = 0
        while stack:
            cx, cy = stack.pop()
            for nx, ny in self.neighbors(cx, cy):
                if self._display[ny, nx] != DisplayState.HIDDEN:
                    continue
                self._display[ny, nx] = DisplayState.REVEALED
                opened += 1
                if self._is_zero(nx, ny):
                    stack.append((nx, ny))
        log.debug("flood fill from (%d, %d) opened %d cells", x, y, opened)

    def reveal_adjacent(self, x: int, y: int) -> bool:
        """Reveal every hidden neighbour of a revealed cell.

        Returns True as soon as one of them turns out to be a mine; the
        neighbours after it are left as they were.
        """
        self._check_bounds(x, y)
        if self._display[y, x] != DisplayState.REVEALED:
            raise NotRevealedError(x, y)
        for nx, ny in self.neighbors(x, y):
            if self._display[ny, nx] != DisplayState.HIDDEN:
                continue
            if self.reveal(nx, ny).is_mine:
                return True
        return False

    def toggle(self, x: int, y: int) -> DisplayState:
        self._check_bounds(x, y)
        state = DisplayState(int(self._display[y, x])).toggled()
        self._display[y, x] = state
        return state

    def get_tile(self, x: int, y: int) -> Tile:
        self._check_bounds(x, y)
        return self._tile_at(x, y)

    def get_display(self, x: int, y: int) -> DisplayState:
        self._check_bounds(x, y)
        return DisplayState(int(self._display[y, x]))

    def is_won(self) -> bool:
        return bool(np.all(self._display[~self._mines] == DisplayState.REVEALED))

    def reveal_all(self) -> None:
        self._display[:, :] = DisplayState.REVEALED

    def mine_count(self) -> int:
        return int(np.count_nonzero(self._mines))

    def count_display(self, state: DisplayState) -> int:
        return int(np.count_nonzero(self._display == state))

    def render_ascii(self) -> str:
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                state = self._display[y, x]
                if state == DisplayState.FLAGGED:
                    row.append('F')
                elif state == DisplayState.QUESTIONED:
                    row.append('?')
                elif state == DisplayState.HIDDEN:
                    row.append('#')
                elif self._mines[y, x]:
                    row.append('*')
                elif self._digits[y, x] == 0:
                    row.append('.')
                else:
                    row.append(str(self._digits[y, x]))
            rows.append(' '.join(row))
        return '\n'.join(rows)

    def __str__(self) -> str:
        # Column header keeps single digit indices centred in their 3-wide cell
        header = '   ' + ''.join(f' {i} ' if i < 10 else f' {i}'
                                 for i in range(self.width))
        lines = [header]
        for y in range(self.height):
            cells = []
            for x in range(self.width):
                state = DisplayState(int(self._display[y, x]))
                if state == DisplayState.REVEALED:
                    cells.append(str(self._tile_at(x, y)))
                else:
                    cells.append(_DISPLAY_TEXT[state])
            lines.append(f'{y:2} ' + ''.join(cells))
        return '\n'.join(lines)

from __future__ import annotations
from enum import Enum

from .engine import DisplayState
from .errors import InvalidChordError, NotRevealedError
from .interface import BoardView

# Player-level moves built on top of the board primitives:
# - chord: open all hidden neighbours of a number once it has exactly that many flags around it
# - flag: put a flag on a hidden or questioned cell without cycling through states


class ChordOutcome(Enum):
    MISMATCH = 'mismatch'
    CLEARED = 'cleared'
    HIT_MINE = 'hit_mine'


def count_adjacent_flags(board: BoardView, x: int, y: int) -> int:
    return sum(1 for nx, ny in board.neighbors(x, y)
               if board.get_display(nx, ny) == DisplayState.FLAGGED)


def chord(board: BoardView, x: int, y: int) -> ChordOutcome:
    if board.get_display(x, y) != DisplayState.REVEALED:
        raise NotRevealedError(x, y)
    tile = board.get_tile(x, y)
    if tile.is_mine:
        raise InvalidChordError(f"Cannot chord on a mine at ({x}, {y})")
    if count_adjacent_flags(board, x, y) != tile.adj_mines:
        return ChordOutcome.MISMATCH
    if board.reveal_adjacent(x, y):
        return ChordOutcome.HIT_MINE
    return ChordOutcome.CLEARED


def flag(board: BoardView, x: int, y: int) -> DisplayState:
    state = board.get_display(x, y)
    if state == DisplayState.HIDDEN:
        return board.toggle(x, y)
    if state == DisplayState.QUESTIONED:
        board.toggle(x, y)
        return board.toggle(x, y)
    return state

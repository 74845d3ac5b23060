"""
Pytest configuration and shared fixtures.
"""
from typing import Iterable, List, Tuple

import pytest

from minesweeper.engine import Board, DisplayState


class ScriptedRandom:
    """Random source that replays a fixed list of picks."""

    def __init__(self, values: Iterable[int]):
        self.values: List[int] = list(values)
        self.calls: List[int] = []

    def pick_index(self, n: int) -> int:
        if not self.values:
            raise AssertionError(f"scripted random source exhausted (asked for [0, {n}))")
        value = self.values.pop(0)
        assert 0 <= value < n, f"scripted pick {value} outside [0, {n})"
        self.calls.append(n)
        return value


def board_with_mines(width: int, height: int, mines: List[Tuple[int, int]], extra=()) -> Board:
    """Board whose construction places exactly the given mines, in order."""
    picks = [c for xy in mines for c in xy]
    return Board(width, height, len(mines), rng=ScriptedRandom([*picks, *extra]))


def mine_cells(board: Board):
    return {(x, y) for y in range(board.height) for x in range(board.width)
            if board.get_tile(x, y).is_mine}


def revealed_cells(board: Board):
    return {(x, y) for y in range(board.height) for x in range(board.width)
            if board.get_display(x, y) == DisplayState.REVEALED}


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with its single mine at (2, 2)."""
    return board_with_mines(3, 3, [(2, 2)])


@pytest.fixture
def wall_board() -> Board:
    """5x5 board with a full column of mines at x == 2."""
    return board_with_mines(5, 5, [(2, y) for y in range(5)])


@pytest.fixture
def strip_board() -> Board:
    """4x1 board with a mine at the right end."""
    return board_with_mines(4, 1, [(3, 0)])

from __future__ import annotations
import logging
from enum import Enum
from typing import Optional

from .difficulty import Difficulty
from .engine import Board, DisplayState
from .gestures import ChordOutcome, chord, flag
from .interface import BoardView
from .rng import RandomSource

log = logging.getLogger(__name__)


class GameState(Enum):
    RUNNING = 'running'
    WON = 'won'
    LOST = 'lost'


class GameSession:
    """One game on one board, driven by a front end.

    Moves made after the game has ended are ignored. Coordinate and
    precondition errors from the board propagate to the caller.
    """

    def __init__(self, board: BoardView):
        self.board = board
        self.state = GameState.RUNNING

    @classmethod
    def new(cls, difficulty: Difficulty, seed: Optional[int] = None,
            rng: Optional[RandomSource] = None) -> GameSession:
        board = Board(difficulty.width, difficulty.height, difficulty.mines, seed=seed, rng=rng)
        return cls(board)

    @property
    def game_over(self) -> bool:
        return self.state != GameState.RUNNING

    @property
    def win(self) -> bool:
        return self.state == GameState.WON

    @property
    def unflagged_mines(self) -> int:
        return self.board.mines - self.board.count_display(DisplayState.FLAGGED)

    def check(self, x: int, y: int) -> None:
        if self.game_over:
            return
        if self.board.get_display(x, y) != DisplayState.HIDDEN:
            return
        if self.board.reveal(x, y).is_mine:
            self._lose(f"mine revealed at ({x}, {y})")
            return
        self._check_victory()

    def toggle(self, x: int, y: int) -> Optional[DisplayState]:
        if self.game_over:
            return None
        state = self.board.toggle(x, y)
        self._check_victory()
        return state

    def flag(self, x: int, y: int) -> Optional[DisplayState]:
        if self.game_over:
            return None
        state = flag(self.board, x, y)
        self._check_victory()
        return state

    def chord(self, x: int, y: int) -> Optional[ChordOutcome]:
        if self.game_over:
            return None
        outcome = chord(self.board, x, y)
        if outcome == ChordOutcome.HIT_MINE:
            self._lose(f"chord at ({x}, {y}) hit a mine")
        elif outcome == ChordOutcome.CLEARED:
            self._check_victory()
        return outcome

    def quit(self) -> None:
        if self.game_over:
            return
        self._lose("player quit")

    def _lose(self, reason: str) -> None:
        self.state = GameState.LOST
        self.board.reveal_all()
        log.info("game lost: %s", reason)

    def _check_victory(self) -> None:
        if self.board.is_won():
            self.state = GameState.WON
            log.info("game won")

from __future__ import annotations
import logging
from typing import Callable, List, Optional

from .errors import MinesweeperError
from .gestures import ChordOutcome
from .session import GameSession

log = logging.getLogger(__name__)

MENU = """Menu:
All capital letters are treated as lowercase
Replace x and y with numbers - they represent coordinates
Check square - 'check x y' or 'c x y'
Toggle square - 'toggle x y' or 't x y'
Flag square - 'flag x y' or 'f x y'
Chord at square - 'chord x y' or 'ch x y'
Show this menu - 'menu' or 'm'
Quit game - 'quit' or 'q'"""

COMMANDS = {
    'c': 'check', 'check': 'check',
    't': 'toggle', 'toggle': 'toggle',
    'f': 'flag', 'flag': 'flag',
    'ch': 'chord', 'chord': 'chord',
}


class TextGame:
    def __init__(self, session: GameSession, read: Optional[Callable[[str], str]] = None,
                 write: Optional[Callable[[str], None]] = None, compact: bool = False):
        self.session = session
        self.read = read if read is not None else input
        self.write = write if write is not None else print
        self.compact = compact

    def main_loop(self) -> None:
        while not self.session.game_over:
            self.write(self.render())
            self.write(f'Mines left: {self.session.unflagged_mines}')
            try:
                line = self.read('Enter your selection (menu for options): ')
            except EOFError:
                self.session.quit()
                break
            self.handle(line)
        self.write('You Win!' if self.session.win else 'You Lose!')
        self.write(self.render())

    def render(self) -> str:
        if self.compact:
            return self.session.board.render_ascii()
        return str(self.session.board)

    def handle(self, line: str) -> None:
        words: List[str] = line.lower().split()
        if not words:
            self.write('You must select an option.')
            return
        option = words[0]
        if option in ('m', 'menu'):
            self.write(MENU)
            return
        if option in ('q', 'quit'):
            self.session.quit()
            return
        command = COMMANDS.get(option)
        if command is None:
            self.write(f'Unknown option {option!r}.')
            return
        if len(words) < 3:
            self.write('Your option requires 2 arguments.')
            return
        board = self.session.board
        try:
            x, y = int(words[1]), int(words[2])
        except ValueError:
            self.write('x and y must be whole numbers')
            return
        if not 0 <= x < board.width:
            self.write(f'x must be less than {board.width}')
            return
        if not 0 <= y < board.height:
            self.write(f'y must be less than {board.height}')
            return
        try:
            if command == 'check':
                self.session.check(x, y)
            elif command == 'toggle':
                self.session.toggle(x, y)
            elif command == 'flag':
                self.session.flag(x, y)
            elif self.session.chord(x, y) == ChordOutcome.MISMATCH:
                self.write('Chording is only allowed when there are exactly the right '
                           'number of flags adjacent to a tile.')
        except MinesweeperError as e:
            log.debug("rejected %s at (%d, %d): %s", command, x, y, e)
            self.write(str(e))

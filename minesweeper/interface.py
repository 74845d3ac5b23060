from __future__ import annotations
from typing import List, Protocol, Tuple

from .engine import DisplayState, Tile


class BoardView(Protocol):
    """Operations a front end or controller may use on a board."""

    width: int
    height: int
    mines: int

    def in_bounds(self, x: int, y: int) -> bool: ...

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]: ...

    def reveal(self, x: int, y: int) -> Tile: ...

    def reveal_adjacent(self, x: int, y: int) -> bool: ...

    def toggle(self, x: int, y: int) -> DisplayState: ...

    def get_tile(self, x: int, y: int) -> Tile: ...

    def get_display(self, x: int, y: int) -> DisplayState: ...

    def count_display(self, state: DisplayState) -> int: ...

    def is_won(self) -> bool: ...

    def reveal_all(self) -> None: ...

    def render_ascii(self) -> str: ...

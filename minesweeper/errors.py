from __future__ import annotations


class MinesweeperError(Exception):
    """Base class for every error raised by the board engine."""


class InvalidBoardError(MinesweeperError, ValueError):
    pass


class OutOfBoundsError(MinesweeperError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Index out of bounds: x is {x}, y is {y}, width is {width}, height is {height}"
        )


class NotRevealedError(MinesweeperError, ValueError):
    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        super().__init__(f"Cannot chord from an unrevealed tile at ({x}, {y})")


class InvalidChordError(MinesweeperError, ValueError):
    pass

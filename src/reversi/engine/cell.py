from __future__ import annotations

from enum import Enum
from typing import Union


class Cell(Enum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def __str__(self) -> str:
        return self.name

    def to_char(self) -> str:
        return CELL_CHARS[self]

    @classmethod
    def from_char(cls, char: str) -> Cell:
        for cell, cell_char in CELL_CHARS.items():
            if cell_char == char.upper():
                return cell
        raise ValueError(f'Invalid square "{char}"')


CELL_CHARS = {
    Cell.EMPTY: "-",
    Cell.BLACK: "X",
    Cell.WHITE: "O",
}

PLAYERS = (Cell.BLACK, Cell.WHITE)


class Tie:
    """
    Marker for a finished game where both colors have the same number of pieces.
    """

    def __repr__(self) -> str:
        return "TIE"

    def __str__(self) -> str:
        return "TIE"


TIE = Tie()

Winner = Union[Cell, Tie]


def opponent(color: Cell) -> Cell:
    if color == Cell.BLACK:
        return Cell.WHITE
    if color == Cell.WHITE:
        return Cell.BLACK
    raise ValueError(f"{color} has no opponent")

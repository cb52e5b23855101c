from __future__ import annotations

from typing import Iterable, Iterator, Optional

from reversi.engine.cell import Cell
from reversi.engine.errors import InvalidConfiguration, OutOfBoundsIndex

DEFAULT_ROWS = 8
DEFAULT_COLUMNS = 8

# Used by both the move validator and the flip resolver, always in this order.
DIRECTIONS = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]

COLUMN_LETTERS = "abcdefghijklmnopqrstuvwxyz"


class Board:
    """
    Board stores the occupancy of a rows x columns grid, but not the color of
    the player to move. Squares are addressed by linear index `row * columns + col`.

    Boards are never modified after construction, use `replaced()` to derive a new one.
    """

    def __init__(self, rows: int, columns: int, squares: Iterable[Cell]) -> None:
        if rows < 1 or columns < 1:
            raise InvalidConfiguration(
                f"Board must have at least one row and column, got {rows}x{columns}"
            )

        self.rows = rows
        self.columns = columns
        self.__squares = tuple(squares)

        if len(self.__squares) != rows * columns:
            raise InvalidConfiguration(
                f"Expected {rows * columns} squares, got {len(self.__squares)}"
            )

        for square in self.__squares:
            if not isinstance(square, Cell):
                raise TypeError(f"Square must be a Cell, got {type(square)}")

    @classmethod
    def empty(cls, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS) -> Board:
        return Board(rows, columns, [Cell.EMPTY] * (rows * columns))

    @classmethod
    def start(cls, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS) -> Board:
        if rows < 2 or columns < 2:
            raise InvalidConfiguration(
                f"Board must be at least 2x2, got {rows}x{columns}"
            )

        if rows % 2 != 0 or columns % 2 != 0:
            raise InvalidConfiguration(
                f"Board dimensions must be even, got {rows}x{columns}"
            )

        mid_row = rows // 2
        mid_col = columns // 2

        return cls.empty(rows, columns).replaced(
            {
                (mid_row - 1) * columns + (mid_col - 1): Cell.WHITE,
                (mid_row - 1) * columns + mid_col: Cell.BLACK,
                mid_row * columns + (mid_col - 1): Cell.BLACK,
                mid_row * columns + mid_col: Cell.WHITE,
            }
        )

    def __repr__(self) -> str:
        squares = "".join(square.to_char() for square in self.__squares)
        return f"Board({self.rows}, {self.columns}, {squares})"

    def size(self) -> int:
        return self.rows * self.columns

    def squares(self) -> tuple[Cell, ...]:
        return self.__squares

    def check_index(self, index: int) -> None:
        if index not in range(self.size()):
            raise OutOfBoundsIndex(index, self.size())

    def get_square(self, index: int) -> Cell:
        self.check_index(index)
        return self.__squares[index]

    def replaced(self, changes: dict[int, Cell]) -> Board:
        squares = list(self.__squares)

        for index, square in changes.items():
            self.check_index(index)
            squares[index] = square

        return Board(self.rows, self.columns, squares)

    def walk(self, index: int, direction: tuple[int, int]) -> Iterator[tuple[int, Cell]]:
        """
        Yields (index, square) for every square in `direction` starting next to
        `index`, until the edge of the board is reached.
        """
        self.check_index(index)

        d_row, d_col = direction
        row = index // self.columns + d_row
        col = index % self.columns + d_col

        while 0 <= row < self.rows and 0 <= col < self.columns:
            current = row * self.columns + col
            yield current, self.__squares[current]
            row += d_row
            col += d_col

    def count(self, color: Cell) -> int:
        return sum(1 for square in self.__squares if square == color)

    def count_discs(self) -> int:
        return self.size() - self.count_empties()

    def count_empties(self) -> int:
        return self.count(Cell.EMPTY)

    def has_field_notation(self) -> bool:
        return self.columns <= len(COLUMN_LETTERS)

    def check_field_notation(self) -> None:
        if not self.has_field_notation():
            raise ValueError(
                f"Field notation supports at most {len(COLUMN_LETTERS)} columns, got {self.columns}"
            )

    def index_to_field(self, index: int) -> str:
        self.check_field_notation()

        if index not in range(self.size()):
            raise ValueError(f"Index {index} is not on the board")

        row, col = divmod(index, self.columns)
        return COLUMN_LETTERS[col] + str(row + 1)

    def indexes_to_fields(self, indexes: Iterable[int]) -> str:
        return " ".join(self.index_to_field(index) for index in indexes)

    def field_to_index(self, field: str) -> int:
        self.check_field_notation()
        field = field.lower()

        if len(field) < 2:
            raise ValueError(f'Invalid move length "{len(field)}"')

        letter, number = field[0], field[1:]

        valid_number = (
            number.isascii() and number.isdigit() and not number.startswith("0")
        )

        if letter not in COLUMN_LETTERS[: self.columns] or not valid_number:
            raise ValueError(f'Invalid field "{field}"')

        row = int(number) - 1
        if row not in range(self.rows):
            raise ValueError(f'Invalid field "{field}"')

        col = COLUMN_LETTERS.index(letter)
        return row * self.columns + col

    def render(self, moves: Optional[set[int]] = None) -> str:
        if moves is None:
            moves = set()

        label_width = len(str(self.rows))
        padding = " " * (label_width - 1)
        border = padding + "+" + "-" * (2 * self.columns + 1) + "+"

        # Wide boards have no column letters, the header is a plain border.
        if self.has_field_notation():
            letters = "-".join(COLUMN_LETTERS[: self.columns])
            lines = [padding + "+-" + letters + "-+"]
        else:
            lines = [border]

        for row in range(self.rows):
            line = f"{row + 1:>{label_width}} "

            for col in range(self.columns):
                index = row * self.columns + col
                square = self.__squares[index]

                if square == Cell.BLACK:
                    line += "○ "
                elif square == Cell.WHITE:
                    line += "● "
                elif index in moves:
                    line += "· "
                else:
                    line += "  "
            lines.append(line + "|")
        lines.append(border)

        return "\n".join(lines)

    def show(self, moves: Optional[set[int]] = None) -> None:
        print(self.render(moves))

    def as_tuple(self) -> tuple[int, int, tuple[Cell, ...]]:
        return (self.rows, self.columns, self.__squares)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.as_tuple() == other.as_tuple()

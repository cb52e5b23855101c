from __future__ import annotations

from typing import NamedTuple, Optional

from reversi.engine.board import DEFAULT_COLUMNS, DEFAULT_ROWS, DIRECTIONS, Board
from reversi.engine.cell import PLAYERS, TIE, Cell, Winner, opponent
from reversi.engine.errors import IllegalMove


class PieceCount(NamedTuple):
    black: int
    white: int


class GameState:
    """
    GameState is a board together with the color of the player to move.

    Whether the game is over and who won are derived from those two on request.
    When the player to move has no legal moves the game ends, there is no passing.
    """

    def __init__(self, board: Board, turn: Cell) -> None:
        if turn not in PLAYERS:
            raise ValueError(f"Turn must be BLACK or WHITE, got {turn}")

        self.board = board
        self.turn = turn

    @classmethod
    def start(
        cls, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS
    ) -> GameState:
        return GameState(Board.start(rows, columns), Cell.BLACK)

    @classmethod
    def from_squares(
        cls,
        squares: list[Cell],
        turn: Cell,
        rows: int = DEFAULT_ROWS,
        columns: int = DEFAULT_COLUMNS,
    ) -> GameState:
        return GameState(Board(rows, columns, squares), turn)

    def __repr__(self) -> str:
        return f"GameState({self.board}, {self.turn})"

    @property
    def rows(self) -> int:
        return self.board.rows

    @property
    def columns(self) -> int:
        return self.board.columns

    @property
    def over(self) -> bool:
        return self.is_game_end()

    @property
    def winner(self) -> Optional[Winner]:
        return self.get_winner()

    def get_square(self, index: int) -> Cell:
        return self.board.get_square(index)

    # --- move validator ---

    def is_valid_move(self, index: int) -> bool:
        if self.board.get_square(index) != Cell.EMPTY:
            return False

        opp = opponent(self.turn)

        for direction in DIRECTIONS:
            seen_opp = False

            for _, square in self.board.walk(index, direction):
                if square == opp:
                    seen_opp = True
                    continue

                if square == self.turn and seen_opp:
                    return True

                break

        return False

    def get_moves_as_set(self) -> set[int]:
        return {
            index for index in range(self.board.size()) if self.is_valid_move(index)
        }

    def has_moves(self) -> bool:
        return any(self.is_valid_move(index) for index in range(self.board.size()))

    # --- flip resolver ---

    def get_flips(self, index: int) -> list[int]:
        """
        Returns the indexes of all opponent discs that a disc of the player to
        move placed at `index` would flip, in all directions.
        """
        opp = opponent(self.turn)
        flips: list[int] = []

        for direction in DIRECTIONS:
            candidates: list[int] = []

            for current, square in self.board.walk(index, direction):
                if square == opp:
                    candidates.append(current)
                    continue

                if square == self.turn:
                    flips += candidates

                break

        return flips

    def do_move(self, index: int) -> GameState:
        if not self.is_valid_move(index):
            raise IllegalMove(index)

        changes = {index: self.turn}
        for flipped in self.get_flips(index):
            changes[flipped] = self.turn

        return GameState(self.board.replaced(changes), opponent(self.turn))

    # --- turn controller ---

    def is_game_end(self) -> bool:
        return not self.has_moves()

    # --- scorer ---

    def count(self, color: Cell) -> int:
        if color not in PLAYERS:
            raise ValueError(f"Can only count BLACK or WHITE, got {color}")

        return self.board.count(color)

    def count_pieces(self) -> PieceCount:
        return PieceCount(black=self.count(Cell.BLACK), white=self.count(Cell.WHITE))

    def determine_winner(self) -> Winner:
        black, white = self.count_pieces()

        if black > white:
            return Cell.BLACK
        if white > black:
            return Cell.WHITE
        return TIE

    def get_winner(self) -> Optional[Winner]:
        if not self.is_game_end():
            return None
        return self.determine_winner()

    def turn_text(self) -> str:
        return f"{self.turn}'s move"

    def winner_message(self) -> str:
        winner = self.determine_winner()

        if winner is TIE:
            return "It's a tie!"
        return f"{winner} wins!"

    def render(self) -> str:
        return self.board.render(self.get_moves_as_set())

    def show(self) -> None:
        print(self.render())

    def as_tuple(self) -> tuple[Board, Cell]:
        return (self.board, self.turn)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            raise TypeError(f"Cannot compare GameState with {type(other)}")

        return self.as_tuple() == other.as_tuple()

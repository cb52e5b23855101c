from typing import Optional

from reversi.engine.board import DEFAULT_COLUMNS, DEFAULT_ROWS
from reversi.engine.cell import TIE, Cell, Winner
from reversi.engine.state import GameState, PieceCount

__all__ = [
    "TIE",
    "Cell",
    "GameState",
    "PieceCount",
    "Winner",
    "apply_move",
    "count_pieces",
    "determine_winner",
    "is_game_over",
    "is_valid_move",
    "new_game",
    "valid_moves",
]


def new_game(rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS) -> GameState:
    return GameState.start(rows, columns)


def is_valid_move(state: GameState, index: int) -> bool:
    return state.is_valid_move(index)


def valid_moves(state: GameState) -> set[int]:
    return state.get_moves_as_set()


def apply_move(state: GameState, index: int) -> GameState:
    return state.do_move(index)


def is_game_over(state: GameState) -> bool:
    return state.is_game_end()


def determine_winner(state: GameState) -> Optional[Winner]:
    return state.get_winner()


def count_pieces(state: GameState) -> PieceCount:
    return state.count_pieces()

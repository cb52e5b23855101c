from __future__ import annotations

from typing import Optional

from reversi.config import BoardConfig
from reversi.engine.cell import Winner
from reversi.engine.state import GameState


class GameSession:
    """
    Holds the game a front end is currently showing.

    Placements that are not legal are ignored, so input from clicks or typed
    fields can be passed in without checking it first.
    """

    def __init__(self, rows: Optional[int] = None, columns: Optional[int] = None) -> None:
        if rows is None or columns is None:
            config = BoardConfig()
            rows = config.rows if rows is None else rows
            columns = config.columns if columns is None else columns

        self.rows = rows
        self.columns = columns
        self.state = GameState.start(rows, columns)

    def new_game(self) -> None:
        self.state = GameState.start(self.rows, self.columns)

    def place(self, index: int) -> bool:
        if not self.state.is_valid_move(index):
            return False

        self.state = self.state.do_move(index)
        return True

    def is_over(self) -> bool:
        return self.state.is_game_end()

    def winner(self) -> Optional[Winner]:
        return self.state.get_winner()

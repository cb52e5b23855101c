from __future__ import annotations

from pydantic import BaseModel, field_validator, model_validator

from reversi.engine.board import Board
from reversi.engine.cell import CELL_CHARS, Cell
from reversi.engine.state import GameState

TURN_NAMES = {
    Cell.BLACK: "black",
    Cell.WHITE: "white",
}


class SerializedGameState(BaseModel):
    rows: int
    columns: int
    squares: str
    turn: str

    @field_validator("squares")
    @classmethod
    def validate_squares(cls, v: str) -> str:
        v = v.upper()
        allowed = set(CELL_CHARS.values())

        for char in v:
            if char not in allowed:
                raise ValueError(f'Invalid square "{char}"')
        return v

    @field_validator("turn")
    @classmethod
    def validate_turn(cls, v: str) -> str:
        v = v.lower()
        if v not in TURN_NAMES.values():
            raise ValueError(f'Unknown turn "{v}"')
        return v

    @model_validator(mode="after")
    def validate_size(self) -> SerializedGameState:
        if len(self.squares) != self.rows * self.columns:
            raise ValueError(
                f"Expected {self.rows * self.columns} squares, got {len(self.squares)}"
            )
        return self

    def to_state(self) -> GameState:
        squares = [Cell.from_char(char) for char in self.squares]
        board = Board(self.rows, self.columns, squares)

        turns = {name: cell for cell, name in TURN_NAMES.items()}
        return GameState(board, turns[self.turn])

    @classmethod
    def from_state(cls, state: GameState) -> SerializedGameState:
        return cls(
            rows=state.rows,
            columns=state.columns,
            squares="".join(square.to_char() for square in state.board.squares()),
            turn=TURN_NAMES[state.turn],
        )

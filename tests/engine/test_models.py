import pytest
from pydantic import ValidationError

from reversi.engine.cell import Cell
from reversi.engine.models import SerializedGameState
from reversi.engine.state import GameState

START_SQUARES = "-" * 27 + "OX" + "-" * 6 + "XO" + "-" * 27


def test_from_state_start() -> None:
    serialized = SerializedGameState.from_state(GameState.start())

    assert serialized.rows == 8
    assert serialized.columns == 8
    assert serialized.squares == START_SQUARES
    assert serialized.turn == "black"


def test_to_state_after_move() -> None:
    state = GameState.start().do_move(19)
    serialized = SerializedGameState.from_state(state)

    assert serialized.turn == "white"
    assert serialized.to_state() == state


def test_json() -> None:
    state = GameState.start(4, 6).do_move(2)
    raw = SerializedGameState.from_state(state).model_dump_json()

    loaded = SerializedGameState.model_validate_json(raw).to_state()

    assert loaded == state
    assert loaded.rows == 4
    assert loaded.columns == 6


def test_lowercase_input() -> None:
    serialized = SerializedGameState(
        rows=2, columns=2, squares="oxxo", turn="WHITE"
    )

    assert serialized.squares == "OXXO"
    assert serialized.turn == "white"
    assert serialized.to_state().turn == Cell.WHITE


@pytest.mark.parametrize(
    ["rows", "columns", "squares", "turn"],
    [
        pytest.param(2, 2, "OXX?", "black", id="invalid-square"),
        pytest.param(2, 2, "OXX", "black", id="too-few-squares"),
        pytest.param(2, 2, "OXXOO", "black", id="too-many-squares"),
        pytest.param(2, 2, "OXXO", "red", id="invalid-turn"),
        pytest.param(2, 2, "OXXO", "empty", id="empty-turn"),
    ],
)
def test_validation_error(rows: int, columns: int, squares: str, turn: str) -> None:
    with pytest.raises(ValidationError):
        SerializedGameState(rows=rows, columns=columns, squares=squares, turn=turn)

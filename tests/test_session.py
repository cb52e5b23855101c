import pytest

from reversi.engine.cell import TIE, Cell
from reversi.engine.errors import InvalidConfiguration, OutOfBoundsIndex
from reversi.engine.state import GameState
from reversi.session import GameSession


def test_init_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REVERSI_ROWS", raising=False)
    monkeypatch.delenv("REVERSI_COLUMNS", raising=False)

    session = GameSession()
    assert session.state == GameState.start(8, 8)


def test_init_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVERSI_ROWS", "6")
    monkeypatch.setenv("REVERSI_COLUMNS", "4")

    session = GameSession()
    assert session.rows == 6
    assert session.columns == 4
    assert session.state == GameState.start(6, 4)


def test_init_arguments_override_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVERSI_ROWS", "6")
    monkeypatch.setenv("REVERSI_COLUMNS", "6")

    session = GameSession(4, 4)
    assert session.state == GameState.start(4, 4)


def test_init_invalid() -> None:
    with pytest.raises(InvalidConfiguration):
        GameSession(3, 3)


def test_place_legal() -> None:
    session = GameSession(8, 8)

    assert session.place(19)
    assert session.state.turn == Cell.WHITE
    assert session.state.get_square(27) == Cell.BLACK


def test_place_illegal_is_ignored() -> None:
    session = GameSession(8, 8)

    assert not session.place(0)
    assert not session.place(27)
    assert session.state == GameState.start()


def test_place_out_of_bounds() -> None:
    session = GameSession(8, 8)

    with pytest.raises(OutOfBoundsIndex):
        session.place(64)


def test_game_over_and_new_game() -> None:
    session = GameSession(2, 2)

    assert session.is_over()
    assert session.winner() is TIE
    assert not session.place(0)

    session.new_game()
    assert session.state == GameState.start(2, 2)


def test_new_game_resets() -> None:
    session = GameSession(8, 8)
    session.place(19)
    session.place(18)

    session.new_game()

    assert not session.is_over()
    assert session.winner() is None
    assert session.state.turn == Cell.BLACK
    assert session.state == GameState.start()

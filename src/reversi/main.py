import typer
from pydantic import ValidationError
from typing import Annotated, Optional

from reversi.config import BoardConfig, get_show_moves
from reversi.engine.errors import IllegalMove, InvalidConfiguration
from reversi.engine.models import SerializedGameState
from reversi.engine.state import GameState
from reversi.session import GameSession

app = typer.Typer(pretty_exceptions_enable=False)

RowsOption = Annotated[Optional[int], typer.Option("--rows", "-r")]
ColumnsOption = Annotated[Optional[int], typer.Option("--columns", "-c")]


def print_state(state: GameState) -> None:
    if get_show_moves():
        typer.echo(state.render())
    else:
        typer.echo(state.board.render())

    black, white = state.count_pieces()
    typer.echo(f"Black: {black} | White: {white}")

    if state.is_game_end():
        typer.echo(f"Game over! {state.winner_message()}")
    else:
        typer.echo(f"It is currently {state.turn_text()}...")


def start_state(rows: Optional[int], columns: Optional[int]) -> GameState:
    config = BoardConfig()

    if rows is None:
        rows = config.rows
    if columns is None:
        columns = config.columns

    try:
        state = GameState.start(rows, columns)
        state.board.check_field_notation()
    except (InvalidConfiguration, ValueError) as e:
        raise typer.BadParameter(str(e)) from e

    return state


@app.command()
def play(rows: RowsOption = None, columns: ColumnsOption = None) -> None:
    state = start_state(rows, columns)
    session = GameSession(state.rows, state.columns)
    print_state(session.state)

    while True:
        command = typer.prompt("Move").strip().lower()

        if command in ["quit", "q"]:
            break

        if command == "new":
            session.new_game()
            print_state(session.state)
            continue

        if session.is_over():
            typer.echo('Game is over, type "new" to play again.')
            continue

        try:
            index = session.state.board.field_to_index(command)
        except ValueError as e:
            typer.echo(str(e))
            continue

        if not session.place(index):
            typer.echo(f'Move "{command}" is not legal.')
            continue

        print_state(session.state)


@app.command()
def replay(
    moves: Annotated[Optional[list[str]], typer.Argument()] = None,
    rows: RowsOption = None,
    columns: ColumnsOption = None,
    as_json: Annotated[bool, typer.Option("--json")] = False,
) -> None:
    state = start_state(rows, columns)

    for field in moves or []:
        try:
            index = state.board.field_to_index(field)
        except ValueError as e:
            raise typer.BadParameter(str(e)) from e

        try:
            state = state.do_move(index)
        except IllegalMove:
            typer.echo(f'Illegal move "{field}"')
            raise typer.Exit(code=1)

    if as_json:
        typer.echo(SerializedGameState.from_state(state).model_dump_json())
        return

    print_state(state)


@app.command()
def show(state_json: Annotated[str, typer.Argument()]) -> None:
    try:
        state = SerializedGameState.model_validate_json(state_json).to_state()
    except (ValidationError, InvalidConfiguration) as e:
        raise typer.BadParameter(str(e)) from e

    print_state(state)


if __name__ == "__main__":
    app()

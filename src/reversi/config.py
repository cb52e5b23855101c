import os
from dotenv import load_dotenv

from reversi.engine.board import DEFAULT_COLUMNS, DEFAULT_ROWS
from reversi.engine.errors import InvalidConfiguration

load_dotenv()


def get_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))

    try:
        return int(raw)
    except ValueError as e:
        raise InvalidConfiguration(f'{name} must be an integer, got "{raw}"') from e


class BoardConfig:
    def __init__(self) -> None:
        self.rows = get_int("REVERSI_ROWS", DEFAULT_ROWS)
        self.columns = get_int("REVERSI_COLUMNS", DEFAULT_COLUMNS)


def get_show_moves() -> bool:
    return os.getenv("REVERSI_SHOW_MOVES", "1") != "0"

"""Storage of played games and their moves in SQLite."""

from __future__ import annotations

import re
import sqlite3
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from os import PathLike
from typing import Union

from bytechess.movement import Move
from bytechess.point import Point

DEFAULT_PATH = "chess_game.db"

_CREATE_GAME = """
    CREATE TABLE IF NOT EXISTS game (
        id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
        start_time DATETIME NOT NULL
    )
"""

_CREATE_MOVE_RECORD = """
    CREATE TABLE IF NOT EXISTS move_record (
        game_id INTEGER,
        move_number INTEGER,
        p_from CHAR(4),
        p_to CHAR(4),
        type CHAR(10),
        FOREIGN KEY (game_id) REFERENCES game
        ON DELETE CASCADE
    )
"""

_LONG_FRACTION = re.compile(r"(\.\d{6})\d+")


def _format_time(moment: datetime) -> str:
    return moment.isoformat(sep=" ")


def _parse_time(text: str) -> datetime:
    return datetime.fromisoformat(_LONG_FRACTION.sub(r"\1", text))


@dataclass(frozen=True)
class Game:
    """A game and the moment it started."""

    id: int
    start_time: datetime

    @classmethod
    def now(cls) -> Game:
        """A game not yet stored, starting now."""
        return cls(0, datetime.now(timezone.utc))


@dataclass(frozen=True)
class MoveRecord:
    """One stored move of a game."""

    game_id: int
    move_number: int = -1
    p_from: str = ""
    p_to: str = ""
    m_type: str = ""

    @classmethod
    def for_game(cls, game: Game) -> MoveRecord:
        """The record that comes before the first move of ``game``."""
        return cls(game.id)

    def to_next(self, move: Move) -> MoveRecord:
        """The record of ``move`` played right after this one."""
        return MoveRecord(
            game_id=self.game_id,
            move_number=self.move_number + 1,
            p_from=str(move.source),
            p_to=str(move.target),
            m_type=str(move.move_type),
        )

    def to_move(self) -> Move:
        """The simple move between the recorded squares; raises ``ValueError``."""
        return Move(Point.from_string(self.p_from), Point.from_string(self.p_to))


class DataBaseInstance:
    """A connection to the game database."""

    def __init__(self, path: Union[str, PathLike] = DEFAULT_PATH) -> None:
        self._connection = sqlite3.connect(path)

    @classmethod
    def open_default(cls) -> DataBaseInstance:
        """Open the database at ``DEFAULT_PATH`` with its tables created."""
        instance = cls(DEFAULT_PATH)
        instance.create_tables()
        return instance

    def create_tables(self) -> None:
        with self._connection:
            self._connection.execute(_CREATE_GAME)
            self._connection.execute(_CREATE_MOVE_RECORD)

    def add_game(self, game: Game) -> Game:
        """Store ``game`` and return it with its new id."""
        with self._connection:
            cursor = self._connection.execute(
                "INSERT INTO game (start_time) VALUES (?)",
                (_format_time(game.start_time),),
            )
        return replace(game, id=cursor.lastrowid)

    def find_game(self, game_id: int) -> Game:
        """Raises ``LookupError`` if there is no such game."""
        row = self._connection.execute(
            "SELECT id, start_time FROM game WHERE id = ?", (game_id,)
        ).fetchone()
        if row is None:
            raise LookupError(f"no game with id {game_id}")
        return Game(row[0], _parse_time(row[1]))

    def add_move(self, record: MoveRecord) -> None:
        """Store ``record``; raises ``ValueError`` for a negative move number."""
        if record.move_number < 0:
            raise ValueError(f"invalid move number {record.move_number}")
        with self._connection:
            self._connection.execute(
                "INSERT INTO move_record (game_id, move_number, p_from, p_to, type) "
                "VALUES (?, ?, ?, ?, ?)",
                (record.game_id, record.move_number, record.p_from, record.p_to,
                 record.m_type),
            )

    def find_moves_by_game_id(self, game_id: int) -> list[MoveRecord]:
        rows = self._connection.execute(
            "SELECT game_id, move_number, p_from, p_to, type FROM move_record "
            "WHERE game_id = ?",
            (game_id,),
        )
        return [MoveRecord(*row) for row in rows]

    def find_moves(self, game: Game) -> list[MoveRecord]:
        return self.find_moves_by_game_id(game.id)

    def close(self) -> None:
        self._connection.close()

    def __enter__(self) -> DataBaseInstance:
        return self

    def __exit__(self, *args) -> None:
        self.close()
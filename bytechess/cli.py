"""Console chess game between people and search algorithms."""

from __future__ import annotations

import argparse
import itertools
import sqlite3
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

from bytechess.board import ByteBoard
from bytechess.board_controller import BoardController, BoardDataHolder
from bytechess.database import DEFAULT_PATH, DataBaseInstance, Game, MoveRecord
from bytechess.figure import Color
from bytechess.movement import Move
from bytechess.score import AlphaBetaSearch, MinMaxSimpleSearch, MoveSearch

SEARCH_DEPTH = 5

_RULE = "==================================="
_SIDE_NAMES = {Color.WHITE: "White", Color.BLACK: "Black"}
_WIN_BANNERS = {
    Color.WHITE: "=      White side is win!         =",
    Color.BLACK: "=       Black side is win!        =",
}


def _banner(line: str) -> None:
    print(_RULE)
    print(line)
    print(_RULE)


class MoveSource(ABC):
    """Something that chooses the next move for a side."""

    @property
    def position_counter(self) -> int:
        return 0

    @abstractmethod
    def next_move(self, controller: BoardController) -> Optional[Move]:
        """The move to play, or ``None`` if the side has no moves."""


class ConsoleMoveSource(MoveSource):
    """Reads moves typed by a player."""

    def next_move(self, controller: BoardController) -> Optional[Move]:
        if len(controller.friend_moves()) == 0:
            return None

        print()
        while True:
            text = input(f"Write {controller.friend_color.name} move (e.g. a1b2):")
            try:
                move = Move.from_string(text.rstrip().upper())
            except ValueError:
                continue
            if controller.is_valid_move(move):
                return move


class AlgoMoveSource(MoveSource):
    """Lets a search algorithm choose moves."""

    def __init__(self, move_search: MoveSearch, depth: int = SEARCH_DEPTH) -> None:
        self.move_search = move_search
        self.depth = depth
        self._position_counter = 0

    @property
    def position_counter(self) -> int:
        return self._position_counter

    def next_move(self, controller: BoardController) -> Optional[Move]:
        move = self.move_search.find_best_move(controller, self.depth)[1]
        self._position_counter = controller.position_counter
        return move


_SOURCES: dict[int, Callable[[], MoveSource]] = {
    1: ConsoleMoveSource,
    2: lambda: AlgoMoveSource(MinMaxSimpleSearch()),
    3: lambda: AlgoMoveSource(AlphaBetaSearch()),
}


def read_move_source(color: Color) -> MoveSource:
    """Ask which kind of player plays ``color``."""
    while True:
        text = input(f"Type source for {color.name} side: ")
        try:
            choice = int(text.strip())
        except ValueError as error:
            print(error)
            continue
        factory = _SOURCES.get(choice)
        if factory is not None:
            return factory()


def _replay(records: list[MoveRecord]) -> BoardDataHolder:
    moves = [record.to_move() for record in records]

    print()
    _banner("=           Load game             =")

    holder = BoardDataHolder(ByteBoard.standard())
    for number, move in enumerate(moves):
        color = Color.WHITE if number % 2 == 0 else Color.BLACK
        controller = holder.controller(color)
        if not controller.is_valid_move(move):
            raise RuntimeError(f"{color.name} move: {move} is not valid")
        controller.make_move(move)

        print()
        print(holder.board)
        print(f"{color.name} move: {move}")
    return holder


def load_board(db: DataBaseInstance) -> tuple[ByteBoard, Game, MoveRecord]:
    """Start a new game or replay a stored one chosen by id."""
    while True:
        text = input("Load game or start new: ").strip()

        if not text:
            game = db.add_game(Game.now())
            return ByteBoard.standard(), game, MoveRecord.for_game(game)

        try:
            game = db.find_game(int(text))
            records = db.find_moves(game)
            holder = _replay(records)
        except (ValueError, LookupError, sqlite3.Error) as error:
            print(error)
            continue

        last_record = records[-1] if records else MoveRecord.for_game(game)
        return holder.board, game, last_record


def _take_turn(holder: BoardDataHolder, color: Color, source: MoveSource,
               db: DataBaseInstance, record: MoveRecord) -> Optional[MoveRecord]:
    """Play one move; returns the new record, or ``None`` once the game is over."""
    start = time.perf_counter()
    move = source.next_move(holder.controller(color))
    if move is None:
        print(f"{_SIDE_NAMES[color]} movements unavailable. Likely it's draw...")
        return None

    holder.controller(color).make_move(move)
    elapsed = time.perf_counter() - start
    print()
    print(holder.board)
    print(f"{color.name.lower()} move: {move}, {elapsed} sec, "
          f"{source.position_counter / 1_000_000} mln positions")

    record = record.to_next(move)
    db.add_move(record)

    if not holder.controller(color.invert()).is_king_alive():
        print()
        _banner(_WIN_BANNERS[color])
        return None
    return record


def _play(db: DataBaseInstance, white: MoveSource, black: MoveSource) -> None:
    board, _, record = load_board(db)
    holder = BoardDataHolder(board)

    print()
    _banner("=         Game started!           =")
    print()
    print(holder.board)

    turns = itertools.cycle(((Color.WHITE, white), (Color.BLACK, black)))
    if record.move_number % 2 == 0:
        next(turns)

    current: Optional[MoveRecord] = record
    while current is not None:
        color, source = next(turns)
        current = _take_turn(holder, color, source, db, current)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="bytechess",
                                     description="Play chess in the console.")
    parser.add_argument("--database", default=DEFAULT_PATH,
                        help="file that stores games (default: %(default)s)")
    args = parser.parse_args(argv)

    _banner("= Chess algorithm console version =")
    print()
    print("Available move sources:")
    print("1: Console gamer")
    print("2: Simple min-max algorithm")
    print("3: Alpha-betta algorithm")
    print()

    try:
        white = read_move_source(Color.WHITE)
        black = read_move_source(Color.BLACK)
        with DataBaseInstance(args.database) as db:
            db.create_tables()
            _play(db, white, black)
    except EOFError:
        print()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
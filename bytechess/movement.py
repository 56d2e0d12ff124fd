"""Moves, move lists and pseudo-legal move generation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Protocol

from bytechess.board import ByteBoard
from bytechess.figure import Color, Figure, Rank
from bytechess.point import Point

MAX_MOVES = 150

_KING_STEPS = tuple(zip((0, 1, 1, 0, -1, -1, -1, 1), (1, 0, 1, -1, 0, -1, 1, -1)))
_KNIGHT_STEPS = tuple(zip((1, 2, -1, 2, 1, -2, -1, -2), (2, 1, 2, -1, -2, 1, -2, -1)))
_ROOK_DIRECTIONS = tuple(zip((0, 1, -1, 0), (1, 0, 0, -1)))
_BISHOP_DIRECTIONS = tuple(zip((1, -1, 1, -1), (1, 1, -1, -1)))


class MoveType(Enum):
    SIMPLE = 0
    SWAP = 1
    TRANSFORM = 2

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Move:
    """A piece going from ``source`` to ``target``."""

    source: Point = Point()
    target: Point = Point()
    move_type: MoveType = MoveType.SIMPLE

    @classmethod
    def from_string(cls, text: str) -> Move:
        """Parse a move such as ``"E2E4"``; raises ``ValueError`` if malformed."""
        if not text.isascii() or len(text) != 4:
            raise ValueError(f"cannot parse move from {text!r}")
        return cls(Point.from_string(text[:2]), Point.from_string(text[2:]))

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}"


class _Generator(Protocol):
    def fill(self, move_list: MoveList) -> None: ...


class MoveList:
    """A bounded list of moves."""

    __slots__ = ("_moves",)

    def __init__(self, moves: Iterable[Move] = ()) -> None:
        self._moves: list[Move] = []
        for move in moves:
            self.push(move)

    @classmethod
    def from_generator(cls, generator: _Generator) -> MoveList:
        move_list = cls()
        generator.fill(move_list)
        return move_list

    def push(self, move: Move) -> None:
        if len(self._moves) >= MAX_MOVES:
            raise IndexError(f"move list holds at most {MAX_MOVES} moves")
        self._moves.append(move)

    def clear(self) -> None:
        self._moves.clear()

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __getitem__(self, index: int) -> Move:
        return self._moves[index]

    def __repr__(self) -> str:
        return f"MoveList({self._moves!r})"

    def sort_by_gain(self, board: ByteBoard) -> None:
        """Order moves by captured weight minus moving weight, best first."""
        self._moves.sort(
            key=lambda move: board[move.target].weight - board[move.source].weight,
            reverse=True,
        )


@dataclass
class MoveGenerator:
    """Generates moves for the pieces at ``figures`` on ``board``."""

    board: ByteBoard
    figures: Iterable[Point]

    def fill(self, move_list: MoveList) -> None:
        move_list.clear()
        for point in self.figures:
            self.fill_for_figure(point, move_list)

    def fill_for_figure(self, point: Point, move_list: MoveList) -> None:
        """Append the moves of the piece at ``point``."""
        figure = self.board[point]
        rank = figure.rank
        if rank == Rank.KING:
            self._step_moves(point, _KING_STEPS, move_list)
        elif rank == Rank.QUEEN:
            self._sliding_moves(point, _ROOK_DIRECTIONS, move_list)
            self._sliding_moves(point, _BISHOP_DIRECTIONS, move_list)
        elif rank == Rank.ROOK:
            self._sliding_moves(point, _ROOK_DIRECTIONS, move_list)
        elif rank == Rank.BISHOP:
            self._sliding_moves(point, _BISHOP_DIRECTIONS, move_list)
        elif rank == Rank.KNIGHT:
            self._step_moves(point, _KNIGHT_STEPS, move_list)
        elif rank == Rank.PAWN:
            self._pawn_moves(point, figure, move_list)
        elif rank == Rank.NONE:
            raise ValueError(f"board has no figure at {point}")
        else:
            raise ValueError(f"out of board at {point}")

    def move_if_not_out(self, point: Point, dx: int, dy: int) -> Optional[Point]:
        """Return the shifted point unless it falls off the board."""
        moved = point + Point(dx, dy)
        if self.board[moved].rank != Rank.OUT:
            return moved
        return None

    def _push(self, move_list: MoveList, source: Point, target: Point,
              move_type: MoveType = MoveType.SIMPLE) -> None:
        move_list.push(Move(source, target, move_type))

    def _step_moves(self, point: Point, steps: tuple[tuple[int, int], ...],
                    move_list: MoveList) -> None:
        own_color = self.board[point].color
        for dx, dy in steps:
            target = self.move_if_not_out(point, dx, dy)
            if target is not None and self.board[target].color != own_color:
                self._push(move_list, point, target)

    def _sliding_moves(self, point: Point, directions: tuple[tuple[int, int], ...],
                       move_list: MoveList) -> None:
        own_color = self.board[point].color
        enemy_color = own_color.invert()
        for dx, dy in directions:
            current = point
            while (target := self.move_if_not_out(current, dx, dy)) is not None:
                target_color = self.board[target].color
                if target_color == own_color:
                    break
                self._push(move_list, point, target)
                if target_color == enemy_color:
                    break
                current = target

    def _pawn_moves(self, point: Point, figure: Figure, move_list: MoveList) -> None:
        if figure.color == Color.WHITE:
            direction, prey = 1, Color.BLACK
        elif figure.color == Color.BLACK:
            direction, prey = -1, Color.WHITE
        else:
            raise ValueError(f"pawn at {point} has no side")

        for dx in (1, -1):
            target = point + Point(dx, direction)
            if self.board[target].color == prey:
                self._push(move_list, point, target)

        ahead = point + Point(0, direction)
        if self.board[ahead].rank != Rank.NONE:
            return
        kind = MoveType.TRANSFORM if ahead.y in (0, 7) else MoveType.SIMPLE
        self._push(move_list, point, ahead, kind)

        on_start_row = (point.y == 1 and direction == 1) or (point.y == 6 and direction == -1)
        if on_start_row:
            jump = point + Point(0, 2 * direction)
            if self.board[jump].rank == Rank.NONE:
                self._push(move_list, point, jump)
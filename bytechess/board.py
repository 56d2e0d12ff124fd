"""A padded 16x16 board whose central 8x8 area is the chessboard."""

from __future__ import annotations

from typing import Iterator

from bytechess.figure import Color, Figure, Rank
from bytechess.point import Point

_SIZE = 16
_OFFSET = 4
_LOW = -_OFFSET
_HIGH = _SIZE - _OFFSET


def _index(coordinate: int) -> int:
    if not _LOW <= coordinate < _HIGH:
        raise IndexError(f"coordinate {coordinate} is outside {_LOW}..{_HIGH - 1}")
    return coordinate + _OFFSET


class ByteBoard:
    """A grid of figures; squares outside the 8x8 area hold ``Rank.OUT``."""

    __slots__ = ("_grid",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        out = Figure(Rank.OUT, Color.NONE, False)
        empty = Figure.empty()
        self._grid = [
            [empty if 0 <= literal - _OFFSET < 8 and 0 <= number - _OFFSET < 8 else out
             for number in range(_SIZE)]
            for literal in range(_SIZE)
        ]

    @classmethod
    def empty(cls) -> ByteBoard:
        """A board with no pieces."""
        return cls()

    @classmethod
    def standard(cls) -> ByteBoard:
        """A board set up for a new game."""
        board = cls()
        for literal in range(8):
            board.set_cell(literal, 1, Figure(Rank.PAWN, Color.WHITE))
            board.set_cell(literal, 6, Figure(Rank.PAWN, Color.BLACK))

        back_row = [
            (0, Rank.ROOK, False),
            (7, Rank.ROOK, False),
            (1, Rank.KNIGHT, False),
            (6, Rank.KNIGHT, False),
            (2, Rank.BISHOP, True),
            (5, Rank.BISHOP, True),
            (4, Rank.QUEEN, False),
            (3, Rank.KING, True),
        ]
        for literal, rank, flag in back_row:
            board.set_cell(literal, 0, Figure(rank, Color.WHITE, flag))
            board.set_cell(literal, 7, Figure(rank, Color.BLACK, flag))
        return board

    def cell(self, literal: int, number: int) -> Figure:
        return self._grid[_index(literal)][_index(number)]

    def set_cell(self, literal: int, number: int, figure: Figure) -> None:
        self._grid[_index(literal)][_index(number)] = figure

    def __getitem__(self, point: Point) -> Figure:
        return self.cell(point.x, point.y)

    def __setitem__(self, point: Point, figure: Figure) -> None:
        self.set_cell(point.x, point.y, figure)

    def swap(self, first: Point, second: Point) -> None:
        self[first], self[second] = self[second], self[first]

    def cells(self) -> Iterator[tuple[Point, Figure]]:
        """Yield every square of the 8x8 area, file by file."""
        for x, column in enumerate(self._grid[_OFFSET:_OFFSET + 8]):
            for y, figure in enumerate(column[_OFFSET:_OFFSET + 8]):
                yield Point(x, y), figure

    def copy(self) -> ByteBoard:
        board = ByteBoard.__new__(ByteBoard)
        board._grid = [list(column) for column in self._grid]
        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByteBoard):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        return f"ByteBoard(\n{self}\n)"

    def __str__(self) -> str:
        lines = []
        for number in reversed(range(8)):
            row = "".join(f"{self.cell(literal, number)} " for literal in reversed(range(8)))
            lines.append(f"{number + 1} {row}\n")
        lines.append("  " + "".join(f"{chr(65 + literal)}  " for literal in range(8)))
        return "".join(lines)
"""Chess pieces packed into a single byte."""

from __future__ import annotations

from enum import IntEnum

W_PAWN = 1000
W_BISHOP = 4 * W_PAWN
W_KNIGHT = 3 * W_PAWN
W_ROOK = 5 * W_PAWN
W_QUEEN = 9 * W_PAWN
W_INFINITY = 10 * W_QUEEN
W_KING = W_INFINITY

_RANK_MASK = 7
_COLOR_MASK = 64 + 128
_FLAG_BIT = 16


class Rank(IntEnum):
    NONE = 0
    KING = 1
    QUEEN = 2
    ROOK = 3
    BISHOP = 4
    KNIGHT = 5
    PAWN = 6
    OUT = 7


class Color(IntEnum):
    NONE = 0
    WHITE = 64
    BLACK = 128
    WHITEBLACK = 64 + 128

    def invert(self) -> Color:
        """Swap both colour bits."""
        return Color(self ^ _COLOR_MASK)


_FIGURE_WEIGHT = {
    Rank.NONE: 0,
    Rank.KING: W_KING,
    Rank.QUEEN: W_QUEEN,
    Rank.ROOK: W_ROOK,
    Rank.BISHOP: W_BISHOP,
    Rank.KNIGHT: W_KNIGHT,
    Rank.PAWN: W_PAWN,
    Rank.OUT: 0,
}

_COLOR_CHAR = {
    Color.NONE: "n",
    Color.WHITEBLACK: "%",
    Color.WHITE: "w",
    Color.BLACK: "b",
}

_RANK_CHAR = {
    Rank.NONE: "n",
    Rank.KING: "K",
    Rank.QUEEN: "Q",
    Rank.ROOK: "r",
    Rank.BISHOP: "b",
    Rank.KNIGHT: "k",
    Rank.PAWN: "p",
    Rank.OUT: "x",
}


class Figure:
    """An immutable piece: rank, colour and a flag bit in one byte."""

    __slots__ = ("_value",)

    def __init__(self, rank: Rank = Rank.NONE, color: Color = Color.NONE, flag: bool = False):
        self._value = (int(rank) + int(color) + (_FLAG_BIT if flag else 0)) & 0xFF

    @classmethod
    def empty(cls) -> Figure:
        return cls(Rank.NONE, Color.NONE, False)

    @classmethod
    def from_byte(cls, value: int) -> Figure:
        figure = cls.__new__(cls)
        figure._value = value & 0xFF
        return figure

    @property
    def value(self) -> int:
        return self._value

    @property
    def rank(self) -> Rank:
        return Rank(self._value & _RANK_MASK)

    @property
    def color(self) -> Color:
        return Color(self._value & _COLOR_MASK)

    @property
    def weight(self) -> int:
        return _FIGURE_WEIGHT[self.rank]

    def is_flag_set(self) -> bool:
        return self._value & _FLAG_BIT == _FLAG_BIT

    def with_flag(self) -> Figure:
        """Return a copy with the flag bit added."""
        return Figure.from_byte(self._value + _FLAG_BIT)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Figure):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Figure({self.rank.name}, {self.color.name}, flag={self.is_flag_set()})"

    def __str__(self) -> str:
        return _COLOR_CHAR[self.color] + _RANK_CHAR[self.rank]
"""Board coordinates."""

from __future__ import annotations

from dataclasses import dataclass

_FILE_BASE = ord("H")
_RANK_BASE = ord("1")


@dataclass(frozen=True, slots=True)
class Point:
    """A square on the board.

    ``x`` counts files from H (0) to A (7) and ``y`` counts ranks from 1 (0)
    to 8 (7).
    """

    x: int = 0
    y: int = 0

    @classmethod
    def from_string(cls, text: str) -> Point:
        """Parse a square such as ``"E2"``.

        Only the first two characters are looked at. Characters outside the
        file or rank range leave that coordinate at zero. Raises
        ``ValueError`` if fewer than two characters can be read.
        """
        x = y = 0
        parsed = 0
        offset = 0
        for char in text:
            if offset >= 2:
                break
            if offset == 0 and "A" <= char <= "H":
                x = _FILE_BASE - ord(char)
            elif offset == 1 and "1" <= char <= "8":
                y = ord(char) - _RANK_BASE
            parsed += 1
            offset += len(char.encode("utf-8", errors="surrogatepass"))
        if parsed != 2:
            raise ValueError(f"cannot parse square from {text!r}")
        return cls(x, y)

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __str__(self) -> str:
        return chr((_FILE_BASE - self.x) & 0xFF) + chr((_RANK_BASE + self.y) & 0xFF)
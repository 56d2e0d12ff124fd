"""Lists of the squares a side's pieces stand on, heaviest piece first."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Optional

from bytechess.board import ByteBoard
from bytechess.figure import Color
from bytechess.point import Point

if TYPE_CHECKING:
    from bytechess.movement import Move

CAPACITY = 16


def _sorted_points(board: ByteBoard, color: Color) -> list[Point]:
    points = [point for point, figure in board.cells() if figure.color == color]
    if len(points) > CAPACITY:
        raise ValueError(f"more than {CAPACITY} figures of colour {color.name}")
    points.sort(key=lambda point: board[point].weight, reverse=True)
    return points


@dataclass(eq=False, slots=True)
class PointNode:
    """A node of a singly linked list of points."""

    point: Point = Point()
    next: Optional[PointNode] = None


class LinkedNodeCursor:
    """A handle on one node of a ``FigurePointList`` that can unlink and relink it."""

    __slots__ = ("_owner", "_prev", "_node")

    def __init__(self, owner: Optional[FigurePointList] = None,
                 prev: Optional[PointNode] = None,
                 node: Optional[PointNode] = None) -> None:
        self._owner = owner
        self._prev = prev
        self._node = node

    def _require_node(self) -> PointNode:
        if self._node is None:
            raise ValueError("cursor points at no node")
        return self._node

    def remove(self) -> None:
        """Unlink the node from its list."""
        node = self._require_node()
        if self._prev is not None:
            self._prev.next = node.next
        elif self._owner is not None:
            self._owner.first = node.next
        else:
            raise ValueError("cursor belongs to no list")

    def restore(self) -> None:
        """Link the node back where it was."""
        if self._prev is not None:
            self._prev.next = self._node
        elif self._owner is not None:
            self._owner.first = self._node

    def set_point(self, point: Point) -> None:
        if self._node is not None:
            self._node.point = point

    def point(self) -> Point:
        return self._require_node().point


class FigurePointList:
    """A linked list over a fixed pool of nodes."""

    def __init__(self, board: Optional[ByteBoard] = None,
                 color: Optional[Color] = None) -> None:
        self._nodes = [PointNode() for _ in range(CAPACITY)]
        self.first: Optional[PointNode] = None
        if board is not None:
            if color is None:
                raise ValueError("a colour is needed to fill from a board")
            self.fill(board, color)

    def fill(self, board: ByteBoard, color: Color) -> None:
        points = _sorted_points(board, color)
        for node, point in zip(self._nodes, points):
            node.point = point
        self.first = None
        for node in reversed(self._nodes[:len(points)]):
            node.next = self.first
            self.first = node

    def __iter__(self) -> Iterator[Point]:
        node = self.first
        while node is not None:
            yield node.point
            node = node.next

    def node_iter(self) -> Iterator[LinkedNodeCursor]:
        prev: Optional[PointNode] = None
        node = self.first
        while node is not None:
            cursor = LinkedNodeCursor(self, prev, node)
            prev, node = node, node.next
            yield cursor

    def __str__(self) -> str:
        return "[" + "".join(f"{point}, " for point in self) + "]"


@dataclass(slots=True)
class _Slot:
    point: Point = Point()
    present: bool = False


class FigureArrayList:
    """A fixed array of points in which removed entries are only marked absent."""

    def __init__(self, board: Optional[ByteBoard] = None,
                 color: Optional[Color] = None) -> None:
        self._slots = [_Slot() for _ in range(CAPACITY)]
        if board is not None:
            if color is None:
                raise ValueError("a colour is needed to fill from a board")
            self.fill(board, color)

    def fill(self, board: ByteBoard, color: Color) -> None:
        points = [point for point, figure in board.cells() if figure.color == color]
        if len(points) > CAPACITY:
            raise ValueError(f"more than {CAPACITY} figures of colour {color.name}")
        self._slots = [_Slot(point, True) for point in points]
        self._slots.extend(_Slot() for _ in range(CAPACITY - len(points)))
        self._slots.sort(key=lambda slot: board[slot.point].weight, reverse=True)

    def _find(self, point: Point, present: bool) -> _Slot:
        for slot in self._slots:
            if slot.present == present and slot.point == point:
                return slot
        state = "present" if present else "removed"
        raise ValueError(f"no {state} figure at {point}")

    def make_move(self, move: Move) -> None:
        self._find(move.source, True).point = move.target

    def unmake_move(self, move: Move) -> None:
        self._find(move.target, True).point = move.source

    def remove(self, point: Point) -> None:
        self._find(point, True).present = False

    def restore(self, point: Point) -> None:
        self._find(point, False).present = True

    def __iter__(self) -> Iterator[Point]:
        return (slot.point for slot in self._slots if slot.present)


class FigureLinkedList:
    """A plain list of points; restored points go to the front."""

    def __init__(self, board: Optional[ByteBoard] = None,
                 color: Optional[Color] = None) -> None:
        self._points: list[Point] = []
        if board is not None:
            if color is None:
                raise ValueError("a colour is needed to fill from a board")
            self.fill(board, color)

    def fill(self, board: ByteBoard, color: Color) -> None:
        self._points = _sorted_points(board, color)

    def _index(self, point: Point) -> int:
        try:
            return self._points.index(point)
        except ValueError:
            raise ValueError(f"no figure at {point}") from None

    def make_move(self, move: Move) -> None:
        self._points[self._index(move.source)] = move.target

    def unmake_move(self, move: Move) -> None:
        self._points[self._index(move.target)] = move.source

    def remove(self, point: Point) -> None:
        if point in self._points:
            self._points.remove(point)

    def restore(self, point: Point) -> None:
        self._points.insert(0, point)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)
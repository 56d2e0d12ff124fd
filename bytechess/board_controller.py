"""Applying and undoing moves on a board together with both sides' piece lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from bytechess.board import ByteBoard
from bytechess.figure import Color, Figure, Rank
from bytechess.figure_list import FigurePointList, LinkedNodeCursor
from bytechess.movement import Move, MoveGenerator, MoveList, MoveType
from bytechess.point import Point


@dataclass
class PointInfo:
    """What stood on a square before a move, and the list node that tracks it."""

    figure: Figure = field(default_factory=Figure.empty)
    point: Point = Point()
    cursor: LinkedNodeCursor = field(default_factory=LinkedNodeCursor)

    @classmethod
    def capture(cls, point: Point, controller: BoardController) -> PointInfo:
        """Record the square ``point`` and locate its node in the owning list.

        Raises ``LookupError`` if a piece stands there but its side's list
        does not hold the square.
        """
        figure = controller.board[point]
        info = cls(figure=figure, point=point)

        if figure.color == controller.friend_color:
            owner = controller.friend_list
        elif figure.color == controller.enemy_color:
            owner = controller.enemy_list
        else:
            return info

        cursor = next((c for c in owner.node_iter() if c.point() == point), None)
        if cursor is None:
            raise LookupError(f"point {point} should be in the figure list")
        info.cursor = cursor
        return info


MoveInfo = tuple[PointInfo, PointInfo]


@dataclass(eq=False)
class BoardController:
    """A view of the game from the side that is to move."""

    board: ByteBoard
    friend_list: FigurePointList
    enemy_list: FigurePointList
    friend_color: Color
    enemy_color: Color
    position_counter: int = 0

    def friend_moves(self) -> MoveList:
        """All moves of the side to move."""
        return MoveList.from_generator(MoveGenerator(self.board, self.friend_list))

    def point_moves(self, point: Point) -> MoveList:
        """The moves of the piece standing at ``point``."""
        move_list = MoveList()
        MoveGenerator(self.board, self.friend_list).fill_for_figure(point, move_list)
        return move_list

    def is_valid_move(self, move: Move) -> bool:
        source = move.source
        if not (0 <= source.x <= 7 and 0 <= source.y <= 7):
            return False
        if self.board[source].color != self.friend_color:
            return False
        return move in self.point_moves(source)

    def make_move(self, move: Move) -> MoveInfo:
        """Apply ``move`` and return what is needed to undo it."""
        source_info = PointInfo.capture(move.source, self)
        target_info = PointInfo.capture(move.target, self)
        board = self.board

        if move.move_type is MoveType.SIMPLE:
            source_info.cursor.set_point(move.target)
            if board[move.target].color == self.enemy_color:
                target_info.cursor.remove()
            board[move.target] = board[move.source]
            board[move.source] = Figure.empty()
        elif move.move_type is MoveType.SWAP:
            source_info.cursor.set_point(move.target)
            target_info.cursor.set_point(move.source)
            board.swap(move.source, move.target)
        else:
            source_info.cursor.set_point(move.target)
            moving = board[move.source]
            board[move.source] = Figure.empty()
            board[move.target] = Figure(Rank.QUEEN, moving.color, False)

        return source_info, target_info

    def unmake_move(self, move_info: MoveInfo) -> None:
        """Undo a move using the result of ``make_move``."""
        source_info, target_info = move_info
        source_info.cursor.restore()
        target_info.cursor.restore()
        source_info.cursor.set_point(source_info.point)
        target_info.cursor.set_point(target_info.point)
        self.board[source_info.point] = source_info.figure
        self.board[target_info.point] = target_info.figure

    def pass_move_to_enemy(self) -> None:
        """Turn the view around to the other side."""
        self.friend_list, self.enemy_list = self.enemy_list, self.friend_list
        self.friend_color, self.enemy_color = self.enemy_color, self.friend_color

    def is_king_alive(self) -> bool:
        return any(
            self.board[point].rank == Rank.KING and self.board[point].color == self.friend_color
            for point in self.friend_list
        )

    def find_king_eat_move(self, move_list: Iterable[Move]) -> Optional[Move]:
        """The first simple move that captures the enemy king, if any."""
        for move in move_list:
            if move.move_type is not MoveType.SIMPLE:
                continue
            target = self.board[move.target]
            if target.rank == Rank.KING and target.color == self.enemy_color:
                return move
        return None


class BoardDataHolder:
    """Owns a board and the piece lists of both sides."""

    def __init__(self, board: ByteBoard) -> None:
        self.board = board.copy()
        self.white_list = FigurePointList(board, Color.WHITE)
        self.black_list = FigurePointList(board, Color.BLACK)

    def controller(self, color: Color) -> BoardController:
        """A controller for the side ``color`` to move."""
        if color == Color.WHITE:
            return BoardController(self.board, self.white_list, self.black_list,
                                   Color.WHITE, Color.BLACK)
        if color == Color.BLACK:
            return BoardController(self.board, self.black_list, self.white_list,
                                   Color.BLACK, Color.WHITE)
        raise ValueError(f"no side for colour {color.name}")
"""Position evaluation and game-tree search."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional

from bytechess.board_controller import BoardController
from bytechess.figure import W_INFINITY, Figure
from bytechess.movement import Move
from bytechess.point import Point

EvalFn = Callable[[Point, Figure], int]
SearchResult = tuple[int, Optional[Move]]


def evaluate_score(controller: BoardController, eval_fn: EvalFn) -> int:
    """Sum ``eval_fn`` over the side to move minus the same over its enemy."""
    board = controller.board
    friend_score = sum(eval_fn(point, board[point]) for point in controller.friend_list)
    enemy_score = sum(eval_fn(point, board[point]) for point in controller.enemy_list)
    return friend_score - enemy_score


def material_fn(point: Point, figure: Figure) -> int:
    return figure.weight


def simple_positional_fn(point: Point, figure: Figure) -> int:
    return (int(figure.color) - 64) + point.y * 8 + (8 - point.x)


def _static_score(controller: BoardController) -> int:
    controller.position_counter += 1
    return evaluate_score(
        controller,
        lambda point, figure: material_fn(point, figure) + simple_positional_fn(point, figure),
    )


def min_max_simple(controller: BoardController, depth: int) -> SearchResult:
    """Plain negamax search to ``depth`` plies; ties keep the first move."""
    if depth <= 0:
        return _static_score(controller), None

    move_list = controller.friend_moves()
    best_score = -W_INFINITY
    best_move = next(iter(move_list), None)
    for move in move_list:
        move_info = controller.make_move(move)
        controller.pass_move_to_enemy()

        score = -min_max_simple(controller, depth - 1)[0]

        controller.pass_move_to_enemy()
        controller.unmake_move(move_info)

        if score > best_score:
            best_score, best_move = score, move

    return best_score, best_move


def alpha_betta(controller: BoardController, depth: int, alpha: int, betta: int) -> SearchResult:
    """Negamax with alpha-beta pruning and a null-window first probe."""
    if depth <= 0:
        return _static_score(controller), None

    move_list = controller.friend_moves()
    move_list.sort_by_gain(controller.board)

    best_score = -W_INFINITY
    best_move = next(iter(move_list), None)
    for move in move_list:
        move_info = controller.make_move(move)
        controller.pass_move_to_enemy()

        score = -alpha_betta(controller, depth - 1, -(alpha + 1), -alpha)[0]
        if alpha < score < betta:
            score = -alpha_betta(controller, depth - 1, -betta, -alpha)[0]

        controller.pass_move_to_enemy()
        controller.unmake_move(move_info)

        if score > best_score:
            best_score, best_move = score, move

        alpha = max(alpha, best_score)
        if alpha >= betta:
            return alpha, best_move

    return best_score, best_move


class MoveSearch(ABC):
    """A strategy that picks a move for the side to move."""

    @abstractmethod
    def find_best_move(self, controller: BoardController, depth: int) -> SearchResult:
        """Return the best score and move found searching ``depth`` plies."""


class MinMaxSimpleSearch(MoveSearch):
    def find_best_move(self, controller: BoardController, depth: int) -> SearchResult:
        return min_max_simple(controller, depth)


class AlphaBetaSearch(MoveSearch):
    def find_best_move(self, controller: BoardController, depth: int) -> SearchResult:
        return alpha_betta(controller, depth, -W_INFINITY, W_INFINITY)
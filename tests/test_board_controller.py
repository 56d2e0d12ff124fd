import pytest

from bytechess.board import ByteBoard
from bytechess.board_controller import BoardDataHolder, PointInfo
from bytechess.figure import Color, Figure, Rank
from bytechess.movement import Move, MoveType
from bytechess.point import Point


def test_transform():
    board = ByteBoard.empty()
    board.set_cell(1, 6, Figure(Rank.PAWN, Color.WHITE, False))
    move = Move(Point(1, 6), Point(1, 7), MoveType.TRANSFORM)

    holder = BoardDataHolder(board)
    info = holder.controller(Color.WHITE).make_move(move)

    assert list(holder.white_list)[-1] == Point(1, 7)
    assert holder.board[Point(1, 7)] == Figure(Rank.QUEEN, Color.WHITE, False)
    assert holder.board[Point(1, 6)] == Figure.empty()

    holder.controller(Color.WHITE).unmake_move(info)

    assert board == holder.board
    assert list(holder.white_list)[-1] == Point(1, 6)


def test_capture_and_undo_restores_enemy_list():
    board = ByteBoard.empty()
    board.set_cell(1, 1, Figure(Rank.ROOK, Color.WHITE))
    board.set_cell(1, 6, Figure(Rank.PAWN, Color.BLACK))
    holder = BoardDataHolder(board)
    controller = holder.controller(Color.WHITE)

    info = controller.make_move(Move(Point(1, 1), Point(1, 6)))
    assert list(holder.black_list) == []
    assert list(holder.white_list) == [Point(1, 6)]
    assert holder.board[Point(1, 6)] == Figure(Rank.ROOK, Color.WHITE)

    controller.unmake_move(info)
    assert list(holder.black_list) == [Point(1, 6)]
    assert list(holder.white_list) == [Point(1, 1)]
    assert holder.board == board


def test_swap_move_exchanges_pieces():
    board = ByteBoard.empty()
    board.set_cell(0, 0, Figure(Rank.ROOK, Color.WHITE))
    board.set_cell(3, 0, Figure(Rank.KING, Color.WHITE))
    holder = BoardDataHolder(board)
    controller = holder.controller(Color.WHITE)

    info = controller.make_move(Move(Point(0, 0), Point(3, 0), MoveType.SWAP))
    assert holder.board[Point(0, 0)].rank == Rank.KING
    assert holder.board[Point(3, 0)].rank == Rank.ROOK
    assert set(holder.white_list) == {Point(0, 0), Point(3, 0)}

    controller.unmake_move(info)
    assert holder.board == board
    assert list(holder.white_list) == [Point(3, 0), Point(0, 0)]


def test_standard_board_has_twenty_opening_moves():
    holder = BoardDataHolder(ByteBoard.standard())
    assert len(holder.controller(Color.WHITE).friend_moves()) == 20
    assert len(holder.controller(Color.BLACK).friend_moves()) == 20


def test_make_unmake_every_opening_move_round_trips():
    original = ByteBoard.standard()
    holder = BoardDataHolder(original)
    controller = holder.controller(Color.WHITE)
    white_before = list(holder.white_list)
    black_before = list(holder.black_list)

    for move in controller.friend_moves():
        info = controller.make_move(move)
        assert holder.board != original
        controller.unmake_move(info)
        assert holder.board == original
        assert list(holder.white_list) == white_before
        assert list(holder.black_list) == black_before


def test_is_valid_move():
    holder = BoardDataHolder(ByteBoard.standard())
    white = holder.controller(Color.WHITE)
    assert white.is_valid_move(Move.from_string("E2E4"))
    assert white.is_valid_move(Move.from_string("G1F3"))
    assert not white.is_valid_move(Move.from_string("E2E5"))
    assert not white.is_valid_move(Move.from_string("E7E5"))
    assert not white.is_valid_move(Move.from_string("E4E5"))
    assert not white.is_valid_move(Move(Point(8, 0), Point(7, 0)))
    assert not white.is_valid_move(Move(Point(0, -1), Point(0, 0)))

    black = holder.controller(Color.BLACK)
    assert black.is_valid_move(Move.from_string("E7E5"))


def test_point_moves_for_knight():
    holder = BoardDataHolder(ByteBoard.standard())
    moves = holder.controller(Color.WHITE).point_moves(Point(1, 0))
    assert {move.target for move in moves} == {Point(0, 2), Point(2, 2)}


def test_pass_move_to_enemy_swaps_sides():
    holder = BoardDataHolder(ByteBoard.standard())
    controller = holder.controller(Color.WHITE)
    controller.pass_move_to_enemy()
    assert controller.friend_color == Color.BLACK
    assert controller.enemy_color == Color.WHITE
    assert controller.friend_list is holder.black_list
    assert controller.enemy_list is holder.white_list


def test_is_king_alive():
    board = ByteBoard.standard()
    holder = BoardDataHolder(board)
    assert holder.controller(Color.WHITE).is_king_alive()

    no_king = ByteBoard.empty()
    no_king.set_cell(0, 0, Figure(Rank.ROOK, Color.WHITE))
    no_king.set_cell(3, 7, Figure(Rank.KING, Color.BLACK))
    holder = BoardDataHolder(no_king)
    assert not holder.controller(Color.WHITE).is_king_alive()
    assert holder.controller(Color.BLACK).is_king_alive()


def test_find_king_eat_move():
    board = ByteBoard.empty()
    board.set_cell(0, 0, Figure(Rank.ROOK, Color.WHITE))
    board.set_cell(0, 5, Figure(Rank.KING, Color.BLACK))
    holder = BoardDataHolder(board)
    controller = holder.controller(Color.WHITE)
    assert controller.find_king_eat_move(controller.friend_moves()) == Move(Point(0, 0), Point(0, 5))

    board.set_cell(0, 5, Figure.empty())
    board.set_cell(1, 5, Figure(Rank.KING, Color.BLACK))
    holder = BoardDataHolder(board)
    controller = holder.controller(Color.WHITE)
    assert controller.find_king_eat_move(controller.friend_moves()) is None


def test_controller_rejects_colourless_side():
    holder = BoardDataHolder(ByteBoard.standard())
    with pytest.raises(ValueError):
        holder.controller(Color.NONE)


def test_point_info_of_empty_square():
    holder = BoardDataHolder(ByteBoard.standard())
    info = PointInfo.capture(Point(3, 3), holder.controller(Color.WHITE))
    assert info.figure == Figure.empty()
    assert info.point == Point(3, 3)


def test_point_info_missing_from_list_raises():
    holder = BoardDataHolder(ByteBoard.empty())
    holder.board.set_cell(2, 2, Figure(Rank.PAWN, Color.WHITE))
    with pytest.raises(LookupError):
        PointInfo.capture(Point(2, 2), holder.controller(Color.WHITE))


def test_holder_copies_board():
    board = ByteBoard.standard()
    holder = BoardDataHolder(board)
    holder.board.set_cell(0, 0, Figure.empty())
    assert board.cell(0, 0) == Figure(Rank.ROOK, Color.WHITE)
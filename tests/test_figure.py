import pytest

from bytechess.figure import (
    W_KING,
    W_PAWN,
    W_QUEEN,
    Color,
    Figure,
    Rank,
)


def test_figure_fits_in_a_byte():
    for rank in Rank:
        for color in Color:
            for flag in (False, True):
                assert 0 <= Figure(rank, color, flag).value <= 255


@pytest.mark.parametrize(
    "rank, color",
    [
        (Rank.NONE, Color.WHITE),
        (Rank.KING, Color.WHITE),
        (Rank.KNIGHT, Color.BLACK),
        (Rank.PAWN, Color.BLACK),
    ],
)
def test_build_figure(rank, color):
    figure = Figure(rank, color, False)
    assert figure.rank == rank
    assert figure.color == color


@pytest.mark.parametrize(
    "rank, weight",
    [
        (Rank.NONE, 0),
        (Rank.PAWN, W_PAWN),
        (Rank.QUEEN, W_QUEEN),
        (Rank.KING, W_KING),
    ],
)
def test_weight_figure(rank, weight):
    assert Figure(rank, Color.WHITE, False).weight == weight


def test_flag_figure():
    assert Figure(Rank.NONE, Color.WHITE, False).is_flag_set() is False
    assert Figure(Rank.NONE, Color.WHITE, True).is_flag_set() is True


def test_with_flag_keeps_rank_and_color():
    figure = Figure(Rank.BISHOP, Color.BLACK).with_flag()
    assert figure.is_flag_set()
    assert figure.rank == Rank.BISHOP
    assert figure.color == Color.BLACK
    assert figure == Figure(Rank.BISHOP, Color.BLACK, True)


def test_empty_is_default():
    assert Figure.empty() == Figure()
    assert Figure.empty().rank == Rank.NONE
    assert Figure.empty().color == Color.NONE


def test_from_byte_round_trip():
    figure = Figure(Rank.ROOK, Color.WHITE, True)
    assert Figure.from_byte(figure.value) == figure


def test_color_invert():
    assert Color.WHITE.invert() == Color.BLACK
    assert Color.BLACK.invert() == Color.WHITE
    assert Color.NONE.invert() == Color.WHITEBLACK
    assert Color.WHITEBLACK.invert() == Color.NONE


def test_display():
    assert str(Figure(Rank.KING, Color.WHITE)) == "wK"
    assert str(Figure(Rank.KNIGHT, Color.BLACK)) == "bk"
    assert str(Figure(Rank.OUT, Color.NONE)) == "nx"
    assert str(Figure(Rank.PAWN, Color.WHITEBLACK)) == "%p"
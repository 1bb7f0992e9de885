import pytest

from engine.board import Board, Player, parse_coordinate
from engine.errors import AlreadyOccupied, OutOfRange


def test_new_board_is_empty():
    board = Board()
    assert board.cells() == (None,) * 9
    assert board.occupied_count() == 0
    assert not board.is_full()


def test_set_and_get_use_row_major_index():
    board = Board()
    board.set(2, 1, Player.SECOND)
    assert board.get(2, 1) is Player.SECOND
    assert board.cells()[3 * 1 + 2] is Player.SECOND
    assert board.occupied_count() == 1


def test_set_refuses_to_overwrite():
    board = Board()
    board.set(0, 0, Player.FIRST)
    with pytest.raises(AlreadyOccupied):
        board.set(0, 0, Player.SECOND)
    assert board.get(0, 0) is Player.FIRST


@pytest.mark.parametrize("x, y", [(-1, 0), (3, 0), (0, 3), (5, 5), (True, 0), ("1", 1)])
def test_bad_coordinates_raise_out_of_range(x, y):
    board = Board()
    with pytest.raises(OutOfRange):
        board.get(x, y)
    with pytest.raises(OutOfRange):
        board.set(x, y, Player.FIRST)
    with pytest.raises(OutOfRange):
        board.clear(x, y)
    assert board.cells() == (None,) * 9


def test_clear_and_reset():
    board = Board()
    for x in range(3):
        for y in range(3):
            board.set(x, y, Player.FIRST)
    assert board.is_full()

    board.clear(1, 1)
    assert board.get(1, 1) is None
    assert board.occupied_count() == 8

    board.reset()
    assert board.cells() == (None,) * 9


def test_player_other():
    assert Player.FIRST.other() is Player.SECOND
    assert Player.SECOND.other() is Player.FIRST


@pytest.mark.parametrize("raw, expected", [("0", 0), ("2", 2), ("7", 7), ("-1", -1)])
def test_parse_coordinate_accepts_plain_integers(raw, expected):
    assert parse_coordinate(raw) == expected


@pytest.mark.parametrize(
    "raw", [None, "", "a", "1.0", " 1 ", "1 ", "+1", "01", "0_1", "１", "١", "1e0"]
)
def test_parse_coordinate_rejects_anything_else(raw):
    with pytest.raises(OutOfRange):
        parse_coordinate(raw)

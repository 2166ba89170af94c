import pytest

from tetris_board import collide, create_board
from tetris_piece import PIECES, SHAPES, Piece, rotate, shape_for, try_rotate


@pytest.mark.parametrize("t", list(PIECES))
@pytest.mark.parametrize("direction", [1, -1])
def test_four_rotations_return_original(t, direction):
    shape = shape_for(t)
    out = shape
    for _ in range(4):
        out = rotate(out, direction)
    assert out == SHAPES[t]


def test_rotate_clockwise_and_counter_clockwise():
    t = shape_for("T")
    assert rotate(t, 1) == [[0, 1, 0], [0, 1, 1], [0, 1, 0]]
    assert rotate(t, -1) == [[0, 1, 0], [1, 1, 0], [0, 1, 0]]
    assert rotate(rotate(t, 1), -1) == t


def test_rotate_returns_new_grid():
    s = shape_for("L")
    before = [r[:] for r in s]
    rotate(s, 1)
    assert s == before


def test_shape_for_is_a_copy():
    s = shape_for("S")
    s[0][0] = 7
    assert SHAPES["S"][0][0] == 0


def test_every_shape_uses_a_single_cell_id():
    ids = set()
    for t in PIECES:
        cells = {v for row in SHAPES[t] for v in row if v}
        assert len(cells) == 1
        assert len(SHAPES[t]) == len(SHAPES[t][0])
        ids |= cells
    assert ids == set(range(1, 8))


def test_spawn_is_centered_on_top_row():
    assert Piece.spawn("I", 10).x == 3
    assert Piece.spawn("O", 10).x == 4
    assert Piece.spawn("T", 10).x == 4
    assert Piece.spawn("T", 10).y == 0


def test_try_rotate_in_open_space_keeps_position():
    board = create_board(10, 20)
    p = Piece.spawn("T", 10)
    p.y = 5
    r = try_rotate(board, p, 1)
    assert r is not None
    assert (r.x, r.y) == (p.x, p.y)
    assert r.shape == rotate(p.shape, 1)
    assert r.state == 1
    assert try_rotate(board, p, -1).state == 3


def test_try_rotate_kicks_off_right_wall():
    board = create_board(10, 20)
    # vertical I in the last column
    p = Piece("I", [[0, 0, 5, 0] for _ in range(4)], 1, 7, 5)
    r = try_rotate(board, p, 1)
    # +1 still out of bounds, -2 fits
    assert r is not None
    assert r.x == 6
    assert r.shape[2] == [5, 5, 5, 5]


def test_try_rotate_gives_up_and_leaves_piece_untouched():
    board = create_board(3, 3)
    board[2] = [1, 1, 1]
    p = Piece.spawn("T", 3)
    assert p.x == 0
    before = [r[:] for r in p.shape]
    assert try_rotate(board, p, 1) is None
    assert p.shape == before
    assert p.x == 0


def test_try_rotate_kick_reaches_plus_three():
    board = create_board(10, 20)
    # horizontal I lands on row 7; x=2, 3 and 1 all overlap column 3
    board[7][3] = 1
    p = Piece("I", [[0, 0, 5, 0] for _ in range(4)], 1, 2, 5)
    r = try_rotate(board, p, 1)
    assert r is not None
    assert r.x == 4


def test_try_rotate_aborts_before_trying_minus_four():
    board = create_board(10, 20)
    # x=5, 6, 4 overlap column 7 and x=7 is off the board
    board[7][7] = 1
    p = Piece("I", [[0, 0, 5, 0] for _ in range(4)], 1, 5, 5)
    assert try_rotate(board, p, 1) is None
    # the -4 position would have fit, but the next offset 5 exceeds the width first
    assert not collide(board, Piece("I", rotate(p.shape, 1), 2, 3, 5))

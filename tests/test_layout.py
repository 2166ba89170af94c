from tetris_config import CONFIG
from tetris_layout import compute_dims


def test_default_dims_follow_config():
    d = compute_dims()
    assert d.board_w == CONFIG["BOARD_W"] * CONFIG["CELL_SIZE"]
    assert d.board_h == CONFIG["BOARD_H"] * CONFIG["CELL_SIZE"]


def test_custom_board_size_moves_panel():
    d = compute_dims(6, 12)
    assert d.board_w == 6 * d.cell
    assert d.board_h == 12 * d.cell
    assert d.panel_x == d.board_x + d.board_w + d.margin
    assert d.total_w == d.panel_x + d.panel_w + d.margin
    assert d.total_h == d.board_h + 2 * d.margin

import random

import pytest

from collapse.components.board import Board
from collapse.systems import board_ops


def make_board(rows, colors=None):
    """Board from rows listed bottom to top."""
    width = len(rows)
    cells = [v for row in rows for v in row]
    return Board(width=width, colors=colors or max(max(cells), 1), cells=cells)


def grid(board):
    w = board.width
    return [board.cells[r * w:(r + 1) * w] for r in range(w)]


def test_fill_board_leaves_no_empty_cells():
    board = Board(width=6, colors=3)
    board_ops.fill_board(board, random.Random(7))
    assert all(1 <= v <= 3 for v in board.cells)


def test_fill_column_returns_positions_bottom_up():
    board = Board(width=3, colors=2)
    spawned = board_ops.fill_column(board, 1, random.Random(1))
    assert spawned == [(0, 1), (1, 1), (2, 1)]
    assert all(board.get(r, 1) in (1, 2) for r in range(3))
    assert board.get(0, 0) == 0


def test_find_region_collects_connected_same_color_only():
    board = make_board([
        [1, 1, 2, 1],
        [2, 1, 2, 1],
        [1, 1, 3, 1],
        [3, 3, 3, 3],
    ])
    region = board_ops.find_region(board, 0, 0)
    assert sorted(region) == [(0, 0), (0, 1), (1, 1), (2, 0), (2, 1)]
    # right-hand column of 1s is not connected to the left group
    assert (0, 3) not in region


def test_find_region_visits_each_cell_once():
    board = make_board([[2] * 5 for _ in range(5)])
    region = board_ops.find_region(board, 2, 2)
    assert len(region) == 25
    assert len(set(region)) == 25


def test_find_region_on_empty_cell_is_empty():
    board = make_board([[1, 0], [0, 0]])
    assert board_ops.find_region(board, 1, 1) == []


def test_fall_down_settles_gaps_in_every_column():
    board = make_board([
        [0, 1, 0],
        [2, 0, 0],
        [0, 3, 0],
    ], colors=3)
    board_ops.fall_down(board)
    assert grid(board) == [
        [2, 1, 0],
        [0, 3, 0],
        [0, 0, 0],
    ]


def test_fall_down_preserves_column_order():
    board = make_board([
        [0, 0, 0, 0],
        [1, 0, 0, 0],
        [0, 0, 0, 0],
        [2, 0, 0, 0],
    ])
    board_ops.fall_down(board)
    assert [board.get(r, 0) for r in range(4)] == [1, 2, 0, 0]


def test_fall_left_moves_empty_columns_to_the_right():
    board = make_board([
        [0, 1, 0, 2],
        [0, 1, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ])
    board_ops.fall_left(board)
    assert grid(board) == [
        [1, 2, 0, 0],
        [1, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ]
    assert board_ops.empty_columns(board) == [2, 3]


def test_is_valid_move_needs_same_colored_neighbour():
    board = make_board([
        [1, 2],
        [1, 3],
    ])
    assert board_ops.is_valid_move(board, 0, 0)
    assert board_ops.is_valid_move(board, 1, 0)
    assert not board_ops.is_valid_move(board, 0, 1)
    assert not board_ops.is_valid_move(board, 1, 1)
    assert not board_ops.is_valid_move(board, 5, 5)


def test_has_valid_moves_checks_right_and_up_pairs():
    assert not board_ops.has_valid_moves(make_board([[1, 2], [2, 1]]))
    assert board_ops.has_valid_moves(make_board([[1, 1], [2, 3]]))
    assert board_ops.has_valid_moves(make_board([[1, 2], [3, 2]]))


def test_has_valid_moves_ignores_empty_pairs():
    assert not board_ops.has_valid_moves(make_board([[1, 0], [0, 0]]))


def test_refill_columns_only_touches_given_columns():
    board = make_board([[1, 0], [1, 0]], colors=3)
    spawned = board_ops.refill_columns(board, [1], random.Random(3))
    assert spawned == [(0, 1), (1, 1)]
    assert board.get(0, 0) == 1 and board.get(1, 0) == 1
    assert all(1 <= board.get(r, 1) <= 3 for r in range(2))


@pytest.mark.parametrize("rows", [
    [[0, 0], [1, 0]],          # floating tile
    [[0, 1], [0, 1]],          # empty column left of a filled one
    [[1, 4], [1, 1]],          # value outside the palette
])
def test_check_layout_rejects_unsettled_grids(rows):
    board = Board(width=2, colors=3, cells=[v for row in rows for v in row])
    with pytest.raises(ValueError):
        board_ops.check_layout(board)


def test_check_layout_accepts_settled_grid():
    board_ops.check_layout(make_board([[1, 2, 0], [3, 0, 0], [0, 0, 0]]))

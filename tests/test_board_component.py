import pytest

from fruitmatch.components.board import Board
from fruitmatch.errors import OutOfBounds


def test_board_starts_empty():
    board = Board(size=4)
    assert len(board.cells) == 4 and all(len(row) == 4 for row in board.cells)
    assert board.empty_positions() == [(r, c) for r in range(4) for c in range(4)]


def test_get_set_roundtrip_and_swap():
    board = Board(size=3)
    board.set(0, 0, 'A')
    board.set(0, 1, 'B')
    board.swap((0, 0), (0, 1))
    assert board.get(0, 0) == 'B'
    assert board.get(0, 1) == 'A'


def test_swap_is_unconditional_for_any_two_cells():
    board = Board(size=3)
    board.set(0, 0, 'A')
    board.set(2, 2, 'B')
    board.swap((0, 0), (2, 2))
    assert board.get(0, 0) == 'B' and board.get(2, 2) == 'A'


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_out_of_bounds_access_raises(row, col):
    board = Board(size=3)
    with pytest.raises(OutOfBounds):
        board.get(row, col)
    with pytest.raises(OutOfBounds):
        board.set(row, col, 'A')
    with pytest.raises(IndexError):
        board.swap((0, 0), (row, col))


def test_snapshot_is_a_copy():
    board = Board(size=3)
    board.set(1, 1, 'A')
    snap = board.snapshot()
    board.set(1, 1, 'B')
    assert snap[1][1] == 'A'

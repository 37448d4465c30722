import random

from fruitmatch.components.board import Board
from fruitmatch.systems.board_ops import apply_gravity, clear_positions, refill_empty
from fruitmatch.systems.token_source import TokenSource


def column(board, col):
    return [board.cells[r][col] for r in range(board.size)]


def test_gravity_compacts_column_preserving_order():
    board = Board(size=5)
    for row, token in ((0, 'A'), (2, 'B'), (3, None), (4, 'C')):
        board.set(row, 0, token)
    moves = apply_gravity(board)
    assert column(board, 0) == [None, None, 'A', 'B', 'C']
    assert moves == [((2, 0), (3, 0)), ((0, 0), (2, 0))]


def test_gravity_leaves_full_columns_alone():
    board = Board(size=3, cells=[['A', 'B', 'C'], ['B', 'C', 'A'], ['C', 'A', 'B']])
    assert apply_gravity(board) == []
    assert board.snapshot() == (('A', 'B', 'C'), ('B', 'C', 'A'), ('C', 'A', 'B'))


def test_gravity_after_random_clears_is_bottom_aligned():
    rng = random.Random(5)
    board = Board(size=8, cells=[[f"{r}{c}" for c in range(8)] for r in range(8)])
    before = [column(board, c) for c in range(8)]
    cleared = {(rng.randrange(8), rng.randrange(8)) for _ in range(20)}
    clear_positions(board, cleared)
    apply_gravity(board)
    for c in range(8):
        after = column(board, c)
        filled = [t for t in after if t is not None]
        # non-empty cells occupy a contiguous bottom suffix
        assert after == [None] * (8 - len(filled)) + filled
        # relative order preserved
        survivors = [t for r, t in enumerate(before[c]) if (r, c) not in cleared]
        assert filled == survivors


def test_refill_fills_exactly_the_empties_top_down_per_column():
    board = Board(size=3, cells=[[None, 'A', None], [None, 'B', 'C'], ['D', 'C', 'B']])
    coords, tokens = refill_empty(board, TokenSource("XYZ", random.Random(1)))
    assert coords == [(0, 0), (1, 0), (0, 2)]
    assert len(tokens) == 3
    assert not board.empty_positions()


def test_clear_positions_counts_only_filled_cells():
    board = Board(size=3, cells=[[None, 'A', 'B'], ['A', 'B', 'C'], ['B', 'C', 'A']])
    assert clear_positions(board, [(0, 0), (0, 1)]) == 1
    assert board.get(0, 1) is None

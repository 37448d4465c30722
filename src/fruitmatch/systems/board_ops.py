from __future__ import annotations

from typing import Hashable, List, Tuple

from fruitmatch.components.board import Board, Position
from fruitmatch.systems.token_source import TokenSource

Move = Tuple[Position, Position]


def completes_run(board: Board, row: int, col: int, token: Hashable) -> bool:
    """Return True if placing token at (row, col) finishes a run with its two left or two upper neighbours."""
    cells = board.cells
    if col >= 2 and cells[row][col - 1] == token and cells[row][col - 2] == token:
        return True
    if row >= 2 and cells[row - 1][col] == token and cells[row - 2][col] == token:
        return True
    return False


def generate_board(source: TokenSource, size: int) -> Board:
    """Fill a fresh board row by row, redrawing any token that would complete a run.

    Each cell forbids at most two tokens, so any alphabet of three or more
    distinct tokens terminates.
    """
    if len(set(source.alphabet)) < 3:
        raise ValueError("alphabet needs at least three distinct tokens")
    board = Board(size=size)
    for row in range(size):
        for col in range(size):
            token = source.draw()
            while completes_run(board, row, col, token):
                token = source.draw()
            board.cells[row][col] = token
    return board


def clear_positions(board: Board, positions) -> int:
    """Empty every listed cell; return how many were cleared."""
    cleared = 0
    for row, col in positions:
        if board.get(row, col) is not None:
            cleared += 1
        board.set(row, col, None)
    return cleared


def apply_gravity(board: Board) -> List[Move]:
    """Compact each column downward preserving order; return (source, destination) moves.

    A write cursor starts at the bottom row and climbs past every non-empty cell,
    so empties end up at the top of the column.
    """
    moves: List[Move] = []
    cells = board.cells
    for col in range(board.size):
        write_row = board.size - 1
        for row in range(board.size - 1, -1, -1):
            token = cells[row][col]
            if token is None:
                continue
            if write_row != row:
                cells[write_row][col] = token
                cells[row][col] = None
                moves.append(((row, col), (write_row, col)))
            write_row -= 1
    return moves


def refill_empty(board: Board, source: TokenSource) -> Tuple[List[Position], List[Hashable]]:
    """Draw a token for every empty cell, column by column from the top."""
    coords: List[Position] = []
    tokens: List[Hashable] = []
    for col in range(board.size):
        for row in range(board.size):
            if board.cells[row][col] is None:
                token = source.draw()
                board.cells[row][col] = token
                coords.append((row, col))
                tokens.append(token)
    return coords, tokens

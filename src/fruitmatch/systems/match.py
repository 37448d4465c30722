from typing import Set

from fruitmatch.components.board import Board, Position


def find_matches(board: Board) -> Set[Position]:
    """Return every cell that sits in a horizontal or vertical run of three or more.

    Each length-3 window of equal, non-empty tokens contributes its cells; longer
    runs and crossing runs fall out as the union of their windows.
    """
    cells = board.cells
    size = board.size
    matched: Set[Position] = set()
    # Horizontal
    for r in range(size):
        for c in range(size - 2):
            token = cells[r][c]
            if token is not None and token == cells[r][c + 1] and token == cells[r][c + 2]:
                matched.update(((r, c), (r, c + 1), (r, c + 2)))
    # Vertical
    for c in range(size):
        for r in range(size - 2):
            token = cells[r][c]
            if token is not None and token == cells[r + 1][c] and token == cells[r + 2][c]:
                matched.update(((r, c), (r + 1, c), (r + 2, c)))
    return matched


def has_match(board: Board) -> bool:
    return bool(find_matches(board))

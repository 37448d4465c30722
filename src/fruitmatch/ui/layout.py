from typing import Optional, Tuple

from fruitmatch.constants import (
    BOTTOM_MARGIN, HUD_HEIGHT, MIN_TILE_SIZE, BOARD_MAX_WIDTH_PCT, BOARD_MAX_HEIGHT_PCT,
    RESET_BUTTON_WIDTH, RESET_BUTTON_HEIGHT,
)


def compute_board_geometry(window_width: int, window_height: int, grid_size: int):
    """Return (tile_size, start_x, start_y) for a square board centred horizontally.

    start_y is the bottom edge of the board; the HUD strip sits above it.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - HUD_HEIGHT) * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_board_w, max_board_h) / grid_size)
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = grid_size * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def cell_center(row: int, col: int, window_width: int, window_height: int, grid_size: int) -> Tuple[float, float]:
    """Screen centre of a cell. Row 0 is drawn at the top of the board."""
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height, grid_size)
    x = start_x + col * tile_size + tile_size / 2
    y = start_y + (grid_size - 1 - row) * tile_size + tile_size / 2
    return x, y


def cell_at_point(x: float, y: float, window_width: int, window_height: int, grid_size: int) -> Optional[Tuple[int, int]]:
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height, grid_size)
    total = grid_size * tile_size
    if x < start_x or x >= start_x + total:
        return None
    if y < start_y or y >= start_y + total:
        return None
    col = int((x - start_x) // tile_size)
    row = grid_size - 1 - int((y - start_y) // tile_size)
    return row, col


def reset_button_rect(window_width: int, window_height: int) -> Tuple[float, float, float, float]:
    """(left, bottom, width, height) of the reset button in the HUD strip."""
    left = window_width - RESET_BUTTON_WIDTH - 20
    bottom = window_height - (HUD_HEIGHT + RESET_BUTTON_HEIGHT) / 2
    return left, bottom, RESET_BUTTON_WIDTH, RESET_BUTTON_HEIGHT


def point_in_rect(x: float, y: float, rect: Tuple[float, float, float, float]) -> bool:
    left, bottom, width, height = rect
    return left <= x <= left + width and bottom <= y <= bottom + height

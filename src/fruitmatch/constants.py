from dataclasses import dataclass
from typing import Hashable, Tuple

GRID_SIZE = 8

# Reference alphabet; any sequence of distinct hashable tokens works.
FRUITS = ('🍎', '🍌', '🍇', '🍓', '🍍', '🍒', '🍉', '🍊')

FRUIT_COLORS = {
    '🍎': (196, 52, 52),
    '🍌': (222, 200, 70),
    '🍇': (120, 64, 150),
    '🍓': (214, 70, 96),
    '🍍': (200, 150, 50),
    '🍒': (150, 30, 50),
    '🍉': (70, 160, 80),
    '🍊': (230, 130, 40),
}
FALLBACK_COLOR = (110, 110, 120)

POINTS_PER_CELL = 10

# Animation pacing in seconds. The engine never waits on these; only the
# presentation layer does.
SWAP_DURATION = 0.3
REVERT_PAUSE = 0.2
CLEAR_DURATION = 0.3
FALL_DURATION = 0.05
REFILL_DURATION = 0.4
CASCADE_PAUSE = 0.3

# Window
WINDOW_WIDTH = 720
WINDOW_HEIGHT = 800
WINDOW_TITLE = "Fruit Match"
TILE_SIZE = 72
MIN_TILE_SIZE = 20
BOTTOM_MARGIN = 20
HUD_HEIGHT = 110

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.90
BOARD_MAX_HEIGHT_PCT = 0.95

RESET_BUTTON_WIDTH = 140
RESET_BUTTON_HEIGHT = 40


@dataclass(frozen=True)
class GameConfig:
    """Board shape, token alphabet and scoring for one game.

    Construction validates, so a config that exists can always build a board.
    """
    alphabet: Tuple[Hashable, ...] = FRUITS
    grid_size: int = GRID_SIZE
    points_per_cell: int = POINTS_PER_CELL

    def __post_init__(self):
        object.__setattr__(self, 'alphabet', tuple(self.alphabet))
        if self.grid_size < 3:
            raise ValueError("grid_size must be at least 3")
        if len(set(self.alphabet)) < 3:
            raise ValueError("alphabet needs at least three distinct tokens")
        if self.points_per_cell < 0:
            raise ValueError("points_per_cell must not be negative")

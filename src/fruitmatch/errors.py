"""Exception and rejection types shared by the engine."""
from enum import Enum


class FruitMatchError(Exception):
    """Base class for engine errors."""


class OutOfBounds(FruitMatchError, IndexError):
    def __init__(self, row: int, col: int, size: int):
        super().__init__(f"cell ({row}, {col}) outside {size}x{size} board")
        self.row = row
        self.col = col
        self.size = size


class CascadeLimitExceeded(FruitMatchError, RuntimeError):
    """Raised when a settle cycle fails to stabilise within its round limit."""


class Rejection(Enum):
    """Why an input was refused. Returned as a value, never raised."""
    OUT_OF_BOUNDS = "out_of_bounds"
    INVALID_ADJACENCY = "invalid_adjacency"
    NOT_IDLE = "not_idle"

"""Fruit Match: a tile-matching board engine with an Arcade front end."""
from fruitmatch.errors import CascadeLimitExceeded, FruitMatchError, OutOfBounds, Rejection
from fruitmatch.events.types import (
    CascadeComplete,
    CellsCleared,
    CellsFell,
    CellsRefilled,
    SelectOutcome,
    SelectResult,
    SwapApplied,
    SwapReverted,
)
from fruitmatch.game import MatchGame

__all__ = [
    "MatchGame",
    "SelectOutcome",
    "SelectResult",
    "SwapApplied",
    "SwapReverted",
    "CellsCleared",
    "CellsFell",
    "CellsRefilled",
    "CascadeComplete",
    "Rejection",
    "FruitMatchError",
    "OutOfBounds",
    "CascadeLimitExceeded",
]

"""Score, move counter and input guard for one game instance."""
from dataclasses import dataclass


@dataclass
class GameState:
    """Singleton component reset together with the board.

    ``busy`` is held by the controller while a swap is evaluated and its cascade
    settles. ``animating`` counts presentation holds; input stays blocked until
    every hold is released.
    """
    score: int = 0
    moves: int = 0
    busy: bool = False
    animating: int = 0

    @property
    def is_busy(self) -> bool:
        return self.busy or self.animating > 0

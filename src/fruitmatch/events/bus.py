from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float
EVENT_GAME_RESET = "game_reset"                    # payload: board=snapshot, score=int, moves=int


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_TILE_CLICK = "tile_click"                    # payload: row, col
EVENT_TILE_SELECTED = "tile_selected"              # payload: row, col
EVENT_TILE_DESELECTED = "tile_deselected"          # payload: row, col, reason=str
EVENT_INPUT_REJECTED = "input_rejected"            # payload: row, col, reason=Rejection
EVENT_MOVE_ACCEPTED = "move_accepted"              # payload: moves=int, score=int, score_delta=int


# ============================================================================
# TILE & BOARD MECHANICS
# ============================================================================
EVENT_SWAP_APPLIED = "swap_applied"                # payload: event=SwapApplied
EVENT_SWAP_REVERTED = "swap_reverted"              # payload: event=SwapReverted
EVENT_CELLS_CLEARED = "cells_cleared"              # payload: event=CellsCleared
EVENT_CELLS_FELL = "cells_fell"                    # payload: event=CellsFell
EVENT_CELLS_REFILLED = "cells_refilled"            # payload: event=CellsRefilled
EVENT_CASCADE_COMPLETE = "cascade_complete"        # payload: event=CascadeComplete


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind=str, index=int
EVENT_ANIMATION_IDLE = "animation_idle"            # payload: none

import logging
from enum import Enum, auto
from typing import List

from fruitmatch.components.board import Board
from fruitmatch.components.game_state import GameState
from fruitmatch.constants import POINTS_PER_CELL
from fruitmatch.errors import CascadeLimitExceeded
from fruitmatch.events.bus import EventBus
from fruitmatch.events.types import CascadeComplete, CellsCleared, CellsFell, CellsRefilled
from fruitmatch.systems.board_ops import apply_gravity, clear_positions, refill_empty
from fruitmatch.systems.match import find_matches
from fruitmatch.systems.token_source import TokenSource

logger = logging.getLogger(__name__)


class ResolverPhase(Enum):
    SCANNING = auto()
    CLEARING = auto()
    FALLING = auto()
    REFILLING = auto()
    SETTLED = auto()


class MatchResolutionSystem:
    """Runs one settle cycle: scan, clear, fall, refill, until a scan comes back empty.

    Every step is appended to the returned list and published on the bus as it
    happens, so renderers can queue their own animations.
    """

    def __init__(self, event_bus: EventBus, *, points_per_cell: int = POINTS_PER_CELL, max_rounds: int | None = None):
        self.event_bus = event_bus
        self.points_per_cell = points_per_cell
        self.max_rounds = max_rounds
        self.phase = ResolverPhase.SETTLED

    def resolve(self, board: Board, state: GameState, source: TokenSource) -> List[object]:
        events: List[object] = []
        limit = self.max_rounds if self.max_rounds is not None else 10 * board.size * board.size
        depth = 0
        matches = set()
        self.phase = ResolverPhase.SCANNING
        while self.phase is not ResolverPhase.SETTLED:
            if self.phase is ResolverPhase.SCANNING:
                matches = find_matches(board)
                if not matches:
                    self.phase = ResolverPhase.SETTLED
                    continue
                depth += 1
                if depth > limit:
                    raise CascadeLimitExceeded(f"board still matching after {limit} rounds")
                logger.debug("cascade round %d: %d matched cells", depth, len(matches))
                self.phase = ResolverPhase.CLEARING
            elif self.phase is ResolverPhase.CLEARING:
                cleared = clear_positions(board, sorted(matches))
                delta = cleared * self.points_per_cell
                state.score += delta
                self._publish(events, CellsCleared(coords=frozenset(matches), score_delta=delta, depth=depth))
                self.phase = ResolverPhase.FALLING
            elif self.phase is ResolverPhase.FALLING:
                moves = apply_gravity(board)
                self._publish(events, CellsFell(moves=tuple(moves)))
                self.phase = ResolverPhase.REFILLING
            elif self.phase is ResolverPhase.REFILLING:
                coords, tokens = refill_empty(board, source)
                self._publish(events, CellsRefilled(coords=tuple(coords), tokens=tuple(tokens)))
                self.phase = ResolverPhase.SCANNING
        if depth:
            self._publish(events, CascadeComplete(depth=depth))
        return events

    def _publish(self, events: List[object], event) -> None:
        events.append(event)
        self.event_bus.emit(event.name, event=event)

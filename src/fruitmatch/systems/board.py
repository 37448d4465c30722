import logging
from typing import Tuple

from esper import World

from fruitmatch.components.board import Board
from fruitmatch.components.game_state import GameState
from fruitmatch.components.selection import Selection
from fruitmatch.errors import Rejection
from fruitmatch.events.bus import (
    EventBus,
    EVENT_TILE_CLICK,
    EVENT_TILE_SELECTED,
    EVENT_TILE_DESELECTED,
    EVENT_INPUT_REJECTED,
    EVENT_MOVE_ACCEPTED,
)
from fruitmatch.events.types import SelectOutcome, SelectResult, SwapApplied, SwapReverted
from fruitmatch.systems.match import find_matches
from fruitmatch.systems.match_resolution import MatchResolutionSystem
from fruitmatch.systems.token_source import TokenSource
from fruitmatch.world import get_board, get_selection, get_state, get_token_source

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class BoardSystem:
    """Turns cell clicks into selections and swap attempts.

    Idle -> Selected on the first click. A second click on the same cell
    deselects, on a non-adjacent cell moves the selection, and on an adjacent
    cell attempts the swap. While the game is busy every click is dropped.
    """

    def __init__(self, world: World, event_bus: EventBus, resolver: MatchResolutionSystem):
        self.world = world
        self.event_bus = event_bus
        self.resolver = resolver
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)

    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        self.select(row, col)

    @staticmethod
    def is_adjacent(a: Position, b: Position) -> bool:
        ar, ac = a
        br, bc = b
        return abs(ar - br) + abs(ac - bc) == 1

    def select(self, row: int, col: int) -> SelectResult:
        board, state, selection, _ = self._components()
        pos = (row, col)
        if state.is_busy:
            return self._reject(pos, Rejection.NOT_IDLE, selection)
        if not board.in_bounds(row, col):
            return self._reject(pos, Rejection.OUT_OF_BOUNDS, selection)

        held = selection.pos
        if held is None:
            selection.pos = pos
            logger.debug("selected %s", pos)
            self.event_bus.emit(EVENT_TILE_SELECTED, row=row, col=col)
            return SelectResult(SelectOutcome.SELECTED, selection=pos)
        if held == pos:
            selection.pos = None
            self.event_bus.emit(EVENT_TILE_DESELECTED, row=row, col=col, reason='toggle')
            return SelectResult(SelectOutcome.DESELECTED)
        if not self.is_adjacent(held, pos):
            selection.pos = pos
            self.event_bus.emit(EVENT_TILE_DESELECTED, row=held[0], col=held[1], reason='replaced')
            self.event_bus.emit(EVENT_TILE_SELECTED, row=row, col=col)
            return SelectResult(SelectOutcome.SELECTED, selection=pos)

        selection.pos = None
        self.event_bus.emit(EVENT_TILE_DESELECTED, row=held[0], col=held[1], reason='swap')
        return self._evaluate_swap(held, pos)

    def attempt_swap(self, a: Position, b: Position) -> SelectResult:
        """Swap two cells directly, bypassing the two-click selection."""
        board, state, selection, _ = self._components()
        if state.is_busy:
            return self._reject(b, Rejection.NOT_IDLE, selection)
        if not (board.in_bounds(*a) and board.in_bounds(*b)):
            bad = a if not board.in_bounds(*a) else b
            return self._reject(bad, Rejection.OUT_OF_BOUNDS, selection)
        if not self.is_adjacent(a, b):
            return self._reject(b, Rejection.INVALID_ADJACENCY, selection)
        selection.pos = None
        return self._evaluate_swap(a, b)

    def _evaluate_swap(self, a: Position, b: Position) -> SelectResult:
        board, state, _, source = self._components()
        state.busy = True
        try:
            applied = SwapApplied(a=a, b=b)
            board.swap(a, b)
            self.event_bus.emit(applied.name, event=applied)
            if not find_matches(board):
                board.swap(a, b)
                reverted = SwapReverted(a=a, b=b)
                self.event_bus.emit(reverted.name, event=reverted)
                logger.debug("swap %s<->%s made no match, reverted", a, b)
                return SelectResult(SelectOutcome.REVERTED_NO_MATCH, events=(applied, reverted))
            state.moves += 1
            score_before = state.score
            cascade = self.resolver.resolve(board, state, source)
        finally:
            state.busy = False
        delta = state.score - score_before
        logger.info("move %d accepted: +%d (score %d)", state.moves, delta, state.score)
        self.event_bus.emit(EVENT_MOVE_ACCEPTED, moves=state.moves, score=state.score, score_delta=delta)
        return SelectResult(SelectOutcome.ACCEPTED, events=(applied, *cascade))

    def _reject(self, pos: Position, reason: Rejection, selection: Selection) -> SelectResult:
        logger.debug("input %s rejected: %s", pos, reason.value)
        self.event_bus.emit(EVENT_INPUT_REJECTED, row=pos[0], col=pos[1], reason=reason)
        return SelectResult(SelectOutcome.REJECTED, rejection=reason, selection=selection.pos)

    def _components(self) -> Tuple[Board, GameState, Selection, TokenSource]:
        return get_board(self.world), get_state(self.world), get_selection(self.world), get_token_source(self.world)

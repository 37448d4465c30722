import logging
from typing import List, Tuple

from fruitmatch.components.animation_fade import FadeAnimation
from fruitmatch.components.animation_fall import FallAnimation
from fruitmatch.components.animation_refill import RefillAnimation
from fruitmatch.components.animation_step import AnimationStep
from fruitmatch.components.animation_swap import SwapAnimation
from fruitmatch.components.display_board import DisplayBoard
from fruitmatch.components.duration import Duration
from fruitmatch.constants import (
    SWAP_DURATION, REVERT_PAUSE, CLEAR_DURATION, FALL_DURATION, REFILL_DURATION, CASCADE_PAUSE,
)
from fruitmatch.events.bus import (
    EVENT_TICK, EVENT_GAME_RESET, EVENT_SWAP_APPLIED, EVENT_SWAP_REVERTED, EVENT_CELLS_CLEARED,
    EVENT_CELLS_FELL, EVENT_CELLS_REFILLED, EVENT_ANIMATION_COMPLETE, EVENT_ANIMATION_IDLE,
)
from fruitmatch.factories.animation_factory import AnimationFactory

logger = logging.getLogger(__name__)


class AnimationSystem:
    """Plays engine events back one timed step at a time.

    The engine settles synchronously; this system replays the events it emitted
    against a DisplayBoard so the window can show each intermediate state. While
    any step is queued the game's input stays held.
    """

    def __init__(self, game, *, speed: float = 1.0):
        self.game = game
        self.world = game.world
        self.event_bus = game.event_bus
        self.speed = speed
        self.factory = AnimationFactory(self.world)
        self._next_index = 0
        self._holding = False
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_GAME_RESET, self.on_game_reset)
        self.event_bus.subscribe(EVENT_SWAP_APPLIED, self.on_swap_applied)
        self.event_bus.subscribe(EVENT_SWAP_REVERTED, self.on_swap_reverted)
        self.event_bus.subscribe(EVENT_CELLS_CLEARED, self.on_cells_cleared)
        self.event_bus.subscribe(EVENT_CELLS_FELL, self.on_cells_fell)
        self.event_bus.subscribe(EVENT_CELLS_REFILLED, self.on_cells_refilled)
        self._install_display(game.board, game.score, game.moves)

    @property
    def pending(self) -> bool:
        return bool(self.world.get_component(AnimationStep))

    def display(self) -> DisplayBoard:
        for _, display in self.world.get_component(DisplayBoard):
            return display
        raise RuntimeError("DisplayBoard not found")

    # Event handlers -----------------------------------------------------
    def on_game_reset(self, sender, **kwargs):
        # The world was rebuilt; previous steps and holds went with it.
        self._holding = False
        self._next_index = 0
        self._install_display(kwargs.get('board'), kwargs.get('score', 0), kwargs.get('moves', 0))

    def on_swap_applied(self, sender, **kwargs):
        event = kwargs['event']
        index = self._begin_step()
        self.factory.create_swap(index, event.a, event.b, SWAP_DURATION * self.speed)

    def on_swap_reverted(self, sender, **kwargs):
        event = kwargs['event']
        self.factory.create_pause(self._begin_step(), REVERT_PAUSE * self.speed)
        self.factory.create_swap(self._begin_step(), event.b, event.a, SWAP_DURATION * self.speed, reverse=True)

    def on_cells_cleared(self, sender, **kwargs):
        event = kwargs['event']
        index = self._begin_step()
        self.factory.create_fade_group(
            index, event.coords, CLEAR_DURATION * self.speed,
            score_delta=event.score_delta, depth=event.depth,
        )

    def on_cells_fell(self, sender, **kwargs):
        event = kwargs['event']
        if not event.moves:
            return
        self.factory.create_fall_group(self._begin_step(), event.moves, FALL_DURATION * self.speed)

    def on_cells_refilled(self, sender, **kwargs):
        event = kwargs['event']
        if event.coords:
            self.factory.create_refill_group(self._begin_step(), event.coords, event.tokens, REFILL_DURATION * self.speed)
        self.factory.create_pause(self._begin_step(), CASCADE_PAUSE * self.speed)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        steps = self.world.get_component(AnimationStep)
        if not steps:
            return
        head = min(step.index for _, step in steps)
        current = [(ent, step) for ent, step in steps if step.index == head]
        finished = True
        for ent, step in current:
            step.elapsed += dt
            duration = self.world.component_for_entity(ent, Duration).value
            p = 1.0 if duration <= 0.0 else min(1.0, step.elapsed / duration)
            self._set_progress(ent, p)
            if p < 1.0:
                finished = False
        if finished:
            self._complete(head, current)

    def flush(self) -> None:
        """Finish every queued step immediately."""
        while self.pending:
            self.on_tick(self, dt=float('inf'))

    # Internals ----------------------------------------------------------
    def _begin_step(self) -> int:
        if not self._holding:
            self.game.hold_input()
            self._holding = True
        index = self._next_index
        self._next_index += 1
        return index

    def _set_progress(self, ent: int, p: float) -> None:
        swap = self.world.try_component(ent, SwapAnimation)
        if swap is not None:
            swap.progress = p
        fade = self.world.try_component(ent, FadeAnimation)
        if fade is not None:
            fade.alpha = 1.0 - p
        fall = self.world.try_component(ent, FallAnimation)
        if fall is not None:
            fall.linear = p
        refill = self.world.try_component(ent, RefillAnimation)
        if refill is not None:
            refill.linear = p

    def _complete(self, index: int, current: List[Tuple[int, AnimationStep]]) -> None:
        display = self.display()
        kind = current[0][1].kind
        if kind in ('swap', 'revert'):
            swap = self.world.component_for_entity(current[0][0], SwapAnimation)
            (ar, ac), (br, bc) = swap.src, swap.dst
            display.cells[ar][ac], display.cells[br][bc] = display.cells[br][bc], display.cells[ar][ac]
        elif kind == 'fade':
            for ent, _ in current:
                r, c = self.world.component_for_entity(ent, FadeAnimation).pos
                display.cells[r][c] = None
            meta = current[0][1].meta
            display.score += meta.get('score_delta', 0)
            if meta.get('depth') == 1:
                display.moves += 1
        elif kind == 'fall':
            # Moves must be replayed in emission order so a vacated cell is never overwritten early.
            for ent, _ in sorted(current, key=lambda item: item[1].meta['order']):
                fall = self.world.component_for_entity(ent, FallAnimation)
                (sr, sc), (dr, dc) = fall.src, fall.dst
                display.cells[dr][dc] = display.cells[sr][sc]
                display.cells[sr][sc] = None
        elif kind == 'refill':
            for ent, _ in current:
                refill = self.world.component_for_entity(ent, RefillAnimation)
                r, c = refill.pos
                display.cells[r][c] = refill.token
        for ent, _ in current:
            self.world.delete_entity(ent, immediate=True)
        self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind=kind, index=index)
        if not self.world.get_component(AnimationStep):
            self._finish()

    def _finish(self) -> None:
        # Queue drained: the display must now agree with the engine.
        self._install_display(self.game.board, self.game.score, self.game.moves)
        if self._holding:
            self._holding = False
            self.game.release_input()
        logger.debug("animations idle")
        self.event_bus.emit(EVENT_ANIMATION_IDLE)

    def _install_display(self, board, score: int, moves: int) -> None:
        cells = [list(row) for row in board] if board is not None else []
        for _, display in self.world.get_component(DisplayBoard):
            display.cells = cells
            display.score = score
            display.moves = moves
            return
        self.world.create_entity(DisplayBoard(cells=cells, score=score, moves=moves))

"""Game aggregate: one board, one state, one event bus per instance."""
from __future__ import annotations

import dataclasses
import logging
import random
from typing import Hashable, Optional, Sequence, Tuple

from esper import World

from fruitmatch.constants import GameConfig
from fruitmatch.events.bus import EventBus, EVENT_GAME_RESET
from fruitmatch.events.types import SelectResult
from fruitmatch.systems.board import BoardSystem
from fruitmatch.systems.match_resolution import MatchResolutionSystem
from fruitmatch.world import create_world, get_board, get_selection, get_state, get_tile_types

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


def _apply_overrides(config: GameConfig, **overrides) -> GameConfig:
    changes = {key: value for key, value in overrides.items() if value is not None}
    return dataclasses.replace(config, **changes) if changes else config


class MatchGame:
    """Entry point a presentation layer drives: ``reset`` then repeated ``select``.

    All mutable game data lives in an esper World owned by this instance, so
    several games can coexist in one process.
    """

    def __init__(
        self,
        alphabet: Sequence[Hashable] | None = None,
        grid_size: int | None = None,
        rng: random.Random | None = None,
        *,
        config: GameConfig | None = None,
        event_bus: EventBus | None = None,
        points_per_cell: int | None = None,
        max_rounds: int | None = None,
    ):
        self.config = _apply_overrides(
            config or GameConfig(), alphabet=alphabet, grid_size=grid_size, points_per_cell=points_per_cell,
        )
        self.world = World()
        self.event_bus = event_bus or EventBus()
        self.resolver = MatchResolutionSystem(
            self.event_bus, points_per_cell=self.config.points_per_cell, max_rounds=max_rounds,
        )
        self.board_system = BoardSystem(self.world, self.event_bus, self.resolver)
        self.reset(rng=rng)

    def reset(
        self,
        alphabet: Sequence[Hashable] | None = None,
        grid_size: int | None = None,
        rng: random.Random | None = None,
        *,
        config: GameConfig | None = None,
        points_per_cell: int | None = None,
    ) -> None:
        """Rebuild board and state together; omitted arguments keep the previous configuration.

        An invalid configuration raises ValueError and leaves the running game as it was.
        """
        new_config = _apply_overrides(
            config or self.config, alphabet=alphabet, grid_size=grid_size, points_per_cell=points_per_cell,
        )
        create_world(new_config, rng, world=self.world)
        self.config = new_config
        self.resolver.points_per_cell = new_config.points_per_cell
        logger.info("new %dx%d game with %d tokens", new_config.grid_size, new_config.grid_size, len(new_config.alphabet))
        self.event_bus.emit(EVENT_GAME_RESET, board=self.board, score=0, moves=0)

    def select(self, row: int, col: int) -> SelectResult:
        return self.board_system.select(row, col)

    def attempt_swap(self, a: Position, b: Position) -> SelectResult:
        return self.board_system.attempt_swap(a, b)

    # Presentation holds input while it animates.
    def hold_input(self) -> None:
        get_state(self.world).animating += 1

    def release_input(self) -> None:
        state = get_state(self.world)
        if state.animating > 0:
            state.animating -= 1

    @property
    def board(self):
        return get_board(self.world).snapshot()

    def token_at(self, row: int, col: int) -> Optional[Hashable]:
        return get_board(self.world).get(row, col)

    @property
    def grid_size(self) -> int:
        return self.config.grid_size

    @property
    def alphabet(self) -> Tuple[Hashable, ...]:
        return self.config.alphabet

    @property
    def tile_types(self):
        return get_tile_types(self.world)

    @property
    def score(self) -> int:
        return get_state(self.world).score

    @property
    def moves(self) -> int:
        return get_state(self.world).moves

    @property
    def busy(self) -> bool:
        return get_state(self.world).is_busy

    @property
    def selection(self) -> Optional[Position]:
        return get_selection(self.world).pos

    def close(self) -> None:
        self.world.clear_database()

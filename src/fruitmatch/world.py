import random

from esper import World

from fruitmatch.components.board import Board
from fruitmatch.components.game_state import GameState
from fruitmatch.components.selection import Selection
from fruitmatch.components.tile_types import TileTypes
from fruitmatch.constants import FRUIT_COLORS, GameConfig
from fruitmatch.systems.board_ops import generate_board
from fruitmatch.systems.token_source import TokenSource


def create_world(
    config: GameConfig,
    rng: random.Random | None = None,
    *,
    world: World | None = None,
) -> World:
    """Build a world holding board, token source, game state and selection.

    When ``world`` is given it is rebuilt in place. The new board is generated
    before anything is cleared, so a failure leaves the old contents untouched
    and board and state always reset together.
    """
    tile_types = TileTypes(alphabet=list(config.alphabet), colors=dict(FRUIT_COLORS))
    source = TokenSource(tile_types.alphabet, rng)
    board = generate_board(source, config.grid_size)

    if world is None:
        world = World()
    world.clear_database()
    world.create_entity(board, source, tile_types)
    world.create_entity(GameState(), Selection())
    return world


def _singleton(world: World, component_type):
    for _, comp in world.get_component(component_type):
        return comp
    raise RuntimeError(f"{component_type.__name__} not found")


def get_board(world: World) -> Board:
    return _singleton(world, Board)


def get_state(world: World) -> GameState:
    return _singleton(world, GameState)


def get_selection(world: World) -> Selection:
    return _singleton(world, Selection)


def get_token_source(world: World) -> TokenSource:
    return _singleton(world, TokenSource)


def get_tile_types(world: World) -> TileTypes:
    return _singleton(world, TileTypes)

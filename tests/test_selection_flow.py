from fruitmatch.errors import Rejection
from fruitmatch.events.bus import (
    EVENT_TILE_SELECTED, EVENT_TILE_DESELECTED, EVENT_SWAP_APPLIED, EVENT_TILE_CLICK, EVENT_INPUT_REJECTED,
)
from fruitmatch.events.types import SelectOutcome

from helpers import EventCapture


def test_first_click_selects(game):
    result = game.select(2, 5)
    assert result.outcome is SelectOutcome.SELECTED
    assert result.selection == (2, 5)
    assert game.selection == (2, 5)


def test_second_click_on_same_cell_deselects(game):
    game.select(2, 5)
    result = game.select(2, 5)
    assert result.outcome is SelectOutcome.DESELECTED
    assert game.selection is None


def test_non_adjacent_click_replaces_selection(lettered_game):
    game = lettered_game
    before = game.board
    cap = EventCapture(game.event_bus, EVENT_TILE_SELECTED, EVENT_TILE_DESELECTED, EVENT_SWAP_APPLIED)
    game.select(0, 0)
    result = game.select(5, 5)
    assert result.outcome is SelectOutcome.SELECTED
    assert game.selection == (5, 5)
    assert game.board == before
    assert result.events == ()
    assert cap.names() == [EVENT_TILE_SELECTED, EVENT_TILE_DESELECTED, EVENT_TILE_SELECTED]


def test_diagonal_is_not_adjacent(lettered_game):
    game = lettered_game
    before = game.board
    game.select(3, 3)
    result = game.select(4, 4)
    assert result.outcome is SelectOutcome.SELECTED
    assert game.board == before
    assert game.moves == 0


def test_out_of_range_click_is_rejected(game):
    game.select(1, 1)
    cap = EventCapture(game.event_bus, EVENT_INPUT_REJECTED)
    result = game.select(8, 0)
    assert result.outcome is SelectOutcome.REJECTED
    assert result.rejection is Rejection.OUT_OF_BOUNDS
    assert game.selection == (1, 1)
    assert cap.received[0][1]['reason'] is Rejection.OUT_OF_BOUNDS


def test_tile_click_event_drives_selection(game):
    game.event_bus.emit(EVENT_TILE_CLICK, row=4, col=4)
    assert game.selection == (4, 4)
    game.event_bus.emit(EVENT_TILE_CLICK, row=4, col=4)
    assert game.selection is None


def test_adjacent_click_clears_selection_even_when_reverted(lettered_game):
    game = lettered_game
    game.select(0, 0)
    game.select(1, 0)
    assert game.selection is None

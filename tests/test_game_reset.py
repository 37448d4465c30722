import random

import pytest

from fruitmatch.events.bus import EVENT_GAME_RESET
from fruitmatch.game import MatchGame
from fruitmatch.systems.match import find_matches
from fruitmatch.components.board import Board
from fruitmatch.constants import GameConfig

from helpers import EventCapture, install_board, scenario_rows


def test_reset_clears_score_moves_and_selection(lettered_game):
    game = lettered_game
    install_board(game, scenario_rows())
    game.select(3, 3)
    game.select(4, 3)
    game.select(0, 0)
    assert game.score > 0 and game.moves == 1
    game.reset()
    assert game.score == 0
    assert game.moves == 0
    assert game.selection is None
    assert not game.busy


def test_reset_can_change_configuration(game):
    cap = EventCapture(game.event_bus, EVENT_GAME_RESET)
    game.reset(alphabet="XYZW", grid_size=5, rng=random.Random(3))
    board = game.board
    assert len(board) == 5 and all(len(row) == 5 for row in board)
    assert {t for row in board for t in row} <= set("XYZW")
    assert not find_matches(Board(size=5, cells=[list(r) for r in board]))
    assert cap.received[0][1]['board'] == board
    assert game.alphabet == tuple("XYZW")


def test_reset_keeps_previous_configuration_when_omitted(game):
    game.reset(grid_size=6)
    game.reset()
    assert game.grid_size == 6


def test_reset_releases_presentation_holds(game):
    game.hold_input()
    game.reset()
    assert not game.busy


def test_invalid_configuration_rejected():
    with pytest.raises(ValueError):
        MatchGame(grid_size=2)
    with pytest.raises(ValueError):
        MatchGame(alphabet="AB")


def test_games_do_not_share_state():
    one = MatchGame(rng=random.Random(1))
    two = MatchGame(rng=random.Random(2))
    try:
        one.select(0, 0)
        one.hold_input()
        assert two.selection is None
        assert not two.busy
        assert one.board != two.board
    finally:
        one.close()
        two.close()


def test_token_at_bounds_checked(game):
    assert game.token_at(0, 0) == game.board[0][0]
    with pytest.raises(IndexError):
        game.token_at(0, 8)


@pytest.mark.parametrize("kwargs", [
    {"alphabet": "AB"},
    {"grid_size": 2},
    {"points_per_cell": -1},
])
def test_failed_reset_leaves_running_game_untouched(lettered_game, kwargs):
    game = lettered_game
    install_board(game, scenario_rows())
    game.select(3, 3)
    game.select(4, 3)
    board, score = game.board, game.score
    config = game.config
    with pytest.raises(ValueError):
        game.reset(**kwargs)
    assert game.config == config
    assert game.grid_size == 8
    assert game.alphabet == tuple("ABCDEFGH")
    assert game.board == board
    assert game.score == score and game.moves == 1
    assert not game.busy


def test_failed_reset_emits_nothing(game):
    cap = EventCapture(game.event_bus, EVENT_GAME_RESET)
    with pytest.raises(ValueError):
        game.reset(alphabet="AAAB")
    assert cap.received == []


def test_game_config_validates_on_construction():
    with pytest.raises(ValueError):
        GameConfig(grid_size=2)
    with pytest.raises(ValueError):
        GameConfig(alphabet="AABB")
    assert GameConfig(alphabet="XYZ").alphabet == ('X', 'Y', 'Z')


def test_reset_accepts_a_config(game):
    game.reset(config=GameConfig(alphabet="XYZW", grid_size=5, points_per_cell=5), rng=random.Random(3))
    assert game.grid_size == 5
    assert game.alphabet == tuple("XYZW")
    assert game.config.points_per_cell == 5


def test_points_per_cell_follows_reset(lettered_game):
    game = lettered_game
    game.reset(points_per_cell=5)
    install_board(game, scenario_rows())
    game.select(3, 3)
    result = game.select(4, 3)
    assert result.accepted
    assert game.score == 15


def test_constructor_takes_a_config():
    game = MatchGame(config=GameConfig(alphabet="ABCD", grid_size=4), rng=random.Random(9))
    try:
        assert game.grid_size == 4
        assert {t for row in game.board for t in row} <= set("ABCD")
    finally:
        game.close()

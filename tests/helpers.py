from __future__ import annotations

import itertools
import string
from typing import Iterable, List, Sequence

from fruitmatch.world import get_board, get_token_source

LETTERS = "ABCDEFGH"


def base_rows(size: int = 8) -> List[List[str]]:
    """Match-free layout: neighbours differ by 1 across a row and by 3 down a column."""
    return [[LETTERS[(3 * r + c) % len(LETTERS)] for c in range(size)] for r in range(size)]


def scenario_rows() -> List[List[str]]:
    """Swapping (3,3) with (4,3) lines up X at (3,2), (3,3), (3,4)."""
    rows = base_rows()
    rows[3][2] = 'X'
    rows[3][4] = 'X'
    rows[4][3] = 'X'
    return rows


def cascade_rows() -> List[List[str]]:
    """Like scenario_rows, but the first clear drops Y into (3,2) next to Y Y at (3,0), (3,1)."""
    rows = scenario_rows()
    rows[2][2] = 'Y'
    rows[3][0] = 'Y'
    rows[3][1] = 'Y'
    return rows


class SequenceRandom:
    """Stands in for random.Random where only choice() is used; replays tokens in order."""
    def __init__(self, tokens: Iterable):
        self._tokens = itertools.cycle(list(tokens))

    def choice(self, seq: Sequence):
        return next(self._tokens)


def install_board(game, rows, draws: Iterable | None = string.ascii_lowercase) -> None:
    """Overwrite the game's board cells and make refills replay draws.

    Lowercase refills never equal the uppercase board tokens and any 26
    consecutive draws are distinct, so refills alone cannot form a run.
    """
    board = get_board(game.world)
    board.size = len(rows)
    board.cells = [list(row) for row in rows]
    if draws is not None:
        get_token_source(game.world).rng = SequenceRandom(draws)


class EventCapture:
    def __init__(self, bus, *names):
        self.received = []
        for name in names:
            bus.subscribe(name, self._make_handler(name))

    def _make_handler(self, name):
        def handler(sender, **payload):
            self.received.append((name, payload))
        return handler

    def names(self):
        return [name for name, _ in self.received]

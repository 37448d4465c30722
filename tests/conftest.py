import sys, os
import random

import pytest

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from fruitmatch.game import MatchGame


@pytest.fixture
def game():
    g = MatchGame(rng=random.Random(1234))
    yield g
    g.close()


@pytest.fixture
def lettered_game():
    """8x8 game over letters A-H with a known, match-free layout installed."""
    from helpers import base_rows, install_board
    g = MatchGame(alphabet="ABCDEFGH", rng=random.Random(7))
    install_board(g, base_rows())
    yield g
    g.close()

import random
from typing import Hashable, Sequence


class TokenSource:
    """Draws tokens uniformly from a fixed alphabet using the given generator."""

    def __init__(self, alphabet: Sequence[Hashable], rng: random.Random | None = None):
        if not alphabet:
            raise ValueError("alphabet must not be empty")
        self.alphabet = tuple(alphabet)
        self.rng = rng or random.Random()

    def draw(self) -> Hashable:
        return self.rng.choice(self.alphabet)

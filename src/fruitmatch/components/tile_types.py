from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Tuple

from fruitmatch.constants import FALLBACK_COLOR

@dataclass(slots=True)
class TileTypes:
    """Token alphabet for a game plus the background color each token is drawn on.

    Lives on the same entity as the TokenSource; the renderer reads colors from here.
    """
    alphabet: List[Hashable]
    colors: Dict[Hashable, Tuple[int, int, int]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Preserve order while dropping duplicates.
        seen: set = set()
        filtered: List[Hashable] = []
        for token in self.alphabet:
            if token not in seen:
                filtered.append(token)
                seen.add(token)
        self.alphabet = filtered

    def background_for(self, token: Hashable) -> Tuple[int, int, int]:
        return self.colors.get(token, FALLBACK_COLOR)

from dataclasses import dataclass, field
from typing import Hashable, List, Optional

@dataclass(slots=True)
class DisplayBoard:
    """What the window currently shows.

    Trails the engine board while animations play and is advanced one step at a
    time as each animation completes.
    """
    cells: List[List[Optional[Hashable]]] = field(default_factory=list)
    score: int = 0
    moves: int = 0

from dataclasses import dataclass
from typing import Hashable, Tuple

@dataclass(slots=True)
class RefillAnimation:
    pos: Tuple[int,int]
    token: Hashable
    linear: float = 0.0

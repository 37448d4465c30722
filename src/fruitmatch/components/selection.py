from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass(slots=True)
class Selection:
    pos: Optional[Tuple[int, int]] = None

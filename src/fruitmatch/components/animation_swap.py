from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class SwapAnimation:
    src: Tuple[int,int]
    dst: Tuple[int,int]
    progress: float = 0.0  # 0..1
    reverse: bool = False

from dataclasses import dataclass, field
from typing import Any, Dict

@dataclass(slots=True)
class AnimationStep:
    """Orders animation entities; only the lowest pending index plays."""
    index: int
    kind: str
    elapsed: float = 0.0
    meta: Dict[str, Any] = field(default_factory=dict)

"""Structured results the engine hands to the presentation layer."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Hashable, Optional, Tuple

from fruitmatch.errors import Rejection
from fruitmatch.events.bus import (
    EVENT_SWAP_APPLIED,
    EVENT_SWAP_REVERTED,
    EVENT_CELLS_CLEARED,
    EVENT_CELLS_FELL,
    EVENT_CELLS_REFILLED,
    EVENT_CASCADE_COMPLETE,
)

Position = Tuple[int, int]
Move = Tuple[Position, Position]


@dataclass(frozen=True, slots=True)
class SwapApplied:
    name: ClassVar[str] = EVENT_SWAP_APPLIED
    a: Position
    b: Position


@dataclass(frozen=True, slots=True)
class SwapReverted:
    name: ClassVar[str] = EVENT_SWAP_REVERTED
    a: Position
    b: Position


@dataclass(frozen=True, slots=True)
class CellsCleared:
    name: ClassVar[str] = EVENT_CELLS_CLEARED
    coords: frozenset[Position]
    score_delta: int
    depth: int = 1


@dataclass(frozen=True, slots=True)
class CellsFell:
    """Gravity moves as (source, destination) pairs, bottom-up within each column."""
    name: ClassVar[str] = EVENT_CELLS_FELL
    moves: Tuple[Move, ...]


@dataclass(frozen=True, slots=True)
class CellsRefilled:
    name: ClassVar[str] = EVENT_CELLS_REFILLED
    coords: Tuple[Position, ...]
    tokens: Tuple[Hashable, ...]


@dataclass(frozen=True, slots=True)
class CascadeComplete:
    name: ClassVar[str] = EVENT_CASCADE_COMPLETE
    depth: int


class SelectOutcome(Enum):
    SELECTED = auto()
    DESELECTED = auto()
    REVERTED_NO_MATCH = auto()
    ACCEPTED = auto()
    REJECTED = auto()


@dataclass(frozen=True, slots=True)
class SelectResult:
    outcome: SelectOutcome
    events: Tuple[object, ...] = field(default_factory=tuple)
    rejection: Optional[Rejection] = None
    selection: Optional[Position] = None

    @property
    def accepted(self) -> bool:
        return self.outcome is SelectOutcome.ACCEPTED

    def of_type(self, event_type: type) -> list:
        return [event for event in self.events if isinstance(event, event_type)]

from dataclasses import dataclass, field
from typing import Hashable, Iterator, List, Optional, Tuple

from fruitmatch.errors import OutOfBounds

Token = Hashable
Position = Tuple[int, int]


@dataclass(slots=True)
class Board:
    """Square grid of optional tokens addressed by (row, col); row 0 is the top row.

    ``None`` marks an empty cell. Primitives here are unconditional; legality of a
    swap is decided by the interaction controller.
    """
    size: int
    cells: List[List[Optional[Token]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [[None] * self.size for _ in range(self.size)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.size)

    def get(self, row: int, col: int) -> Optional[Token]:
        self._check(row, col)
        return self.cells[row][col]

    def set(self, row: int, col: int, value: Optional[Token]) -> None:
        self._check(row, col)
        self.cells[row][col] = value

    def swap(self, a: Position, b: Position) -> None:
        self._check(*a)
        self._check(*b)
        (ar, ac), (br, bc) = a, b
        self.cells[ar][ac], self.cells[br][bc] = self.cells[br][bc], self.cells[ar][ac]

    def positions(self) -> Iterator[Position]:
        for row in range(self.size):
            for col in range(self.size):
                yield row, col

    def empty_positions(self) -> List[Position]:
        return [(r, c) for r, c in self.positions() if self.cells[r][c] is None]

    def snapshot(self) -> Tuple[Tuple[Optional[Token], ...], ...]:
        return tuple(tuple(row) for row in self.cells)

from dataclasses import dataclass, field
from typing import List, Tuple

from collapse.constants import EMPTY

Position = Tuple[int, int]


@dataclass(slots=True)
class Board:
    """Square grid of tile values plus the running score.

    Cells are stored row-major in a flat list, row 0 at the bottom. Every read
    and write goes through the accessors below so out-of-range coordinates are
    handled in one place: reads return EMPTY, writes are dropped.
    """
    width: int
    colors: int
    cells: List[int] = field(default_factory=list)
    score: int = 0

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"Board width must be positive, got {self.width}")
        if self.colors < 1:
            raise ValueError(f"Board needs at least one color, got {self.colors}")
        size = self.width * self.width
        if not self.cells:
            self.cells = [EMPTY] * size
        elif len(self.cells) != size:
            raise ValueError(f"Expected {size} cells for width {self.width}, got {len(self.cells)}")

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.width and 0 <= col < self.width

    def index(self, row: int, col: int) -> int:
        return row * self.width + col

    def get(self, row: int, col: int) -> int:
        if not self.in_bounds(row, col):
            return EMPTY
        return self.cells[self.index(row, col)]

    def set(self, row: int, col: int, value: int) -> None:
        if self.in_bounds(row, col):
            self.cells[self.index(row, col)] = value

    def swap(self, a: Position, b: Position) -> None:
        ia = self.index(*a)
        ib = self.index(*b)
        self.cells[ia], self.cells[ib] = self.cells[ib], self.cells[ia]

    def positions(self):
        for row in range(self.width):
            for col in range(self.width):
                yield (row, col)

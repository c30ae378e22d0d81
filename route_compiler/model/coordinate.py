"""Coordinate and Direction - grid geometry atoms.

A Coordinate is a (col, row) tile position. It is a frozen value type so it
can live in sets and dict keys and never needs copying to avoid aliasing.
Rows grow downward, matching the layout text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Direction(Enum):
    """Orthogonal step directions as (dcol, drow).

    Member order is the scan order used by the route walk.
    """

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    UP = (0, -1)

    @property
    def dcol(self) -> int:
        return self.value[0]

    @property
    def drow(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class Coordinate:
    """A tile position on the grid.

    Attributes:
        col: Column index (x), 0 is the left edge
        row: Row index (y), 0 is the top edge

    Example:
        entry = Coordinate(col=0, row=3)
        entry.step(Direction.RIGHT)  # Coordinate(col=1, row=3)
    """

    col: int
    row: int

    def __lt__(self, other: "Coordinate") -> bool:
        """Row-major ordering, the order cells are scanned in."""
        return (self.row, self.col) < (other.row, other.col)

    def step(self, direction: Direction) -> "Coordinate":
        """Return the neighboring coordinate one tile in the given direction."""
        return Coordinate(col=self.col + direction.dcol, row=self.row + direction.drow)

    def in_bounds(self, size: int) -> bool:
        """True if the coordinate lies inside a size x size grid."""
        return 0 <= self.col < size and 0 <= self.row < size

    def on_boundary(self, size: int) -> bool:
        """True if the coordinate is an inside-grid cell on the outer ring."""
        return self.in_bounds(size=size) and (self.col in (0, size - 1) or self.row in (0, size - 1))

    def is_adjacent(self, other: "Coordinate") -> bool:
        """True if other is exactly one orthogonal step away."""
        return abs(self.col - other.col) + abs(self.row - other.row) == 1

    def to_list(self) -> list[int]:
        """Serialize as [col, row]."""
        return [self.col, self.row]

    @classmethod
    def from_list(cls, data: Any) -> "Coordinate":
        """Create Coordinate from a [col, row] pair."""
        col, row = data
        return cls(col=int(col), row=int(row))

    def __str__(self) -> str:
        return f"({self.col}, {self.row})"

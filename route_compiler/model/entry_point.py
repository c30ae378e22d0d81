"""EntryPoint - a boundary path tile where a route begins.

Each entry point carries its spawn coordinate: the off-grid cell one step
outward, where moving entities appear before walking onto the board.
"""

from dataclasses import dataclass
from typing import Any

from route_compiler.model.coordinate import Coordinate, Direction


@dataclass(frozen=True)
class EntryPoint:
    """A boundary path tile and its off-grid spawn coordinate.

    Attributes:
        coordinate: The boundary path tile
        spawn: One cell outward from coordinate, outside the grid

    Example:
        entry = EntryPoint.at(coordinate=Coordinate(col=0, row=5), size=20)
        entry.spawn  # Coordinate(col=-1, row=5)
    """

    coordinate: Coordinate
    spawn: Coordinate

    @staticmethod
    def outward_direction(coordinate: Coordinate, size: int) -> Direction:
        """Boundary-normal direction for a boundary cell.

        Columns win over rows, so corner cells spawn horizontally.

        Raises:
            ValueError: If the coordinate is not on the grid boundary.
        """
        if not coordinate.on_boundary(size=size):
            raise ValueError(f"{coordinate} is not on the boundary of a {size}x{size} grid")
        if coordinate.col == 0:
            return Direction.LEFT
        if coordinate.col == size - 1:
            return Direction.RIGHT
        if coordinate.row == 0:
            return Direction.UP
        return Direction.DOWN

    @classmethod
    def at(cls, coordinate: Coordinate, size: int) -> "EntryPoint":
        """Create the entry point for a boundary path tile."""
        direction = cls.outward_direction(coordinate=coordinate, size=size)
        return cls(coordinate=coordinate, spawn=coordinate.step(direction))

    def to_dict(self) -> dict[str, Any]:
        return {"coordinate": self.coordinate.to_list(), "spawn": self.spawn.to_list()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EntryPoint":
        """Create EntryPoint from dictionary."""
        return cls(
            coordinate=Coordinate.from_list(data["coordinate"]),
            spawn=Coordinate.from_list(data["spawn"]),
        )

"""Route, Waypoint and ProjectedRoute - the compiler's outputs.

A Route is the tile-space walk from an entry point to the goal.
A ProjectedRoute pairs it with the pixel-space waypoints handed to movement
logic, which begin at the off-grid spawn point.
"""

from dataclasses import dataclass
from typing import Any

from route_compiler.model.coordinate import Coordinate
from route_compiler.model.entry_point import EntryPoint


@dataclass(frozen=True)
class Route:
    """Ordered tile coordinates from an entry point to the goal.

    Attributes:
        coordinates: Entry tile first, goal tile last

    Construction validates that the route is non-empty, never revisits a
    tile, and only takes single orthogonal steps.
    """

    coordinates: tuple[Coordinate, ...]

    def __post_init__(self) -> None:
        """Validate route shape."""
        if not self.coordinates:
            raise ValueError("Route must have at least one coordinate")
        if len(set(self.coordinates)) != len(self.coordinates):
            raise ValueError(f"Route revisits a tile: {self}")
        for a, b in zip(self.coordinates, self.coordinates[1:]):
            if not a.is_adjacent(b):
                raise ValueError(f"Route step {a} -> {b} is not a single orthogonal step")

    @property
    def start(self) -> Coordinate:
        return self.coordinates[0]

    @property
    def end(self) -> Coordinate:
        return self.coordinates[-1]

    def __len__(self) -> int:
        return len(self.coordinates)

    def __iter__(self):
        return iter(self.coordinates)

    def to_list(self) -> list[list[int]]:
        return [c.to_list() for c in self.coordinates]

    @classmethod
    def from_list(cls, data: list[Any]) -> "Route":
        """Create Route from a list of [col, row] pairs."""
        return cls(coordinates=tuple(Coordinate.from_list(item) for item in data))

    def __str__(self) -> str:
        return " -> ".join(str(c) for c in self.coordinates)


@dataclass(frozen=True)
class Waypoint:
    """A pixel-space point on a projected route.

    Attributes:
        x: Horizontal pixel position
        y: Vertical pixel position (includes the header offset)
    """

    x: int
    y: int

    def to_list(self) -> list[int]:
        return [self.x, self.y]

    @classmethod
    def from_list(cls, data: Any) -> "Waypoint":
        x, y = data
        return cls(x=int(x), y=int(y))


@dataclass(frozen=True)
class ProjectedRoute:
    """An entry point's route in tile space and pixel space.

    Attributes:
        entry: The entry point the route starts from
        route: Tile coordinates, entry tile to goal
        waypoints: Pixel points, spawn point first, goal last
    """

    entry: EntryPoint
    route: Route
    waypoints: tuple[Waypoint, ...]

    def __post_init__(self) -> None:
        """Validate that waypoints cover the spawn point plus every route tile."""
        if len(self.waypoints) != len(self.route) + 1:
            raise ValueError(
                f"Projected route from {self.entry.coordinate} needs {len(self.route) + 1} waypoints, "
                f"got {len(self.waypoints)}"
            )

    @property
    def spawn_waypoint(self) -> Waypoint:
        return self.waypoints[0]

    def to_dict(self) -> dict[str, Any]:
        return {
            "entry": self.entry.to_dict(),
            "coordinates": self.route.to_list(),
            "waypoints": [w.to_list() for w in self.waypoints],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProjectedRoute":
        """Create ProjectedRoute from dictionary."""
        return cls(
            entry=EntryPoint.from_dict(data=data["entry"]),
            route=Route.from_list(data["coordinates"]),
            waypoints=tuple(Waypoint.from_list(item) for item in data["waypoints"]),
        )

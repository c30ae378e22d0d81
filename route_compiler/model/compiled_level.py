"""CompiledLevel - the immutable output of compiling one level layout.

Holds everything movement logic needs from a level: the goal, the path
network facts, and one projected route per entry point. Built once at
level load and rebuilt wholesale when the level changes.

Provides:
- Lookup of routes by entry coordinate
- Serialization to/from JSON-compatible dicts and files
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from route_compiler.constants import SerializationConfig
from route_compiler.model.coordinate import Coordinate
from route_compiler.model.entry_point import EntryPoint
from route_compiler.model.route import ProjectedRoute, Waypoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledLevel:
    """Compiled routes and path facts for one level.

    Attributes:
        grid_size: Grid edge length N
        goal: Goal tile
        path: Path tiles in row-major order
        forks: Fork tiles in row-major order
        routes: One projected route per entry point, in entry (row-major) order
        exclusions: Tiles excluded while enumerating routes, in exclusion order

    Example:
        level = RouteFactory().compile(symbols=rows)
        for projected in level.routes:
            spawn_entity(waypoints=projected.waypoints)
    """

    grid_size: int
    goal: Coordinate
    path: tuple[Coordinate, ...]
    forks: tuple[Coordinate, ...]
    routes: tuple[ProjectedRoute, ...]
    exclusions: tuple[Coordinate, ...] = ()

    @property
    def entry_count(self) -> int:
        """Number of entry points (one route each)."""
        return len(self.routes)

    @property
    def entry_points(self) -> tuple[EntryPoint, ...]:
        return tuple(projected.entry for projected in self.routes)

    @property
    def waypoint_lists(self) -> list[list[tuple[int, int]]]:
        """Plain (x, y) waypoint lists, one per entry point, spawn first."""
        return [[(w.x, w.y) for w in projected.waypoints] for projected in self.routes]

    def route_for(self, entry: Coordinate) -> Optional[ProjectedRoute]:
        """Projected route starting at the given entry tile, or None."""
        for projected in self.routes:
            if projected.entry.coordinate == entry:
                return projected
        return None

    def route_from_spawn(self, spawn_waypoint: Waypoint) -> Optional[ProjectedRoute]:
        """Projected route whose first waypoint is the given spawn point, or None."""
        for projected in self.routes:
            if projected.spawn_waypoint == spawn_waypoint:
                return projected
        return None

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> dict:
        """Serialize compiled level to JSON-compatible dict."""
        return {
            "version": SerializationConfig.VERSION,
            "grid_size": self.grid_size,
            "goal": self.goal.to_list(),
            "path": [c.to_list() for c in self.path],
            "forks": [c.to_list() for c in self.forks],
            "exclusions": [c.to_list() for c in self.exclusions],
            "routes": [projected.to_dict() for projected in self.routes],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CompiledLevel":
        """Deserialize compiled level from dict.

        Raises:
            ValueError: If the data was written by an unknown format version
                or a stored route is malformed.
        """
        version = data.get("version")
        if version != SerializationConfig.VERSION:
            raise ValueError(f"Unsupported compiled level version {version!r}")

        return cls(
            grid_size=int(data["grid_size"]),
            goal=Coordinate.from_list(data["goal"]),
            path=tuple(Coordinate.from_list(item) for item in data["path"]),
            forks=tuple(Coordinate.from_list(item) for item in data["forks"]),
            routes=tuple(ProjectedRoute.from_dict(data=item) for item in data["routes"]),
            exclusions=tuple(Coordinate.from_list(item) for item in data["exclusions"]),
        )

    def save_json(self, path: Union[str, Path]) -> Path:
        """Write the compiled level as JSON, creating parent directories.

        Returns:
            Path the file was written to.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=SerializationConfig.JSON_INDENT)
        logger.info(f"Saved compiled level with {self.entry_count} route(s) to {path.name}")
        return path

    @classmethod
    def load_json(cls, path: Union[str, Path]) -> "CompiledLevel":
        """Read a compiled level written by save_json()."""
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(data=json.load(f))

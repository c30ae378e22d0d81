"""Data model classes for compiled levels.

- Coordinate / Direction: Grid geometry atoms
- TileKind: Cell classification
- EntryPoint: Boundary path tile plus its off-grid spawn coordinate
- Route: Tile walk from an entry point to the goal
- Waypoint / ProjectedRoute: Pixel-space route handed to movement logic
- CompiledLevel: Immutable compilation result with JSON serialization
- Errors: LevelLoadError hierarchy
"""

from route_compiler.model.compiled_level import CompiledLevel
from route_compiler.model.coordinate import Coordinate, Direction
from route_compiler.model.entry_point import EntryPoint
from route_compiler.model.errors import (
    ForkExhaustionError,
    GoalCountError,
    GridSizeError,
    GridStructureError,
    InvalidSymbolError,
    LevelLoadError,
    RoutingError,
    UnreachablePathError,
)
from route_compiler.model.route import ProjectedRoute, Route, Waypoint
from route_compiler.model.tile import TileKind

__all__ = [
    "Coordinate",
    "Direction",
    "TileKind",
    "EntryPoint",
    "Route",
    "Waypoint",
    "ProjectedRoute",
    "CompiledLevel",
    "LevelLoadError",
    "GridStructureError",
    "GridSizeError",
    "GoalCountError",
    "InvalidSymbolError",
    "RoutingError",
    "UnreachablePathError",
    "ForkExhaustionError",
]

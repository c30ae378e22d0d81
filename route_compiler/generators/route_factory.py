"""RouteFactory - compiles level layouts into projected routes.

Runs the full pipeline once per level load:

    symbols -> TileClassifier -> AdjacencyResolver -> RouteEnumerator
            -> CoordinateProjector -> CompiledLevel

The factory keeps no per-level state, so one instance can compile any
number of levels. Any failure raises a LevelLoadError subclass and no
partial result is produced.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from route_compiler.constants import GridConfig, ProjectionConfig
from route_compiler.core.adjacency_resolver import AdjacencyResolver
from route_compiler.core.coordinate_projector import CoordinateProjector
from route_compiler.core.layout_reader import read_layout_file, read_layout_text
from route_compiler.core.route_enumerator import RouteEnumerator
from route_compiler.core.tile_classifier import SymbolGrid, TileClassifier
from route_compiler.model.compiled_level import CompiledLevel

logger = logging.getLogger(__name__)


class RouteFactory:
    """Factory compiling symbol grids into CompiledLevel objects.

    Example:
        factory = RouteFactory(grid_size=20)
        level = factory.compile_file(path="levels/level1.txt")
        print(level.entry_count)
        for waypoints in level.waypoint_lists:
            print(waypoints[0], "->", waypoints[-1])

    Configuration: See GridConfig and ProjectionConfig in constants.py.
    """

    def __init__(
        self,
        grid_size: int = GridConfig.SIZE,
        projector: Optional[CoordinateProjector] = None,
        max_walks: Optional[int] = None,
    ) -> None:
        """Initialize route factory.

        Args:
            grid_size: Grid edge length N
            projector: Tile-to-pixel projector; defaults to ProjectionConfig values
            max_walks: Optional hard cap on enumeration walks
        """
        self.grid_size = grid_size
        self.classifier = TileClassifier(size=grid_size)
        self.resolver = AdjacencyResolver()
        self.enumerator = RouteEnumerator(resolver=self.resolver, max_walks=max_walks)
        self.projector = projector or CoordinateProjector(
            tile_size=ProjectionConfig.TILE_SIZE,
            offset_x=ProjectionConfig.OFFSET_X,
            offset_y=ProjectionConfig.OFFSET_Y,
            header_height=ProjectionConfig.HEADER_HEIGHT,
        )

    def compile(self, symbols: SymbolGrid) -> CompiledLevel:
        """Compile a symbol grid into projected routes.

        Raises:
            GridSizeError, GoalCountError, InvalidSymbolError: Malformed grid.
            UnreachablePathError, ForkExhaustionError: Routes cannot be built.
        """
        classified = self.classifier.classify(symbols=symbols)
        adjacency = self.resolver.resolve(classified=classified)
        result = self.enumerator.enumerate(classified=classified, adjacency=adjacency)

        routes = tuple(
            self.projector.project_route(entry=entry, route=route) for entry, route in result.routes.items()
        )

        level = CompiledLevel(
            grid_size=classified.size,
            goal=classified.goal,
            path=classified.path,
            forks=adjacency.forks,
            routes=routes,
            exclusions=result.exclusions,
        )
        logger.info(
            f"Compiled level: goal={level.goal}, {len(level.path)} path tiles, "
            f"{len(level.forks)} forks, {level.entry_count} route(s)"
        )
        return level

    def compile_text(self, text: str) -> CompiledLevel:
        """Compile layout text (one row per line)."""
        return self.compile(symbols=read_layout_text(text=text, size=self.grid_size))

    def compile_file(self, path: Union[str, Path]) -> CompiledLevel:
        """Compile a layout text file."""
        return self.compile(symbols=read_layout_file(path=path, size=self.grid_size))

"""Route enumeration - one deterministic route per entry point.

Implements the backward walk with fork exclusion:
1. Walk outward from the goal, always taking the first free path neighbor
   in Direction order (LEFT, RIGHT, DOWN, UP), until the cursor stands on
   the grid boundary (complete) or has no free neighbor (stuck)
2. Reverse the walk so it reads entry -> goal; if it ends on an unresolved
   entry point, that is the entry's route (plus the goal tile)
3. Exclude the tile just before the first fork on the walk (or the fork
   itself when the walk starts on it), so the next walk has to take a
   different branch at that junction
4. Repeat until every entry point has a route

Every walk must either resolve an entry point or exclude a new tile.
A walk that does neither means the remaining entries can never be reached,
so enumeration fails instead of looping.

Visited and exclusion state is local to one enumerate() call.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from route_compiler.constants import EnumerationConfig
from route_compiler.core.adjacency_resolver import AdjacencyMap, AdjacencyResolver
from route_compiler.core.tile_classifier import ClassifiedGrid
from route_compiler.model.coordinate import Coordinate, Direction
from route_compiler.model.entry_point import EntryPoint
from route_compiler.model.errors import ForkExhaustionError, UnreachablePathError
from route_compiler.model.route import Route

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Walk:
    """One backward walk from the goal.

    Attributes:
        tiles: Discovered path tiles in entry -> goal order (goal excluded)
        complete: True if the walk reached the grid boundary, False if stuck
    """

    tiles: tuple[Coordinate, ...]
    complete: bool

    @property
    def start(self) -> Optional[Coordinate]:
        return self.tiles[0] if self.tiles else None


@dataclass(frozen=True)
class EnumerationResult:
    """Result of route enumeration.

    Attributes:
        routes: Entry point -> route, in entry point (row-major) order
        exclusions: Tiles excluded during enumeration, in exclusion order
        walks: Number of walks performed
    """

    routes: dict[EntryPoint, Route]
    exclusions: tuple[Coordinate, ...]
    walks: int


class RouteEnumerator:
    """Computes exactly one route per entry point.

    Example:
        enumerator = RouteEnumerator()
        result = enumerator.enumerate(classified=classified, adjacency=adjacency)
        for entry, route in result.routes.items():
            print(entry.coordinate, len(route))
    """

    def __init__(
        self,
        resolver: Optional[AdjacencyResolver] = None,
        max_walks: Optional[int] = None,
    ) -> None:
        """Initialize route enumerator.

        Args:
            resolver: Adjacency resolver used for the goal connectivity check
            max_walks: Hard cap on walks; defaults to entries + path tiles + slack
        """
        if max_walks is not None and max_walks < 1:
            raise ValueError(f"max_walks must be positive, got {max_walks}")
        self._resolver = resolver or AdjacencyResolver()
        self._max_walks = max_walks

    def enumerate(self, classified: ClassifiedGrid, adjacency: AdjacencyMap) -> EnumerationResult:
        """Find one route per entry point.

        Args:
            classified: Classified grid (goal, path tiles, entry points)
            adjacency: Adjacency map with the fork set

        Returns:
            EnumerationResult with a route for every entry point.

        Raises:
            UnreachablePathError: If an entry point has no path to the goal.
            ForkExhaustionError: If fork exclusion stops making progress.
        """
        entries = classified.entry_points
        if not entries:
            logger.warning("Level has no entry points, no routes to compute")
            return EnumerationResult(routes={}, exclusions=(), walks=0)

        disconnected = self._resolver.unreachable_entries(classified=classified)
        if disconnected:
            raise UnreachablePathError(unresolved=[entry.coordinate for entry in disconnected])

        unresolved: dict[Coordinate, EntryPoint] = {entry.coordinate: entry for entry in entries}
        found: dict[Coordinate, Route] = {}
        # dict as an insertion-ordered set
        exclusions: dict[Coordinate, None] = {}

        max_walks = self._max_walks or len(entries) + len(classified.path) + EnumerationConfig.WALK_CAP_SLACK
        walks = 0

        while unresolved:
            if walks >= max_walks:
                raise ForkExhaustionError(unresolved=list(unresolved), walks=walks)
            walks += 1

            walk = self._walk(classified=classified, exclusions=exclusions)

            resolved: Optional[EntryPoint] = None
            if walk.complete and walk.start in unresolved:
                resolved = unresolved.pop(walk.start)
                found[resolved.coordinate] = Route(coordinates=walk.tiles + (classified.goal,))

            excluded = self._exclude_nearest_fork(walk=walk, adjacency=adjacency, exclusions=exclusions)

            logger.debug(
                f"Walk {walks}: {len(walk.tiles)} tiles, {'complete' if walk.complete else 'stuck'}"
                f" at {walk.start}, resolved={resolved.coordinate if resolved else None}, excluded={excluded}"
            )

            if resolved is None and excluded is None:
                if not walk.complete or not walk.tiles:
                    raise UnreachablePathError(unresolved=list(unresolved))
                raise ForkExhaustionError(unresolved=list(unresolved), walks=walks)

        logger.info(f"Enumerated {len(found)} route(s) in {walks} walk(s), {len(exclusions)} tile(s) excluded")

        return EnumerationResult(
            routes={entry: found[entry.coordinate] for entry in entries},
            exclusions=tuple(exclusions),
            walks=walks,
        )

    def _walk(self, classified: ClassifiedGrid, exclusions: dict[Coordinate, None]) -> Walk:
        """Walk outward from the goal until the boundary is reached or no free neighbor is left."""
        visited: set[Coordinate] = set()
        discovered: list[Coordinate] = []
        cursor = classified.goal

        while True:
            if any(not cursor.step(direction).in_bounds(size=classified.size) for direction in Direction):
                complete = True
                break

            for direction in Direction:
                neighbor = cursor.step(direction)
                if not classified.is_path(coordinate=neighbor) or neighbor in visited or neighbor in exclusions:
                    continue
                discovered.append(neighbor)
                visited.add(neighbor)
                cursor = neighbor
                break
            else:
                complete = False
                break

        discovered.reverse()
        return Walk(tiles=tuple(discovered), complete=complete)

    def _exclude_nearest_fork(
        self,
        walk: Walk,
        adjacency: AdjacencyMap,
        exclusions: dict[Coordinate, None],
    ) -> Optional[Coordinate]:
        """Exclude the entry-side neighbor of the first fork on the walk.

        Returns:
            The newly excluded tile, or None if nothing new was excluded.
        """
        for i, tile in enumerate(walk.tiles):
            if not adjacency.is_fork(coordinate=tile):
                continue
            target = walk.tiles[i - 1] if i > 0 else tile
            if target in exclusions:
                return None
            exclusions[target] = None
            return target
        return None

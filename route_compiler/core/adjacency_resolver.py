"""Adjacency resolution for the path network.

For every path tile, records which of its four orthogonal neighbors are also
path tiles. Out-of-grid neighbors simply count as absent. Path tiles with
three or four path neighbors are forks (branch points).

Also answers whether each entry point is connected to the goal at all, using
SciPy's sparse-graph connected components over path tiles plus the goal.
"""

import logging
from dataclasses import dataclass

import numpy as np
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import connected_components

from route_compiler.constants import GridConfig
from route_compiler.core.tile_classifier import ClassifiedGrid
from route_compiler.model.coordinate import Coordinate, Direction
from route_compiler.model.entry_point import EntryPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdjacencyMap:
    """Boolean adjacency facts for the path network.

    Attributes:
        neighbors: Path coordinate -> directions whose neighbor is a path tile
        forks: Path coordinates with 3 or 4 path neighbors, row-major order
    """

    neighbors: dict[Coordinate, frozenset[Direction]]
    forks: tuple[Coordinate, ...]

    def directions(self, coordinate: Coordinate) -> frozenset[Direction]:
        """Directions with a path neighbor (empty for non-path tiles)."""
        return self.neighbors.get(coordinate, frozenset())

    def has_neighbor(self, coordinate: Coordinate, direction: Direction) -> bool:
        return direction in self.directions(coordinate=coordinate)

    def degree(self, coordinate: Coordinate) -> int:
        """Number of path neighbors."""
        return len(self.directions(coordinate=coordinate))

    def is_fork(self, coordinate: Coordinate) -> bool:
        return self.degree(coordinate=coordinate) >= GridConfig.FORK_MIN_NEIGHBORS


class AdjacencyResolver:
    """Computes path adjacency, forks and goal connectivity.

    Example:
        resolver = AdjacencyResolver()
        adjacency = resolver.resolve(classified=classified)
        adjacency.forks  # (Coordinate(col=3, row=3),)
    """

    def resolve(self, classified: ClassifiedGrid) -> AdjacencyMap:
        """Compute the adjacency map and fork set for a classified grid."""
        neighbors: dict[Coordinate, frozenset[Direction]] = {}
        forks: list[Coordinate] = []

        for coordinate in classified.path:
            present = frozenset(
                direction for direction in Direction if classified.is_path(coordinate=coordinate.step(direction))
            )
            neighbors[coordinate] = present
            if len(present) >= GridConfig.FORK_MIN_NEIGHBORS:
                forks.append(coordinate)

        logger.debug(f"Resolved adjacency for {len(neighbors)} path tiles, {len(forks)} forks")
        return AdjacencyMap(neighbors=neighbors, forks=tuple(forks))

    def unreachable_entries(self, classified: ClassifiedGrid) -> tuple[EntryPoint, ...]:
        """Entry points whose path tiles are not connected to the goal.

        Builds an undirected sparse graph over path tiles plus the goal tile
        and labels its connected components.
        """
        if not classified.entry_points:
            return ()

        nodes = classified.path + (classified.goal,)
        index = {coordinate: i for i, coordinate in enumerate(nodes)}

        row_list: list[int] = []
        col_list: list[int] = []
        for coordinate, from_id in index.items():
            # RIGHT and DOWN cover every undirected edge once
            for direction in (Direction.RIGHT, Direction.DOWN):
                to_id = index.get(coordinate.step(direction))
                if to_id is not None:
                    row_list.append(from_id)
                    col_list.append(to_id)

        csgraph = csr_matrix(
            (np.ones(len(row_list), dtype=np.int8), (row_list, col_list)),
            shape=(len(nodes), len(nodes)),
        )
        _, labels = connected_components(csgraph=csgraph, directed=False)

        goal_label = labels[index[classified.goal]]
        return tuple(entry for entry in classified.entry_points if labels[index[entry.coordinate]] != goal_label)

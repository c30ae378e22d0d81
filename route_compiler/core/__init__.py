"""Pipeline stages for compiling a level layout into routes.

- LayoutReader functions: layout text to symbol rows
- TileClassifier: symbol grid to typed tiles, goal, path tiles, entry points
- AdjacencyResolver: path neighbors, forks, goal connectivity
- RouteEnumerator: one route per entry point via backward walks
- CoordinateProjector: tile coordinates to pixel waypoints
"""

from route_compiler.core.adjacency_resolver import AdjacencyMap, AdjacencyResolver
from route_compiler.core.coordinate_projector import CoordinateProjector
from route_compiler.core.layout_reader import read_layout_file, read_layout_text
from route_compiler.core.route_enumerator import EnumerationResult, RouteEnumerator, Walk
from route_compiler.core.tile_classifier import ClassifiedGrid, TileClassifier

__all__ = [
    # Layout reader
    "read_layout_text",
    "read_layout_file",
    # Tile classifier
    "TileClassifier",
    "ClassifiedGrid",
    # Adjacency resolver
    "AdjacencyResolver",
    "AdjacencyMap",
    # Route enumerator
    "RouteEnumerator",
    "EnumerationResult",
    "Walk",
    # Coordinate projector
    "CoordinateProjector",
]

"""Tile-to-pixel projection for compiled routes.

    x = col * tile_size + offset_x
    y = row * tile_size + offset_y + header_height

The projection constants belong to the caller (see ProjectionConfig for the
defaults the game uses). Every projected route starts at its entry point's
off-grid spawn coordinate.
"""

from route_compiler.model.coordinate import Coordinate
from route_compiler.model.entry_point import EntryPoint
from route_compiler.model.route import ProjectedRoute, Route, Waypoint


class CoordinateProjector:
    """Maps tile coordinates to pixel-space waypoints and back.

    Example:
        projector = CoordinateProjector(tile_size=32, offset_x=6, offset_y=6, header_height=40)
        projector.project(Coordinate(col=2, row=1))  # Waypoint(x=70, y=78)
    """

    def __init__(self, tile_size: int, offset_x: int, offset_y: int, header_height: int) -> None:
        if tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {tile_size}")
        self.tile_size = tile_size
        self.offset_x = offset_x
        self.offset_y = offset_y
        self.header_height = header_height

    def project(self, coordinate: Coordinate) -> Waypoint:
        """Pixel position of a tile coordinate (works for off-grid spawn cells too)."""
        return Waypoint(
            x=coordinate.col * self.tile_size + self.offset_x,
            y=coordinate.row * self.tile_size + self.offset_y + self.header_height,
        )

    def unproject(self, waypoint: Waypoint) -> Coordinate:
        """Inverse of project().

        Raises:
            ValueError: If the waypoint is not on the tile lattice.
        """
        col, col_rem = divmod(waypoint.x - self.offset_x, self.tile_size)
        row, row_rem = divmod(waypoint.y - self.offset_y - self.header_height, self.tile_size)
        if col_rem or row_rem:
            raise ValueError(f"Waypoint ({waypoint.x}, {waypoint.y}) is not on the tile lattice")
        return Coordinate(col=col, row=row)

    def project_route(self, entry: EntryPoint, route: Route) -> ProjectedRoute:
        """Prepend the spawn coordinate and project every tile of the route.

        Raises:
            ValueError: If the route does not start at the entry point.
        """
        if route.start != entry.coordinate:
            raise ValueError(f"Route starts at {route.start}, expected entry point {entry.coordinate}")
        waypoints = tuple(self.project(coordinate=c) for c in (entry.spawn, *route.coordinates))
        return ProjectedRoute(entry=entry, route=route, waypoints=waypoints)

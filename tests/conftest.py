"""Shared pytest fixtures for route_compiler tests.

Provides small hand-traced layouts plus the bundled 20x20 example levels.

COORDINATE SYSTEM:
    Coordinates are (col, row) with row 0 at the top of the layout text.
    Small layouts use a 7x7 grid so every expected route can be traced by hand.
"""

import pytest

from route_compiler.constants import LEVELS_DIR
from route_compiler.core.adjacency_resolver import AdjacencyResolver
from route_compiler.core.coordinate_projector import CoordinateProjector
from route_compiler.core.route_enumerator import RouteEnumerator
from route_compiler.core.tile_classifier import TileClassifier
from route_compiler.generators.route_factory import RouteFactory

SMALL_SIZE = 7


def layout(*rows: str, size: int = SMALL_SIZE) -> list[str]:
    """Pad layout rows to size x size with empty cells."""
    padded = [row.ljust(size) for row in rows]
    padded.extend(" " * size for _ in range(size - len(padded)))
    return padded


# =============================================================================
# SMALL LAYOUTS (7x7)
# =============================================================================


@pytest.fixture
def corridor_layout() -> list[str]:
    """Straight corridor from the left edge into the goal.

    Entry (0,2), path (0,2)-(3,2), goal (4,2). No forks.
    """
    return layout(
        "",
        "",
        "XXXXW",
    )


@pytest.fixture
def merge_layout() -> list[str]:
    """Two entries merging into one corridor before the goal.

    Top entry (2,0) runs down column 2, left entry (0,3) runs along row 3.
    They merge at fork (2,3); shared corridor (2,3)-(4,3); goal (5,3).
    """
    return layout(
        "  X",
        "  X",
        "  X",
        "XXXXXW",
    )


@pytest.fixture
def four_way_layout() -> list[str]:
    """Four-way fork with entries on the left and right edges.

    Row 3 spans the grid, fork at (3,3). A dead-end spur (3,2) goes up,
    the goal (3,5) hangs below via (3,4).
    """
    return layout(
        "",
        "",
        "   X",
        "XXXXXXX",
        "   X",
        "   W",
    )


@pytest.fixture
def disconnected_layout() -> list[str]:
    """Isolated path segment touching the top edge, not connected to the goal.

    Entry (4,0) sits on segment (4,0)-(4,1); entry (0,3) reaches goal (3,3).
    """
    return layout(
        "    X",
        "    X",
        "",
        "XXXW",
    )


@pytest.fixture
def edge_run_layout() -> list[str]:
    """Corridor that reaches the right edge and then runs down along it.

    Every tile on the edge is an entry point, but walks always stop at (6,3).
    """
    return layout(
        "",
        "",
        "",
        "   WXXX",
        "      X",
        "      X",
        "      X",
    )


# =============================================================================
# BUNDLED 20x20 LEVELS
# =============================================================================


@pytest.fixture
def level1_path():
    """Three entries: top (5,0), left (0,10), bottom (10,19); goal (15,10).

    Forks at (5,10) and (10,10). The walk needs two dead-end walks to free
    the bottom branch.
    """
    return LEVELS_DIR / "level1.txt"


@pytest.fixture
def level2_path():
    """Cross-shaped level: four-way fork (10,10), entries top, left and bottom, goal (15,10)."""
    return LEVELS_DIR / "level2.txt"


# =============================================================================
# COMPONENTS
# =============================================================================


@pytest.fixture
def small_classifier() -> TileClassifier:
    return TileClassifier(size=SMALL_SIZE)


@pytest.fixture
def resolver() -> AdjacencyResolver:
    return AdjacencyResolver()


@pytest.fixture
def enumerator() -> RouteEnumerator:
    return RouteEnumerator()


@pytest.fixture
def projector() -> CoordinateProjector:
    """Projector with the game's default constants (32px tiles, 6px offsets, 40px header)."""
    return CoordinateProjector(tile_size=32, offset_x=6, offset_y=6, header_height=40)


@pytest.fixture
def small_factory() -> RouteFactory:
    return RouteFactory(grid_size=SMALL_SIZE)


@pytest.fixture
def factory() -> RouteFactory:
    return RouteFactory()

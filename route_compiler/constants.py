"""Configuration constants for the Level Route Compiler.

All configurable parameters are centralized here for easy tuning.

Classes:
    GridConfig: Grid dimensions and the layout symbol alphabet
    ProjectionConfig: Default tile-to-pixel projection constants
    EnumerationConfig: Route enumeration safety limits
    SerializationConfig: Compiled level file format
"""

from pathlib import Path

# Package root directory (where route_compiler/ lives)
PACKAGE_DIR = Path(__file__).parent

# Project root directory (parent of route_compiler/)
PROJECT_ROOT = PACKAGE_DIR.parent

# Bundled example level layouts
LEVELS_DIR = PROJECT_ROOT / "levels"

# Output directory for compiled levels
OUTPUT_DIR = PROJECT_ROOT / "output"


class GridConfig:
    """Grid dimensions and layout symbols."""

    # Levels are square; every row holds exactly SIZE symbols
    SIZE = 20

    # Layout alphabet - one character per cell
    EMPTY_SYMBOL = " "
    OBSTACLE_SYMBOL = "S"
    GOAL_SYMBOL = "W"
    PATH_SYMBOL = "X"
    SYMBOLS = (EMPTY_SYMBOL, OBSTACLE_SYMBOL, GOAL_SYMBOL, PATH_SYMBOL)

    # A path tile with at least this many path neighbors is a fork
    FORK_MIN_NEIGHBORS = 3


assert len(set(GridConfig.SYMBOLS)) == len(GridConfig.SYMBOLS), "Layout symbols must be distinct"
assert all(len(symbol) == 1 for symbol in GridConfig.SYMBOLS), "Layout symbols must be single characters"


class ProjectionConfig:
    """Default tile-to-pixel projection constants.

    The projector never reads these directly; callers pass them in.
    """

    TILE_SIZE = 32  # Pixels per tile edge
    OFFSET_X = 6  # Centers a 20px sprite inside a 32px tile
    OFFSET_Y = 6
    HEADER_HEIGHT = 40  # Top bar above the board


class EnumerationConfig:
    """Route enumeration safety limits."""

    # Every walk resolves an entry or excludes a new path cell, so
    # entries + path cells walks always suffice. Slack keeps the cap strict.
    WALK_CAP_SLACK = 1


class SerializationConfig:
    """Compiled level file format."""

    VERSION = "1.0"
    JSON_INDENT = 2

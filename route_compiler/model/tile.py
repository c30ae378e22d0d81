"""TileKind - what occupies a grid cell."""

from enum import Enum

from route_compiler.constants import GridConfig


class TileKind(Enum):
    """Cell classification. Values are the int8 codes stored in the kind array."""

    EMPTY = 0
    OBSTACLE = 1
    GOAL = 2
    PATH = 3

    @classmethod
    def from_symbol(cls, symbol: str) -> "TileKind":
        """Map a layout symbol to its tile kind.

        Raises:
            KeyError: If the symbol is not part of the layout alphabet.
        """
        return SYMBOL_TO_KIND[symbol]


SYMBOL_TO_KIND = {
    GridConfig.EMPTY_SYMBOL: TileKind.EMPTY,
    GridConfig.OBSTACLE_SYMBOL: TileKind.OBSTACLE,
    GridConfig.GOAL_SYMBOL: TileKind.GOAL,
    GridConfig.PATH_SYMBOL: TileKind.PATH,
}
assert set(SYMBOL_TO_KIND) == set(GridConfig.SYMBOLS)

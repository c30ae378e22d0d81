"""Errors raised while compiling a level layout into routes.

Every error here is fatal to level load: the caller must treat the level as
failed and cannot retry without a corrected grid. No partial routing exists.

Hierarchy:
    LevelLoadError
    ├── GridStructureError (also a ValueError)
    │   ├── GridSizeError
    │   ├── GoalCountError
    │   └── InvalidSymbolError
    └── RoutingError (also a RuntimeError)
        ├── UnreachablePathError
        └── ForkExhaustionError
"""

from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from route_compiler.model.coordinate import Coordinate


class LevelLoadError(Exception):
    """Base class for all level compilation failures."""


class GridStructureError(LevelLoadError, ValueError):
    """The symbol grid itself is malformed."""


class GridSizeError(GridStructureError):
    """Grid is not exactly size x size.

    Attributes:
        expected: Required number of rows and columns
        actual: Offending row count or row length
        row: Index of the offending row, None when the row count is wrong
    """

    def __init__(self, expected: int, actual: int, row: Optional[int] = None) -> None:
        self.expected = expected
        self.actual = actual
        self.row = row
        if row is None:
            message = f"Grid must have {expected} rows, got {actual}"
        else:
            message = f"Grid row {row} must have {expected} cells, got {actual}"
        super().__init__(message)


class GoalCountError(GridStructureError):
    """Grid does not contain exactly one goal cell.

    Attributes:
        count: Number of goal symbols found
    """

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Grid must contain exactly one goal, found {count}")


class InvalidSymbolError(GridStructureError):
    """Grid cell holds a symbol outside the layout alphabet.

    Attributes:
        symbol: The offending cell content
        coordinate: Where it was found
    """

    def __init__(self, symbol: str, coordinate: "Coordinate") -> None:
        self.symbol = symbol
        self.coordinate = coordinate
        super().__init__(f"Invalid symbol {symbol!r} at {coordinate}")


class RoutingError(LevelLoadError, RuntimeError):
    """Route enumeration could not give every entry point a route.

    Attributes:
        unresolved: Entry coordinates still lacking a route
    """

    def __init__(self, message: str, unresolved: Sequence["Coordinate"]) -> None:
        self.unresolved = tuple(unresolved)
        super().__init__(message)


class UnreachablePathError(RoutingError):
    """An entry point has no path to the goal."""

    def __init__(self, unresolved: Sequence["Coordinate"]) -> None:
        entries = ", ".join(str(c) for c in unresolved)
        super().__init__(f"No route from entry point(s) {entries} to the goal", unresolved=unresolved)


class ForkExhaustionError(RoutingError):
    """Fork exclusion cannot make further progress on the remaining entries.

    Attributes:
        walks: Number of walks performed before giving up
    """

    def __init__(self, unresolved: Sequence["Coordinate"], walks: int) -> None:
        self.walks = walks
        entries = ", ".join(str(c) for c in unresolved)
        super().__init__(
            f"Fork exclusion exhausted after {walks} walk(s); unresolved entry point(s): {entries}",
            unresolved=unresolved,
        )

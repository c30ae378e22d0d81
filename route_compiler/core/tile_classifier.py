"""Tile classification - turns a raw symbol grid into typed tiles.

Scans the grid in row-major order and records:
- The TileKind of every cell (numpy int8 array indexed [row, col])
- The single goal coordinate
- All path coordinates, in scan order
- The entry points: path coordinates on the grid boundary, in scan order

Scan order is the deterministic iteration order for everything downstream.
"""

import logging
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

from route_compiler.constants import GridConfig
from route_compiler.model.coordinate import Coordinate
from route_compiler.model.entry_point import EntryPoint
from route_compiler.model.errors import GoalCountError, GridSizeError, InvalidSymbolError
from route_compiler.model.tile import SYMBOL_TO_KIND, TileKind

logger = logging.getLogger(__name__)

SymbolGrid = Sequence[Union[str, Sequence[str]]]


@dataclass(frozen=True, eq=False)
class ClassifiedGrid:
    """Result of tile classification.

    Attributes:
        size: Grid edge length N
        kinds: N x N int8 array of TileKind values, indexed [row, col]
        goal: The goal coordinate
        path: Path coordinates in row-major order
        entry_points: Boundary path tiles in row-major order
    """

    size: int
    kinds: np.ndarray
    goal: Coordinate
    path: tuple[Coordinate, ...]
    entry_points: tuple[EntryPoint, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "_path_set", frozenset(self.path))

    @property
    def path_set(self) -> frozenset[Coordinate]:
        """Path coordinates for O(1) membership tests."""
        return self._path_set

    def is_path(self, coordinate: Coordinate) -> bool:
        return coordinate in self._path_set

    def kind_at(self, coordinate: Coordinate) -> TileKind:
        """TileKind of an inside-grid cell.

        Raises:
            ValueError: If the coordinate lies outside the grid.
        """
        if not coordinate.in_bounds(size=self.size):
            raise ValueError(f"{coordinate} is outside the {self.size}x{self.size} grid")
        return TileKind(int(self.kinds[coordinate.row, coordinate.col]))

    def count(self, kind: TileKind) -> int:
        """Number of cells of the given kind."""
        return int(np.count_nonzero(self.kinds == kind.value))


class TileClassifier:
    """Classifies an N x N layout symbol grid.

    Example:
        classifier = TileClassifier(size=20)
        classified = classifier.classify(symbols=rows)
        print(classified.goal, len(classified.entry_points))
    """

    def __init__(self, size: int = GridConfig.SIZE) -> None:
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}")
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    def classify(self, symbols: SymbolGrid) -> ClassifiedGrid:
        """Classify every cell of the grid.

        Args:
            symbols: N rows, each a string of N characters or a sequence of
                N single-character strings

        Returns:
            ClassifiedGrid with kinds, goal, path coordinates and entry points.

        Raises:
            GridSizeError: If the grid is not N x N.
            InvalidSymbolError: If a cell is not one of the layout symbols.
            GoalCountError: If there is not exactly one goal symbol.
        """
        grid = self._to_array(symbols=symbols)
        n = self._size

        kinds = np.zeros((n, n), dtype=np.int8)
        for row in range(n):
            for col in range(n):
                symbol = grid[row, col]
                kind = SYMBOL_TO_KIND.get(symbol) if isinstance(symbol, str) else None
                if kind is None:
                    raise InvalidSymbolError(symbol=symbol, coordinate=Coordinate(col=col, row=row))
                kinds[row, col] = kind.value

        # argwhere yields (row, col) pairs in row-major order
        goal_cells = np.argwhere(kinds == TileKind.GOAL.value)
        if len(goal_cells) != 1:
            raise GoalCountError(count=len(goal_cells))
        goal = Coordinate(col=int(goal_cells[0][1]), row=int(goal_cells[0][0]))

        path = tuple(Coordinate(col=int(col), row=int(row)) for row, col in np.argwhere(kinds == TileKind.PATH.value))
        entry_points = tuple(EntryPoint.at(coordinate=c, size=n) for c in path if c.on_boundary(size=n))

        logger.debug(
            f"Classified {n}x{n} grid: goal={goal}, {len(path)} path tiles, {len(entry_points)} entry points"
        )

        return ClassifiedGrid(size=n, kinds=kinds, goal=goal, path=path, entry_points=entry_points)

    def _to_array(self, symbols: SymbolGrid) -> np.ndarray:
        """Validate grid dimensions and return an N x N object array of cells."""
        n = self._size
        if len(symbols) != n:
            raise GridSizeError(expected=n, actual=len(symbols))

        rows = []
        for index, row in enumerate(symbols):
            cells = list(row)
            if len(cells) != n:
                raise GridSizeError(expected=n, actual=len(cells), row=index)
            rows.append(cells)

        # Object dtype keeps multi-character cells intact so they are rejected, not truncated
        grid = np.empty((n, n), dtype=object)
        for index, cells in enumerate(rows):
            grid[index, :] = cells
        return grid

"""Grid state representation for Game of Life."""

from dataclasses import dataclass, field
from typing import Iterator
import numpy as np


@dataclass(frozen=True)
class Cell:
    """Read-only view of a single grid position."""

    row: int
    col: int
    alive: bool
    live_neighbor_count: int


@dataclass
class GridState:
    """
    Represents the state of a square Game of Life grid.

    Alive flags and cached neighbor counts are stored as two (N, N) arrays
    indexed ``[row, col]``. The neighbor counts always describe the alive
    flags as they were before the current transition started; keeping them
    in sync is the job of ``GameOfLifeRules.count_neighbors``.
    """

    dimension: int
    cells: np.ndarray = field(default=None, repr=False)
    neighbors: np.ndarray = field(default=None, repr=False)

    def __post_init__(self):
        """Allocate the cell and neighbor buffers."""
        shape = (self.dimension, self.dimension)
        if self.cells is None:
            self.cells = np.zeros(shape, dtype=np.uint8)
        if self.neighbors is None:
            self.neighbors = np.zeros(shape, dtype=np.int32)

    @property
    def shape(self) -> tuple:
        return self.cells.shape

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether (row, col) lies inside the grid."""
        return 0 <= row < self.dimension and 0 <= col < self.dimension

    def get_cell(self, row: int, col: int) -> int:
        """Get cell value at (row, col). Returns 0 for out-of-bounds."""
        if self.in_bounds(row, col):
            return int(self.cells[row, col])
        return 0

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Set cell value at (row, col)."""
        if self.in_bounds(row, col):
            self.cells[row, col] = 1 if value else 0

    def is_alive(self, row: int, col: int) -> bool:
        return self.get_cell(row, col) == 1

    def neighbor_count(self, row: int, col: int) -> int:
        """Cached live neighbor count at (row, col). Returns 0 for out-of-bounds."""
        if self.in_bounds(row, col):
            return int(self.neighbors[row, col])
        return 0

    def cell(self, row: int, col: int) -> Cell:
        """
        Get a snapshot of the cell at (row, col).

        Raises:
            IndexError: If (row, col) is outside the grid.
        """
        if not self.in_bounds(row, col):
            raise IndexError(
                f"cell ({row}, {col}) outside {self.dimension}x{self.dimension} grid"
            )
        return Cell(
            row=row,
            col=col,
            alive=bool(self.cells[row, col]),
            live_neighbor_count=int(self.neighbors[row, col]),
        )

    def __iter__(self) -> Iterator[Cell]:
        for row in range(self.dimension):
            for col in range(self.dimension):
                yield self.cell(row, col)

    def __len__(self) -> int:
        return self.dimension * self.dimension

    def count_live_cells(self) -> int:
        """Count total number of live cells."""
        return int(np.sum(self.cells))

    def live_positions(self) -> set:
        """Set of (row, col) tuples for every live cell."""
        rows, cols = np.nonzero(self.cells)
        return {(int(r), int(c)) for r, c in zip(rows, cols)}

    def clear(self) -> None:
        """Clear all cells (set to dead) and reset neighbor counts."""
        self.cells.fill(0)
        self.neighbors.fill(0)

    def copy(self) -> "GridState":
        """Create a deep copy of this grid state."""
        return GridState(
            self.dimension,
            cells=self.cells.copy(),
            neighbors=self.neighbors.copy(),
        )

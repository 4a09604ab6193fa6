"""Game of Life rules implementation using NumPy for efficiency."""

from typing import Optional

import numpy as np

from life_visualizer.models.grid_state import GridState


class GameOfLifeRules:
    """
    Implements Conway's Game of Life rules.

    Rules:
    1. Any live cell with 2 or 3 live neighbors survives.
    2. Any dead cell with exactly 3 live neighbors becomes alive.
    3. All other cells die or stay dead.

    A generation is two whole-grid passes: ``count_neighbors`` caches every
    cell's count from the current alive flags, then ``advance`` rewrites the
    alive flags from those cached counts. Cells beyond the edge count as dead.
    """

    @staticmethod
    def seed(
        dimension: int,
        probability: float,
        use_random: bool,
        rng: Optional[np.random.Generator] = None,
    ) -> GridState:
        """
        Create a new grid.

        Args:
            dimension: Number of rows and columns.
            probability: Chance of each cell starting alive when seeding randomly.
            use_random: Seed randomly if True, otherwise every cell starts dead.
            rng: Random generator to draw from (a fresh one if omitted).

        Returns:
            New GridState with zeroed neighbor counts.
        """
        grid = GridState(dimension)
        if use_random:
            if rng is None:
                rng = np.random.default_rng()
            grid.cells = (rng.random((dimension, dimension)) < probability).astype(
                np.uint8
            )
        return grid

    @staticmethod
    def count_neighbors_at(grid: GridState, row: int, col: int) -> int:
        """
        Count the number of live neighbors for a cell.

        Args:
            grid: The grid state.
            row: Row of the cell.
            col: Column of the cell.

        Returns:
            Number of live neighbors (0-8).
        """
        count = 0
        for dr in [-1, 0, 1]:
            for dc in [-1, 0, 1]:
                if dr == 0 and dc == 0:
                    continue
                nr, nc = row + dr, col + dc
                # Handle boundary - cells outside grid are dead
                if grid.in_bounds(nr, nc):
                    count += int(grid.cells[nr, nc])
        return count

    @staticmethod
    def count_neighbors(grid: GridState) -> GridState:
        """
        Recompute the cached neighbor count of every cell.

        Args:
            grid: Grid to update in place.

        Returns:
            The same grid.
        """
        cells = grid.cells.astype(np.int32)

        # Pad the grid with zeros for boundary handling
        padded = np.pad(cells, 1, mode="constant", constant_values=0)

        # Sum the eight shifted views (the centre is left out)
        neighbors = (
            padded[:-2, :-2]
            + padded[:-2, 1:-1]
            + padded[:-2, 2:]  # Top row
            + padded[1:-1, :-2]
            + padded[1:-1, 2:]  # Middle row (no center)
            + padded[2:, :-2]
            + padded[2:, 1:-1]
            + padded[2:, 2:]  # Bottom row
        )

        grid.neighbors = neighbors
        return grid

    @staticmethod
    def advance(grid: GridState) -> GridState:
        """
        Apply the transition rule using the cached neighbor counts.

        The new alive flags are computed for the whole grid before any are
        written back.

        Args:
            grid: Grid to update in place.

        Returns:
            The same grid.
        """
        alive = grid.cells == 1
        neighbors = grid.neighbors

        survives = alive & ((neighbors == 2) | (neighbors == 3))
        births = ~alive & (neighbors == 3)

        grid.cells = (survives | births).astype(np.uint8)
        return grid

    @staticmethod
    def toggle_cell(grid: GridState, row: int, col: int) -> bool:
        """
        Flip the alive flag of one cell.

        Neighbor counts are not touched; call ``count_neighbors`` afterwards.

        Args:
            grid: Grid to update in place.
            row: Row of the cell.
            col: Column of the cell.

        Returns:
            True if the cell was toggled, False if (row, col) is outside the grid.
        """
        if not grid.in_bounds(row, col):
            return False
        grid.cells[row, col] ^= 1
        return True

    @staticmethod
    def step(grid: GridState) -> GridState:
        """Advance one generation and refresh the counts for the next one."""
        GameOfLifeRules.advance(grid)
        return GameOfLifeRules.count_neighbors(grid)

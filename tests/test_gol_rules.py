import numpy as np
import pytest

from life_visualizer.models.grid_state import GridState
from life_visualizer.simulation.gol_rules import GameOfLifeRules


def make_grid(dimension, live):
    grid = GridState(dimension)
    for row, col in live:
        grid.set_cell(row, col, 1)
    return GameOfLifeRules.count_neighbors(grid)


def generation(grid):
    return GameOfLifeRules.step(grid)


@pytest.mark.parametrize("dimension", [1, 2, 3, 7, 32])
def test_seed_without_random_is_all_dead(dimension):
    grid = GameOfLifeRules.seed(dimension, 0.9, use_random=False)
    assert grid.shape == (dimension, dimension)
    assert grid.count_live_cells() == 0

    GameOfLifeRules.count_neighbors(grid)
    assert not grid.neighbors.any()


def test_seed_probability_extremes():
    rng = np.random.default_rng(1)
    assert GameOfLifeRules.seed(20, 0.0, True, rng=rng).count_live_cells() == 0
    assert GameOfLifeRules.seed(20, 1.0, True, rng=rng).count_live_cells() == 400


def test_seed_is_reproducible_with_same_generator_seed():
    a = GameOfLifeRules.seed(30, 0.4, True, rng=np.random.default_rng(42))
    b = GameOfLifeRules.seed(30, 0.4, True, rng=np.random.default_rng(42))
    assert np.array_equal(a.cells, b.cells)
    assert 0 < a.count_live_cells() < 900


def test_ring_around_dead_center_counts_eight():
    ring = [(r, c) for r in range(3) for c in range(3) if (r, c) != (1, 1)]
    grid = make_grid(3, ring)

    assert grid.neighbor_count(1, 1) == 8
    # Corners see two ring cells, edge midpoints see four
    assert grid.neighbor_count(0, 0) == 2
    assert grid.neighbor_count(0, 1) == 4

    GameOfLifeRules.advance(grid)
    assert grid.live_positions() == {(0, 0), (0, 2), (2, 0), (2, 2)}


def test_isolated_cell_dies():
    grid = make_grid(5, [(2, 2)])
    assert grid.neighbor_count(2, 2) == 0

    generation(grid)
    assert grid.count_live_cells() == 0


def test_block_is_still_life():
    block = {(2, 2), (2, 3), (3, 2), (3, 3)}
    grid = make_grid(6, block)

    for _ in range(50):
        for row, col in block:
            assert grid.neighbor_count(row, col) == 3
        generation(grid)
        assert grid.live_positions() == block


def test_blinker_oscillates_with_period_two():
    horizontal = {(1, 0), (1, 1), (1, 2)}
    vertical = {(0, 1), (1, 1), (2, 1)}
    grid = make_grid(5, horizontal)

    generation(grid)
    assert grid.live_positions() == vertical

    generation(grid)
    assert grid.live_positions() == horizontal


@pytest.mark.parametrize("dimension", [1, 2, 5, 50])
def test_corner_cell_has_no_neighbors_beyond_edge(dimension):
    grid = make_grid(dimension, [(0, 0)])
    assert grid.neighbor_count(0, 0) == 0
    assert GameOfLifeRules.count_neighbors_at(grid, 0, 0) == 0


def test_edges_do_not_wrap():
    last = 4
    grid = make_grid(5, [(0, 0), (0, last), (last, 0), (last, last)])
    for row, col in [(0, 0), (0, last), (last, 0), (last, last)]:
        assert grid.neighbor_count(row, col) == 0


def test_bulk_count_matches_single_cell_count():
    grid = GameOfLifeRules.seed(17, 0.35, True, rng=np.random.default_rng(7))
    GameOfLifeRules.count_neighbors(grid)
    for cell in grid:
        expected = GameOfLifeRules.count_neighbors_at(grid, cell.row, cell.col)
        assert cell.live_neighbor_count == expected


def test_advance_reads_cached_counts_only():
    grid = make_grid(5, [(1, 1), (1, 2), (1, 3)])
    before = grid.neighbors.copy()

    # Changing alive flags without recounting must not affect the transition
    grid.set_cell(4, 4, 1)
    GameOfLifeRules.advance(grid)

    assert np.array_equal(grid.neighbors, before)
    assert grid.live_positions() == {(0, 2), (1, 2), (2, 2)}


def test_toggle_then_count_touches_only_neighbors():
    grid = GameOfLifeRules.seed(9, 0.4, True, rng=np.random.default_rng(3))
    GameOfLifeRules.count_neighbors(grid)
    cells_before = grid.cells.copy()
    counts_before = grid.neighbors.copy()

    assert GameOfLifeRules.toggle_cell(grid, 4, 4)
    GameOfLifeRules.count_neighbors(grid)

    changed_cells = set(zip(*np.nonzero(grid.cells != cells_before)))
    assert changed_cells == {(4, 4)}

    changed_counts = {
        (int(r), int(c)) for r, c in zip(*np.nonzero(grid.neighbors != counts_before))
    }
    ring = {(r, c) for r in range(3, 6) for c in range(3, 6)} - {(4, 4)}
    assert changed_counts == ring


def test_toggle_corner_updates_three_neighbors():
    grid = make_grid(4, [])
    GameOfLifeRules.toggle_cell(grid, 0, 0)
    GameOfLifeRules.count_neighbors(grid)

    nonzero = {(int(r), int(c)) for r, c in zip(*np.nonzero(grid.neighbors))}
    assert nonzero == {(0, 1), (1, 0), (1, 1)}


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (5, 0), (0, 5), (9, 9)])
def test_toggle_out_of_range_is_rejected(row, col):
    grid = make_grid(5, [(2, 2)])
    before = grid.cells.copy()

    assert GameOfLifeRules.toggle_cell(grid, row, col) is False
    assert np.array_equal(grid.cells, before)


def test_toggle_twice_restores_cell():
    grid = make_grid(3, [])
    GameOfLifeRules.toggle_cell(grid, 1, 1)
    assert grid.is_alive(1, 1)
    GameOfLifeRules.toggle_cell(grid, 1, 1)
    assert not grid.is_alive(1, 1)


def test_glider_moves_diagonally():
    glider = {(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)}
    grid = make_grid(10, glider)

    for _ in range(4):
        generation(grid)

    assert grid.live_positions() == {(r + 1, c + 1) for r, c in glider}

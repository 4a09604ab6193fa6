"""Simulation driver: pause/step/reset state machine and the lifetime counter."""

from enum import Enum
from typing import TYPE_CHECKING, Optional

import numpy as np

from life_visualizer.config import (
    MAX_TICK_RATE_MS,
    TICK_RATE_STEP_MS,
    VisualizerConfig,
)
from life_visualizer.models.grid_state import GridState
from life_visualizer.simulation.gol_rules import GameOfLifeRules

if TYPE_CHECKING:
    from life_visualizer.renderers.pygame_grid import RenderResult


class SimulationState(Enum):
    """States of the driver loop."""

    RUNNING = "running"
    PAUSED = "paused"
    STEPPING = "stepping"
    RESET = "reset"


# Gosper Glider Gun - creates gliders continuously
# fmt: off
GLIDER_GUN_CELLS = [
    (0, 24),
    (1, 22), (1, 24),
    (2, 12), (2, 13), (2, 20), (2, 21), (2, 34), (2, 35),
    (3, 11), (3, 15), (3, 20), (3, 21), (3, 34), (3, 35),
    (4, 0), (4, 1), (4, 10), (4, 16), (4, 20), (4, 21),
    (5, 0), (5, 1), (5, 10), (5, 14), (5, 16), (5, 17), (5, 22), (5, 24),
    (6, 10), (6, 16), (6, 24),
    (7, 11), (7, 15),
    (8, 12), (8, 13),
]
# fmt: on


class LifeSimulator:
    """
    Owns the grid and drives it one generation at a time.

    Transitions:
    - RUNNING <-> PAUSED on toggle
    - PAUSED + step request -> STEPPING -> PAUSED after one generation
    - any state + reset -> RESET -> RUNNING/PAUSED (configured start state)
    - lifetime counter at zero -> RESET on the next tick, even when paused

    RESET is passed through inside ``reset()`` and is never left as the
    current state; callers only observe RUNNING, PAUSED and STEPPING.
    """

    def __init__(self, config: VisualizerConfig):
        """
        Initialize the simulator and seed the first grid.

        Args:
            config: Visualizer configuration.
        """
        self.config = config
        self.rng = np.random.default_rng(config.random_seed)
        self.tick_rate_ms = config.tick_rate_ms
        self.grid = GridState(config.dimension)
        self.lifetime = config.lifetime
        self.generation = 0
        self.auto_reseeds = 0
        self.reset()

    @property
    def paused(self) -> bool:
        return self.state in (SimulationState.PAUSED, SimulationState.STEPPING)

    def reset(self) -> None:
        """Reseed the grid and restore the counters and pause state."""
        if self.config.pattern == "random":
            self.grid = GameOfLifeRules.seed(
                self.config.dimension,
                self.config.probability,
                self.config.use_random,
                rng=self.rng,
            )
            GameOfLifeRules.count_neighbors(self.grid)
        else:
            self.initialize_pattern(self.config.pattern)

        self.lifetime = self.config.lifetime
        self.generation = 0
        self.state = (
            SimulationState.PAUSED
            if self.config.start_paused
            else SimulationState.RUNNING
        )

    def initialize_pattern(self, pattern: str) -> None:
        """
        Clear the grid and place a predefined pattern around its centre.

        Neighbor counts are refreshed afterwards.

        Args:
            pattern: Pattern name ("empty", "glider", "glider_gun", "acorn",
                "rpentomino", "block", "blinker").

        Raises:
            ValueError: If the pattern name is unknown.
        """
        self.grid = GridState(self.config.dimension)
        center = self.config.dimension // 2

        if pattern == "empty":
            pass
        elif pattern == "glider":
            self._place_pattern(
                [[0, 1, 0], [0, 0, 1], [1, 1, 1]], center - 1, center - 1
            )
        elif pattern == "glider_gun":
            self._place_cells(GLIDER_GUN_CELLS, 1, 1)
        elif pattern == "acorn":
            # Takes 5206 generations to stabilize
            self._place_pattern(
                [
                    [0, 1, 0, 0, 0, 0, 0],
                    [0, 0, 0, 1, 0, 0, 0],
                    [1, 1, 0, 0, 1, 1, 1],
                ],
                center - 1,
                center - 3,
            )
        elif pattern == "rpentomino":
            self._place_pattern(
                [[0, 1, 1], [1, 1, 0], [0, 1, 0]], center - 1, center - 1
            )
        elif pattern == "block":
            self._place_pattern([[1, 1], [1, 1]], center - 1, center - 1)
        elif pattern == "blinker":
            self._place_pattern([[1, 1, 1]], center, center - 1)
        else:
            raise ValueError(f"unknown pattern '{pattern}'")

        GameOfLifeRules.count_neighbors(self.grid)

    def _place_pattern(self, pattern: list[list[int]], row: int, col: int) -> None:
        """Place a pattern at the specified position, clipping at the edges."""
        for r, row_data in enumerate(pattern):
            for c, cell in enumerate(row_data):
                self.grid.set_cell(row + r, col + c, cell)

    def _place_cells(self, cells: list[tuple[int, int]], row: int, col: int) -> None:
        for r, c in cells:
            self.grid.set_cell(row + r, col + c, 1)

    def step(self) -> None:
        """Compute one generation and spend one unit of lifetime."""
        GameOfLifeRules.step(self.grid)
        self.lifetime -= 1
        self.generation += 1

    def tick(self) -> bool:
        """
        Per-frame update.

        Reseeds first if the lifetime has run out, then advances one
        generation if running or a single step was requested.

        Returns:
            True if a generation was computed.
        """
        if self.lifetime <= 0:
            self.reset()
            self.auto_reseeds += 1

        if self.state == SimulationState.STEPPING:
            self.step()
            self.state = SimulationState.PAUSED
            return True
        if self.state == SimulationState.RUNNING:
            self.step()
            return True
        return False

    def toggle_pause(self) -> None:
        if self.state == SimulationState.RUNNING:
            self.state = SimulationState.PAUSED
        else:
            self.state = SimulationState.RUNNING

    def request_step(self) -> bool:
        """Queue a single generation. Only honoured while paused."""
        if self.state != SimulationState.PAUSED:
            return False
        self.state = SimulationState.STEPPING
        return True

    def toggle_at(self, row: int, col: int) -> bool:
        """Flip one cell and refresh the neighbor counts."""
        if not GameOfLifeRules.toggle_cell(self.grid, row, col):
            return False
        GameOfLifeRules.count_neighbors(self.grid)
        return True

    def speed_up(self) -> int:
        self.tick_rate_ms = max(0, self.tick_rate_ms - TICK_RATE_STEP_MS)
        return self.tick_rate_ms

    def speed_down(self) -> int:
        self.tick_rate_ms = min(
            MAX_TICK_RATE_MS, self.tick_rate_ms + TICK_RATE_STEP_MS
        )
        return self.tick_rate_ms

    def apply_input(self, result: "RenderResult") -> Optional[str]:
        """
        Apply the user input collected by a renderer.

        Args:
            result: A RenderResult from the renderer.

        Returns:
            A short description of what changed, or None.
        """
        message = None
        if result.reset:
            self.reset()
            message = "Reset simulation"
        if result.toggle_pause:
            self.toggle_pause()
            message = "Paused" if self.paused else "Resumed"
        if result.step_once:
            self.request_step()
        if result.speed_up:
            message = f"Tick rate: {self.speed_up()} ms"
        if result.speed_down:
            message = f"Tick rate: {self.speed_down()} ms"
        for row, col in result.toggled_cells:
            self.toggle_at(row, col)
        return message

    def get_grid(self) -> GridState:
        """Get the current grid state."""
        return self.grid

    def get_generation(self) -> int:
        """Get the current generation number."""
        return self.generation

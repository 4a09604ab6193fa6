"""Conway's Game of Life rendered with pygame."""

from life_visualizer.config import VisualizerConfig
from life_visualizer.models.grid_state import Cell, GridState
from life_visualizer.simulation.gol_rules import GameOfLifeRules
from life_visualizer.simulation.simulator import LifeSimulator, SimulationState

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "GameOfLifeRules",
    "GridState",
    "LifeSimulator",
    "SimulationState",
    "VisualizerConfig",
]

"""Simulation package for Game of Life."""

from life_visualizer.simulation.gol_rules import GameOfLifeRules
from life_visualizer.simulation.simulator import LifeSimulator, SimulationState

__all__ = ["GameOfLifeRules", "LifeSimulator", "SimulationState"]

"""Models package for the Life visualizer."""

from life_visualizer.models.grid_state import Cell, GridState

__all__ = ["Cell", "GridState"]

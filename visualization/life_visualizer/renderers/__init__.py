"""Renderers package for the Life visualizer."""

from life_visualizer.renderers.pygame_grid import PygameGridRenderer, RenderResult
from life_visualizer.renderers.stats_panel import StatsPanel

__all__ = ["PygameGridRenderer", "RenderResult", "StatsPanel"]

"""Configuration and constants for the Life visualizer."""

from dataclasses import dataclass
from typing import Optional, Tuple

# ==============================================================================
# Color Scheme
# ==============================================================================

ALIVE_COLOR: Tuple[int, int, int] = (0, 0, 0)
DEAD_COLOR: Tuple[int, int, int] = (255, 255, 255)
GRID_LINE_COLOR: Tuple[int, int, int] = (230, 230, 230)
DEBUG_TEXT_COLOR: Tuple[int, int, int] = (255, 255, 255)

# UI Colors
BACKGROUND_COLOR: Tuple[int, int, int] = (245, 245, 245)
STATS_PANEL_BG: Tuple[int, int, int] = (30, 30, 40)
TEXT_COLOR: Tuple[int, int, int] = (220, 220, 220)
TEXT_HIGHLIGHT_COLOR: Tuple[int, int, int] = (255, 255, 255)
STATUS_RUNNING_COLOR: Tuple[int, int, int] = (0, 255, 100)
STATUS_PAUSED_COLOR: Tuple[int, int, int] = (255, 200, 0)

# ==============================================================================
# Layout Constants
# ==============================================================================

STATS_PANEL_WIDTH: int = 280
STATS_PANEL_MIN_HEIGHT: int = 420
DEFAULT_CELL_SIZE: int = 10
MIN_CELL_SIZE: int = 2
MAX_CELL_SIZE: int = 40

# ==============================================================================
# Simulation Defaults
# ==============================================================================

DEFAULT_DIMENSION: int = 100
DEFAULT_PROBABILITY: float = 0.1
DEFAULT_LIFETIME: int = 10000  # Generations before the grid is reseeded
DEFAULT_TICK_RATE_MS: int = 100  # Delay between frames
TICK_RATE_STEP_MS: int = 100
MAX_TICK_RATE_MS: int = 2000
DEFAULT_FPS: int = 120

PATTERNS: Tuple[str, ...] = (
    "random",
    "empty",
    "glider",
    "glider_gun",
    "acorn",
    "rpentomino",
    "block",
    "blinker",
)


# ==============================================================================
# Configuration Dataclass
# ==============================================================================


@dataclass
class VisualizerConfig:
    """Configuration for the Life visualizer."""

    # Grid
    dimension: int = DEFAULT_DIMENSION
    probability: float = DEFAULT_PROBABILITY
    use_random: bool = True
    pattern: str = "random"
    random_seed: Optional[int] = None

    # Driver
    start_paused: bool = True
    lifetime: int = DEFAULT_LIFETIME
    tick_rate_ms: int = DEFAULT_TICK_RATE_MS

    # Display settings
    cell_size: int = DEFAULT_CELL_SIZE
    fps: int = DEFAULT_FPS
    show_stats: bool = True
    debug: bool = False

    def __post_init__(self):
        """Validate values that the simulation cannot recover from."""
        if self.dimension < 1:
            raise ValueError(f"dimension must be at least 1, got {self.dimension}")
        if not 0.0 <= self.probability <= 1.0:
            raise ValueError(
                f"probability must be between 0.0 and 1.0, got {self.probability}"
            )
        if self.lifetime < 1:
            raise ValueError(f"lifetime must be at least 1, got {self.lifetime}")
        if not 0 <= self.tick_rate_ms <= MAX_TICK_RATE_MS:
            raise ValueError(
                f"tick rate must be between 0 and {MAX_TICK_RATE_MS} ms, "
                f"got {self.tick_rate_ms}"
            )
        if not MIN_CELL_SIZE <= self.cell_size <= MAX_CELL_SIZE:
            raise ValueError(
                f"cell size must be between {MIN_CELL_SIZE} and {MAX_CELL_SIZE}, "
                f"got {self.cell_size}"
            )
        if self.fps < 1:
            raise ValueError(f"fps must be at least 1, got {self.fps}")
        if self.pattern not in PATTERNS:
            raise ValueError(f"unknown pattern '{self.pattern}'")

    @property
    def grid_pixel_size(self) -> int:
        """Width and height of the square grid area in pixels."""
        return self.dimension * self.cell_size

    @property
    def window_width(self) -> int:
        """Total window width including stats panel."""
        if self.show_stats:
            return self.grid_pixel_size + STATS_PANEL_WIDTH
        return self.grid_pixel_size

    @property
    def window_height(self) -> int:
        """Total window height."""
        if self.show_stats:
            return max(self.grid_pixel_size, STATS_PANEL_MIN_HEIGHT)
        return self.grid_pixel_size

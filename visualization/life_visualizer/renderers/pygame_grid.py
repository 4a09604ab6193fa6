"""Pygame-based grid renderer for Game of Life visualization."""

import pygame
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from life_visualizer.config import (
    VisualizerConfig,
    ALIVE_COLOR,
    DEAD_COLOR,
    BACKGROUND_COLOR,
    DEBUG_TEXT_COLOR,
    STATS_PANEL_WIDTH,
)
from life_visualizer.models.grid_state import GridState
from life_visualizer.renderers.stats_panel import StatsPanel


@dataclass
class RenderResult:
    """Result of a render call with user input information."""

    should_quit: bool = False
    toggle_pause: bool = False
    step_once: bool = False
    reset: bool = False
    speed_up: bool = False
    speed_down: bool = False
    toggled_cells: List[Tuple[int, int]] = field(default_factory=list)


class PygameGridRenderer:
    """
    Renders the Game of Life grid and collects keyboard and mouse input.

    Features:
    - Live cells in black on white
    - Optional neighbor-count overlay (debug mode)
    - Pause overlay
    - Stats panel sidebar
    """

    def __init__(self, config: VisualizerConfig):
        """
        Initialize the pygame renderer.

        Args:
            config: Visualizer configuration.
        """
        self.config = config
        self.cell_size = config.cell_size

        # Initialize pygame
        pygame.init()
        pygame.display.set_caption("Game of Life")

        # Create display
        self.screen = pygame.display.set_mode(
            (config.window_width, config.window_height)
        )

        # Create stats panel
        if config.show_stats:
            self.stats_panel = StatsPanel(
                self.screen,
                x_offset=config.grid_pixel_size,
                width=STATS_PANEL_WIDTH,
                height=config.window_height,
            )
        else:
            self.stats_panel = None

        self.debug_font: Optional[pygame.font.Font] = None
        if config.debug:
            self.debug_font = pygame.font.SysFont(
                "monospace", max(8, self.cell_size - 2)
            )

        self.clock = pygame.time.Clock()

    def cell_at_pixel(self, x: int, y: int) -> Optional[Tuple[int, int]]:
        """
        Map a pointer position to a grid cell.

        Args:
            x: Horizontal pixel position.
            y: Vertical pixel position.

        Returns:
            (row, col) of the cell under the pointer, or None outside the grid.
        """
        if x < 0 or y < 0:
            return None
        row = y // self.cell_size
        col = x // self.cell_size
        if row >= self.config.dimension or col >= self.config.dimension:
            return None
        return row, col

    def poll_input(self) -> RenderResult:
        """Drain the pygame event queue into a RenderResult."""
        result = RenderResult()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                result.should_quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE or event.key == pygame.K_q:
                    result.should_quit = True
                elif event.key == pygame.K_SPACE:
                    result.toggle_pause = True
                elif event.key == pygame.K_n or event.key == pygame.K_RIGHT:
                    result.step_once = True
                elif event.key == pygame.K_r:
                    result.reset = True
                elif event.key == pygame.K_UP or event.key == pygame.K_EQUALS:
                    result.speed_up = True
                elif event.key == pygame.K_DOWN or event.key == pygame.K_MINUS:
                    result.speed_down = True
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                cell = self.cell_at_pixel(*event.pos)
                if cell is not None:
                    result.toggled_cells.append(cell)

        return result

    def render(
        self,
        grid: GridState,
        generation: int = 0,
        lifetime: int = 0,
        paused: bool = False,
        tick_rate_ms: int = 0,
    ) -> RenderResult:
        """
        Render the complete visualization frame.

        Args:
            grid: Current grid state.
            generation: Current generation number.
            lifetime: Generations left before the grid is reseeded.
            paused: Whether simulation is paused.
            tick_rate_ms: Current delay between frames.

        Returns:
            RenderResult with user input flags.
        """
        result = self.poll_input()

        # Clear screen
        self.screen.fill(BACKGROUND_COLOR)

        # Draw grid cells
        self._draw_cells(grid)

        if self.debug_font is not None:
            self._draw_neighbor_counts(grid)

        # Draw stats panel
        if self.stats_panel:
            self.stats_panel.render(grid, generation, lifetime, paused, tick_rate_ms)

        # Draw pause overlay if paused
        if paused:
            self._draw_pause_overlay()

        # Update display
        pygame.display.flip()

        # Cap framerate
        self.clock.tick(self.config.fps)

        return result

    def _draw_pause_overlay(self) -> None:
        """Draw a small pause indicator in the top-left corner of the grid."""
        font = pygame.font.SysFont("monospace", 20, bold=True)
        text = font.render("PAUSED", True, (255, 255, 255))
        box = text.get_rect(topleft=(8, 8)).inflate(12, 8)

        overlay = pygame.Surface(box.size, pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        self.screen.blit(overlay, box.topleft)
        self.screen.blit(text, text.get_rect(center=box.center))

    def _draw_cells(self, grid: GridState) -> None:
        """Draw every cell, alive or dead."""
        size = self.cell_size
        pygame.draw.rect(
            self.screen,
            DEAD_COLOR,
            (0, 0, grid.dimension * size, grid.dimension * size),
        )

        for row, col in grid.live_positions():
            pygame.draw.rect(
                self.screen,
                ALIVE_COLOR,
                (col * size, row * size, size, size),
            )

    def _draw_neighbor_counts(self, grid: GridState) -> None:
        """Print the cached neighbor count on top of each live cell."""
        for row, col in grid.live_positions():
            label = self.debug_font.render(
                str(grid.neighbor_count(row, col)), True, DEBUG_TEXT_COLOR
            )
            self.screen.blit(
                label, (col * self.cell_size + 2, row * self.cell_size + 2)
            )

    def cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()

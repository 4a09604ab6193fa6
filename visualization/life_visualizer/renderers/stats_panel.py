"""Stats panel renderer for the simulation sidebar."""

import pygame
from typing import Optional

from life_visualizer.config import (
    STATS_PANEL_BG,
    STATUS_PAUSED_COLOR,
    STATUS_RUNNING_COLOR,
    TEXT_COLOR,
    TEXT_HIGHLIGHT_COLOR,
)
from life_visualizer.models.grid_state import GridState


class StatsPanel:
    """
    Renders the statistics sidebar panel.

    Displays:
    - Run status and current generation
    - Live cell count and population share
    - Generations remaining before the grid is reseeded
    - Key bindings
    """

    def __init__(
        self,
        screen: pygame.Surface,
        x_offset: int,
        width: int,
        height: int,
    ):
        """
        Initialize the stats panel.

        Args:
            screen: Pygame surface to draw on.
            x_offset: X position where panel starts.
            width: Width of the panel.
            height: Height of the panel.
        """
        self.screen = screen
        self.x = x_offset
        self.width = width
        self.height = height

        # Initialize fonts
        pygame.font.init()
        self.title_font = pygame.font.SysFont("monospace", 16, bold=True)
        self.header_font = pygame.font.SysFont("monospace", 14, bold=True)
        self.font = pygame.font.SysFont("monospace", 12)

        # Layout constants
        self.padding = 10
        self.line_height = 18
        self.section_gap = 10

    def render(
        self,
        grid: GridState,
        generation: int,
        lifetime: int,
        paused: bool = False,
        tick_rate_ms: int = 0,
    ) -> None:
        """
        Render the stats panel.

        Args:
            grid: Current grid state.
            generation: Current generation number.
            lifetime: Generations left before reseeding.
            paused: Whether simulation is paused.
            tick_rate_ms: Current delay between frames.
        """
        # Draw panel background
        pygame.draw.rect(
            self.screen,
            STATS_PANEL_BG,
            (self.x, 0, self.width, self.height),
        )

        # Draw border
        pygame.draw.line(
            self.screen,
            (60, 60, 70),
            (self.x, 0),
            (self.x, self.height),
            2,
        )

        y = self.padding

        # Title
        y = self._draw_text(
            "═══ Game of Life ═══",
            y,
            self.title_font,
            TEXT_HIGHLIGHT_COLOR,
            center=True,
        )
        y += self.section_gap

        status, status_color = (
            ("PAUSED", STATUS_PAUSED_COLOR)
            if paused
            else ("RUNNING", STATUS_RUNNING_COLOR)
        )
        y = self._draw_text(f"Status: {status}", y, self.header_font, status_color)
        y += self.section_gap // 2

        # Generation counter
        y = self._draw_text(f"Generation: {generation}", y, self.header_font)
        y = self._draw_text(f"Cycles Remaining: {lifetime}", y)
        y += self.section_gap

        y = self._draw_separator(y)
        y += self.section_gap // 2

        # Population
        total_live = grid.count_live_cells()
        share = 100.0 * total_live / len(grid)
        y = self._draw_text(
            f"─── Grid {grid.dimension}x{grid.dimension} ───",
            y,
            self.header_font,
            TEXT_HIGHLIGHT_COLOR,
        )
        y = self._draw_text(f"  Live Cells: {total_live}", y)
        y = self._draw_text(f"  Population: {share:.1f}%", y)
        y = self._draw_text(f"  Tick: {tick_rate_ms} ms", y)
        y += self.section_gap

        # Separator before controls
        y = self._draw_separator(y)
        y += self.section_gap // 2

        # Controls section (flows after content, not fixed position)
        y = self._draw_text(
            "─── Controls ───", y, self.header_font, TEXT_HIGHLIGHT_COLOR
        )
        y = self._draw_text("  SPACE: Pause/Resume", y)
        y = self._draw_text("  N/→: Step once", y)
        y = self._draw_text("  R: Reset", y)
        y = self._draw_text("  Click: Toggle cell", y)
        y = self._draw_text("  =/↑  -/↓: Speed +/-", y)
        y = self._draw_text("  Q/ESC: Quit", y)

    def _draw_text(
        self,
        text: str,
        y: int,
        font: Optional[pygame.font.Font] = None,
        color: tuple = TEXT_COLOR,
        center: bool = False,
    ) -> int:
        """
        Draw text at the specified position.

        Returns:
            Y position after this text (for chaining).
        """
        if font is None:
            font = self.font

        surface = font.render(text, True, color)

        if center:
            x = self.x + (self.width - surface.get_width()) // 2
        else:
            x = self.x + self.padding

        self.screen.blit(surface, (x, y))
        return y + self.line_height

    def _draw_separator(self, y: int) -> int:
        """Draw a horizontal separator line."""
        pygame.draw.line(
            self.screen,
            (60, 60, 70),
            (self.x + self.padding, y),
            (self.x + self.width - self.padding, y),
            1,
        )
        return y + 5

"""
Grid Hull - Editor State

Manages view settings and the on-screen cell layout.
"""

import math

from editor.core.constants import (
    CELL_PADDING_RATIO,
    MIN_CELL_FULL_SIZE,
    SCREEN_FILL_RATIO,
)


class EditorState:
    """Manages editor application state."""

    def __init__(self):
        # View settings
        self.show_grid: bool = False
        self.show_vertices: bool = True

        # Cell layout in pixels; recomputed on resize
        self.cell_full_size: int = 32
        self.cell_padding: int = 2
        self.cell_size: int = 30

    def toggle_grid(self):
        """Toggle grid line visibility."""
        self.show_grid = not self.show_grid

    def toggle_vertices(self):
        """Toggle vertex dot visibility."""
        self.show_vertices = not self.show_vertices

    def update_layout(self, screen_width: int, screen_height: int, grid_width: int, grid_height: int):
        """
        Size cells so the grid fills half of the smaller window dimension.

        Args:
            screen_width: Window width in pixels
            screen_height: Window height in pixels
            grid_width: Grid width in cells
            grid_height: Grid height in cells
        """
        screen_size = min(screen_width, screen_height) * SCREEN_FILL_RATIO
        grid_size = min(grid_width, grid_height)

        self.cell_full_size = max(int(screen_size / grid_size), MIN_CELL_FULL_SIZE)
        self.cell_padding = math.ceil(self.cell_full_size * CELL_PADDING_RATIO)
        self.cell_size = self.cell_full_size - self.cell_padding

"""
Grid Hull - Grid Renderer

Renders session cells, classified vertices and the seed marker on the
canvas.
"""

import pygame
from pygame import Rect, Surface

from editor.controllers.editor_state import EditorState
from editor.core.constants import COLOR_GRID, COLOR_SEED
from hull.core.session import HullSession
from hull.rendering.colors import VERTEX_SIZE_RATIO, cell_color, vertex_color


class GridRenderer:
    """Renders a hull session onto the canvas."""

    @staticmethod
    def render(screen: Surface, origin: tuple[int, int], session: HullSession, state: EditorState):
        """
        Render cells, then vertices on top.

        Args:
            screen: Pygame surface to draw on
            origin: Screen position of the grid's top-left corner
            session: Session to draw
            state: Editor state holding layout and view flags
        """
        ox, oy = origin
        full = state.cell_full_size

        for (x, y), cell_state in session.cell_states().items():
            rect = Rect(ox + x * full, oy + y * full, state.cell_size, state.cell_size)
            pygame.draw.rect(screen, cell_color(cell_state), rect)

        if session.seed is not None:
            sx, sy = session.seed.pos
            rect = Rect(ox + sx * full, oy + sy * full, state.cell_size, state.cell_size)
            pygame.draw.rect(screen, COLOR_SEED, rect, 2)

        if state.show_grid:
            GridRenderer._render_lines(screen, origin, session, full)

        if state.show_vertices:
            GridRenderer._render_vertices(screen, origin, session, state)

    @staticmethod
    def _render_lines(screen: Surface, origin: tuple[int, int], session: HullSession, full: int):
        ox, oy = origin
        bottom = oy + session.height * full
        right = ox + session.width * full

        for col in range(session.width + 1):
            x = ox + col * full
            pygame.draw.line(screen, COLOR_GRID, (x, oy), (x, bottom))

        for row in range(session.height + 1):
            y = oy + row * full
            pygame.draw.line(screen, COLOR_GRID, (ox, y), (right, y))

    @staticmethod
    def _render_vertices(screen: Surface, origin: tuple[int, int], session: HullSession, state: EditorState):
        ox, oy = origin
        radius = max(1, int(state.cell_size * VERTEX_SIZE_RATIO / 2))

        for (x, y), (weight, is_diagonal_case) in session.vertex_states().items():
            color = vertex_color(weight, is_diagonal_case)
            if color is None:
                continue
            # Centered in the padding gap at the corner
            center = (
                ox + x * state.cell_full_size - state.cell_padding // 2,
                oy + y * state.cell_full_size - state.cell_padding // 2,
            )
            pygame.draw.circle(screen, color, center, radius)

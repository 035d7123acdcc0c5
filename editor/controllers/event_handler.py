"""
Grid Hull - Event Handler

Routes user input to the session: left click toggles a cell, right click
moves the flood fill seed. Also handles keyboard shortcuts and window events.
"""

from typing import Callable, List, Optional, Tuple

import pygame

from .editor_state import EditorState
from editor.core.constants import CANVAS_OFFSET_X, CANVAS_OFFSET_Y
from editor.ui.widgets import Button
from hull.core.session import HullSession


class EventHandler:
    """Handles all user input events."""

    def __init__(
        self,
        state: EditorState,
        session: HullSession,
        buttons: List[Button],
        on_load: Callable[[], None],
        on_save: Callable[[], None],
        on_export: Callable[[], None],
        on_resize: Callable[[int, int], None],
    ):
        """
        Initialize event handler.

        Args:
            state: Editor state
            session: Hull session receiving toggle/seed operations
            buttons: List of UI buttons
            on_load: Callback for load action
            on_save: Callback for save action
            on_export: Callback for PNG export action
            on_resize: Callback for window resize (width, height)
        """
        self.state = state
        self.session = session
        self.buttons = buttons
        self.on_load = on_load
        self.on_save = on_save
        self.on_export = on_export
        self.on_resize = on_resize

    def handle_events(self, events: List[pygame.event.Event]) -> bool:
        """
        Handle all pygame events.

        Args:
            events: List of pygame events to process

        Returns:
            True if application should continue running, False if quit requested
        """
        for event in events:
            if event.type == pygame.QUIT:
                return False

            if event.type == pygame.KEYDOWN:
                self._handle_key(event)

            consumed = False
            for button in self.buttons:
                if button.handle_event(event):
                    consumed = True

            if consumed:
                continue

            if event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:  # Left click
                    self._toggle_at(event.pos)
                elif event.button == 3:  # Right click
                    self._seed_at(event.pos)

            elif event.type == pygame.VIDEORESIZE:
                self.on_resize(event.w, event.h)

        return True

    def _handle_key(self, event):
        """Handle keyboard input."""
        ctrl = bool(getattr(event, "mod", 0) & pygame.KMOD_CTRL)

        if event.key == pygame.K_s and ctrl:
            self.on_save()
        elif event.key == pygame.K_o and ctrl:
            self.on_load()
        elif event.key == pygame.K_e and ctrl:
            self.on_export()

        elif event.key == pygame.K_g:
            self.state.toggle_grid()
        elif event.key == pygame.K_p:
            self.state.toggle_vertices()
        elif event.key == pygame.K_c:
            self.session.clear()

    def screen_to_cell(self, screen_pos: Tuple[int, int]) -> Optional[Tuple[int, int]]:
        """
        Convert a screen position to cell coordinates.

        Returns:
            (x, y) of the cell under the position, or None if outside the grid
        """
        local_x = screen_pos[0] - CANVAS_OFFSET_X
        local_y = screen_pos[1] - CANVAS_OFFSET_Y
        if local_x < 0 or local_y < 0:
            return None

        x = local_x // self.state.cell_full_size
        y = local_y // self.state.cell_full_size
        if not self.session.topology.in_bounds(x, y):
            return None
        return (x, y)

    def _toggle_at(self, pos: Tuple[int, int]):
        cell = self.screen_to_cell(pos)
        if cell is not None:
            self.session.toggle_cell(*cell)

    def _seed_at(self, pos: Tuple[int, int]):
        cell = self.screen_to_cell(pos)
        if cell is not None:
            self.session.set_seed(*cell)

"""
Grid Hull - Editor Application

Main application class that wires the hull session to the pygame window,
input routing and session file persistence.
"""
import logging
from pathlib import Path
from typing import List, Optional

import pygame
from pygame import Rect

from .core.constants import *
from .ui.widgets import Button
from .ui.dialogs import open_file_dialog, save_file_dialog
from .controllers.editor_state import EditorState
from .controllers.event_handler import EventHandler
from .rendering.grid_renderer import GridRenderer
from hull.core.grid import OutOfRangeError
from hull.core.session import HullSession
from hull.formats.session_file import load_into, save_session
from hull.formats.snapshot import MalformedSnapshotError
from hull.rendering.pil_renderer import save_png

logger = logging.getLogger(__name__)


class EditorApplication:
    """Main editor application."""

    def __init__(
        self,
        width: int = DEFAULT_GRID_WIDTH,
        height: int = DEFAULT_GRID_HEIGHT,
        session_path: Optional[str] = DEFAULT_SESSION_PATH,
        autosave: bool = True,
    ):
        pygame.init()

        self.screen_width = SCREEN_WIDTH
        self.screen_height = SCREEN_HEIGHT
        self.screen = pygame.display.set_mode(
            (self.screen_width, self.screen_height),
            pygame.RESIZABLE
        )
        pygame.display.set_caption("Grid Hull Editor")

        self.font = pygame.font.SysFont("monospace", 14)

        self.session = HullSession(width, height)
        self.session_path = session_path
        self.state = EditorState()
        self.state.update_layout(self.screen_width, self.screen_height, width, height)

        if session_path:
            self._restore(session_path)

        # Persistence is driven from here; the session only reports changes
        if autosave:
            self.session.add_listener(self._autosave)

        self.buttons: List[Button] = []
        self.btn_grid: Optional[Button] = None
        self.btn_points: Optional[Button] = None
        self._create_ui()

        self.event_handler = EventHandler(
            self.state,
            self.session,
            self.buttons,
            on_load=self._on_load,
            on_save=self._on_save,
            on_export=self._on_export,
            on_resize=self._on_resize,
        )

        self.running = True
        self.clock = pygame.time.Clock()

    def _create_ui(self):
        """Create toolbar buttons."""
        self.buttons.clear()
        x = 10

        for text, width, callback in (
            ("Load", 60, self._on_load),
            ("Save", 60, self._on_save),
            ("Export", 70, self._on_export),
            ("Clear", 60, self.session.clear),
        ):
            self.buttons.append(Button(Rect(x, 5, width, 30), text, callback))
            x += width + 10

        x += 20
        self.btn_grid = Button(Rect(x, 5, 50, 30), "Grid", self._toggle_grid)
        self.buttons.append(self.btn_grid)
        x += 60

        self.btn_points = Button(Rect(x, 5, 70, 30), "Points", self._toggle_vertices)
        self.buttons.append(self.btn_points)

        self._update_view_buttons()

    def _toggle_grid(self):
        self.state.toggle_grid()
        self._update_view_buttons()

    def _toggle_vertices(self):
        self.state.toggle_vertices()
        self._update_view_buttons()

    def _update_view_buttons(self):
        self.btn_grid.active = self.state.show_grid
        self.btn_points.active = self.state.show_vertices

    def _restore(self, path: str):
        try:
            load_into(self.session, path)
        except (MalformedSnapshotError, OutOfRangeError) as e:
            print(f"Warning: Could not restore session from {path}: {e}")

    def _autosave(self, session: HullSession):
        if self.session_path:
            save_session(session, self.session_path)

    def _on_load(self):
        """Load a session file."""
        path = open_file_dialog()
        if path:
            self.session_path = path
            self._restore(path)

    def _on_save(self):
        """Save the current session."""
        path = self.session_path or save_file_dialog()
        if path:
            self.session_path = path
            save_session(self.session, path)

    def _on_export(self):
        """Export the canvas as a PNG next to the session file."""
        if self.session_path:
            path = str(Path(self.session_path).with_suffix(".png"))
        else:
            path = DEFAULT_EXPORT_PATH
        save_png(self.session, path, cell_size=self.state.cell_full_size)
        logger.info("Exported %s", path)

    def _on_resize(self, width: int, height: int):
        """Handle window resize."""
        self.screen_width = width
        self.screen_height = height
        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.state.update_layout(width, height, self.session.width, self.session.height)

    def run(self):
        """Main loop."""
        while self.running:
            events = pygame.event.get()
            self.running = self.event_handler.handle_events(events)
            self._render()
            self.clock.tick(FRAME_RATE)

        pygame.quit()

    def _render(self):
        """Render the editor."""
        self.screen.fill(COLOR_BG)

        pygame.draw.rect(self.screen, COLOR_TOOLBAR, (0, 0, self.screen_width, TOOLBAR_HEIGHT))
        for button in self.buttons:
            button.render(self.screen, self.font)

        GridRenderer.render(self.screen, (CANVAS_OFFSET_X, CANVAS_OFFSET_Y), self.session, self.state)

        self._render_status()

        pygame.display.flip()

    def _render_status(self):
        """Render status bar."""
        status_rect = Rect(0, self.screen_height - STATUS_HEIGHT, self.screen_width, STATUS_HEIGHT)
        pygame.draw.rect(self.screen, COLOR_STATUS, status_rect)

        status_parts = [f"Grid: {self.session.width}x{self.session.height}"]

        seed = self.session.seed_pos
        status_parts.append(f"Seed: {seed if seed else '-'}")
        status_parts.append(f"Region: {len(self.session.closed_order)} cells")

        cell = self.event_handler.screen_to_cell(pygame.mouse.get_pos())
        if cell:
            status_parts.append(f"Cell: {cell}")
            vertex = self.session.topology.vertex_at(*cell)
            if vertex.weight is not None:
                saddle = " saddle" if vertex.is_diagonal_case else ""
                status_parts.append(f"Vertex weight: {vertex.weight}{saddle}")

        if self.session_path:
            status_parts.append(f"File: {Path(self.session_path).name}")

        status_text = "  |  ".join(status_parts)
        text_surf = self.font.render(status_text, True, COLOR_TEXT)
        self.screen.blit(text_surf, (10, self.screen_height - STATUS_HEIGHT + 8))

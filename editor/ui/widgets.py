"""
Grid Hull - UI Widgets

Toolbar widget components for the editor.
"""

from typing import Callable

import pygame
from pygame import Rect, Surface

from editor.core.constants import (
    COLOR_BUTTON,
    COLOR_BUTTON_ACTIVE,
    COLOR_BUTTON_HOVER,
    COLOR_GRID,
    COLOR_TEXT,
)


class Button:
    """Simple toolbar button."""

    def __init__(self, rect: Rect, text: str, callback: Callable[[], None]):
        self.rect = rect
        self.text = text
        self.callback = callback
        self.hovered = False
        self.active = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Update hover state and fire the callback on left click.

        Returns:
            True if the event was a click on this button
        """
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False

    def render(self, screen: Surface, font: pygame.font.Font):
        if self.active:
            color = COLOR_BUTTON_ACTIVE
        elif self.hovered:
            color = COLOR_BUTTON_HOVER
        else:
            color = COLOR_BUTTON
        pygame.draw.rect(screen, color, self.rect)
        pygame.draw.rect(screen, COLOR_GRID, self.rect, 1)

        text_surf = font.render(self.text, True, COLOR_TEXT)
        screen.blit(text_surf, text_surf.get_rect(center=self.rect.center))

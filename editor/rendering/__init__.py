"""
Grid Hull - Rendering Module

Pygame rendering for the hull session canvas.
"""

from .grid_renderer import GridRenderer

__all__ = ['GridRenderer']

"""
Grid Hull - Editor Package

A Pygame-based editor for toggling cells, choosing a flood fill seed and
viewing the resulting vertex classification.
"""

from .application import EditorApplication
from .main import main

__all__ = ['EditorApplication', 'main']

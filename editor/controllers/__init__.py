"""
Grid Hull - Controllers Module

Application state management and event handling.
"""

from .editor_state import EditorState
from .event_handler import EventHandler

__all__ = ['EditorState', 'EventHandler']

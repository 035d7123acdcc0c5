"""
Grid Hull - UI Module

Toolbar widgets and file dialogs.
"""

from .dialogs import open_file_dialog, save_file_dialog
from .widgets import Button

__all__ = [
    "Button",
    "open_file_dialog",
    "save_file_dialog",
]

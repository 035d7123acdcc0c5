"""
Grid Hull - File Dialogs

Session file pickers using plyer, falling back to tkinter when plyer has
no backend on this platform.
"""

from plyer import filechooser

SESSION_FILETYPES = [("Session files", "*.json"), ("All files", "*.*")]


def _tkinter_dialog(save: bool, title: str, default_extension: str) -> str | None:
    try:
        import tkinter as tk
        from tkinter import filedialog
    except ImportError:
        print("tkinter not available for file dialog")
        return None

    root = tk.Tk()
    root.withdraw()
    try:
        if save:
            path = filedialog.asksaveasfilename(
                title=title, defaultextension=default_extension, filetypes=SESSION_FILETYPES
            )
        else:
            path = filedialog.askopenfilename(title=title, filetypes=SESSION_FILETYPES)
    finally:
        root.destroy()
    return path or None


def open_file_dialog(title: str = "Load Session") -> str | None:
    """
    Ask for a session file to open.

    Returns:
        Selected file path, or None if canceled
    """
    try:
        result = filechooser.open_file(title=title, filters=SESSION_FILETYPES)
    except (OSError, NotImplementedError):
        return _tkinter_dialog(False, title, ".json")
    return result[0] if result else None


def save_file_dialog(title: str = "Save Session", default_extension: str = ".json") -> str | None:
    """
    Ask for a path to save a session file to.

    The default extension is appended when the chosen name lacks it.

    Returns:
        Selected file path, or None if canceled
    """
    try:
        result = filechooser.save_file(title=title, filters=SESSION_FILETYPES)
    except (OSError, NotImplementedError):
        return _tkinter_dialog(True, title, default_extension)
    if not result:
        return None
    path = result[0]
    if default_extension and not path.endswith(default_extension):
        path += default_extension
    return path

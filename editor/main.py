"""
Grid Hull - Editor Main

Command-line entry point for the editor application.

Usage:
    hull-editor [width height] [session.json]

Defaults to a 16x16 grid saved to hull_session.json.
"""

import logging
import sys

from .application import EditorApplication
from .core.constants import DEFAULT_GRID_HEIGHT, DEFAULT_GRID_WIDTH, DEFAULT_SESSION_PATH


def parse_arguments(args: list[str]) -> tuple[int, int, str]:
    """
    Parse command-line arguments with defaults.

    Returns:
        tuple[int, int, str]: (width, height, session_json)

    Usage patterns:
        hull-editor                       # 16x16, default session file
        hull-editor grid.json             # 16x16, given session file
        hull-editor 24 12                 # custom size, default session file
        hull-editor 24 12 grid.json       # all explicit
    """
    if len(args) == 0:
        return DEFAULT_GRID_WIDTH, DEFAULT_GRID_HEIGHT, DEFAULT_SESSION_PATH

    elif len(args) == 1:
        if args[0].endswith(".json"):
            return DEFAULT_GRID_WIDTH, DEFAULT_GRID_HEIGHT, args[0]
        _usage_error("Single argument must be a session JSON file")

    elif len(args) in (2, 3):
        width, height = _parse_size(args[0], args[1])
        session_path = args[2] if len(args) == 3 else DEFAULT_SESSION_PATH
        if not session_path.endswith(".json"):
            _usage_error(f"Session file must be JSON: {session_path}")
        return width, height, session_path

    _usage_error(f"Too many arguments ({len(args)} provided)")


def _parse_size(width_arg: str, height_arg: str) -> tuple[int, int]:
    try:
        width, height = int(width_arg), int(height_arg)
    except ValueError:
        _usage_error(f"Grid size must be two integers, got {width_arg!r} {height_arg!r}")
    if width <= 0 or height <= 0:
        _usage_error(f"Grid size must be positive, got {width}x{height}")
    return width, height


def _usage_error(message: str):
    print(f"Error: {message}")
    print("")
    show_usage()
    sys.exit(1)


def show_usage():
    """Display usage information."""
    print("Usage: hull-editor [width height] [session.json]")
    print("")
    print("Arguments:")
    print(f"  width height   Grid size in cells (default: {DEFAULT_GRID_WIDTH} {DEFAULT_GRID_HEIGHT})")
    print(f"  session.json   Session file, loaded on start and saved on change (default: {DEFAULT_SESSION_PATH})")
    print("")
    print("Controls:")
    print("  Left click     Toggle cell")
    print("  Right click    Set flood fill seed")
    print("  G / P / C      Grid lines / vertex dots / clear")
    print("  Ctrl+S/O/E     Save / load / export PNG")


def main():
    """Main entry point for the editor."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    width, height, session_path = parse_arguments(sys.argv[1:])

    app = EditorApplication(width, height, session_path)
    app.run()


if __name__ == "__main__":
    main()

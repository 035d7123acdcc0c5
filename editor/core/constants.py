"""
Grid Hull - Editor Constants

Layout, color and default configuration values for the editor.
"""

# Grid defaults
DEFAULT_GRID_WIDTH = 16
DEFAULT_GRID_HEIGHT = 16
DEFAULT_SESSION_PATH = "hull_session.json"
DEFAULT_EXPORT_PATH = "hull_session.png"

# Window
SCREEN_WIDTH = 900
SCREEN_HEIGHT = 900
FRAME_RATE = 60

# UI Layout
TOOLBAR_HEIGHT = 40
STATUS_HEIGHT = 30
CANVAS_OFFSET_X = 10
CANVAS_OFFSET_Y = TOOLBAR_HEIGHT + 10

# Cell layout: grid fills this fraction of the smaller window dimension
SCREEN_FILL_RATIO = 0.5
CELL_PADDING_RATIO = 0.05
MIN_CELL_FULL_SIZE = 2

# Colors
COLOR_BG = (48, 48, 48)
COLOR_TOOLBAR = (32, 32, 32)
COLOR_STATUS = (32, 32, 32)
COLOR_GRID = (80, 80, 80)
COLOR_SEED = (255, 0, 0)
COLOR_TEXT = (255, 255, 255)
COLOR_BUTTON = (64, 64, 64)
COLOR_BUTTON_HOVER = (80, 80, 80)
COLOR_BUTTON_ACTIVE = (100, 100, 200)

"""
Grid Hull - Colors

Shared color mapping for cells and vertices used by the pygame editor
and the PNG exporter.
"""

from typing import Dict, Optional, Tuple

from ..core.session import CellState

# Type alias for RGB color
RGBColor = Tuple[int, int, int]

# Cell colors
CELL_DEFAULT_COLOR: RGBColor = (128, 128, 128)  # gray
CELL_SET_COLOR: RGBColor = (0, 0, 255)  # blue
CELL_OPEN_COLOR: RGBColor = (255, 255, 0)  # yellow
CELL_CLOSED_COLOR: RGBColor = (0, 128, 0)  # green

# Vertex colors by weight
VERTEX_COLORS: Dict[int, RGBColor] = {
    0: (255, 255, 255),  # white, exterior
    1: (0, 255, 255),  # aqua, convex corner
    2: (255, 255, 0),  # yellow, colinear
    3: (128, 0, 128),  # purple, concave corner
    4: (245, 245, 220),  # beige, inside
}
VERTEX_SADDLE_COLOR: RGBColor = (255, 165, 0)  # orange

# Vertex dot diameter relative to cell size
VERTEX_SIZE_RATIO = 0.4


def cell_color(state: CellState) -> RGBColor:
    """Closed wins over open, open over set."""
    if state.is_closed:
        return CELL_CLOSED_COLOR
    if state.is_open:
        return CELL_OPEN_COLOR
    if state.is_set:
        return CELL_SET_COLOR
    return CELL_DEFAULT_COLOR


def vertex_color(weight: Optional[int], is_diagonal_case: bool = False) -> Optional[RGBColor]:
    """
    Get the dot color for a vertex.

    Args:
        weight: Vertex weight, or None if not classified
        is_diagonal_case: Whether the vertex is a saddle

    Returns:
        RGB color, or None for an unclassified (invisible) vertex
    """
    if weight is None:
        return None
    if is_diagonal_case:
        return VERTEX_SADDLE_COLOR
    return VERTEX_COLORS[weight]

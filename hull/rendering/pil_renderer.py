"""
Grid Hull - PIL Renderer

PIL-based rendering for generating PNG images of a session's cells and
classified vertices.
"""

from pathlib import Path
from typing import Union

try:
    from PIL import Image, ImageDraw
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

from ..core.session import HullSession
from .colors import VERTEX_SIZE_RATIO, cell_color, vertex_color

BACKGROUND_COLOR = (0, 0, 0)


def render_session_to_image(
    session: HullSession,
    cell_size: int = 32,
    padding_ratio: float = 0.05,
    render_vertices: bool = True,
) -> Image.Image:
    """
    Render a session to a PIL Image.

    Cells are drawn as squares separated by a gap of padding_ratio of the
    cell size; classified vertices are drawn as dots on the cell corners.

    Args:
        session: Session to render
        cell_size: Size of one cell including its padding, in pixels
        padding_ratio: Fraction of cell_size left as a gap between cells
        render_vertices: Whether to draw vertex dots

    Returns:
        PIL Image object
    """
    if cell_size < 2:
        raise ValueError(f"cell_size must be at least 2, got {cell_size}")

    padding = max(1, int(round(cell_size * padding_ratio)))
    inner = cell_size - padding

    img = Image.new(
        "RGB",
        (session.width * cell_size + padding, session.height * cell_size + padding),
        BACKGROUND_COLOR,
    )
    draw = ImageDraw.Draw(img)

    for (x, y), state in session.cell_states().items():
        left = padding + x * cell_size
        top = padding + y * cell_size
        draw.rectangle(
            [left, top, left + inner - 1, top + inner - 1],
            fill=cell_color(state),
        )

    if render_vertices:
        radius = max(1, int(inner * VERTEX_SIZE_RATIO / 2))
        for (x, y), (weight, is_diagonal_case) in session.vertex_states().items():
            color = vertex_color(weight, is_diagonal_case)
            if color is None:
                continue
            # Vertex sits in the middle of the gap between cells
            cx = x * cell_size + padding // 2
            cy = y * cell_size + padding // 2
            draw.ellipse([cx - radius, cy - radius, cx + radius, cy + radius], fill=color)

    return img


def save_png(session: HullSession, path: Union[str, Path], cell_size: int = 32):
    """Render a session and write it as a PNG file."""
    render_session_to_image(session, cell_size=cell_size).save(path, "PNG")

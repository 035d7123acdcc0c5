"""
Grid Hull - Grid Topology

Fixed-size rectangular grid of cells and the vertices at their corners.
Cells and vertices are created once and live as long as the grid; only
their flags change.
"""

from typing import Iterator, List, Optional, Tuple

# 4-neighbour offsets as (dx, dy): west, north, east, south
NEIGHBOR_OFFSETS = ((-1, 0), (0, -1), (1, 0), (0, 1))

# Cells touching a vertex, relative to the vertex coordinate.
# Slots 0 and 1 are diagonally opposite, as are slots 2 and 3.
VERTEX_CELL_OFFSETS = ((-1, -1), (0, 0), (-1, 0), (0, -1))


class OutOfRangeError(IndexError):
    """Raised when a cell or vertex coordinate lies outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int, kind: str = "cell"):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.kind = kind
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.kind == "vertex":
            bounds = f"[0, {self.width}] x [0, {self.height}]"
        else:
            bounds = f"[0, {self.width}) x [0, {self.height})"
        return f"{self.kind.title()} ({self.x}, {self.y}) is outside {bounds}"


class Cell:
    """One grid square."""

    __slots__ = ("x", "y", "is_set", "is_open", "is_closed")

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        self.is_set: bool = False
        self.is_open: bool = False
        self.is_closed: bool = False

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        flags = "".join(
            flag for flag, on in (("S", self.is_set), ("O", self.is_open), ("C", self.is_closed)) if on
        )
        return f"Cell({self.x}, {self.y}{', ' + flags if flags else ''})"


class Vertex:
    """A grid corner shared by up to four cells."""

    __slots__ = ("x", "y", "weight", "is_diagonal_case")

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        self.weight: Optional[int] = None  # None until classified this generation
        self.is_diagonal_case: bool = False

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"Vertex({self.x}, {self.y}, weight={self.weight})"


class GridTopology:
    """
    Bounds-checked lookups over a width x height grid of cells and its
    (width + 1) x (height + 1) vertices.

    Storage is column-major: ``cells[x][y]`` and ``vertices[x][y]``.
    """

    def __init__(self, width: int, height: int):
        """
        Create all cells and vertices.

        Args:
            width: Number of cell columns (positive)
            height: Number of cell rows (positive)

        Raises:
            ValueError: If either dimension is not a positive integer
        """
        if not isinstance(width, int) or not isinstance(height, int) or width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive integers, got {width}x{height}")

        self.width = width
        self.height = height
        self.cells: List[List[Cell]] = [
            [Cell(x, y) for y in range(height)] for x in range(width)
        ]
        self.vertices: List[List[Vertex]] = [
            [Vertex(x, y) for y in range(height + 1)] for x in range(width + 1)
        ]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Optional[Cell]:
        """Get the cell at (x, y), or None when out of bounds."""
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        return self.cells[x][y]

    def require_cell(self, x: int, y: int) -> Cell:
        """Get the cell at (x, y), raising OutOfRangeError when out of bounds."""
        cell = self.cell_at(x, y)
        if cell is None:
            raise OutOfRangeError(x, y, self.width, self.height, "cell")
        return cell

    def vertex_at(self, x: int, y: int) -> Vertex:
        """
        Get the vertex at (x, y).

        Raises:
            OutOfRangeError: If (x, y) is outside [0, width] x [0, height]
        """
        if x < 0 or y < 0 or x > self.width or y > self.height:
            raise OutOfRangeError(x, y, self.width, self.height, "vertex")
        return self.vertices[x][y]

    def cell_neighbors4(self, cell: Cell) -> List[Cell]:
        """
        Get the in-bounds axial neighbours of a cell.

        Order is always west, north, east, south; missing neighbours are
        omitted rather than padded.
        """
        neighbors = []
        for dx, dy in NEIGHBOR_OFFSETS:
            neighbor = self.cell_at(cell.x + dx, cell.y + dy)
            if neighbor is not None:
                neighbors.append(neighbor)
        return neighbors

    def vertex_touching_cells(self, vertex: Vertex) -> Tuple[Optional[Cell], ...]:
        """
        Get the four cells around a vertex in VERTEX_CELL_OFFSETS order.

        Slots outside the grid are None.
        """
        return tuple(
            self.cell_at(vertex.x + dx, vertex.y + dy) for dx, dy in VERTEX_CELL_OFFSETS
        )

    def cell_corners(self, cell: Cell) -> Tuple[Vertex, Vertex, Vertex, Vertex]:
        """Get the four corner vertices of a cell: top-left, top-right, bottom-left, bottom-right."""
        x, y = cell.x, cell.y
        return (
            self.vertices[x][y],
            self.vertices[x + 1][y],
            self.vertices[x][y + 1],
            self.vertices[x + 1][y + 1],
        )

    def iter_cells(self) -> Iterator[Cell]:
        """Iterate cells column-major (outer x, inner y)."""
        for column in self.cells:
            yield from column

    def iter_vertices(self) -> Iterator[Vertex]:
        """Iterate vertices column-major (outer x, inner y)."""
        for column in self.vertices:
            yield from column

    @property
    def cell_count(self) -> int:
        return self.width * self.height

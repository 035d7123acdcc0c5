"""
Grid Hull - Vertex Classifier

Marching-squares style classification of grid vertices by how many of
their four touching cells are set.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .grid import Cell, GridTopology, Vertex

logger = logging.getLogger(__name__)


class VertexKind(Enum):
    """Boundary role of a vertex relative to the region."""

    EXTERIOR = "exterior"  # weight 0
    CONVEX = "convex"  # weight 1, outer corner
    STRAIGHT = "straight"  # weight 2, edge between two set cells
    SADDLE = "saddle"  # weight 2, checkerboard
    CONCAVE = "concave"  # weight 3, reflex corner
    INTERIOR = "interior"  # weight 4


_KIND_BY_WEIGHT = {
    0: VertexKind.EXTERIOR,
    1: VertexKind.CONVEX,
    2: VertexKind.STRAIGHT,
    3: VertexKind.CONCAVE,
    4: VertexKind.INTERIOR,
}


@dataclass(frozen=True)
class VertexClassification:
    """Result of classifying one vertex."""

    x: int
    y: int
    weight: int
    is_diagonal_case: bool

    @property
    def kind(self) -> VertexKind:
        if self.is_diagonal_case:
            return VertexKind.SADDLE
        return _KIND_BY_WEIGHT[self.weight]

    @classmethod
    def of(cls, vertex: Vertex) -> "VertexClassification":
        assert vertex.weight is not None, f"{vertex!r} has not been classified"
        return cls(vertex.x, vertex.y, vertex.weight, vertex.is_diagonal_case)


class VertexClassifier:
    """
    Computes vertex weights, memoized per traversal generation.

    A vertex whose weight is already set is left alone; RegionState clears
    weights at the start of every generation.
    """

    def __init__(self, topology: GridTopology):
        self.topology = topology
        self.computations = 0  # non-memoized evaluations, for diagnostics

    def classify_at(self, vertex: Vertex) -> VertexClassification:
        """
        Classify a vertex if it has not been classified this generation.

        Args:
            vertex: Vertex to classify

        Returns:
            The vertex's classification
        """
        if vertex.weight is not None:
            return VertexClassification.of(vertex)

        touching = self.topology.vertex_touching_cells(vertex)
        slots = [1 if cell is not None and cell.is_set else 0 for cell in touching]
        weight = sum(slots)
        assert 0 <= weight <= 4, f"weight {weight} out of range at {vertex!r}"

        vertex.weight = weight
        # Slots 0 and 1 are diagonally opposite; equal states at weight 2 is a checkerboard
        vertex.is_diagonal_case = weight == 2 and slots[0] == slots[1]
        self.computations += 1

        if vertex.is_diagonal_case:
            logger.debug("Saddle vertex at (%d, %d)", vertex.x, vertex.y)

        return VertexClassification.of(vertex)

    def classify_corners(self, cell: Cell) -> list[VertexClassification]:
        """Classify all four corner vertices of a cell."""
        return [self.classify_at(vertex) for vertex in self.topology.cell_corners(cell)]

"""
Core region and hull classification functionality.

This package contains the grid topology, region state, flood fill,
vertex classifier and the session that ties them together.
"""

from .grid import Cell, GridTopology, OutOfRangeError, Vertex
from .region_state import RegionState
from .flood_fill import FloodFillEngine
from .vertex_classifier import VertexClassification, VertexClassifier, VertexKind
from .session import CellState, HullSession

__all__ = [
    "Cell",
    "CellState",
    "FloodFillEngine",
    "GridTopology",
    "HullSession",
    "OutOfRangeError",
    "RegionState",
    "Vertex",
    "VertexClassification",
    "VertexClassifier",
    "VertexKind",
]

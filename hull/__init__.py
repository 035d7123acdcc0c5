"""
Grid Hull

Flood-fill region growing on a cell grid with marching-squares vertex
classification of the region's boundary.
"""

from .core import HullSession, OutOfRangeError, VertexKind
from .formats.snapshot import MalformedSnapshotError, Snapshot

__all__ = ["HullSession", "MalformedSnapshotError", "OutOfRangeError", "Snapshot", "VertexKind"]

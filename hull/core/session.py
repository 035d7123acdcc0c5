"""
Grid Hull - Hull Session

Public entry point: owns a grid, its region state, the flood fill and the
vertex classifier, and recomputes the region after every mutation.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .flood_fill import FloodFillEngine
from .grid import Cell, GridTopology
from .region_state import RegionState
from .vertex_classifier import VertexClassification, VertexClassifier
from ..formats.snapshot import MalformedSnapshotError, Snapshot, encode_bitfield

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]
ClassificationMap = Dict[Coord, VertexClassification]


@dataclass(frozen=True)
class CellState:
    """Read-only view of one cell's flags."""

    is_set: bool
    is_open: bool
    is_closed: bool


class HullSession:
    """
    Orchestrates flood fill and vertex classification for one grid.

    Every mutation resets transient state and reruns the flood fill from
    the current seed before returning. Not thread-safe.
    """

    def __init__(self, width: int, height: int):
        self.topology = GridTopology(width, height)
        self.state = RegionState(self.topology)
        self.engine = FloodFillEngine()
        self.classifier = VertexClassifier(self.topology)
        self.seed: Optional[Cell] = None
        self.closed_order: List[Cell] = []
        self._listeners: List[Callable[["HullSession"], None]] = []

    @property
    def width(self) -> int:
        return self.topology.width

    @property
    def height(self) -> int:
        return self.topology.height

    @property
    def seed_pos(self) -> Optional[Coord]:
        return self.seed.pos if self.seed is not None else None

    def add_listener(self, listener: Callable[["HullSession"], None]):
        """Register a callable run after every completed mutation."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[["HullSession"], None]):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self):
        for listener in list(self._listeners):
            listener(self)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def toggle_cell(self, x: int, y: int) -> ClassificationMap:
        """
        Flip the set flag of a cell and recompute the region.

        Args:
            x: Cell column
            y: Cell row

        Returns:
            Classification map for the new generation

        Raises:
            OutOfRangeError: If (x, y) is not a cell; nothing is changed
        """
        cell = self.topology.require_cell(x, y)
        self.state.set_cell(cell, not cell.is_set)
        self.regenerate()
        self._notify()
        return self.classifications()

    def set_seed(self, x: int, y: int) -> ClassificationMap:
        """
        Make the cell at (x, y) the flood fill origin and recompute.

        Raises:
            OutOfRangeError: If (x, y) is not a cell; nothing is changed
        """
        self.seed = self.topology.require_cell(x, y)
        self.regenerate()
        self._notify()
        return self.classifications()

    def clear(self) -> ClassificationMap:
        """Unset every cell, keeping the seed."""
        self.state.clear()
        self.regenerate()
        self._notify()
        return self.classifications()

    def regenerate(self) -> List[Cell]:
        """Reset transient state and flood fill from the seed, if any."""
        self.state.reset_transient()
        self.closed_order = self.engine.run(
            self.seed, self.topology, self.state, self.classifier
        )
        return self.closed_order

    # -------------------------------------------------------------------------
    # Projections
    # -------------------------------------------------------------------------

    def classifications(self) -> ClassificationMap:
        """Vertices classified during the current generation."""
        return {
            vertex.pos: VertexClassification.of(vertex)
            for vertex in self.topology.iter_vertices()
            if vertex.weight is not None
        }

    def hull_vertices(self) -> ClassificationMap:
        """
        Classify every corner of every closed cell.

        The flood fill only classifies the top-left vertex of each cell;
        this extends the current generation to all vertices touching the
        region, which is what a boundary tracer needs.
        """
        result: ClassificationMap = {}
        for cell in self.closed_order:
            for classification in self.classifier.classify_corners(cell):
                result[(classification.x, classification.y)] = classification
        return result

    def cell_states(self) -> Dict[Coord, CellState]:
        return {
            cell.pos: CellState(cell.is_set, cell.is_open, cell.is_closed)
            for cell in self.topology.iter_cells()
        }

    def vertex_states(self) -> Dict[Coord, Tuple[Optional[int], bool]]:
        """(weight, is_diagonal_case) for every vertex; weight is None if unclassified."""
        return {
            vertex.pos: (vertex.weight, vertex.is_diagonal_case)
            for vertex in self.topology.iter_vertices()
        }

    # -------------------------------------------------------------------------
    # Persistence boundary
    # -------------------------------------------------------------------------

    def snapshot(self) -> Snapshot:
        """Capture set flags (column-major) and seed. No side effects."""
        return Snapshot(
            width=self.width,
            height=self.height,
            cells=encode_bitfield(self.state.set_flags()),
            seed=self.seed_pos,
        )

    def restore(self, snapshot: Snapshot, strict: bool = False) -> ClassificationMap:
        """
        Apply a snapshot to this session.

        A bitfield whose length is not width * height is ignored and the
        cell flags are left as they are; the seed is still applied.

        Args:
            snapshot: Snapshot to apply
            strict: Raise instead of ignoring a bitfield length mismatch

        Returns:
            Classification map for the new generation

        Raises:
            OutOfRangeError: If the snapshot's seed is not a cell; nothing is changed
            MalformedSnapshotError: If strict and the bitfield length is wrong
        """
        seed = None
        if snapshot.seed is not None:
            seed = self.topology.require_cell(*snapshot.seed)

        if snapshot.width and snapshot.height and (snapshot.width, snapshot.height) != (self.width, self.height):
            logger.warning(
                "Restoring %dx%d snapshot into %dx%d grid",
                snapshot.width, snapshot.height, self.width, self.height,
            )

        if len(snapshot.cells) == self.topology.cell_count:
            self.state.load_flags(snapshot.flags())
        elif strict:
            raise MalformedSnapshotError(
                f"bitfield has {len(snapshot.cells)} entries, expected {self.topology.cell_count}"
            )
        else:
            logger.warning(
                "Ignoring snapshot bitfield of length %d for %dx%d grid",
                len(snapshot.cells), self.width, self.height,
            )

        if seed is not None:
            self.seed = seed
        self.regenerate()
        self._notify()
        return self.classifications()

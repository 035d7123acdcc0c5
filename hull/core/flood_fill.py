"""
Grid Hull - Flood Fill

Breadth-first traversal of the 4-connected region of set cells around a
seed, classifying the top-left vertex of each cell as it closes.
"""

import logging
from collections import deque
from typing import List, Optional

from .grid import Cell, GridTopology
from .region_state import RegionState
from .vertex_classifier import VertexClassifier

logger = logging.getLogger(__name__)


class FloodFillEngine:
    """
    Region-growing search over set cells.

    Algorithm:
        1. Open and enqueue the seed
        2. Dequeue a cell, close it and classify the vertex at its (x, y)
        3. Open and enqueue every set neighbour that is not already open
        4. Repeat until the queue is empty

    The open flag is checked before enqueueing, so each cell enters the
    queue at most once and the run is O(size of the region).
    """

    def run(
        self,
        seed: Optional[Cell],
        topology: GridTopology,
        state: RegionState,
        classifier: VertexClassifier,
    ) -> List[Cell]:
        """
        Flood fill from a seed cell.

        Transient flags must have been reset beforehand.

        Args:
            seed: Starting cell. None or an unset cell yields an empty traversal.
            topology: Grid the cells belong to
            state: Region state that owns the flags
            classifier: Vertex classifier for the current generation

        Returns:
            Cells in the order they were closed
        """
        if seed is None or not seed.is_set:
            logger.debug("Flood fill skipped: seed %r is absent or unset", seed)
            return []

        closed: List[Cell] = []
        open_cells = deque()

        state.open_cell(seed)
        open_cells.append(seed)

        while open_cells:
            cell = open_cells.popleft()
            state.close_cell(cell)
            closed.append(cell)

            classifier.classify_at(topology.vertex_at(cell.x, cell.y))

            for neighbor in topology.cell_neighbors4(cell):
                if neighbor.is_set and not neighbor.is_open:
                    state.open_cell(neighbor)
                    open_cells.append(neighbor)

        logger.debug(
            "Flood fill from (%d, %d) closed %d cell(s) in generation %d",
            seed.x, seed.y, len(closed), state.generation,
        )
        return closed

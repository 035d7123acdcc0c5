"""
Grid Hull - Region State

Flag mutation for cells and vertices. The persistent "set" flag is owned
by the user; open/closed and vertex weights are transient and only valid
for the current traversal generation.
"""

from typing import List

from .grid import Cell, GridTopology


class RegionState:
    """Manages set/open/closed cell flags and memoized vertex weights."""

    def __init__(self, topology: GridTopology):
        self.topology = topology
        self.generation: int = 0

    def reset_transient(self):
        """Clear open/closed flags and vertex weights, starting a new generation."""
        for cell in self.topology.iter_cells():
            cell.is_open = False
            cell.is_closed = False

        for vertex in self.topology.iter_vertices():
            vertex.weight = None
            vertex.is_diagonal_case = False

        self.generation += 1

    def set_cell(self, cell: Cell, value: bool):
        """Update a cell's set flag. Does not trigger reclassification."""
        cell.is_set = bool(value)

    def open_cell(self, cell: Cell):
        cell.is_open = True

    def close_cell(self, cell: Cell):
        """Close an open cell."""
        assert cell.is_open, f"{cell!r} closed before being opened"
        cell.is_closed = True

    def clear(self):
        """Unset every cell and reset transient state."""
        for cell in self.topology.iter_cells():
            cell.is_set = False
        self.reset_transient()

    def set_cells(self) -> List[Cell]:
        return [cell for cell in self.topology.iter_cells() if cell.is_set]

    def closed_cells(self) -> List[Cell]:
        return [cell for cell in self.topology.iter_cells() if cell.is_closed]

    def set_flags(self) -> List[bool]:
        """Set flags for every cell, column-major."""
        return [cell.is_set for cell in self.topology.iter_cells()]

    def load_flags(self, flags: List[bool]):
        """
        Assign set flags for every cell from a column-major sequence.

        Args:
            flags: One flag per cell; length must equal width * height
        """
        assert len(flags) == self.topology.cell_count
        for cell, flag in zip(self.topology.iter_cells(), flags):
            cell.is_set = bool(flag)

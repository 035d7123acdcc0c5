"""Unit tests for cell and vertex color mapping."""

import pytest

from hull.core.session import CellState
from hull.rendering.colors import (
    CELL_CLOSED_COLOR,
    CELL_DEFAULT_COLOR,
    CELL_OPEN_COLOR,
    CELL_SET_COLOR,
    VERTEX_COLORS,
    VERTEX_SADDLE_COLOR,
    cell_color,
    vertex_color,
)


@pytest.mark.parametrize(
    "state,expected",
    [
        (CellState(False, False, False), CELL_DEFAULT_COLOR),
        (CellState(True, False, False), CELL_SET_COLOR),
        (CellState(True, True, False), CELL_OPEN_COLOR),
        (CellState(True, True, True), CELL_CLOSED_COLOR),
    ],
)
def test_cell_color_priority(state, expected):
    assert cell_color(state) == expected


def test_unclassified_vertex_is_invisible():
    assert vertex_color(None) is None


@pytest.mark.parametrize("weight", [0, 1, 2, 3, 4])
def test_vertex_color_by_weight(weight):
    assert vertex_color(weight) == VERTEX_COLORS[weight]


def test_saddle_color():
    assert vertex_color(2, True) == VERTEX_SADDLE_COLOR
    assert VERTEX_SADDLE_COLOR not in VERTEX_COLORS.values()

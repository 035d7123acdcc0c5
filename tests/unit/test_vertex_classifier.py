"""Unit tests for VertexClassifier weights and saddle detection."""

import itertools

import pytest

from hull.core.grid import GridTopology
from hull.core.region_state import RegionState
from hull.core.vertex_classifier import VertexClassification, VertexClassifier, VertexKind


def _grid_with(width, height, set_cells):
    grid = GridTopology(width, height)
    for x, y in set_cells:
        grid.cell_at(x, y).is_set = True
    return grid


class TestWeights:
    """Tests for weight computation."""

    @pytest.mark.parametrize("pattern", list(itertools.product([False, True], repeat=4)))
    def test_every_two_by_two_pattern(self, pattern):
        """
        The centre vertex of a 2x2 grid counts set cells and flags the
        checkerboards as saddles.
        """
        # pattern is (0,0), (1,1), (0,1), (1,0): the slot order around vertex (1,1)
        positions = [(0, 0), (1, 1), (0, 1), (1, 0)]
        grid = _grid_with(2, 2, [pos for pos, on in zip(positions, pattern) if on])
        result = VertexClassifier(grid).classify_at(grid.vertex_at(1, 1))

        assert result.weight == sum(pattern)
        checkerboard = pattern in ((True, True, False, False), (False, False, True, True))
        assert result.is_diagonal_case is checkerboard

    def test_weights_in_range_for_all_vertices(self):
        grid = _grid_with(4, 4, [(0, 0), (1, 1), (2, 1), (3, 3), (0, 3), (1, 3)])
        classifier = VertexClassifier(grid)
        for vertex in grid.iter_vertices():
            assert classifier.classify_at(vertex).weight in {0, 1, 2, 3, 4}

    def test_out_of_bounds_slots_count_as_unset(self):
        grid = _grid_with(1, 1, [(0, 0)])
        classifier = VertexClassifier(grid)
        for vertex in grid.iter_vertices():
            assert classifier.classify_at(vertex).weight == 1


class TestSaddle:
    """Tests for the diagonal case."""

    def test_diagonal_pair_is_saddle(self):
        """Cells (0,0) and (1,1) set, (1,0) and (0,1) unset."""
        grid = _grid_with(2, 2, [(0, 0), (1, 1)])
        result = VertexClassifier(grid).classify_at(grid.vertex_at(1, 1))
        assert result.weight == 2
        assert result.is_diagonal_case is True
        assert result.kind is VertexKind.SADDLE

    def test_anti_diagonal_pair_is_saddle(self):
        grid = _grid_with(2, 2, [(1, 0), (0, 1)])
        result = VertexClassifier(grid).classify_at(grid.vertex_at(1, 1))
        assert result.is_diagonal_case is True

    @pytest.mark.parametrize("cells", [[(0, 0), (1, 0)], [(0, 0), (0, 1)], [(1, 1), (1, 0)]])
    def test_adjacent_pair_is_straight(self, cells):
        grid = _grid_with(2, 2, cells)
        result = VertexClassifier(grid).classify_at(grid.vertex_at(1, 1))
        assert result.weight == 2
        assert result.is_diagonal_case is False
        assert result.kind is VertexKind.STRAIGHT

    def test_saddle_only_at_weight_two(self):
        grid = _grid_with(2, 2, [(0, 0), (1, 1), (0, 1)])
        result = VertexClassifier(grid).classify_at(grid.vertex_at(1, 1))
        assert result.weight == 3
        assert result.is_diagonal_case is False


class TestMemoization:
    """Tests for per-generation memoization."""

    def test_second_call_does_not_recompute(self):
        grid = _grid_with(2, 2, [(0, 0)])
        classifier = VertexClassifier(grid)
        vertex = grid.vertex_at(1, 1)

        first = classifier.classify_at(vertex)
        second = classifier.classify_at(vertex)

        assert first == second
        assert classifier.computations == 1

    def test_stale_until_reset(self):
        """A classified vertex keeps its weight until the generation is reset."""
        grid = _grid_with(2, 2, [(0, 0)])
        state = RegionState(grid)
        classifier = VertexClassifier(grid)
        vertex = grid.vertex_at(1, 1)
        classifier.classify_at(vertex)

        grid.cell_at(1, 1).is_set = True
        assert classifier.classify_at(vertex).weight == 1

        state.reset_transient()
        assert classifier.classify_at(vertex).weight == 2
        assert classifier.computations == 2


class TestKinds:
    """Tests for VertexKind mapping."""

    @pytest.mark.parametrize(
        "weight,diagonal,kind",
        [
            (0, False, VertexKind.EXTERIOR),
            (1, False, VertexKind.CONVEX),
            (2, False, VertexKind.STRAIGHT),
            (2, True, VertexKind.SADDLE),
            (3, False, VertexKind.CONCAVE),
            (4, False, VertexKind.INTERIOR),
        ],
    )
    def test_kind_by_weight(self, weight, diagonal, kind):
        assert VertexClassification(0, 0, weight, diagonal).kind is kind

    def test_of_unclassified_vertex_fails(self):
        grid = GridTopology(1, 1)
        with pytest.raises(AssertionError):
            VertexClassification.of(grid.vertex_at(0, 0))


def test_classify_corners():
    grid = _grid_with(3, 3, [(1, 1)])
    classifier = VertexClassifier(grid)
    results = classifier.classify_corners(grid.cell_at(1, 1))

    assert [(r.x, r.y) for r in results] == [(1, 1), (2, 1), (1, 2), (2, 2)]
    assert all(r.weight == 1 for r in results)
    assert classifier.computations == 4

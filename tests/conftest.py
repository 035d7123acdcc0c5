"""Shared pytest fixtures for grid hull tests."""

import pytest

from hull.core.session import HullSession


def build_session(width, height, set_cells=(), seed=None):
    """Create a session with the given cells set, optionally seeded."""
    session = HullSession(width, height)
    for x, y in set_cells:
        session.state.set_cell(session.topology.require_cell(x, y), True)
    if seed is not None:
        session.set_seed(*seed)
    return session


@pytest.fixture
def make_session():
    """Factory for sessions with preset cells and seed."""
    return build_session


@pytest.fixture
def empty_session():
    """A 4x4 session with nothing set."""
    return HullSession(4, 4)


@pytest.fixture
def block_session():
    """4x4 session with a 2x2 block at (1,1)-(2,2), seeded at (1,1)."""
    return build_session(4, 4, [(1, 1), (2, 1), (1, 2), (2, 2)], seed=(1, 1))


@pytest.fixture
def l_shape_session():
    """
    5x5 session with an L-shaped region and a separate island.

        x: 0 1 2 3 4
    y=0    # . . . .
    y=1    # . . . .
    y=2    # # # . #
    y=3    . . . . .
    y=4    . . . . .
    """
    cells = [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (4, 2)]
    return build_session(5, 5, cells, seed=(0, 0))

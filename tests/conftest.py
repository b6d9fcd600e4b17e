"""Shared fixtures for the 8-puzzle tests."""
import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from eightpuzzle.domains.puzzle8 import GOAL
from eightpuzzle.search.bfs import bfs_distances


@pytest.fixture(scope="session")
def distances():
    """Exact distance-to-goal for all 181440 reachable states."""
    return bfs_distances(GOAL)


@pytest.fixture
def goal():
    return GOAL


@pytest.fixture
def one_move():
    """Blank and 8 swapped: solved by a single RIGHT."""
    return (1, 2, 3, 4, 5, 6, 7, 0, 8)


@pytest.fixture
def two_moves():
    return (1, 2, 3, 4, 5, 6, 0, 7, 8)


@pytest.fixture
def odd_parity():
    """1 and 2 swapped: not reachable from the goal."""
    return (2, 1, 3, 4, 5, 6, 7, 8, 0)

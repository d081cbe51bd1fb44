"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from gridpath.graph import Graph, build_grid


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def grid_3x1() -> Graph:
    """Return a 3x1 grid with every cell open."""
    return build_grid(3, 1)


@pytest.fixture
def grid_3x3() -> Graph:
    """Return a 3x3 grid with every cell open."""
    return build_grid(3, 3)


@pytest.fixture
def maze() -> Graph:
    """Return a 6x5 grid with a wall column that has a single gap at the bottom."""
    #   . . . # . .
    #   . . . # . .
    #   . . . # . .
    #   . . . # . .
    #   . . . . . .
    return build_grid(6, 5, walls=[(3, 0), (3, 1), (3, 2), (3, 3)])


@pytest.fixture(params=["linear", "heap"])
def frontier(request) -> str:
    """Run a test once per frontier strategy."""
    return request.param

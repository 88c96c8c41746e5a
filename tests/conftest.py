"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from heapgraph.graph import Graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def sample_edges() -> list[tuple[int, int, int]]:
    """Return the reference weighted edge list."""
    return [
        (1, 2, 2),
        (1, 3, 4),
        (2, 4, 7),
        (2, 3, 1),
        (3, 5, 3),
        (4, 6, 1),
        (5, 4, 2),
        (5, 6, 5),
    ]


@pytest.fixture
def sample_graph(sample_edges) -> Graph:
    """Return a graph built from the reference edge list."""
    return Graph.create(sample_edges)


@pytest.fixture
def expected_distances() -> dict[int, int]:
    """Minimum costs from vertex 1 in the reference graph."""
    return {1: 0, 2: 2, 3: 3, 4: 8, 5: 6, 6: 9}

"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import matplotlib
import pytest

from gridpath.core.graph import Graph, Node
from gridpath.utils.graph_builder import make_grid

matplotlib.use("Agg")


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_dir(project_root: Path) -> Path:
    """Return the shipped configuration directory."""
    return project_root / "configs"


@pytest.fixture
def grid_5x5():
    """Unit-cost 5x5 grid."""
    return make_grid(5)


@pytest.fixture
def wall_grid():
    """3x3 grid whose centre cell is expensive."""
    return make_grid(3, costs={(1, 1): 100})


@pytest.fixture
def two_components():
    """
    Two disconnected chains: a -> b -> c and x <-> y.

    Returns the graph and a dict of its nodes by name.
    """
    nodes = {name: Node(i, 1.0, name) for i, name in enumerate("abcxy")}
    graph = Graph(list(nodes.values()))
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    graph.add_edge(3, 4)
    graph.add_edge(4, 3)
    return graph, nodes

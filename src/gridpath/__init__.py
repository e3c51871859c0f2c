"""
gridpath - shortest paths over grid-shaped graphs

A small graph-search engine: a binary-heap priority queue, breadth-first
search and uniform-cost search over a node/edge graph, plus the grid
construction, configuration and rendering helpers around them.

Modules:
    core.priority_queue: Binary heap priority queue
    core.graph: Node, Edge and Graph data structures
    algorithms.bfs: Unweighted shortest path (hop count)
    algorithms.ucs: Weighted shortest path (cumulative cost)
    utils.graph_builder: 4-connected grid graphs
    utils.config_loader: YAML configuration management
    utils.visualization: Matplotlib rendering
"""

from .core.exceptions import GridPathError, InvalidGraphError, InvalidInputError
from .core.graph import Edge, Graph, Node
from .core.priority_queue import MinPriorityQueue, PriorityQueue, QueueItem
from .algorithms.bfs import BreadthFirstSearch, breadth_first_search
from .algorithms.ucs import CostPolicy, PathStep, UniformCostSearch, uniform_cost_search
from .utils.graph_builder import Grid, make_grid

__version__ = "1.0.0"

__all__ = [
    "BreadthFirstSearch",
    "CostPolicy",
    "Edge",
    "Graph",
    "Grid",
    "GridPathError",
    "InvalidGraphError",
    "InvalidInputError",
    "MinPriorityQueue",
    "Node",
    "PathStep",
    "PriorityQueue",
    "QueueItem",
    "UniformCostSearch",
    "breadth_first_search",
    "make_grid",
    "uniform_cost_search",
]

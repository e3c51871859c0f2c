"""
Abstract base class for all graph search algorithms.

This module defines the common interface that the search algorithms
(BFS, UCS) implement, plus the shared endpoint validation and metrics.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from .exceptions import InvalidInputError
from .graph import Graph, Node


class GraphSearch(ABC):
    """
    Abstract base class for shortest-path searches over a Node graph.

    Each call to search() starts from a clean state; the attributes below
    only describe the most recent call.

    Attributes:
        config (Dict[str, Any]): Algorithm-specific configuration parameters
        path (Optional[list]): Result of the last search (None if no path)
        search_time (float): Time taken by the last search (seconds)
        nodes_explored (int): Nodes expanded by the last search
    """

    name = 'search'

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the search.

        Args:
            config: Dictionary of algorithm-specific parameters loaded from YAML
        """
        self.config = config or {}
        self.path: Optional[List[Any]] = None
        self.search_time: float = 0.0
        self.nodes_explored: int = 0
        self._initialize_algorithm()

    @abstractmethod
    def _initialize_algorithm(self) -> None:
        """
        Initialize algorithm-specific parameters from self.config.

        Called once from __init__.
        """
        pass

    @abstractmethod
    def search(self, start_node: Node, end_node: Node,
               graph: Optional[Graph] = None) -> Optional[List[Any]]:
        """
        Compute a shortest path from start_node to end_node.

        Implementations must:
        1. Validate the endpoints with _check_endpoints()
        2. Store the result in self.path
        3. Store timing and expansion counts
        4. Return the path, or None if end_node is unreachable

        Args:
            start_node: Node the path starts at
            end_node: Node the path ends at
            graph: Optional graph both endpoints must belong to

        Returns:
            Ordered path from start to end inclusive, or None if no path exists

        Raises:
            InvalidInputError: If an endpoint is missing or not in graph
        """
        pass

    @abstractmethod
    def path_cost(self) -> float:
        """Total cost of the last path (0.0 if none)."""
        pass

    def path_nodes(self) -> List[Node]:
        """Nodes of the last path, in order (empty if none)."""
        return list(self.path) if self.path else []

    def get_metrics(self) -> Dict[str, Any]:
        """
        Get performance metrics from the last search.

        Returns:
            Dictionary containing:
            - algorithm (str): Algorithm name
            - path_exists (bool): Whether a path was found
            - path_length (int): Number of nodes on the path
            - path_cost (float): Total cost of the path
            - search_time (float): Seconds spent in search()
            - nodes_explored (int): Number of nodes expanded
        """
        return {
            'algorithm': self.name,
            'path_exists': self.path is not None,
            'path_length': len(self.path) if self.path else 0,
            'path_cost': self.path_cost(),
            'search_time': self.search_time,
            'nodes_explored': self.nodes_explored,
        }

    @staticmethod
    def _check_endpoints(start_node: Node, end_node: Node,
                         graph: Optional[Graph] = None) -> None:
        for label, node in (('start', start_node), ('end', end_node)):
            if not isinstance(node, Node):
                raise InvalidInputError(f"{label} node must be a Node, got {node!r}")
            if graph is not None and node not in graph:
                raise InvalidInputError(f"{label} node {node.id!r} is not in the graph")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(config={self.config})"

    def __str__(self) -> str:
        status = "with path" if self.path else "no path"
        return f"{self.__class__.__name__} ({status})"

"""
Breadth-first search.

BFS finds the path with the fewest hops by expanding nodes in FIFO order,
which visits nodes in non-decreasing depth from the start.
"""

import logging
import time
from collections import deque
from typing import Dict, List, Optional

from ..core.graph import Graph, Node, NodeId
from ..core.graph_search import GraphSearch

logger = logging.getLogger(__name__)


class BreadthFirstSearch(GraphSearch):
    """
    Unweighted shortest path by hop count.

    A node is recorded in the came-from map the first time it is discovered
    and is never enqueued again. The start node maps to None (no
    predecessor); nodes missing from the map were never reached.

    Attributes:
        came_from (Dict[NodeId, Optional[Node]]): Predecessor of each discovered node
    """

    name = 'BFS'

    def _initialize_algorithm(self) -> None:
        """Initialize BFS-specific data structures."""
        self.came_from: Dict[NodeId, Optional[Node]] = {}

    def search(self, start_node: Node, end_node: Node,
               graph: Optional[Graph] = None) -> Optional[List[Node]]:
        """
        Compute the path with the fewest hops from start_node to end_node.

        Args:
            start_node: Node the path starts at
            end_node: Node the path ends at
            graph: Optional graph both endpoints must belong to

        Returns:
            List of nodes from start to end inclusive, None if end is unreachable
        """
        self._check_endpoints(start_node, end_node, graph)
        start_time = time.perf_counter()
        self.nodes_explored = 0

        frontier = deque([start_node])
        self.came_from = {start_node.id: None}

        while frontier:
            current = frontier.popleft()
            self.nodes_explored += 1
            logger.debug("visiting %r", current.data if current.data is not None else current.id)

            if current == end_node:
                break

            for edge in current.neighbors:
                next_node = edge.to_node
                if next_node.id in self.came_from:
                    continue
                frontier.append(next_node)
                self.came_from[next_node.id] = current

        self.path = self._reconstruct_path(start_node, end_node)
        self.search_time = time.perf_counter() - start_time

        if self.path is None:
            logger.info("BFS: no path from %r to %r (%d nodes explored)",
                        start_node.id, end_node.id, self.nodes_explored)
        else:
            logger.info("BFS: %d-node path from %r to %r (%d nodes explored)",
                        len(self.path), start_node.id, end_node.id, self.nodes_explored)
        return self.path

    def _reconstruct_path(self, start_node: Node, end_node: Node) -> Optional[List[Node]]:
        """
        Walk the came-from map back from end_node.

        Returns:
            Nodes from start to end, or None if end_node was never discovered
        """
        if end_node.id not in self.came_from:
            return None

        path = [end_node]
        current = end_node
        while current.id != start_node.id:
            current = self.came_from[current.id]
            path.append(current)
        return path[::-1]

    def path_cost(self) -> float:
        """Number of hops on the last path."""
        return float(len(self.path) - 1) if self.path else 0.0


def breadth_first_search(start_node: Node, end_node: Node,
                         graph: Optional[Graph] = None) -> Optional[List[Node]]:
    """
    Run a one-off breadth-first search.

    Example:
        >>> grid = make_grid(3)
        >>> path = breadth_first_search(grid.node(0, 0), grid.node(2, 2))
        >>> len(path)
        5
    """
    return BreadthFirstSearch().search(start_node, end_node, graph)

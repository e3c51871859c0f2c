"""
Uniform-cost search.

UCS finds the cheapest path by always expanding the frontier entry with the
lowest cumulative cost. The frontier is a MinPriorityQueue (the max-heap
with negated priorities) keyed by that cumulative cost.
"""

import logging
import math
import time
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Tuple

from ..core.exceptions import InvalidGraphError
from ..core.graph import Edge, Graph, Node, NodeId
from ..core.graph_search import GraphSearch
from ..core.priority_queue import MinPriorityQueue

logger = logging.getLogger(__name__)


class CostPolicy(str, Enum):
    """Where the cost of one step comes from."""

    # Cost of entering the destination node, read when the step is taken
    ENTER_NODE = 'enter_node'
    # Cost captured on the edge when the graph was built
    EDGE = 'edge'


class PathStep(NamedTuple):
    """A node on a weighted path and the cumulative cost to reach it."""
    node: Node
    cost: float


class UniformCostSearch(GraphSearch):
    """
    Weighted shortest path by cumulative cost.

    A node's recorded cost is only replaced by a strictly cheaper one, so
    equal-cost alternatives keep the first path found. Frontier entries made
    stale by a later improvement are skipped when popped.

    Attributes:
        cost_policy (CostPolicy): Step cost model
        came_from (Dict[NodeId, Optional[Node]]): Predecessor on the best known path
        cost_so_far (Dict[NodeId, float]): Best known cumulative cost per node
    """

    name = 'UCS'

    def _initialize_algorithm(self) -> None:
        """Initialize UCS-specific data structures."""
        policy = (self.config.get('parameters') or {}).get('cost_policy', CostPolicy.ENTER_NODE)
        self.cost_policy = CostPolicy(policy)
        self.came_from: Dict[NodeId, Optional[Node]] = {}
        self.cost_so_far: Dict[NodeId, float] = {}

    def _step_cost(self, edge: Edge) -> float:
        if self.cost_policy is CostPolicy.EDGE:
            cost = edge.cost
        else:
            cost = edge.to_node.cost
        if math.isnan(cost):
            raise InvalidGraphError(f"NaN step cost on {edge!r}")
        if cost < 0:
            raise InvalidGraphError(
                f"Negative step cost {cost} on {edge!r}; uniform-cost search requires costs >= 0")
        return cost

    def search(self, start_node: Node, end_node: Node,
               graph: Optional[Graph] = None) -> Optional[List[PathStep]]:
        """
        Compute the cheapest path from start_node to end_node.

        Args:
            start_node: Node the path starts at
            end_node: Node the path ends at
            graph: Optional graph both endpoints must belong to

        Returns:
            List of PathStep(node, cumulative cost) from start to end inclusive,
            None if end is unreachable

        Raises:
            InvalidInputError: If an endpoint is missing or not in graph
            InvalidGraphError: If a negative step cost is encountered
        """
        self._check_endpoints(start_node, end_node, graph)
        start_time = time.perf_counter()
        self.nodes_explored = 0

        frontier: MinPriorityQueue[Tuple[Node, float]] = MinPriorityQueue()
        frontier.add((start_node, 0.0), 0.0)
        self.came_from = {start_node.id: None}
        self.cost_so_far = {start_node.id: 0.0}

        while frontier:
            current, current_cost = frontier.pop()

            # Superseded by a cheaper entry pushed later
            if current_cost > self.cost_so_far[current.id]:
                continue

            self.nodes_explored += 1
            logger.debug("visiting %r at cost %s",
                         current.data if current.data is not None else current.id, current_cost)

            if current == end_node:
                break

            for edge in current.neighbors:
                next_node = edge.to_node
                new_cost = current_cost + self._step_cost(edge)
                if self.cost_so_far.get(next_node.id, math.inf) > new_cost:
                    self.cost_so_far[next_node.id] = new_cost
                    self.came_from[next_node.id] = current
                    frontier.add((next_node, new_cost), new_cost)

        self.path = self._reconstruct_path(start_node, end_node)
        self.search_time = time.perf_counter() - start_time

        if self.path is None:
            logger.info("UCS: no path from %r to %r (%d nodes explored)",
                        start_node.id, end_node.id, self.nodes_explored)
        else:
            logger.info("UCS: path from %r to %r with cost %s (%d nodes explored)",
                        start_node.id, end_node.id, self.path[-1].cost, self.nodes_explored)
        return self.path

    def _reconstruct_path(self, start_node: Node, end_node: Node) -> Optional[List[PathStep]]:
        """
        Walk the came-from map back from end_node, pairing each node with its cost.

        Returns:
            Steps from start to end, or None if end_node was never reached
        """
        if end_node.id not in self.came_from:
            return None

        path = []
        current = end_node
        while current.id != start_node.id:
            path.append(PathStep(current, self.cost_so_far[current.id]))
            current = self.came_from[current.id]
        path.append(PathStep(start_node, 0.0))
        return path[::-1]

    def path_cost(self) -> float:
        """Cumulative cost of the last path."""
        return self.path[-1].cost if self.path else 0.0

    def path_nodes(self) -> List[Node]:
        return [step.node for step in self.path] if self.path else []


def uniform_cost_search(start_node: Node, end_node: Node,
                        graph: Optional[Graph] = None,
                        cost_policy: CostPolicy = CostPolicy.ENTER_NODE) -> Optional[List[PathStep]]:
    """
    Run a one-off uniform-cost search.

    Example:
        >>> grid = make_grid(3, costs={(1, 1): 100})
        >>> path = uniform_cost_search(grid.node(0, 0), grid.node(2, 2))
        >>> path[-1].cost
        4.0
    """
    search = UniformCostSearch({'parameters': {'cost_policy': cost_policy}})
    return search.search(start_node, end_node, graph)

"""
Node, edge and graph structures for the search algorithms.

A graph is simply the set of nodes reachable through ``Node.neighbors``;
the ``Graph`` container is optional and only used to look nodes up by id
and to validate that search endpoints belong to it.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterator, List, Optional, Union

from .exceptions import InvalidGraphError

NodeId = Hashable


class Node:
    """
    A vertex with an entry cost and an ordered list of outgoing edges.

    Two nodes are equal when their ids are equal; ids must be unique within
    one graph.

    Attributes:
        id (NodeId): Identifier, unique within the graph
        cost (float): Non-negative cost of entering this node
        neighbors (List[Edge]): Outgoing edges in insertion order
        data (Any): Opaque payload (e.g. grid coordinates), never read by the searches
    """

    def __init__(self, id: NodeId, cost: float = 1.0, data: Any = None):
        """
        Initialize a node.

        Args:
            id: Unique identifier
            cost: Cost of entering this node (must be >= 0)
            data: Optional caller data carried by reference

        Raises:
            InvalidGraphError: If cost is negative or NaN
        """
        _check_cost(id, cost)
        self.id = id
        self.cost = cost
        self.neighbors: List['Edge'] = []
        self.data = data

    def set_cost(self, cost: float) -> None:
        """
        Change the entry cost in place.

        Edges that were already built keep the cost they captured.
        """
        _check_cost(self.id, cost)
        self.cost = cost

    def connect(self, other: 'Node') -> 'Edge':
        """
        Add a directed edge from this node to ``other``.

        The edge captures this node's current cost.

        Returns:
            The new edge
        """
        edge = Edge(self, other, self.cost)
        self.neighbors.append(edge)
        return edge

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Node(id={self.id!r}, cost={self.cost}, data={self.data!r})"


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Directed connection between two nodes.

    Attributes:
        from_node (Node): Source node
        to_node (Node): Destination node
        cost (float): Cost captured when the edge was built
    """
    from_node: Node
    to_node: Node
    cost: float

    def __repr__(self) -> str:
        return f"Edge({self.from_node.id!r} -> {self.to_node.id!r}, cost={self.cost})"


class Graph:
    """
    Arena of nodes addressed by id.

    Attributes:
        nodes (Dict[NodeId, Node]): Registered nodes by id
    """

    def __init__(self, nodes: Optional[List[Node]] = None):
        self.nodes: Dict[NodeId, Node] = {}
        for node in nodes or []:
            self.add_node(node)

    def add_node(self, node: Node) -> Node:
        """
        Register a node.

        Raises:
            InvalidGraphError: If another node already uses the same id
        """
        if node.id in self.nodes:
            raise InvalidGraphError(f"Duplicate node id: {node.id!r}")
        self.nodes[node.id] = node
        return node

    def add_edge(self, from_id: NodeId, to_id: NodeId) -> Edge:
        """
        Connect two registered nodes.

        Raises:
            KeyError: If either id is unknown
        """
        return self.nodes[from_id].connect(self.nodes[to_id])

    def get(self, node_id: NodeId) -> Optional[Node]:
        return self.nodes.get(node_id)

    def validate(self) -> None:
        """
        Check costs and edge endpoints of every registered node.

        Raises:
            InvalidGraphError: On a negative or NaN cost or an edge leaving the graph
        """
        for node in self.nodes.values():
            _check_cost(node.id, node.cost)
            for edge in node.neighbors:
                if edge.to_node not in self:
                    raise InvalidGraphError(
                        f"Edge {edge!r} points to a node outside the graph")

    def __contains__(self, item: Union[Node, NodeId]) -> bool:
        if isinstance(item, Node):
            return self.nodes.get(item.id) is item
        return item in self.nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes.values())

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        edges = sum(len(node.neighbors) for node in self.nodes.values())
        return f"Graph(nodes={len(self.nodes)}, edges={edges})"


def reachable_from(start: Node) -> Iterator[Node]:
    """
    Yield every node reachable from ``start`` (start included).

    Args:
        start: Entry node

    Yields:
        Nodes in depth-first discovery order
    """
    seen = {start.id}
    stack = [start]
    while stack:
        node = stack.pop()
        yield node
        for edge in node.neighbors:
            if edge.to_node.id not in seen:
                seen.add(edge.to_node.id)
                stack.append(edge.to_node)


def _check_cost(node_id: NodeId, cost: float) -> None:
    if math.isnan(cost):
        raise InvalidGraphError(f"Node {node_id!r} has no numeric cost (NaN)")
    if cost < 0:
        raise InvalidGraphError(f"Node {node_id!r} has negative cost {cost}")

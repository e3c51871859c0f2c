"""
Unit tests for Node, Edge and Graph.
"""

import pytest

from gridpath.core.exceptions import InvalidGraphError
from gridpath.core.graph import Edge, Graph, Node, reachable_from


class TestNode:

    def test_equality_and_hash_follow_id(self):
        a = Node(1, cost=1.0, data=(0, 0))
        b = Node(1, cost=5.0, data=(9, 9))
        assert a == b
        assert hash(a) == hash(b)
        assert a != Node(2)

    def test_not_equal_to_other_types(self):
        assert Node(1) != 1

    def test_negative_cost_rejected(self):
        with pytest.raises(InvalidGraphError):
            Node(1, cost=-1)

    def test_set_cost_rejects_negative(self):
        node = Node(1)
        with pytest.raises(InvalidGraphError):
            node.set_cost(-0.5)
        assert node.cost == 1.0

    def test_nan_cost_rejected(self):
        with pytest.raises(InvalidGraphError):
            Node(1, cost=float("nan"))
        node = Node(2)
        with pytest.raises(InvalidGraphError):
            node.set_cost(float("nan"))
        assert node.cost == 1.0

    def test_data_is_carried_by_reference(self):
        payload = {"label": "cell"}
        node = Node(1, data=payload)
        assert node.data is payload


class TestEdges:

    def test_connect_appends_in_order(self):
        a, b, c = Node(1), Node(2), Node(3)
        a.connect(b)
        a.connect(c)
        assert [edge.to_node for edge in a.neighbors] == [b, c]
        assert all(edge.from_node is a for edge in a.neighbors)

    def test_edge_captures_source_cost(self):
        a, b = Node(1, cost=3.0), Node(2, cost=7.0)
        edge = a.connect(b)
        assert edge.cost == 3.0

    def test_edge_cost_not_updated_by_later_cost_change(self):
        a, b = Node(1, cost=3.0), Node(2)
        edge = a.connect(b)
        a.set_cost(10.0)
        assert edge.cost == 3.0
        assert a.neighbors[0].cost == 3.0

    def test_edge_is_immutable(self):
        edge = Edge(Node(1), Node(2), 1.0)
        with pytest.raises(AttributeError):
            edge.cost = 2.0


class TestGraph:

    def test_duplicate_id_rejected(self):
        graph = Graph([Node(1)])
        with pytest.raises(InvalidGraphError):
            graph.add_node(Node(1))

    def test_contains_by_id_and_by_identity(self):
        node = Node(1)
        graph = Graph([node])
        assert 1 in graph
        assert node in graph
        # Same id, different object: not a member of this graph
        assert Node(1) not in graph
        assert Node(2) not in graph

    def test_add_edge_and_lookup(self):
        graph = Graph([Node("a"), Node("b")])
        edge = graph.add_edge("a", "b")
        assert edge.to_node is graph.get("b")
        assert graph.get("missing") is None
        assert len(graph) == 2
        assert [node.id for node in graph] == ["a", "b"]

    def test_add_edge_unknown_id(self):
        graph = Graph([Node("a")])
        with pytest.raises(KeyError):
            graph.add_edge("a", "b")

    def test_validate_detects_dangling_edge(self):
        inside, outside = Node(1), Node(2)
        inside.connect(outside)
        graph = Graph([inside])
        with pytest.raises(InvalidGraphError):
            graph.validate()

    def test_validate_detects_mutated_negative_cost(self):
        node = Node(1)
        graph = Graph([node])
        node.cost = -3
        with pytest.raises(InvalidGraphError):
            graph.validate()

    def test_validate_passes_on_grid(self, grid_5x5):
        grid_5x5.graph.validate()


def test_reachable_from_follows_neighbors(two_components):
    graph, nodes = two_components
    assert {node.data for node in reachable_from(nodes["a"])} == {"a", "b", "c"}
    assert {node.data for node in reachable_from(nodes["c"])} == {"c"}
    assert {node.data for node in reachable_from(nodes["x"])} == {"x", "y"}

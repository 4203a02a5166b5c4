"""
Unit tests for AdjacencyListGraph.
"""

from dataclasses import dataclass
import math

import pytest

from adjacency_list_graph import AdjacencyListGraph
from errors import InvalidWeight
from nodes import Node


@dataclass(frozen=True)
class DummyNode(Node):
    """
    Minimal concrete Node implementation for testing.
    """

    _id: str

    @property
    def id(self) -> str:
        return self._id


def test_add_nodes_and_edges():
    g = AdjacencyListGraph()

    a = DummyNode("A")
    b = DummyNode("B")
    c = DummyNode("C")

    g.add_edge(a, b, 1)
    g.add_edge(a, c, 2)
    g.add_edge(b, c, 3)

    assert list(g.nodes()) == [a, b, c]

    assert g.outgoing(a) == {b: 1, c: 2}
    assert g.outgoing(b) == {c: 3}
    assert g.outgoing(c) == {}


def test_undirected_edge_writes_both_directions():
    g = AdjacencyListGraph()
    a = DummyNode("A")
    b = DummyNode("B")

    g.add_undirected_edge(a, b, 7)
    assert g.weight(a, b) == 7
    assert g.weight(b, a) == 7

    # re-adding overwrites both directions together
    g.add_undirected_edge(b, a, 4)
    assert g.weight(a, b) == 4
    assert g.weight(b, a) == 4
    assert sorted((s.id, d.id, w) for s, d, w in g.edges()) == [("A", "B", 4), ("B", "A", 4)]


def test_node_order_is_first_insertion():
    g = AdjacencyListGraph()
    a, b, c, d = (DummyNode(x) for x in "ABCD")

    g.add_undirected_edge(c, a, 1)
    g.add_node(d)
    g.add_undirected_edge(a, b, 1)
    g.add_node(c)

    assert [n.id for n in g.nodes()] == ["C", "A", "D", "B"]
    assert len(g) == 4
    assert b in g
    assert DummyNode("Z") not in g


def test_outgoing_returns_copy():
    g = AdjacencyListGraph()
    a = DummyNode("A")
    b = DummyNode("B")

    g.add_edge(a, b, 1)

    out = g.outgoing(a)
    out.clear()

    # internal structure must remain intact
    assert g.outgoing(a) == {b: 1}


def test_outgoing_of_unknown_node_is_empty():
    g = AdjacencyListGraph()
    assert g.outgoing(DummyNode("ghost")) == {}
    assert g.weight(DummyNode("ghost"), DummyNode("A")) is None


def test_zero_weight_is_allowed():
    g = AdjacencyListGraph()
    a = DummyNode("A")
    b = DummyNode("B")
    g.add_undirected_edge(a, b, 0)
    assert g.weight(b, a) == 0


@pytest.mark.parametrize("weight", [-1, -0.5, "3", None, True, math.nan])
def test_invalid_weights_are_rejected(weight):
    g = AdjacencyListGraph()
    a = DummyNode("A")
    b = DummyNode("B")

    with pytest.raises(InvalidWeight) as info:
        g.add_undirected_edge(a, b, weight)

    assert info.value.src == a
    assert info.value.dst == b
    # nothing half-written
    assert len(g) == 0


def test_invalid_weight_is_a_value_error():
    g = AdjacencyListGraph()
    with pytest.raises(ValueError, match="non-negative"):
        g.add_edge(DummyNode("A"), DummyNode("B"), -3)

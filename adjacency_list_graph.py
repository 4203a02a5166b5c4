"""
Concrete weighted graph implementation for roadtrip.

Implements the Graph interface using a simple adjacency-list representation.
Python dicts keep insertion order, so nodes() lists nodes in the order they
were first added.
"""

from numbers import Real
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from errors import InvalidWeight
from graph import Graph
from nodes import Node


class AdjacencyListGraph(Graph):
    """
    Weighted graph backed by a node -> (neighbor -> weight) mapping.
    """

    def __init__(self) -> None:
        self._adj: Dict[Node, Dict[Node, float]] = {}

    # --- Mutation API (builders only, not part of Graph interface) ----------

    def add_node(self, node: Node) -> None:
        """Ensure node exists in the graph."""
        self._adj.setdefault(node, {})

    def add_edge(self, src: Node, dst: Node, weight: float) -> None:
        """
        Add or update a directed edge src -> dst with weight.
        Auto-adds nodes if they don't exist.

        Raises:
            InvalidWeight: if weight is negative or not a number.
        """
        _check_weight(src, dst, weight)
        self.add_node(src)
        self.add_node(dst)
        self._adj[src][dst] = weight

    def add_undirected_edge(self, a: Node, b: Node, weight: float) -> None:
        """
        Add or update the road a <-> b, writing both directed entries with the
        same weight.
        """
        _check_weight(a, b, weight)
        self.add_edge(a, b, weight)
        self.add_edge(b, a, weight)

    # --- Queries -------------------------------------------------------------

    def weight(self, src: Node, dst: Node) -> Optional[float]:
        """Weight of the directed edge src -> dst, or None if there is none."""
        return self._adj.get(src, {}).get(dst)

    def edges(self) -> Iterator[Tuple[Node, Node, float]]:
        """Yield every directed entry as (src, dst, weight)."""
        for src, neighbors in self._adj.items():
            for dst, w in neighbors.items():
                yield src, dst, w

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    # --- Graph interface -----------------------------------------------------

    def nodes(self) -> Iterable[Node]:
        return self._adj.keys()

    def outgoing(self, node: Node) -> Mapping[Node, float]:
        return dict(self._adj.get(node, {}))  # defensive copy


def _check_weight(src: Node, dst: Node, weight: float) -> None:
    # bool is a Real subclass but never a meaningful road length
    if isinstance(weight, bool) or not isinstance(weight, Real) or weight != weight:
        raise InvalidWeight(src, dst, weight)
    if weight < 0:
        raise InvalidWeight(src, dst, weight)

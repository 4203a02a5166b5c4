"""
Weighted graph abstraction for roadtrip.

Nodes are Node instances.
Edges are directed: u -> v with a non-negative weight. Undirected roads are
stored as one entry per direction.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Mapping

from nodes import Node


class Graph(ABC):
    """Directed, weighted graph over Node objects."""

    @abstractmethod
    def nodes(self) -> Iterable[Node]:
        """Return all nodes in the graph, in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, node: Node) -> Mapping[Node, float]:
        """
        Outgoing neighbors and edge weights for a given node.

        Returns: dict[Node, float], empty for nodes not in the graph.
        """
        raise NotImplementedError

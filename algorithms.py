"""
Algorithm interfaces for shortest-path routing.

Keeps the graph algorithm separate from the demo wiring and console output.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional
import math

from nodes import Node
from graph import Graph


@dataclass(frozen=True)
class ShortestPathResult:
    """
    Per-run shortest-path table produced by a DijkstraEngine.

    distances holds every node reached from source (source itself at 0).
    predecessors maps each reached node except source to its parent on one
    minimum-cost path. Nodes missing from distances are unreachable.
    """

    source: Node
    distances: Mapping[Node, float] = field(default_factory=dict)
    predecessors: Mapping[Node, Node] = field(default_factory=dict)

    def distance(self, node: Node) -> float:
        """Shortest distance from source, or math.inf if node is unreachable."""
        return self.distances.get(node, math.inf)

    def predecessor(self, node: Node) -> Optional[Node]:
        return self.predecessors.get(node)

    def is_reachable(self, node: Node) -> bool:
        return node in self.distances

    def reachable(self) -> List[Node]:
        return list(self.distances)

    def path_to(self, target: Node) -> List[Node]:
        """
        Reconstruct the path source -> ... -> target.

        Walks predecessors back from target and reverses the walk, so long
        paths cost no recursion depth. Returns an empty list when target is
        unreachable.
        """
        if not self.is_reachable(target):
            return []

        path: List[Node] = [target]
        node = target
        while node in self.predecessors:
            node = self.predecessors[node]
            path.append(node)
        path.reverse()
        return path


class DijkstraEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: Node) -> Dict[Node, float]:
        """
        Compute shortest-path costs from source to all reachable nodes.

        Returns:
            Mapping dest_node -> path_cost(source -> dest_node).
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(self, graph: Graph, source: Node) -> ShortestPathResult:
        """
        Compute shortest-path costs plus the predecessor chain for each dest.

        Returns:
            A fresh ShortestPathResult; the graph and its nodes are untouched.

        Raises:
            InvalidWeight: if a negative edge weight is encountered.
        """
        raise NotImplementedError

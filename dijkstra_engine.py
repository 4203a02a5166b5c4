"""
Heap-based DijkstraEngine implementation for roadtrip.

Uses Python's heapq to compute single-source shortest paths over any Graph
implementation that satisfies the Graph interface.

heapq has no decrease-key, so an improved node is pushed again and the older,
larger entry is skipped when it surfaces (lazy deletion).
"""

from typing import Dict, List, Tuple
import heapq
import itertools
import math

from algorithms import DijkstraEngine, ShortestPathResult
from errors import InvalidWeight
from graph import Graph
from nodes import Node


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra using a binary heap.

    Complexity:
        O(E log V) over the nodes reachable from the source.

    Edge weights must be non-negative; a negative weight raises InvalidWeight
    as soon as the search reaches it.
    """

    def shortest_path_costs(self, graph: Graph, source: Node) -> Dict[Node, float]:
        """
        Compute only the cost map for all reachable nodes from source.
        """
        return dict(self.shortest_paths(graph, source).distances)

    def shortest_paths(self, graph: Graph, source: Node) -> ShortestPathResult:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        The returned table is built fresh on every call, so the same graph can
        be queried from any number of sources without resetting anything.
        A source that is not in the graph simply ends up alone at distance 0.
        """
        dist: Dict[Node, float] = {source: 0}
        prev: Dict[Node, Node] = {}
        # (distance, insertion sequence, node); the sequence breaks ties so
        # nodes themselves are never compared.
        counter = itertools.count()
        pq: List[Tuple[float, int, Node]] = [(0, next(counter), source)]

        while pq:
            d_u, _, u = heapq.heappop(pq)

            # Skip outdated entries
            if d_u != dist.get(u, math.inf):
                continue

            for v, w in graph.outgoing(u).items():
                if w < 0:
                    raise InvalidWeight(u, v, w)
                alt = d_u + w
                if alt < dist.get(v, math.inf):
                    dist[v] = alt
                    prev[v] = u
                    heapq.heappush(pq, (alt, next(counter), v))

        return ShortestPathResult(source=source, distances=dist, predecessors=prev)

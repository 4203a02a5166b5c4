"""
The fixed demonstration road map: ten towns in Upper Austria.

Weights are road distances in km. Every road is two-way.
"""

from typing import List, Tuple

from adjacency_list_graph import AdjacencyListGraph
from nodes import Location


ROADS: List[Tuple[str, str, int]] = [
    ("Linz", "Wels", 30),
    ("Linz", "Steyr", 38),
    ("Linz", "Enns", 20),
    ("Linz", "Traun", 15),
    ("Wels", "Gmunden", 35),
    ("Wels", "Vöcklabruck", 25),
    ("Wels", "Schwanenstadt", 20),
    ("Gmunden", "Vöcklabruck", 15),
    ("Gmunden", "Bad Ischl", 25),
    ("Steyr", "Traun", 40),
    ("Steyr", "Enns", 18),
    ("Enns", "Eferding", 22),
    ("Eferding", "Wels", 35),
]

DEFAULT_START = "Linz"
DEFAULT_TARGET = "Gmunden"


def build_road_map() -> AdjacencyListGraph:
    """
    Build the road graph. Towns appear in nodes() in the order a road first
    mentions them.
    """
    graph = AdjacencyListGraph()
    for a, b, km in ROADS:
        graph.add_undirected_edge(Location(a), Location(b), km)
    return graph


def location(graph: AdjacencyListGraph, name: str) -> Location:
    """
    Look up a town by name.

    Raises:
        KeyError: if no town with that name is on the map.
    """
    node = Location(name)
    if node not in graph:
        raise KeyError(name)
    return node

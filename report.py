"""
Console report for a shortest-path run.
"""

from typing import Iterable, List
import math

from algorithms import ShortestPathResult
from nodes import Node


UNREACHABLE = "Unreachable"
NO_PATH = "No path exists."


def format_distance(value: float) -> str:
    if math.isinf(value):
        return UNREACHABLE
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_distances(result: ShortestPathResult, nodes: Iterable[Node]) -> List[str]:
    """One header line, then `<label>: <distance>` per node in the given order."""
    lines = [f"Shortest distances from {result.source.id}:"]
    for node in nodes:
        lines.append(f"{node.id}: {format_distance(result.distance(node))}")
    return lines


def format_path(result: ShortestPathResult, target: Node) -> List[str]:
    """Header, the space-separated path (or NO_PATH), then the total distance."""
    path = result.path_to(target)
    return [
        f"Shortest path from {result.source.id} to {target.id}:",
        " ".join(node.id for node in path) if path else NO_PATH,
        f"Total Distance: {format_distance(result.distance(target))}",
    ]


def render_report(result: ShortestPathResult, nodes: Iterable[Node], target: Node) -> str:
    lines = format_distances(result, nodes)
    lines.append("")
    lines.extend(format_path(result, target))
    return "\n".join(lines)

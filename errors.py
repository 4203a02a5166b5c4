"""
Error types for roadtrip.
"""

from typing import Any


class InvalidWeight(ValueError):
    """
    Raised when an edge weight is negative or not a number.

    Dijkstra's greedy invariant only holds for non-negative weights, so such
    edges are rejected rather than producing wrong distances.
    """

    def __init__(self, src: Any, dst: Any, weight: Any) -> None:
        super().__init__(f"Invalid weight {weight!r} on edge {src} -> {dst}; weights must be non-negative numbers.")
        self.src = src
        self.dst = dst
        self.weight = weight

"""
Node abstraction for roadtrip.

Nodes are pure identities: shortest-path state lives in the result table the
engine returns, never on the node itself.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Node(ABC):
    """Abstract node in a road graph."""

    @property
    @abstractmethod
    def id(self) -> str:
        """
        Unique label of the node within one graph.
        """
        raise NotImplementedError


@dataclass(frozen=True)
class Location(Node):
    """A named place on the road map."""

    name: str

    @property
    def id(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name

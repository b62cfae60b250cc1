"""
Directed, weighted graph abstraction.

Vertices are the integers 0..size()-1.
Edges are directed: u -> v with one weight per ordered pair.
"""

from abc import ABC, abstractmethod
from typing import Mapping

import numpy as np

from errors import VertexRangeError
from weights import Weight


class Graph(ABC):
    """Read-only view of a directed, weighted graph over integer vertices."""

    @property
    @abstractmethod
    def weight_dtype(self) -> np.dtype:
        """numpy dtype that edge weights and distances are expressed in."""
        raise NotImplementedError

    @abstractmethod
    def size(self) -> int:
        """Return the number of vertices."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, vertex: int) -> Mapping[int, Weight]:
        """
        Outgoing neighbours and edge weights for a given vertex.

        Returns: read-only mapping target -> weight.
        Raises VertexRangeError if vertex is not in [0, size()).
        """
        raise NotImplementedError


def check_vertex(graph: Graph, vertex: int) -> None:
    """Raise VertexRangeError unless 0 <= vertex < graph.size()."""
    if not 0 <= vertex < graph.size():
        raise VertexRangeError(vertex, graph.size())

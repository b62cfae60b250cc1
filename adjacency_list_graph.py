"""
Concrete directed, weighted graph with a fixed number of integer vertices.

Implements the Graph interface using an adjacency list: one
target -> weight dict per vertex. At most one weight is kept per ordered
pair; adding an edge that already exists replaces its weight.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import (
    Dict, ItemsView, Iterable, Iterator, List, Mapping, Optional, Tuple, Union,
)
import logging

import numpy as np

from config import GraphConfig
from edge_list import read_edge_list
from errors import EdgeNotFoundError, GraphSourceError, VertexRangeError
from graph import Graph
from weights import (
    DTypeLike, Weight, cast_weight, format_weight, infinity_value, zero_value,
)
from weights import weight_dtype as resolve_dtype

logger = logging.getLogger(__name__)


class WeightedDirectedGraph(Graph):
    """
    Directed, weighted graph backed by a list of (neighbour -> weight) dicts.

    Neighbour iteration follows insertion order.
    """

    def __init__(self, vertex_count: int, weight_dtype: DTypeLike = "float64") -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")
        self._dtype = resolve_dtype(weight_dtype)
        self._adj: List[Dict[int, Weight]] = [{} for _ in range(vertex_count)]

    @classmethod
    def from_edges(
        cls,
        vertex_count: int,
        edges: Iterable[Tuple[int, int, Weight]],
        weight_dtype: DTypeLike = "float64",
    ) -> "WeightedDirectedGraph":
        g = cls(vertex_count, weight_dtype)
        for origin, dest, weight in edges:
            g.add_edge(origin, dest, weight)
        return g

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        config: Optional[GraphConfig] = None,
        weight_dtype: Optional[DTypeLike] = None,
    ) -> "WeightedDirectedGraph":
        """
        Build a graph from an edge-list file.

        A file that cannot be opened is logged and yields an empty graph
        (size() == 0), so callers should check the size before use. A
        missing, non-integer or negative vertex count is not treated that
        way: it raises GraphFormatError. An out-of-range triple raises
        VertexRangeError and an unrepresentable weight raises WeightError,
        as add_edge does.
        """
        cfg = config or GraphConfig()
        dtype = weight_dtype if weight_dtype is not None else cfg.weight_dtype
        try:
            source = read_edge_list(path, encoding=cfg.encoding)
        except GraphSourceError as e:
            logger.error(
                "Edge list could not be opened",
                extra={"path": e.path, "error": str(e.cause)},
            )
            return cls(0, dtype)

        g = cls.from_edges(source.vertex_count, source.edges, dtype)
        logger.info(
            "Graph loaded",
            extra={"path": str(path), "vertices": g.size(), "edges": g.edge_count()},
        )
        return g

    # --- Mutation API --------------------------------------------------------

    def add_edge(self, i: int, j: int, weight: Weight) -> None:
        """
        Add or replace the directed edge i -> j.

        Raises VertexRangeError if either endpoint is out of range, and
        WeightError if the weight is NaN or does not fit the weight dtype.
        """
        self._check_vertex(i)
        self._check_vertex(j)
        self._adj[i][j] = cast_weight(self._dtype, weight)

    def remove_edge(self, i: int, j: int) -> None:
        """Remove i -> j if present; out-of-range indices are ignored."""
        if self._in_range(i) and self._in_range(j):
            self._adj[i].pop(j, None)

    # --- Queries -------------------------------------------------------------

    def is_edge(self, i: int, j: int) -> bool:
        """Out-of-range indices simply report no edge."""
        if self._in_range(i) and self._in_range(j):
            return j in self._adj[i]
        return False

    def edge_weight(self, i: int, j: int) -> Weight:
        """
        Weight of edge i -> j.

        Raises:
            VertexRangeError: i or j is out of range.
            EdgeNotFoundError: there is no edge i -> j.
        """
        self._check_vertex(i)
        self._check_vertex(j)
        try:
            return self._adj[i][j]
        except KeyError:
            raise EdgeNotFoundError(i, j) from None

    def get_edge_weight(self, i: int, j: int, default: Optional[Weight] = None) -> Optional[Weight]:
        if not self.is_edge(i, j):
            return default
        return self._adj[i][j]

    def size(self) -> int:
        return len(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        return sum(len(nbrs) for nbrs in self._adj)

    @property
    def weight_dtype(self) -> np.dtype:
        return self._dtype

    def infinity(self) -> Weight:
        return infinity_value(self._dtype)

    def zero(self) -> Weight:
        return zero_value(self._dtype)

    # --- Graph interface / iteration -----------------------------------------

    def outgoing(self, vertex: int) -> Mapping[int, Weight]:
        self._check_vertex(vertex)
        return MappingProxyType(self._adj[vertex])

    def neighbours(self, vertex: int) -> ItemsView[int, Weight]:
        """
        Lazy (target, weight) view for vertex. The view can be iterated any
        number of times and reflects later edge changes.
        """
        return self.outgoing(vertex).items()

    def all_vertices(self) -> Iterator[Tuple[int, Mapping[int, Weight]]]:
        for vertex, nbrs in enumerate(self._adj):
            yield vertex, MappingProxyType(nbrs)

    def __iter__(self) -> Iterator[Tuple[int, Mapping[int, Weight]]]:
        return self.all_vertices()

    def edges(self) -> Iterator[Tuple[int, int, Weight]]:
        for origin, nbrs in enumerate(self._adj):
            for dest, weight in nbrs.items():
                yield origin, dest, weight

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightedDirectedGraph):
            return NotImplemented
        return self._adj == other._adj

    __hash__ = None  # type: ignore[assignment]

    # --- Rendering -------------------------------------------------------------

    def render(self) -> str:
        """
        One line per vertex: ``i:`` then `` (i, j)[w]`` for each outgoing edge.
        """
        lines = []
        for vertex, nbrs in enumerate(self._adj):
            parts = [f"{vertex}:"]
            parts.extend(f" ({vertex}, {dest})[{format_weight(w)}]" for dest, w in nbrs.items())
            lines.append("".join(parts) + "\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"WeightedDirectedGraph(vertices={self.size()}, edges={self.edge_count()}, "
            f"weight_dtype={self._dtype.name})"
        )

    # --- Helpers -------------------------------------------------------------

    def _in_range(self, vertex: int) -> bool:
        return 0 <= vertex < len(self._adj)

    def _check_vertex(self, vertex: int) -> None:
        if not self._in_range(vertex):
            raise VertexRangeError(vertex, len(self._adj))

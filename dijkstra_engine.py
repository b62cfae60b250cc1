"""
Heap-based single-source shortest paths.

Uses Python's heapq to compute shortest-path lengths over any Graph
implementation with non-negative weights, cycles included. Unlike
algorithms.path_lengths_from_root, every vertex is settled exactly once.
"""

from typing import List, Tuple
import heapq
import logging

import numpy as np

from graph import Graph, check_vertex
from weights import Weight, add_weights, infinity_value, zero_value

logger = logging.getLogger(__name__)


def shortest_path_lengths(graph: Graph, source: int) -> np.ndarray:
    """
    Single-source Dijkstra using a binary heap.

    Complexity:
        O(E log V) over the vertices reachable from the source.

    Returns:
        Distance vector in the graph's dtype; unreachable vertices hold the
        infinity sentinel.

    Raises:
        VertexRangeError: source is not a vertex of graph.
        ValueError: a reachable edge has a negative weight.
    """
    check_vertex(graph, source)

    dtype = graph.weight_dtype
    infinity = infinity_value(dtype)
    dist: List[Weight] = [infinity] * graph.size()
    dist[source] = zero_value(dtype)
    pq: List[Tuple[Weight, int]] = [(dist[source], source)]  # (distance, vertex)

    while pq:
        d_u, u = heapq.heappop(pq)

        # Skip outdated entries
        if d_u != dist[u]:
            continue

        for v, w in graph.outgoing(u).items():
            if w < 0:
                raise ValueError(f"negative weight {w} on edge ({u}, {v})")
            alt = add_weights(dtype, d_u, w)
            if alt < dist[v]:
                dist[v] = alt
                heapq.heappush(pq, (alt, v))

    logger.debug(
        "Shortest paths computed",
        extra={"source": source, "reached": sum(d != infinity for d in dist)},
    )
    return np.array(dist, dtype=dtype)

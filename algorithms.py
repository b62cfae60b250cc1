"""
Read-only analysis routines over a Graph.

Each function owns its traversal state (marks, queue) for the duration of
the call and never mutates the graph. Vertex arguments are bounds-checked and
raise VertexRangeError; no other error kinds are introduced here.
"""

from collections import deque
from typing import Deque, List, Sequence
import logging

import numpy as np

from graph import Graph, check_vertex
from weights import Weight, add_weights, infinity_value, zero_value

logger = logging.getLogger(__name__)


def is_subgraph(h: Graph, g: Graph) -> bool:
    """
    True iff every edge of h exists in g with exactly the same weight.

    Edges that only g has are irrelevant. A graph with more vertices than g
    is never a subgraph of it.
    """
    if h.size() > g.size():
        return False

    for u in range(h.size()):
        g_out = g.outgoing(u)
        for v, w in h.outgoing(u).items():
            if v not in g_out or g_out[v] != w:
                return False
    return True


def is_tree_plus_isolated(g: Graph, root: int) -> bool:
    """
    Check that g is a tree hanging off root plus isolated vertices.

    Breadth-first from root, every edge must lead to a vertex not yet
    marked; reaching a marked vertex means a cycle or a second in-edge.
    Afterwards, any vertex the traversal never reached must have no
    outgoing edges.
    """
    check_vertex(g, root)

    marked = [False] * g.size()
    marked[root] = True
    queue: Deque[int] = deque([root])

    while queue:
        u = queue.popleft()
        for v in g.outgoing(u):
            if marked[v]:
                logger.debug("Vertex reached twice", extra={"vertex": v, "via": u})
                return False
            marked[v] = True
            queue.append(v)

    for vertex in range(g.size()):
        if not marked[vertex] and g.outgoing(vertex):
            logger.debug("Unreached vertex has edges", extra={"vertex": vertex})
            return False
    return True


def path_lengths_from_root(tree: Graph, root: int) -> np.ndarray:
    """
    Path lengths from root by FIFO label-correcting relaxation.

    Each dequeued vertex relaxes its outgoing edges; any vertex whose
    distance improves is enqueued again, so a vertex may be expanded more
    than once. This is exact on trees and on DAG-like inputs explored in a
    consistent order. It is NOT a general shortest-path algorithm: without a
    priority order it can expand vertices repeatedly, and it only terminates
    if no endless chain of improvements exists (no negative cycles). Use
    dijkstra_engine.shortest_path_lengths for general graphs with
    non-negative weights.

    Returns:
        Distance vector in the graph's dtype; unreached vertices hold the
        infinity sentinel.
    """
    check_vertex(tree, root)

    dtype = tree.weight_dtype
    dist: List[Weight] = [infinity_value(dtype)] * tree.size()
    dist[root] = zero_value(dtype)
    queue: Deque[int] = deque([root])
    expansions = 0

    while queue:
        u = queue.popleft()
        expansions += 1
        for v, w in tree.outgoing(u).items():
            candidate = add_weights(dtype, dist[u], w)
            if dist[v] > candidate:
                dist[v] = candidate
                queue.append(v)

    logger.debug(
        "Path lengths computed",
        extra={"root": root, "vertices": tree.size(), "expansions": expansions},
    )
    return np.array(dist, dtype=dtype)


def all_edges_relaxed(distances: Sequence[Weight], g: Graph, source: int) -> bool:
    """
    Validate the relaxation condition of a shortest-path distance vector.

    distances[source] must be zero, and for every edge (u, v, w) with a
    finite distances[u], distances[v] <= distances[u] + w, with the sum taken
    in the graph's dtype. Edges leaving a vertex still at infinity impose no
    constraint.
    """
    values = np.asarray(distances)
    if values.ndim != 1 or values.shape[0] != g.size():
        raise ValueError(
            f"distances must be a 1D vector of length {g.size()}, got shape {values.shape}"
        )
    check_vertex(g, source)

    dist = values.tolist()
    if dist[source] != 0:
        return False

    dtype = g.weight_dtype
    infinity = infinity_value(dtype)
    for u in range(g.size()):
        if dist[u] == infinity:
            continue
        for v, w in g.outgoing(u).items():
            if dist[v] > add_weights(dtype, dist[u], w):
                logger.debug(
                    "Edge not relaxed",
                    extra={"origin": u, "dest": v, "weight": w},
                )
                return False
    return True

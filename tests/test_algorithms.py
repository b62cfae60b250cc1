"""
Unit tests for the read-only graph checks.
"""

import math

import numpy as np
import pytest

from adjacency_list_graph import WeightedDirectedGraph
from algorithms import (
    all_edges_relaxed,
    is_subgraph,
    is_tree_plus_isolated,
    path_lengths_from_root,
)
from dijkstra_engine import shortest_path_lengths
from errors import VertexRangeError


def _chain() -> WeightedDirectedGraph:
    # 0 -> 1 (2), 1 -> 2 (3)
    return WeightedDirectedGraph.from_edges(3, [(0, 1, 2.0), (1, 2, 3.0)])


# --- is_subgraph ---------------------------------------------------------------


def test_subgraph_is_reflexive():
    g = WeightedDirectedGraph.from_edges(4, [(0, 1, 1.0), (1, 2, 2.0), (3, 0, 0.5)])
    assert is_subgraph(g, g)


def test_subgraph_ignores_extra_edges_in_g():
    g = WeightedDirectedGraph.from_edges(3, [(0, 1, 1.0), (1, 2, 2.0), (2, 0, 3.0)])
    h = WeightedDirectedGraph.from_edges(2, [(0, 1, 1.0)])

    assert is_subgraph(h, g)
    assert not is_subgraph(g, h)


def test_larger_graph_is_never_a_subgraph():
    """Vertex count alone decides, even without edges."""
    assert not is_subgraph(WeightedDirectedGraph(4), WeightedDirectedGraph(3))


def test_subgraph_requires_exact_weight():
    g = WeightedDirectedGraph.from_edges(2, [(0, 1, 1.0)])
    h = WeightedDirectedGraph.from_edges(2, [(0, 1, 1.5)])

    assert not is_subgraph(h, g)


def test_subgraph_missing_edge():
    g = WeightedDirectedGraph.from_edges(2, [(0, 1, 1.0)])
    h = WeightedDirectedGraph.from_edges(2, [(1, 0, 1.0)])

    assert not is_subgraph(h, g)


# --- is_tree_plus_isolated -----------------------------------------------------


def test_single_vertex_is_a_tree():
    assert is_tree_plus_isolated(WeightedDirectedGraph(1), 0)


def test_tree_with_isolated_vertex():
    g = WeightedDirectedGraph.from_edges(5, [(0, 1, 1.0), (0, 2, 1.0), (1, 3, 1.0)])
    assert is_tree_plus_isolated(g, 0)


def test_converging_paths_are_not_a_tree():
    """0 -> 1, 0 -> 2, 2 -> 1 reaches vertex 1 twice."""
    g = WeightedDirectedGraph.from_edges(3, [(0, 1, 1.0), (0, 2, 1.0), (2, 1, 1.0)])
    assert not is_tree_plus_isolated(g, 0)


def test_edge_back_to_root_is_not_a_tree():
    g = WeightedDirectedGraph.from_edges(2, [(0, 1, 1.0), (1, 0, 1.0)])
    assert not is_tree_plus_isolated(g, 0)


def test_unreached_vertex_with_edges_fails():
    """Vertex 2 is not reachable from 0 but still points somewhere."""
    g = WeightedDirectedGraph.from_edges(4, [(0, 1, 1.0), (2, 3, 1.0)])
    assert not is_tree_plus_isolated(g, 0)


@pytest.mark.parametrize("root", [-1, 3])
def test_tree_check_rejects_invalid_root(root):
    with pytest.raises(VertexRangeError):
        is_tree_plus_isolated(WeightedDirectedGraph(3), root)


# --- path_lengths_from_root ----------------------------------------------------


def test_path_lengths_on_chain():
    dist = path_lengths_from_root(_chain(), 0)

    assert isinstance(dist, np.ndarray)
    assert dist.dtype == np.float64
    assert dist.tolist() == [0.0, 2.0, 5.0]


def test_path_lengths_leave_unreached_at_infinity():
    g = WeightedDirectedGraph.from_edges(4, [(0, 1, 1.0), (1, 2, 1.0)])
    dist = path_lengths_from_root(g, 1)

    assert math.isinf(dist[0])
    assert dist[1] == 0.0
    assert dist[2] == 1.0
    assert math.isinf(dist[3])


def test_path_lengths_reexpand_improved_vertices():
    """1 is first reached at 10, then improved to 2 through vertex 2."""
    g = WeightedDirectedGraph.from_edges(
        4, [(0, 1, 10.0), (0, 2, 1.0), (2, 1, 1.0), (1, 3, 1.0)]
    )
    assert path_lengths_from_root(g, 0).tolist() == [0.0, 2.0, 1.0, 3.0]


def test_path_lengths_integer_dtype():
    g = WeightedDirectedGraph.from_edges(3, [(0, 1, 2), (1, 2, 3)], weight_dtype="int32")
    dist = path_lengths_from_root(g, 0)

    assert dist.dtype == np.int32
    assert dist.tolist() == [0, 2, 5]

    unreached = path_lengths_from_root(g, 2)
    assert unreached.tolist() == [2**31 - 1, 2**31 - 1, 0]


def test_path_lengths_reject_invalid_root():
    with pytest.raises(VertexRangeError):
        path_lengths_from_root(_chain(), 3)


# --- all_edges_relaxed ---------------------------------------------------------


def test_relaxed_distances_accepted():
    assert all_edges_relaxed([0, 2, 5], _chain(), 0)


def test_unrelaxed_edge_detected():
    """6 > 2 + 3: edge 1 -> 2 could still be relaxed."""
    assert not all_edges_relaxed([0, 2, 6], _chain(), 0)
    assert not all_edges_relaxed([0, 3, 5], _chain(), 0)


def test_underestimate_still_counts_as_relaxed():
    # 4 <= 2 + 3, so no edge can lower any entry further
    assert all_edges_relaxed([0, 2, 4], _chain(), 0)


def test_nonzero_source_distance_fails():
    assert not all_edges_relaxed([1, 2, 5], _chain(), 0)
    assert not all_edges_relaxed([0.5, 0, 0], _chain(), 0)


def test_edges_from_unreached_vertices_are_exempt():
    g = WeightedDirectedGraph.from_edges(3, [(0, 1, 1.0), (2, 1, 1.0)])
    inf = float("inf")

    assert all_edges_relaxed([0.0, 5.0, inf], g, 0) is False
    assert all_edges_relaxed([0.0, 1.0, inf], g, 0)


def test_relaxed_accepts_path_lengths_output():
    g = WeightedDirectedGraph.from_edges(5, [(0, 1, 1.0), (0, 2, 4.0), (1, 3, 2.0)])
    assert all_edges_relaxed(path_lengths_from_root(g, 0), g, 0)


def test_relaxed_validates_inputs():
    with pytest.raises(ValueError):
        all_edges_relaxed([0, 2], _chain(), 0)
    with pytest.raises(VertexRangeError):
        all_edges_relaxed([0, 2, 5], _chain(), 3)


def test_float32_distances_pass_relaxation_check():
    """Sums are rounded in float32, so both distance routines agree with the check."""
    g = WeightedDirectedGraph.from_edges(3, [(0, 1, 0.1), (1, 2, 0.2)], weight_dtype="float32")

    by_queue = path_lengths_from_root(g, 0)
    by_heap = shortest_path_lengths(g, 0)

    assert by_queue.dtype == np.float32
    assert all_edges_relaxed(by_queue, g, 0)
    assert all_edges_relaxed(by_heap, g, 0)
    np.testing.assert_array_equal(by_queue, by_heap)


def test_subgraph_reflexive_with_float32_weights():
    g = WeightedDirectedGraph.from_edges(3, [(0, 1, 0.1), (2, 0, 1e-3)], weight_dtype="float32")
    assert is_subgraph(g, g)

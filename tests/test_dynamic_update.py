import io

import pytest

from dynsssp.dynamic_update import (
    Change,
    apply_changes,
    apply_changes_with_logging,
    process_changes,
    update_affected_subgraph,
)
from dynsssp.graph import Graph
from dynsssp.sssp_local import INF, run_local_sssp


@pytest.fixture
def graph():
    return Graph.from_edges(
        [(0, 1, 1), (1, 2, 1), (0, 2, 5), (2, 3, 1), (3, 4, 2), (1, 4, 9)]
    )


def _assert_shortest_path_tree(graph, state, source):
    assert state.dist[source] == 0
    for u in range(graph.num_vertices):
        if state.dist[u] == INF:
            continue
        for v, w in graph.neighbors(u):
            assert state.dist[v] <= state.dist[u] + w
        if u != source:
            p = state.parent[u]
            assert (u, state.dist[u] - state.dist[p]) in list(graph.neighbors(p))


def test_tree_edge_deletion_marks_farther_endpoint(graph):
    state = run_local_sssp(graph, 0)
    assert state.parent[2] == 1
    affected_del, affected = process_changes(graph, state, [Change(False, 1, 2)])
    assert state.dist[2] == INF
    assert affected_del[2] and affected[2]
    assert sum(affected_del) == 1


def test_non_tree_edge_deletion_changes_nothing(graph):
    state = run_local_sssp(graph, 0)
    before = list(state.dist)
    affected_del, affected = process_changes(graph, state, [Change(False, 0, 2)])
    assert state.dist == before
    assert not any(affected_del)
    assert not any(affected)


def test_insertion_between_settled_vertices_leaves_state(graph):
    state = run_local_sssp(graph, 0)
    before_dist, before_parent = list(state.dist), list(state.parent)
    _, affected = process_changes(graph, state, [Change(True, 0, 4)])
    assert state.dist == before_dist
    assert state.parent == before_parent
    assert not any(affected)


def test_update_invalidates_subtree_then_repairs(graph):
    state = run_local_sssp(graph, 0)
    expected = list(state.dist)
    affected_del, affected = process_changes(graph, state, [Change(False, 1, 2)])
    update_affected_subgraph(graph, state, affected_del, affected)
    assert not any(affected_del)
    assert not any(affected)
    assert state.dist == expected
    _assert_shortest_path_tree(graph, state, 0)


def test_apply_changes_recovers_distances_on_static_graph(graph):
    reference = run_local_sssp(graph, 0)
    state = run_local_sssp(graph, 0)
    apply_changes(
        graph,
        state,
        [Change(False, 0, 1), Change(False, 2, 3), Change(True, 1, 3)],
    )
    assert state.dist == reference.dist
    _assert_shortest_path_tree(graph, state, 0)


def test_apply_empty_batch_is_identity(graph):
    state = run_local_sssp(graph, 0)
    before = list(state.dist)
    apply_changes(graph, state, [])
    assert state.dist == before


def test_logging_lists_changes_and_applies(graph):
    reference = run_local_sssp(graph, 0)
    state = run_local_sssp(graph, 0)
    out = io.StringIO()
    apply_changes_with_logging(
        graph, state, [Change(True, 0, 1), Change(False, 1, 2)], out=out
    )
    assert out.getvalue().splitlines() == [
        "Applying changes:",
        "  [INSERT]  Edge (0, 1)",
        "  [DELETE]  Edge (1, 2)",
    ]
    assert state.dist == reference.dist


def test_change_vertex_out_of_range(graph):
    state = run_local_sssp(graph, 0)
    with pytest.raises(IndexError):
        process_changes(graph, state, [Change(False, 0, 99)])
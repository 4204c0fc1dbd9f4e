"""Incremental repair of shortest-path distances after edge changes."""

from __future__ import annotations

import sys
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, TextIO

from dynsssp.graph import Graph
from dynsssp.sssp_local import INF, SSSPState

_INSERT_WEIGHT = 1


@dataclass(frozen=True)
class Change:
    """An edge insertion or deletion between vertices ``u`` and ``v``."""

    is_insert: bool
    u: int
    v: int


def process_changes(
    graph: Graph, state: SSSPState, changes: Sequence[Change]
) -> tuple[list[bool], list[bool]]:
    """Mark the vertices touched by ``changes``.

    Deletions of tree edges cut off the farther endpoint; insertions may
    shorten a path. Returns ``(affected_by_deletion, affected)`` flags.
    """
    dist, parent = state.dist, state.parent
    affected_del = [False] * graph.num_vertices
    affected = [False] * graph.num_vertices

    for change in changes:
        if change.is_insert:
            continue
        u, v = change.u, change.v
        if parent[v] == u or parent[u] == v:
            y = u if dist[u] > dist[v] else v
            dist[y] = INF
            affected_del[y] = affected[y] = True

    for change in changes:
        if not change.is_insert:
            continue
        u, v = change.u, change.v
        x = u if dist[u] > dist[v] else v
        y = v if x == u else u
        if dist[y] > dist[x] + _INSERT_WEIGHT:
            dist[y] = dist[x] + _INSERT_WEIGHT
            parent[y] = x
            affected[y] = True

    return affected_del, affected


def update_affected_subgraph(
    graph: Graph,
    state: SSSPState,
    affected_del: list[bool],
    affected: list[bool],
) -> None:
    """Invalidate subtrees below deleted vertices, then relax until stable.

    Both flag lists are updated in place and end up all ``False``.
    """
    dist, parent = state.dist, state.parent

    children: defaultdict[int, list[int]] = defaultdict(list)
    for v, p in enumerate(parent):
        if p >= 0:
            children[p].append(v)

    queue = deque(v for v, flagged in enumerate(affected_del) if flagged)
    queued = set(queue)
    while queue:
        u = queue.popleft()
        affected_del[u] = False
        for v in children.get(u, ()):
            dist[v] = INF
            affected[v] = True
            if v not in queued:
                queued.add(v)
                affected_del[v] = True
                queue.append(v)

    again = True
    while again:
        again = False
        for u in range(graph.num_vertices):
            if not affected[u]:
                continue
            affected[u] = False
            for v, w in graph.neighbors(u):
                if dist[v] > dist[u] + w:
                    dist[v] = dist[u] + w
                    parent[v] = u
                    affected[v] = True
                    again = True
                elif dist[u] > dist[v] + w:
                    dist[u] = dist[v] + w
                    parent[u] = v
                    affected[u] = True
                    again = True


def apply_changes(graph: Graph, state: SSSPState, changes: Sequence[Change]) -> None:
    """Apply one batch of changes to ``state``."""
    affected_del, affected = process_changes(graph, state, changes)
    update_affected_subgraph(graph, state, affected_del, affected)


def apply_changes_with_logging(
    graph: Graph,
    state: SSSPState,
    changes: Sequence[Change],
    out: Optional[TextIO] = None,
) -> None:
    """List each change on ``out`` (standard output by default), then apply the batch."""
    out = sys.stdout if out is None else out
    print("Applying changes:", file=out)
    for line in _describe(changes):
        print(line, file=out)
    apply_changes(graph, state, changes)


def _describe(changes: Iterable[Change]) -> Iterable[str]:
    for change in changes:
        tag = "[INSERT]" if change.is_insert else "[DELETE]"
        yield f"  {tag}  Edge ({change.u}, {change.v})"
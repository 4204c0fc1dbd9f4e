"""Single-source shortest paths by repeated edge relaxation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from dynsssp.graph import Graph

INF = 2**31 - 1
"""Distance of a vertex that has not been reached."""


@dataclass
class SSSPState:
    """Distances and shortest-path tree parents, indexed by vertex."""

    dist: list[int]
    parent: list[int]

    @classmethod
    def initial(cls, num_vertices: int, source: Optional[int] = None) -> SSSPState:
        """All vertices unreached and parentless, except ``source`` at distance 0."""
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        dist = [INF] * num_vertices
        parent = [-1] * num_vertices
        if source is not None:
            if not 0 <= source < num_vertices:
                raise ValueError(f"source {source} out of range 0..{num_vertices - 1}")
            dist[source] = 0
        return cls(dist=dist, parent=parent)


def run_local_sssp(graph: Graph, source: int, max_iters: int = 10) -> SSSPState:
    """Relax every edge for at most ``max_iters`` sweeps over the vertices."""
    state = SSSPState.initial(graph.num_vertices, source)
    dist, parent = state.dist, state.parent
    for _ in range(max_iters):
        changed = False
        for u in range(graph.num_vertices):
            du = dist[u]
            if du == INF:
                continue
            for v, w in graph.neighbors(u):
                candidate = du + w
                if candidate < dist[v]:
                    dist[v] = candidate
                    parent[v] = u
                    changed = True
        if not changed:
            break
    return state
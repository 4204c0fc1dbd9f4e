"""Splitting a graph into parts and cutting out one part with its halo."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from itertools import accumulate
from typing import Iterator, Sequence

from dynsssp.graph import Graph

log = logging.getLogger(__name__)


@dataclass
class LocalSubgraph:
    """The part of a graph one rank works on, with its vertex numbering.

    ``global_to_local`` holds ``-1`` for vertices that are not present.
    """

    graph: Graph
    global_to_local: list[int]
    local_to_global: list[int]


def partition_graph(graph: Graph, num_parts: int) -> list[int]:
    """Assign every vertex a part number in ``0..num_parts - 1``.

    Vertices are taken in breadth-first order, so neighbouring vertices
    tend to share a part, and the parts differ in size by at most one.
    With ``num_parts`` of one or less every vertex goes to part 0.
    """
    log.info("partitionGraph(): k = %d", num_parts)
    n = graph.num_vertices
    if num_parts <= 1 or n == 0:
        return [0] * n
    part = [0] * n
    for position, vertex in enumerate(_bfs_order(graph)):
        part[vertex] = position * num_parts // n
    return part


def _bfs_order(graph: Graph) -> Iterator[int]:
    seen = [False] * graph.num_vertices
    for start in range(graph.num_vertices):
        if seen[start]:
            continue
        seen[start] = True
        queue = deque([start])
        while queue:
            u = queue.popleft()
            yield u
            for v, _ in graph.neighbors(u):
                if not seen[v]:
                    seen[v] = True
                    queue.append(v)


def extract_local_subgraph(full: Graph, part: Sequence[int], rank: int) -> LocalSubgraph:
    """Cut out the vertices owned by ``rank`` plus their direct neighbours.

    Local vertex ids follow the order of the global ids; the subgraph keeps
    every edge between two kept vertices with its weight.
    """
    if len(part) != full.num_vertices:
        raise ValueError(
            f"partition has {len(part)} entries for {full.num_vertices} vertices"
        )
    owned = [p == rank for p in part]
    keep = list(owned)
    for u, is_owned in enumerate(owned):
        if is_owned:
            for v, _ in full.neighbors(u):
                keep[v] = True

    global_to_local = [-1] * full.num_vertices
    local_to_global = [v for v, kept in enumerate(keep) if kept]
    for local, glob in enumerate(local_to_global):
        global_to_local[glob] = local

    rows = [
        [(global_to_local[v], w) for v, w in full.neighbors(u) if keep[v]]
        for u in local_to_global
    ]
    entries = [entry for row in rows for entry in row]
    graph = Graph(
        num_vertices=len(local_to_global),
        num_edges=len(entries) // 2,
        xadj=[0, *accumulate(len(row) for row in rows)],
        adjncy=[v for v, _ in entries],
        weights=[w for _, w in entries],
    )
    return LocalSubgraph(
        graph=graph,
        global_to_local=global_to_local,
        local_to_global=local_to_global,
    )
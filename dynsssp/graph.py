"""Undirected weighted graphs stored in compressed sparse row form."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import accumulate, chain
from os import PathLike
from typing import Iterable, Iterator, TextIO, Union

log = logging.getLogger(__name__)

Edge = tuple[int, int, int]


@dataclass
class Graph:
    """An undirected graph in CSR form; every edge is stored in both directions."""

    num_vertices: int = 0
    num_edges: int = 0
    xadj: list[int] = field(default_factory=lambda: [0])
    adjncy: list[int] = field(default_factory=list)
    weights: list[int] = field(default_factory=list)

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> Graph:
        """Build a graph from ``(u, v, weight)`` triples.

        The vertex count is one more than the largest vertex id seen.
        """
        edge_list = [(int(u), int(v), int(w)) for u, v, w in edges]
        for u, v, _ in edge_list:
            if u < 0 or v < 0:
                raise ValueError(f"negative vertex id in edge ({u}, {v})")

        num_vertices = max((max(u, v) for u, v, _ in edge_list), default=-1) + 1
        adjacency: list[list[tuple[int, int]]] = [[] for _ in range(num_vertices)]
        for u, v, w in edge_list:
            adjacency[u].append((v, w))
            adjacency[v].append((u, w))

        xadj = [0, *accumulate(len(row) for row in adjacency)]
        entries = list(chain.from_iterable(adjacency))
        return cls(
            num_vertices=num_vertices,
            num_edges=len(edge_list),
            xadj=xadj,
            adjncy=[v for v, _ in entries],
            weights=[w for _, w in entries],
        )

    @classmethod
    def load(cls, path: Union[str, PathLike]) -> Graph:
        """Read a graph from a text file with one ``u v weight`` edge per line.

        Empty lines, lines starting with ``#`` and lines without three
        integers are skipped.
        """
        with open(path, encoding="utf-8") as handle:
            graph = cls.from_edges(_parse_edges(handle))
        log.info(
            "Loaded weighted graph: V=%d   E=%d   CSR-entries=%d",
            graph.num_vertices,
            graph.num_edges,
            len(graph.adjncy),
        )
        return graph

    def neighbors(self, u: int) -> Iterator[tuple[int, int]]:
        """Yield ``(neighbor, weight)`` pairs of vertex ``u`` in storage order."""
        if not 0 <= u < self.num_vertices:
            raise IndexError(f"vertex {u} out of range 0..{self.num_vertices - 1}")
        start, end = self.xadj[u], self.xadj[u + 1]
        return zip(self.adjncy[start:end], self.weights[start:end])


def _parse_edges(lines: TextIO) -> Iterator[Edge]:
    for line in lines:
        line = line.rstrip("\n")
        if not line or line.startswith("#"):
            continue
        fields = line.split()
        if len(fields) < 3:
            continue
        try:
            u, v, w = (int(token) for token in fields[:3])
        except ValueError:
            continue
        yield u, v, w
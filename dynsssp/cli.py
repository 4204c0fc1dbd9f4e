"""Command line driver: load a graph and a change list, update distances in batches."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from os import PathLike
from typing import Optional, Sequence, TextIO, Union

from dynsssp.dynamic_update import Change, apply_changes_with_logging
from dynsssp.exchange import exchange_boundary_distances
from dynsssp.graph import Graph
from dynsssp.partition import LocalSubgraph, extract_local_subgraph, partition_graph
from dynsssp.sssp_local import SSSPState

DEFAULT_GRAPH = "../data/Datasetupd.txt"
DEFAULT_CHANGES = "../data/changes.txt"
DEFAULT_BATCH_SIZE = 1000
SOURCE_VERTEX = 0


def load_changes(path: Union[str, PathLike]) -> list[Change]:
    """Read ``op u v`` records; ``op`` equal to ``insert`` marks an insertion.

    Reading stops at the first incomplete or malformed record.
    """
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    changes = []
    it = iter(tokens)
    for op, u, v in zip(it, it, it):
        try:
            changes.append(Change(op == "insert", int(u), int(v)))
        except ValueError:
            break
    return changes


def _initial_state(sub: LocalSubgraph) -> SSSPState:
    g2l = sub.global_to_local
    source = g2l[SOURCE_VERTEX] if len(g2l) > SOURCE_VERTEX else -1
    return SSSPState.initial(sub.graph.num_vertices, source if source >= 0 else None)


def _to_local(batch: Sequence[Change], g2l: Sequence[int]) -> list[Change]:
    local = []
    for change in batch:
        if not (0 <= change.u < len(g2l) and 0 <= change.v < len(g2l)):
            continue
        u, v = g2l[change.u], g2l[change.v]
        if u >= 0 and v >= 0:
            local.append(Change(change.is_insert, u, v))
    return local


def run(
    graph: Graph,
    changes: Sequence[Change],
    num_parts: int = 1,
    batch_size: int = DEFAULT_BATCH_SIZE,
    out: Optional[TextIO] = None,
) -> list[int]:
    """Apply ``changes`` in batches over ``num_parts`` parts of ``graph``.

    Progress goes to ``out`` (standard output by default). Returns the
    merged distance of every global vertex.
    """
    if num_parts < 1:
        raise ValueError("number of parts must be at least 1")
    if batch_size < 1:
        raise ValueError("batch size must be at least 1")
    out = sys.stdout if out is None else out
    started = time.perf_counter()

    global_v = graph.num_vertices
    part = [0] * global_v if num_parts == 1 else partition_graph(graph, num_parts)
    subs = [extract_local_subgraph(graph, part, rank) for rank in range(num_parts)]

    print(f"Global: V={global_v} E={graph.num_edges}", file=out)
    print(f"Parts={num_parts}", file=out)
    for rank, sub in enumerate(subs):
        print(
            f"Rank {rank}: localV={sub.graph.num_vertices} localE={sub.graph.num_edges}",
            file=out,
        )

    states = [_initial_state(sub) for sub in subs]
    mappings = [sub.local_to_global for sub in subs]
    batches = [changes[a : a + batch_size] for a in range(0, len(changes), batch_size)]

    update_started = time.perf_counter()
    for index, batch in enumerate(batches, start=1):
        print(f"Batch {index}/{len(batches)} changes={len(batch)}", file=out)
        for sub, state in zip(subs, states):
            local_batch = _to_local(batch, sub.global_to_local)
            apply_changes_with_logging(sub.graph, state, local_batch, out)
        exchange_boundary_distances(states, mappings, global_v)
    finished = time.perf_counter()

    print(f"SSSP-update completed in {finished - update_started:.6f} s", file=out)
    print(f"Total run time: {time.perf_counter() - started:.6f} s", file=out)
    return exchange_boundary_distances(states, mappings, global_v)


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point of the ``dynsssp`` command."""
    parser = argparse.ArgumentParser(
        prog="dynsssp",
        description="Update single-source shortest paths after batches of edge changes.",
    )
    parser.add_argument("--graph", default=DEFAULT_GRAPH, help="edge list file")
    parser.add_argument("--changes", default=DEFAULT_CHANGES, help="change list file")
    parser.add_argument("--parts", type=_positive_int, default=1, help="number of parts")
    parser.add_argument(
        "--batch-size", type=_positive_int, default=DEFAULT_BATCH_SIZE, help="changes per batch"
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        graph = Graph.load(args.graph)
    except OSError as exc:
        print(f"ERROR: cannot load graph: {exc}", file=sys.stderr)
        return 1

    try:
        changes = load_changes(args.changes)
    except OSError:
        print(f"ERROR: cannot open {args.changes}", file=sys.stderr)
        changes = []

    run(graph, changes, args.parts, args.batch_size)
    return 0


if __name__ == "__main__":
    sys.exit(main())
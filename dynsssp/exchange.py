"""Sharing change batches and distances between the parts of a graph."""

from __future__ import annotations

from typing import Iterable, Sequence

from dynsssp.dynamic_update import Change
from dynsssp.sssp_local import INF, SSSPState


def encode_changes(changes: Iterable[Change]) -> list[int]:
    """Flatten changes into ``[is_insert, u, v, ...]`` integers."""
    return [
        value
        for change in changes
        for value in (1 if change.is_insert else 0, change.u, change.v)
    ]


def decode_changes(buffer: Sequence[int]) -> list[Change]:
    """Rebuild changes from the integers made by :func:`encode_changes`.

    A flag equal to 1 marks an insertion; anything else is a deletion.
    """
    if len(buffer) % 3:
        raise ValueError(f"buffer length {len(buffer)} is not a multiple of 3")
    it = iter(buffer)
    return [Change(flag == 1, u, v) for flag, u, v in zip(it, it, it)]


def exchange_boundary_distances(
    states: Sequence[SSSPState],
    local_to_globals: Sequence[Sequence[int]],
    global_v: int,
) -> list[int]:
    """Give every copy of a vertex the smallest distance any part holds for it.

    Each state is updated in place; the merged global distances are returned.
    """
    if len(states) != len(local_to_globals):
        raise ValueError("need one vertex mapping per state")
    global_dist = [INF] * global_v
    for state, mapping in zip(states, local_to_globals):
        if len(state.dist) != len(mapping):
            raise ValueError(
                f"state has {len(state.dist)} distances but mapping has {len(mapping)}"
            )
        for d, g in zip(state.dist, mapping):
            if d < global_dist[g]:
                global_dist[g] = d
    for state, mapping in zip(states, local_to_globals):
        state.dist[:] = [global_dist[g] for g in mapping]
    return global_dist


def check_global_convergence(local_done_flags: Iterable[bool]) -> bool:
    """True when every part reports that it is done."""
    return all(local_done_flags)
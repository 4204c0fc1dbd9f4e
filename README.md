# dynsssp

`dynsssp` computes single-source shortest paths on an undirected, weighted
graph. It then keeps the distances up to date while batches of edge
insertions and deletions arrive, without recomputing from scratch.

The graph can also be split into parts. Each part is cut out together with a
one-vertex halo of neighbouring vertices and updated on its own. The distances
of vertices that several parts share are then merged by taking the minimum.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Input formats

**Graph file.** Each line holds one edge, written as `u v w`: two vertex IDs
and an integer weight. Vertex IDs start at 0.

- Lines that are empty or start with `#` are skipped.
- Lines whose first three fields are not integers are skipped.
- The number of vertices is the largest ID seen, plus one.
- Every edge is stored in both directions.

```
# u v w
0 1 4
0 2 1
2 1 2
```

**Changes file.** It holds whitespace-separated triples `op u v`. An op of
`insert` marks an insertion of the edge (u, v); any other op marks a deletion.
Reading stops at the first triple whose vertex IDs are not integers. An
incomplete triple at the end is ignored.

```
insert 1 3
delete 0 2
```

## Command line

```
dynsssp --help
dynsssp --graph edges.txt --changes changes.txt --parts 2 --batch-size 500
```

| Option         | Default                  | Meaning                          |
|----------------|--------------------------|----------------------------------|
| `--graph`      | `../data/Datasetupd.txt` | graph file                       |
| `--changes`    | `../data/changes.txt`    | changes file                     |
| `--parts`      | `1`                      | number of parts (positive)       |
| `--batch-size` | `1000`                   | changes per batch (positive)     |

The command runs these steps:

1. It loads the graph. If the file cannot be opened, it prints an error and
   exits with status 1.
2. It loads the changes. If that file cannot be opened, it prints an error and
   goes on with no changes.
3. It partitions the graph and prints the vertex and edge counts of every part.
4. The source vertex is 0. For each batch, it applies the changes to every
   part and lists each change. Changes with an endpoint outside a part are
   skipped for that part. It then merges the boundary distances.
5. It prints the time spent on the updates and the total run time.

The graph summary is written through `logging` at INFO level.

The same run is available from Python as `dynsssp.cli.run(graph, changes,
num_parts, batch_size, out)`. It returns the merged distance of every vertex.
`dynsssp.cli.load_changes(path)` reads a changes file.

## Library use

```python
from dynsssp.graph import Graph
from dynsssp.sssp_local import SSSPState, run_local_sssp
from dynsssp.dynamic_update import Change, apply_changes

graph = Graph.from_edges([(0, 1, 4), (0, 2, 1), (2, 1, 2)])

# Full relaxation from a source vertex (at most 10 sweeps, stops early when stable)
state = run_local_sssp(graph, 0, 10)
print(state.dist, state.parent)

# Incremental maintenance of an existing state
apply_changes(graph, state, [Change(True, 0, 1), Change(False, 0, 2)])
print(state.dist, state.parent)
```

- `Graph` stores the graph in compressed sparse row form. Its fields are
  `num_vertices`, `num_edges`, `xadj`, `adjncy` and `weights`.
  `Graph.load(path)` reads a graph file. `Graph.neighbors(u)` yields
  `(neighbor, weight)` pairs.
- `SSSPState` holds `dist` and `parent` lists. `SSSPState.initial(n, source)`
  sets every vertex to unreached except the source.
- Unreachable vertices keep the distance `dynsssp.sssp_local.INF`, the largest
  32-bit signed integer. A vertex with no parent has parent `-1`.

The update works in two steps:

- `process_changes` marks the affected vertices. Deleting a tree edge sets
  the farther endpoint to `INF`. An insertion is first treated as an edge of
  weight 1.
- `update_affected_subgraph` clears the subtrees below the deleted vertices.
  It then relaxes the affected vertices with the weights stored in the graph
  until nothing changes.

`apply_changes` runs both steps. `apply_changes_with_logging` also prints each
change to a stream, which is standard output by default.

Changes update only the shortest-path state. The `Graph` itself is not
modified: inserted edges are not added to it, and deleted edges are not
removed from it.

### Partitioning and exchange

```python
from dynsssp.partition import partition_graph, extract_local_subgraph

part = partition_graph(graph, 2)
local = extract_local_subgraph(graph, part, 0)
print(local.graph.num_vertices, local.local_to_global, local.global_to_local)
```

`partition_graph` gives each vertex a part number. It walks the vertices in
breadth-first order and cuts that order into parts whose sizes differ by at
most one. With one part or fewer, every vertex goes to part 0.

`extract_local_subgraph` returns a `LocalSubgraph`. It holds the owned
vertices and their direct neighbours, both vertex mappings, and every edge
between kept vertices. In `global_to_local`, `-1` marks a vertex that is not
in the part.

`dynsssp.exchange` provides the following:

- `encode_changes` and `decode_changes` turn a list of changes into a flat
  `[is_insert, u, v, ...]` integer list and back.
- `exchange_boundary_distances(states, local_to_globals, global_v)` gives
  every copy of a vertex the smallest distance any part holds for it. It
  returns the merged global distances.
- `check_global_convergence(flags)` reports whether every part is done.

## What it does not do

All parts are processed one after another in a single Python process. The
package does not spread the work over several processes or machines, and it
does not use an external graph partitioner.
# mstlab

Minimum spanning trees on small weighted graphs, built from scratch:

- graphs stored as an **adjacency list** (`GraphAdjList`) or an
  **incidence matrix** (`GraphIncMatrix`), directed or undirected;
- **Kruskal's algorithm** on an edge list, with a union-find
  `DisjointSet` and an in-place `heap_sort`;
- **Prim's algorithm** on either representation, driven by an indexed
  `MinHeap` with decrease-key;
- a `Timer` for measuring runs in whole milliseconds.

No third-party libraries are needed.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
mstlab
```

builds a sample graph of 5 vertices and 7 edges, prints it, prints a
blank line, and then prints its minimum spanning tree, one edge per line
as `from -> to : weight`.

Options:

- `--algorithm {prim,kruskal}` – which algorithm to run (default `prim`);
- `--representation {matrix,list}` – store the graph as an incidence
  matrix or an adjacency list (default `matrix`);
- `--undirected` – build an undirected graph (by default it is directed).

With no options the graph is a directed incidence matrix and Prim's
algorithm is used; Prim follows every matrix column in both directions
and uses absolute weights, so the tree is that of the undirected graph.

## Library use

```python
from mstlab.enums import GraphDirection
from mstlab.adjlist import GraphAdjList
from mstlab.kruskal import kruskal
from mstlab.prim import prim_adjacency, format_mst

graph = GraphAdjList(5, GraphDirection.UNDIRECTED)
for source, target, weight in [(0, 1, 2), (0, 2, 5), (0, 3, 4), (1, 3, 7),
                               (2, 3, 1), (2, 4, 6), (3, 4, 3)]:
    graph.add_edge(source, target, weight)

print(graph)                                         # "vertex: n [w] -> n [w] ..." per line
print(format_mst(kruskal(graph.vertices, graph.edge_array())))
print(format_mst(prim_adjacency(graph)))             # grown from vertex 0
```

### Graphs

`GraphAdjList(vertices, direction=GraphDirection.UNDIRECTED)` keeps a
neighbour list per vertex; a newly added neighbour goes in front.
`neighbours(vertex)` yields `Node(vertex, weight)` entries, and
`edge_array()` returns each edge once as `Edge(source, target, weight)`,
taken from the end with the lower vertex number – meant for undirected
graphs.

`GraphIncMatrix(vertices, edges, direction=GraphDirection.UNDIRECTED)`
has one row per vertex and a fixed number of edge columns. In a directed
graph the source row holds the negated weight and the target row the
weight. `matrix` gives a read-only copy. `edge_array()` returns one edge
per filled column, from its first to its second non-zero row, weighted by
the value in the first row (so a directed edge whose source is the lower
vertex comes back with a negative weight).

```python
from mstlab.incmatrix import GraphIncMatrix
from mstlab.prim import prim_incidence

matrix = GraphIncMatrix(5, 7, GraphDirection.UNDIRECTED)
matrix.add_edge(0, 1, 2)
...
print(format_mst(prim_incidence(matrix)))
```

Adding an edge with a vertex outside the graph raises `ValueError`;
adding more edges to an incidence matrix than it has columns raises
`IndexError`.

### Algorithms

- `kruskal(vertices, edges)` sorts the edges by weight and returns the
  tree (or forest) edges in the order they were chosen.
- `prim_adjacency(graph)` and `prim_incidence(graph)` return the tree
  grown from vertex 0.
- `format_mst(edges)` joins the edges as `from -> to : weight` lines.

`DisjointSet(n)` offers `find(vertex)` and `union(first, second)`, the
latter returning `False` when both were already in one set.

### Sorting and heaps

```python
from mstlab.heapsort import heap_sort, is_sorted

heap_sort(edges)          # sorts a list of Edge in place by weight
assert is_sorted(edges)
```

`MinHeap(n)` holds vertices `0..n-1`, vertex 0 keyed at 0 and the rest at
infinity. It supports `extract_min()` (raises `IndexError` when empty),
`set_key(vertex, weight)` (raises `ValueError` for a vertex no longer in
the heap), `key(vertex)`, `vertex in heap` and `len(heap)`.

### Timing

```python
from mstlab.timer import Timer

with Timer() as timer:
    ...
print(timer.result(), "ms")
```

`start()` does nothing if the timer is already running; `stop()` raises
`RuntimeError` if it is not; `reset()` clears the recorded time.

## What it does not do

- Graphs cannot be read from or written to files; they are built in code
  or by the command's fixed sample.
- `AlgorithmType` lists `DIJKSTRA`, but no shortest-path algorithm is
  provided.
- The command does not time its runs; `Timer` is for use from code.
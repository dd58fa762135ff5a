"""Prim's minimum spanning tree algorithm over both graph representations."""

from typing import Callable, Iterable, Iterator

from mstlab.adjlist import GraphAdjList
from mstlab.edge import Edge
from mstlab.incmatrix import GraphIncMatrix
from mstlab.minheap import MinHeap


def _prim(vertices: int, neighbours: Callable[[int], Iterator[tuple[int, int]]]) -> list[Edge]:
    heap = MinHeap(vertices)
    parents = [-1] * vertices
    tree = []
    while len(heap):
        u = heap.extract_min()
        if parents[u] != -1:
            tree.append(Edge(parents[u], u, heap.key(u)))
        for v, weight in neighbours(u):
            if v in heap and weight < heap.key(v):
                parents[v] = u
                heap.set_key(v, weight)
    return tree


def prim_adjacency(graph: GraphAdjList) -> list[Edge]:
    """Minimum spanning tree of an adjacency-list graph, grown from vertex 0."""
    return _prim(
        graph.vertices,
        lambda u: ((node.vertex, node.weight) for node in graph.neighbours(u)),
    )


def prim_incidence(graph: GraphIncMatrix) -> list[Edge]:
    """Minimum spanning tree of an incidence-matrix graph, grown from vertex 0.

    Every edge is followed in both directions and weights are taken as absolute values.
    """
    matrix = graph.matrix

    def neighbours(u: int) -> Iterator[tuple[int, int]]:
        for column, value in enumerate(matrix[u]):
            if not value:
                continue
            for v, row in enumerate(matrix):
                if v != u and row[column]:
                    yield v, abs(row[column])

    return _prim(graph.vertices, neighbours)


def format_mst(edges: Iterable[Edge]) -> str:
    """One "from -> to : weight" line per edge."""
    return "\n".join(str(edge) for edge in edges)
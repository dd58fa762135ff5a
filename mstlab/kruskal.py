"""Kruskal's minimum spanning tree algorithm."""

from typing import Iterable

from mstlab.edge import Edge
from mstlab.heapsort import heap_sort


class DisjointSet:
    """Union-find over vertices 0..size-1 with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("set size must not be negative")
        self._parents = list(range(size))
        self._ranks = [0] * size

    def find(self, vertex: int) -> int:
        """Root of the set holding the vertex."""
        root = vertex
        while self._parents[root] != root:
            root = self._parents[root]
        while self._parents[vertex] != root:
            self._parents[vertex], vertex = root, self._parents[vertex]
        return root

    def union(self, first: int, second: int) -> bool:
        """Merge the sets of two vertices; False if they were already one set."""
        root1, root2 = self.find(first), self.find(second)
        if root1 == root2:
            return False
        if self._ranks[root1] > self._ranks[root2]:
            self._parents[root2] = root1
        else:
            self._parents[root1] = root2
            if self._ranks[root1] == self._ranks[root2]:
                self._ranks[root2] += 1
        return True


def kruskal(vertices: int, edges: Iterable[Edge]) -> list[Edge]:
    """Minimum spanning tree (or forest) edges in the order they were chosen."""
    ordered = list(edges)
    heap_sort(ordered)
    sets = DisjointSet(vertices)
    return [edge for edge in ordered if sets.union(edge.source, edge.target)]
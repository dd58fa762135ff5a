"""Graph stored as adjacency lists."""

from collections import deque
from typing import Iterator

from mstlab.edge import Edge, Node
from mstlab.enums import GraphDirection


class GraphAdjList:
    """Weighted graph whose vertices each keep a list of neighbours.

    A newly added neighbour is placed in front of the earlier ones.
    """

    def __init__(self, vertices: int, direction: GraphDirection = GraphDirection.UNDIRECTED) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._direction = direction
        self._lists: list[deque[Node]] = [deque() for _ in range(vertices)]

    @property
    def vertices(self) -> int:
        """Number of vertices in the graph."""
        return len(self._lists)

    @property
    def direction(self) -> GraphDirection:
        """Whether edges are directed."""
        return self._direction

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._lists):
            raise ValueError("Vertex index out of bounds")

    def add_edge(self, source: int, target: int, weight: int) -> None:
        """Add a weighted edge; an undirected edge is recorded at both ends."""
        self._check_vertex(source)
        self._check_vertex(target)
        self._lists[source].appendleft(Node(target, weight))
        if self._direction is GraphDirection.UNDIRECTED:
            self._lists[target].appendleft(Node(source, weight))

    def neighbours(self, vertex: int) -> Iterator[Node]:
        """Neighbours of a vertex, most recently added first."""
        self._check_vertex(vertex)
        return iter(tuple(self._lists[vertex]))

    def edge_array(self) -> list[Edge]:
        """Every edge once, taken from the end with the lower vertex number.

        Meant for undirected graphs.
        """
        return [
            Edge(vertex, node.vertex, node.weight)
            for vertex, nodes in enumerate(self._lists)
            for node in nodes
            if vertex < node.vertex
        ]

    def __str__(self) -> str:
        return "\n".join(
            f"{vertex}: " + " -> ".join(f"{node.vertex} [{node.weight}]" for node in nodes)
            for vertex, nodes in enumerate(self._lists)
        )
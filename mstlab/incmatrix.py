"""Graph stored as an incidence matrix."""

from mstlab.edge import Edge
from mstlab.enums import GraphDirection


class GraphIncMatrix:
    """Weighted graph with one row per vertex and one column per edge.

    The number of edge columns is fixed when the graph is made. In a directed
    graph the source row holds the negated weight; the target row holds the weight.
    """

    def __init__(
        self,
        vertices: int,
        edges: int,
        direction: GraphDirection = GraphDirection.UNDIRECTED,
    ) -> None:
        if vertices < 0 or edges < 0:
            raise ValueError("vertex and edge counts must not be negative")
        self._direction = direction
        self._capacity = edges
        self._matrix = [[0] * edges for _ in range(vertices)]
        self._used = 0

    @property
    def vertices(self) -> int:
        """Number of vertices (rows)."""
        return len(self._matrix)

    @property
    def edges(self) -> int:
        """Number of edge columns."""
        return self._capacity

    @property
    def direction(self) -> GraphDirection:
        """Whether edges are directed."""
        return self._direction

    @property
    def matrix(self) -> tuple[tuple[int, ...], ...]:
        """A read-only copy of the matrix, rows indexed by vertex."""
        return tuple(tuple(row) for row in self._matrix)

    def add_edge(self, source: int, target: int, weight: int) -> None:
        """Fill the next free column with a weighted edge."""
        if self._used == self._capacity:
            raise IndexError("Edge number is already reached")
        if not (0 <= source < self.vertices and 0 <= target < self.vertices):
            raise ValueError("Vertex index out of bounds")
        column = self._used
        if self._direction is GraphDirection.DIRECTED:
            self._matrix[source][column] = -weight
        else:
            self._matrix[source][column] = weight
        self._matrix[target][column] = weight
        self._used += 1

    def edge_array(self) -> list[Edge]:
        """Edges of the filled columns, each from its first to its second non-zero row.

        The weight is the value in the first row. A column with a single
        non-zero row gives an edge from that vertex to itself.
        """
        result = []
        for column in range(self._used):
            rows = [row for row in range(self.vertices) if self._matrix[row][column]]
            if not rows:
                continue
            first = rows[0]
            second = rows[1] if len(rows) > 1 else first
            result.append(Edge(first, second, self._matrix[first][column]))
        return result

    def __str__(self) -> str:
        return "\n".join("".join(f"{value} " for value in row) for row in self._matrix)
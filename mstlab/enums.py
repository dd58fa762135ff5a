"""Enumerations describing algorithms, graph directions and graph representations."""

from enum import Enum, auto


class AlgorithmType(Enum):
    """Graph algorithms known to the package."""

    KRUSKAL = auto()
    PRIM = auto()
    DIJKSTRA = auto()


class GraphDirection(Enum):
    """Whether the edges of a graph have a direction."""

    DIRECTED = auto()
    UNDIRECTED = auto()


class GraphType(Enum):
    """How a graph is stored in memory."""

    INCIDENCE_MATRIX = auto()
    ADJACENCY_LIST = auto()
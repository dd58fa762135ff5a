"""Weighted edges and adjacency-list entries."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two vertices."""

    source: int
    target: int
    weight: int

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} : {self.weight}"


@dataclass(frozen=True)
class Node:
    """A neighbour entry in an adjacency list: the vertex reached and the edge weight."""

    vertex: int
    weight: int
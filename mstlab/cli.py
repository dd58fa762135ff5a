"""Command that builds the demonstration graph and prints its minimum spanning tree."""

import argparse
from typing import Sequence

from mstlab.adjlist import GraphAdjList
from mstlab.enums import GraphDirection
from mstlab.incmatrix import GraphIncMatrix
from mstlab.kruskal import kruskal
from mstlab.prim import format_mst, prim_adjacency, prim_incidence

DEMO_VERTICES = 5
DEMO_EDGES = (
    (0, 1, 2),
    (0, 2, 5),
    (0, 3, 4),
    (1, 3, 7),
    (2, 3, 1),
    (2, 4, 6),
    (3, 4, 3),
)


def _parse(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mstlab", description="Print a demonstration graph and its minimum spanning tree."
    )
    parser.add_argument("--algorithm", choices=("prim", "kruskal"), default="prim")
    parser.add_argument("--representation", choices=("matrix", "list"), default="matrix")
    parser.add_argument("--undirected", action="store_true", help="build an undirected graph")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the exit status."""
    args = _parse(argv)
    direction = GraphDirection.UNDIRECTED if args.undirected else GraphDirection.DIRECTED
    graph: GraphIncMatrix | GraphAdjList
    if args.representation == "matrix":
        graph = GraphIncMatrix(DEMO_VERTICES, len(DEMO_EDGES), direction)
    else:
        graph = GraphAdjList(DEMO_VERTICES, direction)
    for edge in DEMO_EDGES:
        graph.add_edge(*edge)

    print(graph)
    print()
    if args.algorithm == "kruskal":
        tree = kruskal(graph.vertices, graph.edge_array())
    elif isinstance(graph, GraphIncMatrix):
        tree = prim_incidence(graph)
    else:
        tree = prim_adjacency(graph)
    print(format_mst(tree))
    return 0
"""In-place heap sort of edges by weight."""

from itertools import pairwise
from typing import MutableSequence, Sequence

from mstlab.edge import Edge


def _sift_down(edges: MutableSequence[Edge], index: int, heap_size: int) -> None:
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < heap_size and edges[left].weight > edges[largest].weight:
            largest = left
        if right < heap_size and edges[right].weight > edges[largest].weight:
            largest = right
        if largest == index:
            return
        edges[index], edges[largest] = edges[largest], edges[index]
        index = largest


def heap_sort(edges: MutableSequence[Edge]) -> None:
    """Sort edges in place by ascending weight."""
    size = len(edges)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(edges, index, size)
    for end in range(size - 1, 0, -1):
        edges[0], edges[end] = edges[end], edges[0]
        _sift_down(edges, 0, end)


def is_sorted(edges: Sequence[Edge]) -> bool:
    """True if the edges are in non-decreasing order of weight."""
    return all(first.weight <= second.weight for first, second in pairwise(edges))
"""Indexed binary min-heap of vertices keyed by tentative weight."""

import math


class MinHeap:
    """Min-heap over vertices 0..size-1 with decrease-key support.

    Every vertex starts with an infinite key except vertex 0, whose key is 0.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("heap size must not be negative")
        self._keys: list[float] = [math.inf] * size
        if size:
            self._keys[0] = 0
        self._heap = list(range(size))
        self._position = list(range(size))
        self._size = size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, vertex: object) -> bool:
        if not isinstance(vertex, int) or not 0 <= vertex < len(self._position):
            return False
        return self._position[vertex] < self._size

    def key(self, vertex: int) -> float:
        """Current key of a vertex, whether or not it is still in the heap."""
        return self._keys[vertex]

    def extract_min(self) -> int:
        """Remove and return the vertex with the smallest key."""
        if not self._size:
            raise IndexError("extract from an empty heap")
        top = self._heap[0]
        self._swap(0, self._size - 1)
        self._size -= 1
        self._sift_down(0)
        return top

    def set_key(self, vertex: int, weight: float) -> None:
        """Give a vertex still in the heap a new key and restore heap order upward."""
        if vertex not in self:
            raise ValueError(f"vertex {vertex} is not in the heap")
        self._keys[vertex] = weight
        self._sift_up(self._position[vertex])

    def _less(self, i: int, j: int) -> bool:
        return self._keys[self._heap[i]] < self._keys[self._heap[j]]

    def _swap(self, i: int, j: int) -> None:
        heap, position = self._heap, self._position
        position[heap[i]], position[heap[j]] = position[heap[j]], position[heap[i]]
        heap[i], heap[j] = heap[j], heap[i]

    def _sift_down(self, index: int) -> None:
        while True:
            smallest = index
            left = 2 * index + 1
            right = left + 1
            if left < self._size and self._less(left, smallest):
                smallest = left
            if right < self._size and self._less(right, smallest):
                smallest = right
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if not self._less(index, parent):
                return
            self._swap(index, parent)
            index = parent
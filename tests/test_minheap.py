import math
import random

import pytest

from mstlab.minheap import MinHeap


def drain(heap):
    order = []
    while len(heap):
        order.append(heap.extract_min())
    return order


def test_initial_keys():
    heap = MinHeap(4)
    assert heap.key(0) == 0
    assert all(math.isinf(heap.key(v)) for v in range(1, 4))


def test_first_extracted_is_zero():
    heap = MinHeap(5)
    assert heap.extract_min() == 0
    assert len(heap) == 4


def test_contains_after_extract():
    heap = MinHeap(3)
    vertex = heap.extract_min()
    assert vertex not in heap
    assert 1 in heap and 2 in heap


def test_contains_out_of_range():
    heap = MinHeap(2)
    assert 5 not in heap
    assert -1 not in heap


def test_set_key_reorders():
    heap = MinHeap(4)
    heap.extract_min()
    heap.set_key(3, 1)
    heap.set_key(2, 4)
    heap.set_key(1, 2)
    assert drain(heap) == [3, 1, 2]


def test_key_survives_extraction():
    heap = MinHeap(3)
    heap.extract_min()
    heap.set_key(2, 7)
    assert heap.extract_min() == 2
    assert heap.key(2) == 7


@pytest.mark.parametrize("seed", range(8))
def test_extraction_is_non_decreasing(seed):
    rng = random.Random(seed)
    size = rng.randrange(1, 40)
    heap = MinHeap(size)
    for vertex in range(1, size):
        heap.set_key(vertex, rng.randint(0, 100))
    keys = [heap.key(v) for v in drain(heap)]
    assert keys == sorted(keys)
    assert len(keys) == size


def test_extract_from_empty_raises():
    heap = MinHeap(1)
    heap.extract_min()
    with pytest.raises(IndexError):
        heap.extract_min()


def test_set_key_on_extracted_raises():
    heap = MinHeap(2)
    heap.extract_min()
    with pytest.raises(ValueError):
        heap.set_key(0, 3)


def test_empty_heap():
    heap = MinHeap(0)
    assert len(heap) == 0
    with pytest.raises(IndexError):
        heap.extract_min()


def test_negative_size_raises():
    with pytest.raises(ValueError):
        MinHeap(-1)
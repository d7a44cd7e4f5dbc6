import pytest

from dsalgo.minheap import MinHeap


def test_insert_and_extract_in_order():
    heap = MinHeap()
    for value in (5, 3, 7, 1):
        heap.insert(value)

    assert heap.extract_min() == 1
    assert heap.extract_min() == 3
    assert heap.extract_min() == 5
    assert heap.extract_min() == 7
    assert not heap


def test_peek_does_not_remove():
    heap = MinHeap()
    heap.insert(4)
    heap.insert(2)
    assert heap.peek() == 2
    assert len(heap) == 2


def test_len_tracks_contents():
    heap = MinHeap()
    assert len(heap) == 0
    heap.insert(9)
    heap.insert(9)
    assert len(heap) == 2
    heap.extract_min()
    assert len(heap) == 1
    assert heap


def test_extract_from_empty_raises():
    with pytest.raises(IndexError, match="Heap is empty"):
        MinHeap().extract_min()


def test_peek_on_empty_raises():
    with pytest.raises(IndexError, match="Heap is empty"):
        MinHeap().peek()


def test_many_values_come_out_sorted():
    values = [17, 4, 4, 99, -3, 0, 12, 8, 8, 1, 56, 23]
    heap = MinHeap()
    for value in values:
        heap.insert(value)
    drained = [heap.extract_min() for _ in range(len(values))]
    assert drained == sorted(values)
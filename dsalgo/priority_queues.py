"""Two max-priority queues: a sorted array and a binary heap."""

from __future__ import annotations

import bisect
import random
import time


class SortedArrayPriorityQueue:
    """Max-priority queue kept as a list sorted in decreasing order."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def insert(self, value: int) -> None:
        """Insert ``value`` before the first element not greater than it."""
        position = bisect.bisect_left(self._items, -value, key=lambda item: -item)
        self._items.insert(position, value)

    def extract_max(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("Priority queue is empty")
        return self._items.pop(0)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


class HeapPriorityQueue:
    """Max-priority queue kept as a binary max-heap."""

    def __init__(self) -> None:
        self._heap: list[int] = []

    def insert(self, value: int) -> None:
        """Add ``value`` and sift it up."""
        heap = self._heap
        heap.append(value)
        index = len(heap) - 1
        while index > 0:
            parent = (index - 1) // 2
            if heap[parent] >= heap[index]:
                break
            heap[parent], heap[index] = heap[index], heap[parent]
            index = parent

    def extract_max(self) -> int:
        """Remove and return the largest value."""
        heap = self._heap
        if not heap:
            raise IndexError("Priority queue is empty")
        maximum = heap[0]
        last = heap.pop()
        if heap:
            heap[0] = last
            self._sift_down(0)
        return maximum

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while index < size:
            largest = index
            left, right = 2 * index + 1, 2 * index + 2
            if left < size and heap[left] > heap[largest]:
                largest = left
            if right < size and heap[right] > heap[largest]:
                largest = right
            if largest == index:
                break
            heap[index], heap[largest] = heap[largest], heap[index]
            index = largest

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


def _time_queue(queue, data: list[int]) -> float:
    start = time.perf_counter()
    for value in data:
        queue.insert(value)
    while queue:
        queue.extract_max()
    return time.perf_counter() - start


def benchmark(size: int = 200_000, seed: int = 42) -> dict[str, float]:
    """Time filling and draining both queues with ``size`` random values.

    Returns seconds taken, keyed by ``"heap"`` and ``"sorted_array"``.
    """
    rng = random.Random(seed)
    data = [rng.randint(1, 200_000) for _ in range(size)]
    return {
        "heap": _time_queue(HeapPriorityQueue(), data),
        "sorted_array": _time_queue(SortedArrayPriorityQueue(), data),
    }
"""Heap sort and the up-heap step of a max-heap."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence


def heap_sort(data: Iterable[float]) -> list[float]:
    """Return the values in decreasing order, sorted with a min-heap."""
    items = list(data)

    for start in range(1, len(items)):
        index = start
        while index > 0 and items[index] < items[(index - 1) // 2]:
            parent = (index - 1) // 2
            items[index], items[parent] = items[parent], items[index]
            index = parent

    for heap_size in range(len(items) - 1, 0, -1):
        items[0], items[heap_size] = items[heap_size], items[0]
        index = 0
        while True:
            left, right = 2 * index + 1, 2 * index + 2
            smallest = index
            if left < heap_size and items[left] < items[smallest]:
                smallest = left
            if right < heap_size and items[right] < items[smallest]:
                smallest = right
            if smallest == index:
                break
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    return items


def up_heap(heap: MutableSequence[int], index: int) -> None:
    """Move ``heap[index]`` up until the max-heap property holds again."""
    while index > 0:
        parent = (index - 1) // 2
        if heap[index] > heap[parent]:
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent
        else:
            break


def build_max_heap(values: Iterable[int]) -> list[int]:
    """Insert the values one at a time into a max-heap and return it."""
    heap: list[int] = []
    for value in values:
        heap.append(value)
        up_heap(heap, len(heap) - 1)
    return heap
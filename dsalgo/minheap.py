"""A binary min-heap ordered by the items' own ``<`` comparison."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class MinHeap(Generic[T]):
    """Array-backed binary min-heap."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def insert(self, value: T) -> None:
        """Add ``value`` and restore the heap order."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def peek(self) -> T:
        """Return the smallest item without removing it."""
        if not self._items:
            raise IndexError("Heap is empty")
        return self._items[0]

    def extract_min(self) -> T:
        """Remove and return the smallest item."""
        items = self._items
        if not items:
            raise IndexError("Heap is empty")
        minimum = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return minimum

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[index] < items[parent]:
                items[index], items[parent] = items[parent], items[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            left, right = 2 * index + 1, 2 * index + 2
            if left < size and items[left] < items[smallest]:
                smallest = left
            if right < size and items[right] < items[smallest]:
                smallest = right
            if smallest == index:
                break
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest
"""A first-in, first-out queue with a fixed capacity."""

from __future__ import annotations

from collections import deque


class QueueOverflowError(Exception):
    """Raised when adding to a full queue."""


class QueueUnderflowError(Exception):
    """Raised when reading from an empty queue."""


class BoundedQueue:
    """FIFO queue of at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[int] = deque()

    def enqueue(self, element: int) -> None:
        """Add ``element`` at the rear."""
        if self.is_full():
            raise QueueOverflowError("Queue is full! Cannot enqueue.")
        self._items.append(element)

    def dequeue(self) -> int:
        """Remove and return the front element."""
        if not self._items:
            raise QueueUnderflowError("Queue is empty! Cannot dequeue.")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the front element without removing it."""
        if not self._items:
            raise QueueUnderflowError("Queue is empty! Cannot peek.")
        return self._items[0]

    def is_full(self) -> bool:
        """Return True when no more elements fit."""
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
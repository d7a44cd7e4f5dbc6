"""A singly linked list kept in a fixed array of cells with a free list."""

from __future__ import annotations

from collections.abc import Iterator


class CursorList:
    """Set-like linked list of numbers stored in ``capacity`` array cells.

    New values go to the front; duplicates are ignored.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._data: list[float] = [0.0] * capacity
        self._next: list[int | None] = [*range(1, capacity), None]
        self._free: int | None = 0
        self._head: int | None = None
        self._size = 0

    def _allocate(self, value: float, following: int | None) -> int:
        index = self._free
        self._free = self._next[index]
        self._data[index] = value
        self._next[index] = following
        self._size += 1
        return index

    def insert(self, value: float) -> bool:
        """Add ``value`` at the front; False only if the list is full."""
        if self.find(value) is not None:
            return True
        if self._size == self.capacity:
            return False
        self._head = self._allocate(value, self._head)
        return True

    def find(self, value: float) -> int | None:
        """Return the cell index holding ``value``, or None."""
        index = self._head
        while index is not None:
            if self._data[index] == value:
                return index
            index = self._next[index]
        return None

    def insert_after(self, old: float, new: float) -> bool:
        """Add ``new`` after ``old``; False if ``old`` is absent or the list is full."""
        old_index = self.find(old)
        if old_index is None:
            return False
        if self.find(new) is not None:
            return True
        if self._size == self.capacity:
            return False
        self._next[old_index] = self._allocate(new, self._next[old_index])
        return True

    def remove(self, value: float) -> bool:
        """Delete ``value``; return False if it is absent."""
        previous = None
        index = self._head
        while index is not None and self._data[index] != value:
            previous, index = index, self._next[index]
        if index is None:
            return False
        if previous is None:
            self._head = self._next[index]
        else:
            self._next[previous] = self._next[index]
        self._next[index] = self._free
        self._free = index
        self._size -= 1
        return True

    def __iter__(self) -> Iterator[float]:
        index = self._head
        while index is not None:
            yield self._data[index]
            index = self._next[index]

    def __len__(self) -> int:
        return self._size
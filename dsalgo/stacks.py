"""Two stacks: a fixed-size array stack and an unbounded linked stack."""

from __future__ import annotations

from dataclasses import dataclass


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when reading from an empty stack."""


class ArrayStack:
    """Stack stored in a fixed number of slots."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        if self.is_full():
            raise StackOverflowError("Stack Overflow!")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError("Stack Underflow!")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflowError("Stack is empty!")
        return self._items[-1]

    def is_full(self) -> bool:
        """Return True when every slot is in use."""
        return len(self._items) == self.size

    def slots(self) -> list[int]:
        """Return every slot from the highest down to the lowest; unused slots hold 0."""
        padded = self._items + [0] * (self.size - len(self._items))
        return padded[::-1]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


@dataclass
class _Node:
    value: int
    below: _Node | None


class LinkedStack:
    """Stack built from a chain of nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError(
                "Stack underflow: Cannot pop from an empty stack."
            )
        node = self._top
        self._top = node.below
        self._size -= 1
        return node.value

    def peek(self) -> int:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackUnderflowError(
                "Stack underflow: Cannot peek on an empty stack."
            )
        return self._top.value

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._top is not None
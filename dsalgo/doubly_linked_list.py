"""A doubly linked list with sentinel head and tail nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class ListNode:
    """One node of a doubly linked list."""

    value: int = 0
    prev: ListNode | None = field(default=None, repr=False)
    next: ListNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """Doubly linked list whose ends are marked by sentinel nodes."""

    def __init__(self) -> None:
        self._head = ListNode()
        self._tail = ListNode()
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0

    def append(self, value: int) -> ListNode:
        """Add ``value`` at the back and return its node."""
        last = self._tail.prev
        node = ListNode(value, last, self._tail)
        last.next = node
        self._tail.prev = node
        self._size += 1
        return node

    def remove(self, node: ListNode) -> None:
        """Unlink ``node`` from the list; the sentinels are left alone."""
        if node is self._head or node is self._tail:
            return
        if node.prev is None or node.next is None:
            raise ValueError("node is not in a list")
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1

    def __iter__(self) -> Iterator[int]:
        node = self._head.next
        while node is not self._tail:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head.next is not self._tail
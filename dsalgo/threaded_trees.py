"""Binary search trees whose empty child links thread to in-order neighbours."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class _RightThreadedNode:
    data: int
    left: _RightThreadedNode | None = field(default=None, repr=False)
    right: _RightThreadedNode | None = field(default=None, repr=False)
    right_thread: bool = False


class ThreadedTree:
    """Search tree whose empty right links point to the in-order successor.

    Equal values are placed to the right.
    """

    def __init__(self) -> None:
        self._root: _RightThreadedNode | None = None

    def insert(self, value: int) -> None:
        """Add ``value`` to the tree."""
        if self._root is None:
            self._root = _RightThreadedNode(value)
            return

        parent = self._root
        while True:
            if value < parent.data:
                if parent.left is None:
                    node = _RightThreadedNode(value, right=parent, right_thread=True)
                    parent.left = node
                    return
                parent = parent.left
            else:
                if parent.right is not None and not parent.right_thread:
                    parent = parent.right
                    continue
                node = _RightThreadedNode(value, right_thread=True)
                if parent.right_thread:
                    node.right = parent.right
                parent.right = node
                parent.right_thread = False
                return

    @staticmethod
    def _leftmost(node: _RightThreadedNode | None) -> _RightThreadedNode | None:
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def __iter__(self) -> Iterator[int]:
        current = self._leftmost(self._root)
        while current is not None:
            yield current.data
            if current.right_thread:
                current = current.right
            else:
                current = self._leftmost(current.right)


@dataclass(eq=False)
class _DoubleThreadedNode:
    data: int
    left: _DoubleThreadedNode | None = field(default=None, repr=False)
    right: _DoubleThreadedNode | None = field(default=None, repr=False)
    left_thread: bool = True
    right_thread: bool = True


class DoubleThreadedTree:
    """Search tree threaded both ways, walkable forwards and backwards.

    Equal values are placed to the right.
    """

    def __init__(self) -> None:
        self._root: _DoubleThreadedNode | None = None

    def insert(self, value: int) -> None:
        """Add ``value`` to the tree."""
        if self._root is None:
            self._root = _DoubleThreadedNode(value)
            return

        parent = self._root
        while True:
            if value < parent.data:
                if not parent.left_thread:
                    parent = parent.left
                    continue
                node = _DoubleThreadedNode(value, left=parent.left, right=parent)
                parent.left_thread = False
                parent.left = node
                return
            if not parent.right_thread:
                parent = parent.right
                continue
            node = _DoubleThreadedNode(value, left=parent, right=parent.right)
            parent.right_thread = False
            parent.right = node
            return

    @staticmethod
    def _leftmost(node: _DoubleThreadedNode | None) -> _DoubleThreadedNode | None:
        if node is None:
            return None
        while node.left is not None and not node.left_thread:
            node = node.left
        return node

    @staticmethod
    def _rightmost(node: _DoubleThreadedNode | None) -> _DoubleThreadedNode | None:
        if node is None:
            return None
        while node.right is not None and not node.right_thread:
            node = node.right
        return node

    def __iter__(self) -> Iterator[int]:
        current = self._leftmost(self._root)
        while current is not None:
            yield current.data
            if current.right_thread:
                current = current.right
            else:
                current = self._leftmost(current.right)

    def __reversed__(self) -> Iterator[int]:
        current = self._rightmost(self._root)
        while current is not None:
            yield current.data
            if current.left_thread:
                current = current.left
            else:
                current = self._rightmost(current.left)
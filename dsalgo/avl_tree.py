"""A self-balancing AVL search tree of numbers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    data: float
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: _Node | None, key: float) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.data:
        node.left = _insert(node.left, key)
    elif key > node.data:
        node.right = _insert(node.right, key)
    else:
        return node

    _update(node)
    balance = _height(node.left) - _height(node.right)

    if balance > 1 and key < node.left.data:
        return _rotate_right(node)
    if balance < -1 and key > node.right.data:
        return _rotate_left(node)
    if balance > 1 and key > node.left.data:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and key < node.right.data:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete(node: _Node | None, key: float) -> _Node | None:
    if node is None:
        return None
    if key < node.data:
        node.left = _delete(node.left, key)
    elif key > node.data:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        node = node.left if node.left is not None else node.right
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.data = successor.data
        node.right = _delete(node.right, successor.data)

    if node is None:
        return None

    _update(node)
    balance = _height(node.left) - _height(node.right)

    if balance > 1:
        if _height(node.left.left) >= _height(node.left.right):
            return _rotate_right(node)
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _height(node.right.right) >= _height(node.right.left):
            return _rotate_left(node)
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """Balanced binary search tree; duplicate keys are ignored."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, key: float) -> None:
        """Add ``key`` unless it is already present."""
        self._root = _insert(self._root, key)

    def remove(self, key: float) -> None:
        """Delete ``key`` if it is present."""
        self._root = _delete(self._root, key)

    def in_order(self) -> list[float]:
        """Return the keys in increasing order."""
        order: list[float] = []
        stack: list[_Node] = []
        current = self._root
        while current is not None or stack:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            order.append(current.data)
            current = current.right
        return order

    def pre_order(self) -> list[float]:
        """Return the keys with each node before its subtrees."""
        order: list[float] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            order.append(node.data)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return order

    def post_order(self) -> list[float]:
        """Return the keys with each node after its subtrees."""
        order: list[float] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            order.append(node.data)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        order.reverse()
        return order

    def height(self) -> int:
        """Return the number of levels; an empty tree has height 0."""
        return _height(self._root)
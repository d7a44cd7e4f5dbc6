"""A string tree in which every node has at most a fixed number of children."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class _Node:
    data: str
    children: list[_Node] = field(default_factory=list)


class NaryTree:
    """Tree of unique strings; each node holds at most ``max_children`` children."""

    def __init__(self, max_children: int) -> None:
        self.max_children = max_children
        self._root: _Node | None = None

    def _walk(self, start: _Node | None) -> Iterator[_Node]:
        """Yield the nodes under ``start`` in pre-order."""
        stack = [start] if start is not None else []
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def _find(self, data: str) -> _Node | None:
        for node in self._walk(self._root):
            if node.data == data:
                return node
        return None

    def _require(self, data: str) -> _Node:
        node = self._find(data)
        if node is None:
            raise KeyError("Node not found")
        return node

    def insert_root(self, data: str) -> None:
        """Make ``data`` the new root; the old root becomes its only child."""
        if data in self:
            raise ValueError("Duplicate data not allowed")
        node = _Node(data)
        if self._root is not None:
            if self.max_children < 1:
                raise ValueError(
                    "Cannot add old root as child, max children reached"
                )
            node.children.append(self._root)
        self._root = node

    def insert(self, parent: str, child: str) -> None:
        """Add ``child`` as the last child of the existing node ``parent``."""
        if child in self:
            raise ValueError("Duplicate data not allowed")
        parent_node = self._find(parent)
        if parent_node is None:
            raise KeyError("Parent not found")
        if len(parent_node.children) >= self.max_children:
            raise ValueError("Cannot add child, max children reached")
        parent_node.children.append(_Node(child))

    def pre_order(self) -> list[str]:
        """Return the data of every node, parents before children."""
        return [node.data for node in self._walk(self._root)]

    def post_order(self) -> list[str]:
        """Return the data of every node, children before parents."""
        order: list[str] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            order.append(node.data)
            stack.extend(node.children)
        order.reverse()
        return order

    def height(self) -> int:
        """Return the number of levels; an empty tree has height 0."""
        levels = 0
        level = [self._root] if self._root is not None else []
        while level:
            levels += 1
            level = [child for node in level for child in node.children]
        return levels

    def descendants(self, data: str) -> list[str]:
        """Return everything below ``data`` in pre-order."""
        node = self._require(data)
        return [n.data for n in self._walk(node)][1:]

    def children(self, data: str) -> list[str]:
        """Return the direct children of ``data`` in insertion order."""
        return [child.data for child in self._require(data).children]

    def __contains__(self, data: object) -> bool:
        return isinstance(data, str) and self._find(data) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self._walk(self._root))
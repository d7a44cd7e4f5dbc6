"""Level-order insertion into a binary tree and a completeness check."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer."""

    data: int
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


def insert_level_order(root: TreeNode | None, key: int) -> TreeNode:
    """Put ``key`` in the first free child slot in level order; return the root."""
    node = TreeNode(key)
    if root is None:
        return node

    queue = deque([root])
    while queue:
        current = queue.popleft()
        if current.left is None:
            current.left = node
            return root
        queue.append(current.left)
        if current.right is None:
            current.right = node
            return root
        queue.append(current.right)
    return root


def is_complete(root: TreeNode | None) -> bool:
    """Return True if every level is full except the last, filled from the left."""
    if root is None:
        return True

    queue = deque([root])
    gap_seen = False
    while queue:
        current = queue.popleft()
        for child in (current.left, current.right):
            if child is not None:
                if gap_seen:
                    return False
                queue.append(child)
            else:
                gap_seen = True
    return True
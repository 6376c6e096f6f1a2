"""Measurements and shape checks over whole binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Optional

from bitree.node import Node, is_leaf


def _levels(tree: Optional[Node]) -> Iterator[list[Node]]:
    """Yield the nodes of ``tree`` one level at a time, top level first."""
    level = [tree] if tree is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    """Yield every node of ``tree``."""
    for level in _levels(tree):
        yield from level


def _level_count(tree: Optional[Node]) -> int:
    """Return the number of levels in ``tree`` (0 for None)."""
    return sum(1 for _ in _levels(tree))


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path (0 for None or a leaf)."""
    return max(_level_count(tree) - 1, 0)


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in ``tree``."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _nodes(tree) if is_leaf(node))


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not is_leaf(node))


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's level count minus the right one's (0 for None)."""
    if tree is None:
        return 0
    return _level_count(tree.left) - _level_count(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either no children or two."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _nodes(tree))


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if every level of ``tree`` is completely filled."""
    if tree is None:
        return False
    return size(tree) == 2 ** _level_count(tree) - 1


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled except possibly the last, filled from the left."""
    if tree is None:
        return False
    queue = deque([tree])
    gap = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap = True
            elif gap:
                return False
            else:
                queue.append(child)
    return True
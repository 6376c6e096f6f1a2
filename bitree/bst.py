"""Binary search tree checks and construction."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from bitree.node import Node

_INT_MIN = -2147483648
_INT_MAX = 2147483647


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if ``tree`` is a valid binary search tree.

    Values must be strictly ordered and lie strictly between the bounds of a
    32-bit signed integer. An empty tree is not a valid BST.
    """
    if tree is None:
        return False
    stack = [(tree, _INT_MIN, _INT_MAX)]
    while stack:
        node, low, high = stack.pop()
        if not low < node.value < high:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


def bst_insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` into the BST rooted at ``root`` and return the new node.

    When ``root`` is None the returned node is the root of a new tree.
    Raises ValueError if ``value`` is already present.
    """
    if root is None:
        return Node(value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = Node(value, node)
                return node.left
            node = node.left
        elif value > node.value:
            if node.right is None:
                node.right = Node(value, node)
                return node.right
            node = node.right
        else:
            raise ValueError(f"{value} is already in the tree")


def array_to_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a BST from ``values`` in order, ignoring repeated values.

    Returns the root, or None when there is nothing to insert.
    """
    root: Optional[Node] = None
    seen: set[int] = set()
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        node = bst_insert(root, value)
        if root is None:
            root = node
    return root
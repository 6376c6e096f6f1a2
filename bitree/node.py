"""Binary tree nodes and the operations that relate a node to its neighbours."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    value: int
    parent: Optional["Node"] = field(default=None, repr=False)
    left: Optional["Node"] = field(default=None, repr=False)
    right: Optional["Node"] = field(default=None, repr=False)


def _ancestors(node: Optional[Node]) -> Iterator[Node]:
    """Yield ``node`` and then each of its ancestors up to the root."""
    while node is not None:
        yield node
        node = node.parent


def new_node(parent: Optional[Node], value: int) -> Node:
    """Create a detached node whose parent link points at ``parent``."""
    return Node(value, parent)


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new node as the left child of ``parent``.

    An existing left child becomes the left child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    node = Node(value, parent)
    if parent.left is not None:
        node.left = parent.left
        parent.left.parent = node
    parent.left = node
    return node


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new node as the right child of ``parent``.

    An existing right child becomes the right child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    node = Node(value, parent)
    if parent.right is not None:
        node.right = parent.right
        parent.right.parent = node
    parent.right = node
    return node


def delete(tree: Optional[Node]) -> None:
    """Dismantle the whole subtree rooted at ``tree``, unlinking every node."""
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        if parent.right is tree:
            parent.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.parent = node.left = node.right = None


def is_leaf(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no parent."""
    return node is not None and node.parent is None


def depth(tree: Optional[Node]) -> int:
    """Return the number of edges from ``tree`` up to its root (0 for None)."""
    if tree is None:
        return 0
    return sum(1 for _ in _ancestors(tree.parent))


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of ``node``'s parent, or None if there is none."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    if parent.left is None or parent.right is None:
        return None
    if parent.left is node:
        return parent.right
    if parent.right is node:
        return parent.left
    return None


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of ``node``'s parent, or None if there is none."""
    if node is None or node.parent is None:
        return None
    return sibling(node.parent)


def lowest_common_ancestor(
    first: Optional[Node], second: Optional[Node]
) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both nodes (or either node).

    Nodes count as their own ancestors. Returns None when the nodes share no
    ancestor or either is missing.
    """
    if first is None or second is None:
        return None
    seen = {id(node) for node in _ancestors(second)}
    return next((node for node in _ancestors(first) if id(node) in seen), None)
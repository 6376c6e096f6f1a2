"""Single left and right rotations around a node of a binary tree."""

from __future__ import annotations

from typing import Optional

from bitree.node import Node


def _replace_child(parent: Optional[Node], old: Node, new: Node) -> None:
    """Point whichever link of ``parent`` held ``old`` at ``new``."""
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new


def rotate_left(tree: Node) -> Node:
    """Rotate ``tree`` to the left and return the new subtree root.

    The right child of ``tree`` becomes the root of the subtree, and its former
    left subtree is handed over to ``tree`` as the new right subtree.
    """
    if tree is None or tree.right is None:
        raise ValueError("a left rotation needs a node with a right child")
    pivot = tree.right
    moved = pivot.left
    pivot.left = tree
    tree.right = moved
    if moved is not None:
        moved.parent = tree
    parent = tree.parent
    tree.parent = pivot
    pivot.parent = parent
    _replace_child(parent, tree, pivot)
    return pivot


def rotate_right(tree: Node) -> Node:
    """Rotate ``tree`` to the right and return the new subtree root.

    The left child of ``tree`` becomes the root of the subtree, and its former
    right subtree is handed over to ``tree`` as the new left subtree.
    """
    if tree is None or tree.left is None:
        raise ValueError("a right rotation needs a node with a left child")
    pivot = tree.left
    moved = pivot.right
    pivot.right = tree
    tree.left = moved
    if moved is not None:
        moved.parent = tree
    parent = tree.parent
    tree.parent = pivot
    pivot.parent = parent
    if parent is not None:
        if parent.right is tree:
            parent.right = pivot
        else:
            parent.left = pivot
    return pivot
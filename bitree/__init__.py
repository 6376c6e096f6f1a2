"""Linked binary trees with parent pointers: nodes, metrics, traversals, rotations, BSTs and text drawing."""

__version__ = "0.1.0"

__all__ = ["node", "metrics", "traversal", "rotate", "bst", "printing"]
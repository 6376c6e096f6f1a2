"""Text drawing of a binary tree with connector lines between levels."""

from __future__ import annotations

from typing import Optional

from bitree.node import Node


def _put(rows: list[list[str]], depth: int, column: int, char: str) -> None:
    """Write ``char`` at (``depth``, ``column``), growing the canvas as needed."""
    while len(rows) <= depth:
        rows.append([])
    row = rows[depth]
    if len(row) <= column:
        row.extend(" " * (column + 1 - len(row)))
    row[column] = char


def _draw(tree: Optional[Node], offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw ``tree`` at ``offset`` and ``depth``; return the width it took."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _draw(tree.left, offset, depth + 1, rows)
    right = _draw(tree.right, offset + left + width, depth + 1, rows)
    for i, char in enumerate(label):
        _put(rows, depth, offset + left + i, char)
    if depth:
        if is_left:
            start, length = offset + left + width // 2, width + right
        else:
            start, length = offset - width // 2, left + width
        for column in range(start, start + length):
            _put(rows, depth - 1, column, "-")
        _put(rows, depth - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of ``tree``, one line per level, each ending in a newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = []
    _draw(tree, 0, 0, rows)
    lines = []
    for row in rows:
        line = "".join(row).ljust(2)
        lines.append(line[:2] + line[2:].rstrip(" "))
    return "".join(f"{line}\n" for line in lines)


def print_tree(tree: Optional[Node]) -> None:
    """Print the drawing of ``tree`` to standard output."""
    print(render(tree), end="")
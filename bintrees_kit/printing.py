"""Text rendering of binary trees as boxed values joined by connector lines."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .tree import Node, height


def _put(row: List[str], index: int, char: str) -> None:
    if index < 0:
        return
    if index >= len(row):
        row.extend(" " * (index - len(row) + 1))
    row[index] = char


def _layout(node: Optional[Node], offset: int, level: int, rows: List[List[str]]) -> int:
    """Draw ``node`` and its subtrees into ``rows``; return the width used."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _layout(node.left, offset, level + 1, rows)
    right = _layout(node.right, offset + left + width, level + 1, rows)
    for i, char in enumerate(label):
        _put(rows[level], offset + left + i, char)
    if level:
        above = rows[level - 1]
        if is_left:
            for i in range(width + right):
                _put(above, offset + left + width // 2 + i, "-")
        else:
            for i in range(left + width):
                _put(above, offset - width // 2 + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of ``tree``, one line per level; empty for no tree."""
    if tree is None:
        return ""
    rows: List[List[str]] = [[] for _ in range(height(tree) + 1)]
    _layout(tree, 0, 0, rows)
    return "".join("".join(row).rstrip(" ") + "\n" for row in rows)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(render(tree))
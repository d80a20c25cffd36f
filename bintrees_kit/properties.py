"""Shape checks on binary trees: full, perfect and complete."""

from __future__ import annotations

from typing import Iterator, Optional

from .tree import Node, height, size


def _indexed(tree: Node) -> Iterator[tuple[Node, int]]:
    """Yield every node with its position in level-order array numbering."""
    pending = [(tree, 0)]
    while pending:
        node, index = pending.pop()
        yield node, index
        pending.extend(
            (child, 2 * index + offset)
            for offset, child in ((1, node.left), (2, node.right))
            if child is not None
        )


def is_full(tree: Optional[Node]) -> bool:
    """Return whether every node has either zero or two children."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node, _ in _indexed(tree))


def is_perfect(tree: Optional[Node]) -> bool:
    """Return whether every level of the tree is completely filled."""
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    return 2 ** (height(tree) + 1) - 1 == size(tree)


def is_complete(tree: Optional[Node]) -> bool:
    """Return whether all levels are full except the last, filled from the left."""
    if tree is None:
        return False
    total = size(tree)
    return all(index < total for _, index in _indexed(tree))
"""Max binary heaps stored as linked binary trees."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .properties import is_complete
from .tree import Node, size


def _subtrees(tree: Optional[Node]) -> Iterator[Node]:
    """Yield every node of ``tree``, each parent before its children."""
    if tree is not None:
        yield tree
        yield from _subtrees(tree.left)
        yield from _subtrees(tree.right)


def _dominates(node: Node) -> bool:
    """Whether no child of ``node`` holds a greater value than it."""
    return all(
        child.value <= node.value
        for child in (node.left, node.right)
        if child is not None
    )


def is_heap(tree: Optional[Node]) -> bool:
    """Return whether ``tree`` is a complete tree where no child exceeds its parent."""
    if tree is None:
        return False
    return all(is_complete(node) and _dominates(node) for node in _subtrees(tree))


def heap_insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` into the heap under ``root``.

    The new node takes the first free slot of the last level, then its value
    rises while it is greater than its parent's.  Returns the node that ends
    up holding ``value``; with no root that is a fresh one-node heap.
    """
    if root is None:
        return Node(value)

    remaining = size(root)
    level = 0
    row = 1
    while remaining >= row:
        remaining -= row
        row *= 2
        level += 1

    # The bits of ``remaining`` spell the path to the free slot: 1 right, 0 left.
    parent = root
    bit = 1 << (level - 1)
    while bit > 1:
        parent = parent.right if remaining & bit else parent.left
        bit >>= 1

    node = Node(value, parent)
    setattr(parent, "right" if remaining & 1 else "left", node)

    while node.parent is not None and node.value > node.parent.value:
        node.value, node.parent.value = node.parent.value, node.value
        node = node.parent
    return node


def array_to_heap(values: Iterable[int]) -> Optional[Node]:
    """Build a max heap by inserting ``values`` in order."""
    root: Optional[Node] = None
    for value in values:
        node = heap_insert(root, value)
        if root is None:
            root = node
    return root
"""AVL trees: validation, self-balancing insertion and bulk construction."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from .bst import bst_insert, is_bst
from .rotation import rotate_left, rotate_right
from .tree import Node, balance


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)


def is_avl(tree: Optional[Node]) -> bool:
    """Return whether ``tree`` is a search tree whose subtrees differ in height by at most one."""
    if tree is None:
        return False
    return is_bst(tree) and all(abs(balance(node)) <= 1 for node in _nodes(tree))


def _rebalance(start: Optional[Node], value: int) -> None:
    current = start
    while current is not None:
        factor = balance(current)
        if factor > 1:
            if value > current.left.value:
                rotate_left(current.left)
            rotate_right(current)
            return
        if factor < -1:
            if value < current.right.value:
                rotate_right(current.right)
            rotate_left(current)
            return
        current = current.parent


def avl_insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` into the AVL tree under ``root`` and return the new node.

    Rotations may move the tree's root; it is reached by following parent
    links from any node.  Raises ``ValueError`` if the value is already present.
    """
    node = bst_insert(root, value)
    _rebalance(node.parent, value)
    return node


def array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree by inserting ``values`` in order; duplicates are skipped."""
    root: Optional[Node] = None
    for value in values:
        try:
            node = avl_insert(root, value)
        except ValueError:
            continue
        root = node if root is None else root
        while root.parent is not None:
            root = root.parent
    return root


def _attach(parent: Node, values: Sequence[int], low: int, high: int) -> None:
    if high - low <= 1:
        return
    middle = (high - low) // 2 + low
    node = Node(values[middle], parent)
    if node.value > parent.value:
        parent.right = node
    elif node.value < parent.value:
        parent.left = node
    _attach(node, values, low, middle)
    _attach(node, values, middle, high)


def sorted_array_to_avl(values: Sequence[int]) -> Optional[Node]:
    """Build a balanced tree from sorted ``values`` without any rotation."""
    if not values:
        return None
    middle = (len(values) - 1) // 2
    root = Node(values[middle])
    _attach(root, values, -1, middle)
    _attach(root, values, middle, len(values))
    return root
"""Binary search trees: validation, insertion, lookup and removal."""

from __future__ import annotations

from typing import Iterable, Optional

from .tree import Node


def is_bst(tree: Optional[Node]) -> bool:
    """Return whether ``tree`` is a binary search tree with distinct values.

    Every value in a left subtree is smaller than its ancestor and every
    value in a right subtree is greater.  An empty tree is not a BST.
    """
    if tree is None:
        return False
    stack: list[tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if (low is not None and node.value < low) or (
            high is not None and node.value > high
        ):
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value - 1))
        if node.right is not None:
            stack.append((node.right, node.value + 1, high))
    return True


def bst_insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` into the search tree under ``root`` and return the new node.

    With no root the new node is a fresh tree of its own.  Raises
    ``ValueError`` if the value is already present.
    """
    if root is None:
        return Node(value)
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = Node(value, current)
                return current.left
            current = current.left
        elif value > current.value:
            if current.right is None:
                current.right = Node(value, current)
                return current.right
            current = current.right
        else:
            raise ValueError(f"value {value} is already in the tree")


def array_to_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a search tree by inserting ``values`` in order; duplicates are skipped."""
    root: Optional[Node] = None
    for value in values:
        if root is None:
            root = bst_insert(None, value)
            continue
        try:
            bst_insert(root, value)
        except ValueError:
            continue
    return root


def bst_search(tree: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding ``value``, or None if the tree has none."""
    node = tree
    while node is not None:
        if value == node.value:
            return node
        node = node.left if value < node.value else node.right
    return None


def bst_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` from the search tree and return the tree's new root.

    A node with two children takes the value of its in-order successor,
    which is removed in its place.  A missing value leaves the tree as it is.
    """
    target = bst_search(root, value)
    if target is None:
        return root
    if target.left is not None and target.right is not None:
        successor = target.right
        while successor.left is not None:
            successor = successor.left
        target.value = successor.value
        target = successor

    child = target.left if target.left is not None else target.right
    parent = target.parent
    if child is not None:
        child.parent = parent
    if parent is not None:
        if parent.left is target:
            parent.left = child
        else:
            parent.right = child
    new_root = child if target is root else root
    target.parent = target.left = target.right = None
    return new_root
"""Left and right rotations of a binary tree around a node."""

from __future__ import annotations

from typing import Optional

from .tree import Node


def _replace_child(parent: Optional[Node], old: Node, new: Node) -> None:
    new.parent = parent
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new


def rotate_left(tree: Optional[Node]) -> Node:
    """Rotate ``tree`` left and return the new subtree root (its former right child)."""
    if tree is None or tree.right is None:
        raise ValueError("left rotation needs a node with a right child")
    pivot = tree.right
    parent = tree.parent
    tree.right = pivot.left
    if pivot.left is not None:
        pivot.left.parent = tree
    pivot.left = tree
    tree.parent = pivot
    _replace_child(parent, tree, pivot)
    return pivot


def rotate_right(tree: Optional[Node]) -> Node:
    """Rotate ``tree`` right and return the new subtree root (its former left child)."""
    if tree is None or tree.left is None:
        raise ValueError("right rotation needs a node with a left child")
    pivot = tree.left
    parent = tree.parent
    tree.left = pivot.right
    if pivot.right is not None:
        pivot.right.parent = tree
    pivot.right = tree
    tree.parent = pivot
    _replace_child(parent, tree, pivot)
    return pivot
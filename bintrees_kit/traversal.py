"""Depth-first and breadth-first walks over a binary tree's values."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from .tree import Node


def _children(node: Node) -> tuple[Node, ...]:
    """Return the existing children of ``node``, left before right."""
    return tuple(child for child in (node.left, node.right) if child is not None)


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values node first, then the left subtree, then the right subtree."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        stack.extend(reversed(_children(node)))


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values of the left subtree, then the node, then the right subtree."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values of the left subtree, then the right subtree, then the node."""
    stack: list[tuple[Node, bool]] = [(tree, False)] if tree is not None else []
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node.value
        else:
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(_children(node)))


def levelorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values level by level, each level from left to right."""
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node.value
        queue.extend(_children(node))
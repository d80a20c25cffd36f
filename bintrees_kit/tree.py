"""Binary tree nodes and the basic measurements and relations between them."""

from __future__ import annotations

from typing import Iterator, Optional


class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional["Node"] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def _walk(tree: Optional[Node]) -> Iterator[Node]:
    """Yield every node of a subtree, in no particular order."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new node as the left child of ``parent``.

    An existing left child becomes the left child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    node = Node(value, parent)
    node.left = parent.left
    parent.left = node
    if node.left is not None:
        node.left.parent = node
    return node


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new node as the right child of ``parent``.

    An existing right child becomes the right child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    node = Node(value, parent)
    node.right = parent.right
    parent.right = node
    if node.right is not None:
        node.right.parent = node
    return node


def delete(tree: Optional[Node]) -> None:
    """Dismantle a whole subtree, cutting every link inside it."""
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        if parent.right is tree:
            parent.right = None
    for node in list(_walk(tree)):
        node.parent = node.left = node.right = None


def is_leaf(node: Optional[Node]) -> bool:
    """Return whether ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """Return whether ``node`` exists and has no parent."""
    return node is not None and node.parent is None


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for no tree."""
    if tree is None:
        return 0
    best = 0
    stack = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        best = max(best, level)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, level + 1))
    return best


def depth(tree: Optional[Node]) -> int:
    """Return the number of edges between ``tree`` and its root."""
    if tree is None:
        return 0
    count = 0
    while tree.parent is not None:
        count += 1
        tree = tree.parent
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the subtree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of leaves in the subtree."""
    return sum(1 for node in _walk(tree) if is_leaf(node))


def nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if not is_leaf(node))


def balance(tree: Optional[Node]) -> int:
    """Return the height difference between the left and right subtrees."""
    if tree is None:
        return 0
    left = height(tree.left) if tree.left is not None else -1
    right = height(tree.right) if tree.right is not None else -1
    return left - right


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of ``node``'s parent, if any."""
    if node is None or node.parent is None:
        return None
    if node is node.parent.left:
        return node.parent.right
    return node.parent.left


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of ``node``'s parent, if any."""
    if node is None or node.parent is None:
        return None
    return sibling(node.parent)


def ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the lowest common ancestor of two nodes, or None if they share none."""
    if first is None or second is None:
        return None
    depth_first = depth(first)
    depth_second = depth(second)
    while depth_first > depth_second:
        first = first.parent
        depth_first -= 1
    while depth_second > depth_first:
        second = second.parent
        depth_second -= 1
    while first is not None and second is not None:
        if first is second:
            return first
        first = first.parent
        second = second.parent
    return None
import pytest

from bintrees_kit.bst import array_to_bst, bst_insert, bst_remove, bst_search, is_bst
from bintrees_kit.traversal import inorder
from bintrees_kit.tree import Node, size

ARRAY = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]


def _linked(node):
    """Whether every child below ``node`` points back at its parent."""
    return all(
        child.parent is node and _linked(child)
        for child in (node.left, node.right)
        if child is not None
    )


def _basic_tree():
    # 98 with 12 (10, 54) on the left and 128 (-, 402) on the right.
    return array_to_bst([98, 12, 128, 54, 402, 10])


def test_is_bst_on_valid_tree():
    root = _basic_tree()
    assert is_bst(root) is True
    assert is_bst(root.left) is True


def test_is_bst_detects_misplaced_value():
    root = _basic_tree()
    root.right.left = Node(97, root.right)
    assert is_bst(root) is False


def test_is_bst_rejects_duplicates_and_empty():
    root = Node(5)
    root.left = Node(5, root)
    assert is_bst(root) is False
    assert is_bst(None) is False


def test_insert_into_empty_creates_root():
    node = bst_insert(None, 98)
    assert node.value == 98
    assert node.parent is None
    assert node.left is None and node.right is None


def test_insert_sequence():
    values = [98, 402, 12, 46, 128, 256, 512, 1]
    root = bst_insert(None, values[0])
    for value in values[1:]:
        node = bst_insert(root, value)
        assert node.value == value
        assert node.left is None and node.right is None
    assert list(inorder(root)) == sorted(values)
    assert is_bst(root)
    assert _linked(root)


def test_insert_links_child_to_parent():
    root = bst_insert(None, 98)
    small = bst_insert(root, 12)
    large = bst_insert(root, 402)
    assert root.left is small and small.parent is root
    assert root.right is large and large.parent is root


def test_insert_duplicate_raises():
    root = bst_insert(None, 98)
    bst_insert(root, 128)
    with pytest.raises(ValueError):
        bst_insert(root, 128)
    assert size(root) == 2


def test_array_to_bst():
    root = array_to_bst(ARRAY)
    assert root.value == ARRAY[0]
    assert list(inorder(root)) == sorted(ARRAY)
    assert size(root) == len(ARRAY)
    assert is_bst(root)
    assert _linked(root)


def test_array_to_bst_skips_duplicates_and_handles_empty():
    root = array_to_bst([5, 3, 5, 8, 3])
    assert list(inorder(root)) == [3, 5, 8]
    assert array_to_bst([]) is None


def test_search():
    root = array_to_bst(ARRAY)
    node = bst_search(root, 32)
    assert node.value == 32
    assert set(inorder(node)) <= set(ARRAY)
    assert bst_search(root, 512) is None
    assert bst_search(None, 32) is None


@pytest.mark.parametrize("value", ARRAY)
def test_search_finds_every_value(value):
    root = array_to_bst(ARRAY)
    assert bst_search(root, value).value == value


def test_remove_sequence():
    root = array_to_bst(ARRAY)
    remaining = sorted(ARRAY)
    for value in [79, 21, 68]:
        root = bst_remove(root, value)
        remaining.remove(value)
        assert list(inorder(root)) == remaining
        assert is_bst(root)
        assert root.parent is None
        assert _linked(root)
        assert bst_search(root, value) is None


def test_remove_root_with_two_children_keeps_root_node():
    root = array_to_bst(ARRAY)
    assert bst_remove(root, 79) is root
    assert root.value == min(v for v in ARRAY if v > 79)


def test_remove_root_with_one_child_promotes_child():
    root = array_to_bst([10, 20, 30])
    child = root.right
    new_root = bst_remove(root, 10)
    assert new_root is child
    assert new_root.parent is None
    assert list(inorder(new_root)) == [20, 30]


def test_remove_missing_and_empty():
    root = array_to_bst(ARRAY)
    assert bst_remove(root, 1000) is root
    assert list(inorder(root)) == sorted(ARRAY)
    assert bst_remove(None, 5) is None
    assert bst_remove(Node(5), 5) is None


def test_remove_everything():
    root = array_to_bst(ARRAY)
    for value in ARRAY:
        root = bst_remove(root, value)
    assert root is None
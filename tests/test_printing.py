import io

from bintrees_kit.printing import print_tree, render
from bintrees_kit.tree import Node, height


def _perfect():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def test_render_worked_example():
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)\n"
    )
    assert render(_perfect()) == expected


def test_render_single_node():
    assert render(Node(98)) == "(098)\n"


def test_render_left_child_only():
    root = Node(98)
    root.left = Node(12, root)
    assert render(root) == "  .--(098)\n(012)\n"


def test_render_none_is_empty():
    assert render(None) == ""


def test_line_count_follows_height():
    root = _perfect()
    root.right.right.right = Node(600, root.right.right)
    lines = render(root).splitlines()
    assert len(lines) == height(root) + 1


def test_no_trailing_spaces():
    for line in render(_perfect()).splitlines():
        assert line == line.rstrip(" ")


def test_columns_follow_inorder():
    lines = render(_perfect()).splitlines()
    assert lines[0].index("(098)") == 15
    assert lines[1].index("(012)") == 5
    assert lines[1].index("(402)") == 25
    assert lines[2].index("(006)") == 0
    assert lines[2].index("(016)") == 10
    assert lines[2].index("(256)") == 20
    assert lines[2].index("(512)") == 30


def test_subtree_renders_without_parent_connectors():
    root = _perfect()
    text = render(root.left)
    assert text.splitlines()[-1].startswith("(006)")
    assert len(text.splitlines()) == height(root.left) + 1


def test_print_tree_writes_render_output():
    root = _perfect()
    buffer = io.StringIO()
    print_tree(root, buffer)
    assert buffer.getvalue() == render(root)


def test_print_tree_defaults_to_stdout(capsys):
    root = Node(98)
    print_tree(root)
    assert capsys.readouterr().out == render(root)
# bintrees_kit

A small library of binary tree building blocks: linked nodes with parent
links, measurements, traversals, shape checks, rotations, binary search
trees, AVL trees and max binary heaps, plus a text renderer that draws a tree
level by level. It has no dependencies outside the standard library.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Building trees

`bintrees_kit.tree.Node` holds an integer `value` and the links `parent`,
`left` and `right`.

```python
from bintrees_kit.tree import Node, insert_left, insert_right, height, depth, size

root = Node(98)
root.left = Node(12, parent=root)
root.right = Node(402, parent=root)
insert_right(root.left, 54)     # becomes the new right child of 12
insert_right(root, 128)         # 402 moves down under 128

height(root)            # 2
depth(root.left.right)  # 2
size(root)              # 5
```

`insert_left` and `insert_right` push an existing child down one level under
the new node; they raise `ValueError` when the parent is `None`.

`tree` also offers:

- `delete(tree)` – detaches a subtree from its parent and cuts every link in it
- `is_leaf(node)`, `is_root(node)`
- `leaves(tree)` – number of leaves; `nodes(tree)` – number of nodes with a child
- `balance(tree)` – height of the left subtree minus height of the right one,
  counting a missing subtree as -1
- `sibling(node)`, `uncle(node)`
- `ancestor(first, second)` – lowest common ancestor, or `None`

Measurements of `None` are 0.

## Printing

```python
from bintrees_kit.tree import Node
from bintrees_kit.printing import render, print_tree

root = Node(98)
root.left = Node(12, root)
root.right = Node(402, root)
root.left.left = Node(6, root.left)
root.left.right = Node(16, root.left)
root.right.left = Node(256, root.right)
root.right.right = Node(512, root.right)

print(render(root), end="")
print_tree(root)        # writes to standard output, or to a given file
```

Every value is drawn as `(%03d)` and children hang under dotted branches:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

`render(None)` returns an empty string.

## Traversals

`bintrees_kit.traversal` provides generators of node values: `preorder`,
`inorder`, `postorder` and `levelorder`.

```python
from bintrees_kit.traversal import levelorder

list(levelorder(root))   # [98, 12, 402, 6, 16, 256, 512]
```

## Shape checks and rotations

`bintrees_kit.properties` provides `is_full`, `is_perfect` and `is_complete`;
each returns `False` for `None`.

`bintrees_kit.rotation` provides `rotate_left` and `rotate_right`. Each returns
the new subtree root and reattaches it to the old root's parent. They raise
`ValueError` when the node lacks the child the rotation needs.

## Search trees, AVL trees and heaps

```python
from bintrees_kit.bst import array_to_bst, bst_search, bst_remove, is_bst
from bintrees_kit.avl import array_to_avl, sorted_array_to_avl, is_avl
from bintrees_kit.heap import array_to_heap, is_heap

values = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]

tree = array_to_bst(values)
bst_search(tree, 32).value   # 32
tree = bst_remove(tree, 79)  # returns the tree's new root

avl = sorted_array_to_avl(sorted(values))
is_avl(avl)                  # True

heap = array_to_heap(values)
heap.value                   # 98
is_heap(heap)                # True
```

- `bst_insert(root, value)` and `avl_insert(root, value)` return the new node
  (a fresh one-node tree when `root` is `None`) and raise `ValueError` if the
  value is already present. `array_to_bst` and `array_to_avl` skip duplicates.
- `avl_insert` may rotate the tree so that its root changes; the current root
  is found by following `parent` links from any node.
- `bst_remove` replaces a node with two children by its in-order successor;
  removing a missing value leaves the tree as it is.
- `heap_insert(root, value)` fills the first free slot of the last level, then
  moves the value up while it is greater than its parent's, and returns the
  node that ends up holding it.

## What it does not do

There is no command-line tool. Heaps support insertion only: there is no
extraction of the root and no conversion of a heap to a sorted list. AVL trees
support insertion and construction, but not removal.
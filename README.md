# bitree

Binary trees made of linked nodes. Each node holds an integer value and
links to its parent, its left child and its right child. The package
builds trees, measures them, walks them, rotates them, works with binary
search trees and draws trees as text.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `bitree.node`

- `Node(value, parent=None, left=None, right=None)` is a dataclass.
  Nodes compare by identity.
- `new_node(parent, value)` creates a node whose parent link points at
  `parent`. It does not attach the node to the parent. You set
  `parent.left` or `parent.right` yourself.
- `insert_left(parent, value)` and `insert_right(parent, value)` insert
  a new child on that side. Any existing child on that side moves one
  level down, on the same side of the new node. Both raise `ValueError`
  if `parent` is `None`.
- `delete(tree)` detaches the subtree from its parent and unlinks every
  node in it.
- `is_leaf(node)` and `is_root(node)` return `False` for `None`.
- `depth(tree)` is the number of edges up to the root.
- `sibling(node)` returns the other child of the node's parent.
  `uncle(node)` returns the sibling of the node's parent. Both return
  `None` if that node does not exist.
- `lowest_common_ancestor(first, second)` returns the deepest node that
  both nodes share as an ancestor. A node counts as its own ancestor. It
  returns `None` if there is no such node.

### `bitree.metrics`

- `height(tree)` is the number of edges on the longest downward path. It
  is 0 for a leaf and for `None`.
- `size(tree)`, `leaves(tree)` and `internal_nodes(tree)` count all
  nodes, the nodes without children, and the nodes with at least one
  child.
- `balance(tree)` is the number of levels in the left subtree minus the
  number of levels in the right subtree.
- `is_full(tree)`, `is_perfect(tree)` and `is_complete(tree)` check the
  shape of the tree. Each returns `False` for `None`.

### `bitree.traversal`

`preorder`, `inorder`, `postorder` and `levelorder` are generators. Each
one yields node values in its order and yields nothing for `None`.

### `bitree.rotate`

`rotate_left(tree)` and `rotate_right(tree)` do a single rotation and
return the new subtree root. If the rotated node had a parent, that
parent is relinked to the new root. Each raises `ValueError` when the
node has no child on the side that the rotation needs.

### `bitree.bst`

- `is_bst(tree)` checks for strictly increasing order. Every value must
  lie strictly between the limits of a 32-bit signed integer. An empty
  tree is not a BST.
- `bst_insert(root, value)` adds a value and returns the new node. If
  `root` is `None`, the returned node is the root of a new tree. It
  raises `ValueError` if the value is already present.
- `array_to_bst(values)` inserts values in the order given and skips
  repeats. It returns the root, or `None` if `values` is empty.

### `bitree.printing`

`render(tree)` returns the drawing, one line per level, with a newline
after each line. `print_tree(tree)` writes that drawing to standard
output. Each node is drawn as its zero-padded value in parentheses, such
as `(098)`. Dashes and dots connect each node to its children.

## Example

```python
from bitree.node import new_node, insert_right
from bitree.metrics import height, size
from bitree.traversal import inorder
from bitree.bst import array_to_bst
from bitree.printing import print_tree

root = new_node(None, 98)
root.left = new_node(root, 12)
root.right = new_node(root, 402)
insert_right(root.left, 54)

print(size(root), height(root))   # 4 2
print(list(inorder(root)))        # [12, 54, 98, 402]

tree = array_to_bst([98, 402, 12, 46, 128, 256, 512, 1])
print_tree(tree)
```

## What it does not do

- Binary search trees support checking, insertion and building only.
  There is no search and no removal.
- Trees are not kept balanced. There are no AVL trees and no heaps.
- There is no command-line tool.
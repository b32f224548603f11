# bstree

A small, unbalanced binary search tree of integers. Values are unique: adding
a value that is already present is refused. Nodes compare against plain
integers, and the tree can be walked breadth-first or printed level by level.

## Installation

```
pip install .
```

## Usage

Everything lives in the `bstree.bst` module.

```python
from bstree.bst import BST, Node

tree = BST()
for value in (25, 10, 50, 53, 15, 7):
    tree.add_node(value)     # True for each new value

tree.add_node(53)            # False: the value is already in the tree
len(tree)                    # 6
[n.value for n in tree]      # [25, 10, 50, 7, 15, 53] (breadth-first order)

node = tree.find_node(10)    # the node holding 10, or None if absent
node.left.value, node.right.value   # (7, 15)

parent = tree.find_parent(15)       # the node whose child holds 15
parent.value                        # 10
tree.find_parent(25)                # None: 25 is at the root
tree.find_parent(11)                # None: 11 is not in the tree

values = []
tree.bfs(lambda n: values.append(n.value))   # call a function on every node

tree.root.value              # 25
```

`str(tree)` gives one line per level, each value followed by a space:

```
25 
10 50 
7 15 53 
```

An empty tree prints as `(空树)` (the module constant `EMPTY_TREE_TEXT`).

### Nodes

A `Node` holds `value` (default `0`), `left` and `right` (default `None`).
It compares with integers by its value, on either side of the operator:

```python
n = Node(5)
n > 4, 5 <= n, n == 5, 3 == n    # (True, True, True, False)
```

Two nodes are equal only if they are the same object. `str(node)` shows the
node's identity, its value and the identities of its children (`0` for a
missing child).

## What it does not do

The tree only grows: there is no way to remove a value, and no successor or
predecessor lookup. It does not rebalance itself, so inserting values in
sorted order produces a chain. There is no command-line program; the package
is used as a library.

## Running the tests

```
pip install .[test]
pytest
```
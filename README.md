# arborlab

A collection of classic data structures written in plain Python, together
with a handful of small command-line programs that put them to work.

## What is inside

| Module | What it provides |
| --- | --- |
| `arborlab.stack` | `Stack`, a last-in-first-out stack with an optional size limit; pushes onto a full stack are dropped |
| `arborlab.linked_list` | `SinglyLinkedList` with append, front insertion, deletion and rotation |
| `arborlab.bst` | `BinarySearchTree` with traversals, height, height path and diameter path; `Traversal` and `format_values` |
| `arborlab.splay` | `SplayTree`, a search tree that brings inserted and looked-up values to the root |
| `arborlab.btree` | `BTree` and `BTreeNode`, a B-tree of a chosen order with insertion, removal and search paths |
| `arborlab.rbtree` | `RedBlackTree`, `RBNode` and `Color`, a self-balancing red-black tree |
| `arborlab.student` | `Student` records loaded from a comma-separated file into a B-tree keyed by id |
| `arborlab.browser` | `Site` records read from a browser-history file |
| `arborlab.hanoi` | `solve_hanoi`, the Towers of Hanoi with `Tower` and `Move` |
| `arborlab.stanislaus` | `Stanislaus`, a stack machine that evaluates logic formulas by nesting level, and `solve` |
| `arborlab.rotation` | `rotate_values`, rotating a sequence left or right |
| `arborlab.palindrome` | `is_palindrome` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from arborlab.bst import BinarySearchTree, Traversal
from arborlab.splay import SplayTree
from arborlab.rbtree import RedBlackTree
from arborlab.btree import BTree
from arborlab.stack import Stack
from arborlab.linked_list import SinglyLinkedList

tree = BinarySearchTree([12, 10, 8, 11, 14, 13, 16, 15, 17, 7, 9])
print(list(tree.in_order()))      # values in sorted order
print(tree.height())              # number of levels
print(tree.diameter_path())       # left path reversed, the root, right path
print(tree.traversal_report(Traversal.PRE_ORDER), end="")

splay = SplayTree([12, 10, 8])
splay.contains(10)
print(splay.root_value())         # 10

rb = RedBlackTree()
for value in (20, 10, 30, 15, 17):
    rb.insert(value)
rb.delete(10)
print(17 in rb, list(rb.level_order()))

btree = BTree(4)
for word in ("strudel", "struggle", "structure"):
    btree.insert(word)
print(btree.describe_search("struggle"), end="")

stack = Stack(max_size=5)
stack.push("Cheer")
print(stack.top(), len(stack))

items = SinglyLinkedList([1, 2, 3, 4, 5])
items.rotate(2)
print(items)                      # 3 4 5 1 2
```

## Command-line programs

Check whether a word reads the same forwards and backwards:

```
arborlab-palindrome racecar
```

List every move needed to shift a stack of three weights from tower 1 to
tower 2:

```
arborlab-hanoi 3
```

Evaluate the two built-in formulas on the nesting-level stack machine:

```
arborlab-stanislaus
```

Print a browser history file, four lines per site (URL, title, time, date):

```
arborlab-browser history.txt
```

Rotate a list of numbers; the program reads the length, the number of
rotations, the direction (`L` or `R`) and the values from standard input,
and repeats while you answer `y`:

```
arborlab-rotate
```

Load a comma-separated student file (`id,first,last,email,major` per line)
into a B-tree of order 4 and report the search for ids 86 and 10:

```
arborlab-students students.csv
```

## What it does not do

There is no command that walks through the trees, sets and stacks step by
step; the structures are used from Python code or through the commands
above. Nothing is stored between runs: every tree and list lives in memory
only.
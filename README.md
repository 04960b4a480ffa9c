# structkit

A small collection of classic data structures, each usable as a library
and as an interactive menu-driven program on the terminal. There are no
third-party dependencies.

- `structkit.heap` — `MaxHeap`, a bounded max-heap of integers (default
  capacity 20) with `insert`, `delete_max`, in-place heap `sort`, `keys`,
  `len()` and iteration.
- `structkit.linear_queue` — `LinearQueue`, a fixed-capacity queue
  (default 10) whose slots are not reused: once `capacity` items have been
  added in total it is full, even if some were removed.
- `structkit.circular_queue` — `CircularQueue`, a fixed-capacity ring
  queue (default 3) that reuses slots as items leave.
- `structkit.binary_tree` — plain binary trees of `TreeNode`:
  `build_from_preorder` (with `-1` marking an empty child),
  `insert_by_path` (each `L` steps left, any other character right),
  `inorder`, `preorder`, `postorder`, `iterative_preorder`,
  `iterative_inorder`, `level_order`, `copy_tree`, `ancestors` (nearest
  first) and `height` (counted in nodes).
- `structkit.bst` — `BinarySearchTree` with `insert` (equal values go
  right), `delete`, `search`, `search_recursive`, the `in` operator and
  `inorder`, `preorder` and `postorder`.
- `structkit.exptree` — expression trees of `ExprNode` built from postfix
  strings of single-digit operands with `build_expression_tree`, printed
  in infix with `inorder` (no parentheses) and computed with `evaluate`.
  The operators are `+ - * / % ^`; `/` and `%` truncate toward zero, and
  `^` is bitwise exclusive or.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from structkit.heap import MaxHeap
from structkit.circular_queue import CircularQueue
from structkit.bst import BinarySearchTree
from structkit.exptree import build_expression_tree, inorder, evaluate

heap = MaxHeap(20)
for key in (5, 17, 3, 9):
    heap.insert(key)
heap.delete_max()        # returns 17
heap.sort()              # keys now ascending; no longer a heap
print(heap.keys())       # [3, 5, 9]

queue = CircularQueue(3)
queue.add(1)
queue.add(2)
print(queue.remove())    # 1
print(len(queue))        # 1

tree = BinarySearchTree()
for value in (50, 30, 70, 60):
    tree.insert(value)
print(60 in tree)        # True
tree.delete(50)
print(tree.inorder())    # [30, 60, 70]

root = build_expression_tree("23*4+")
print(inorder(root))     # 2*3+4
print(evaluate(root))    # 10
```

## Errors

Operations that cannot proceed raise exceptions:

- a full heap raises `HeapFullError`, an empty one `HeapEmptyError`
  (both in `structkit.heap`);
- a full queue raises `QueueFullError`, an empty one `QueueEmptyError`
  (defined in `structkit.linear_queue` and used by both queues);
- `insert_by_path` raises `InsertionError` when the path does not end at
  an empty child, and `build_from_preorder` raises `ValueError` when the
  sequence is too short or too long;
- `BinarySearchTree.delete` raises `KeyError` for an absent value;
- a malformed postfix expression raises `ExpressionError` (a
  `ValueError`), and division or remainder by zero raises
  `ZeroDivisionError`.

A capacity below 1 raises `ValueError` for the heap and both queues.

## Interactive programs

Each structure comes with a menu-driven program reading choices from
standard input; end of input exits.

```
structkit-heap [--capacity N]
structkit-queue [--capacity N]
structkit-circular-queue [--capacity N]
structkit-tree
structkit-bst
structkit-exptree [EXPRESSION]
```

`structkit-exptree` takes the postfix expression as an argument or asks
for it, prints it in infix and then its value; it exits with status 1 on
a malformed expression or a division by zero.

## What it does not do

Everything is held in memory: the programs keep nothing between runs and
cannot load or save a structure. The trees are not self-balancing, and
expressions accept only single-digit operands.
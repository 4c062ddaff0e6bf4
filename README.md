# dsakit

Classic data structures and algorithms in plain Python, with no
third-party dependencies, plus a `dsakit` command that runs the
exercises on text read from standard input.

## What is inside

| Module              | Contents |
|---------------------|----------|
| `dsakit.arrays`     | `insert_at`, `delete_at` (1-based positions), `linear_search` (returns index and comparison count), `reverse`, `merge_sorted`, `unique_sorted`, `frequencies`, `min_max`, `rotate_right`, `closest_to_zero_pair`, `count_zero_sum_subarrays` |
| `dsakit.text`       | `reverse_text`, `is_palindrome` |
| `dsakit.recursion`  | `fib` (Fibonacci numbers) and `power` (non-negative integer exponents) |
| `dsakit.matrix`     | `add`, `is_symmetric`, `spiral`, `is_identity`, `diagonal_sum` on lists of rows |
| `dsakit.linkedlist` | `LinkedList`, `DoublyLinkedList`, `CircularLinkedList`, `merge_sorted_lists`, `find_intersection`, `Term` and `format_polynomial` |
| `dsakit.stacks`     | `ArrayStack` (bounded), `LinkedStack`, `infix_to_postfix`, `evaluate_postfix` |
| `dsakit.queues`     | `LinkedQueue`, `CircularQueue` (fixed-size ring), `Deque`, `reverse_queue` |
| `dsakit.heaps`      | `SortedPriorityQueue`, `MinHeap`, `heap_sort` |
| `dsakit.trees`      | `TreeNode`, `build_level_order` (`-1` or `None` marks a missing child), `inorder`, `preorder`, `postorder`, `level_order`, `vertical_order`, `height`, `count_leaves`, `lowest_common_ancestor`, `BinarySearchTree` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from dsakit import arrays, recursion, stacks, text

arrays.insert_at([1, 2, 4], 3, 3)        # [1, 2, 3, 4]  (positions are 1-based)
arrays.rotate_right([1, 2, 3, 4, 5], 2)  # [4, 5, 1, 2, 3]
arrays.merge_sorted([1, 4, 9], [2, 3])   # [1, 2, 3, 4, 9]

text.is_palindrome("level")              # True
recursion.fib(10)                        # 55
recursion.power(2, 10)                   # 1024

stacks.infix_to_postfix("a+b*c")         # "abc*+"
stacks.evaluate_postfix("2 3 1 * + 9 -") # -4
```

Linked structures, queues, heaps and the binary search tree are ordinary
Python objects that support iteration and `len()`:

```python
from dsakit.linkedlist import LinkedList
from dsakit.heaps import MinHeap, heap_sort
from dsakit.trees import BinarySearchTree, build_level_order, vertical_order

items = LinkedList([1, 2, 3, 4, 5])
items.rotate_right(2)
list(items)                              # [4, 5, 1, 2, 3]

heap = MinHeap(10)
for value in (5, 1, 3):
    heap.insert(value)
heap.extract_min()                       # 1

heap_sort([4, 1, 3, 2])                  # [1, 2, 3, 4]

tree = BinarySearchTree([50, 30, 70, 20, 40])
40 in tree                               # True
list(tree)                               # [20, 30, 40, 50, 70]

root = build_level_order([1, 2, 3, -1, 4])
vertical_order(root)                     # [[2], [1, 4], [3]]
```

Bounded containers drop values offered while full: `ArrayStack.push`
ignores them, while `CircularQueue.enqueue`, `SortedPriorityQueue.insert`
and `MinHeap.insert` return `False`. Taking a value from an empty
container raises `StackUnderflowError` (stacks) or `EmptyQueueError`
(queues, deque, priority queue and heap); both are subclasses of
`IndexError`.

## Command line

The `dsakit` command takes the name of an exercise, reads
whitespace-separated input from standard input and prints the result:

```
echo "5 1 2 3 4 5 2" | dsakit rotate
4 5 1 2 3
```

Most list commands read a count followed by that many integers, then any
further arguments (a position, a key, a rotation). Matrix commands read
the dimensions first, then the elements row by row. Run `dsakit --help`
for the full list of commands:

`reverse`, `insert`, `delete`, `search`, `merge`, `unique`, `frequency`,
`minmax`, `rotate`, `closest-pair`, `zero-sum`, `mirror`, `palindrome`,
`fib`, `power`, `matrix-add`, `symmetric`, `spiral`, `identity`,
`diagonal`, `infix`, `postfix`, `heap-sort`, `tree-inorder`,
`tree-traversals`, `tree-height`, `tree-leaves`, `level-order`,
`vertical-order`, `bst-inorder`, `bst-search`.

Invalid input (too few values, a bad position, division by zero) is
reported on standard error and the command exits with status 1.

## What it does not do

The command line covers the functions above only. It has no commands
for the linked-list classes, for sequences of stack, queue, deque or
heap operations, or for lowest common ancestors; use those from Python.
# dsakit

Small, readable implementations of classic data structures and sorting
algorithms, with a command that runs interactive sessions over them.

## Modules

- `dsakit.queues`: `CircularQueue` and `LinearQueue`, both bounded by a
  capacity (default 5). `enqueue` raises `QueueOverflow` when the queue is
  full; `dequeue` and `peek` raise `QueueUnderflow` when it is empty. Both
  support `len()` and iterate from front to back. A `LinearQueue` does not
  reuse slots freed by `dequeue` until it has been fully drained, so it can
  report `is_full()` while holding fewer items than its capacity.
- `dsakit.stack`: a bounded `Stack` (default capacity 5) with `push`, `pop`
  and `peek`, raising `StackOverflow` and `StackUnderflow`. Iteration runs
  from top to bottom.
- `dsakit.sorting`: `bubble_sort`, `insertion_sort`, `selection_sort`,
  `merge_sort` and `quick_sort` take any iterable and return a new list;
  `insertion_sort` and `selection_sort` accept `descending=True`.
  `sort_string` returns the characters of a string in code-point order.
  `average_mark` averages integer marks, truncating toward zero, and
  raises `ValueError` for an empty list; `marks_above_average` returns the
  marks strictly above that average, in their given order.
- `dsakit.bst`: `BinarySearchTree` of distinct values built from `Node`
  objects. `insert` and `delete` return `False` when nothing changed;
  `search` returns the `Node` or `None`, and `in` works too. It offers
  `in_order`, `pre_order`, `post_order` and `level_order`, plus `find_min`
  (raises `ValueError` on an empty tree), `height` (-1 when empty) and
  `is_balanced`. Iterating a tree yields values in order.
- `dsakit.cli`: the sessions behind the `dsakit` command:
  `run_bst_session`, `run_queue_demo`, `run_stack_session`,
  `run_sort_session` and `main`.

## Usage

```python
from dsakit.queues import CircularQueue
from dsakit.stack import Stack
from dsakit.sorting import merge_sort, sort_string
from dsakit.bst import BinarySearchTree

q = CircularQueue(5)
for value in (10, 20, 30):
    q.enqueue(value)
q.dequeue()          # 10
list(q)              # [20, 30]

s = Stack(5)
s.push(1)
s.push(2)
s.pop()              # 2

merge_sort([5, 3, 9, 1])   # [1, 3, 5, 9]
sort_string("banana")      # "aaabnn"

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.in_order()      # [20, 30, 40, 50, 70]
tree.delete(30)      # True
40 in tree           # True
tree.height()        # 2
tree.is_balanced()   # True
```

## Command line

The `dsakit` command has four subcommands. All but `queue` read
whitespace-separated input from standard input.

```
dsakit bst                 # node count, node values, a value to search, a value to delete
dsakit queue [circular|linear]   # fixed enqueue/dequeue demonstration (default: circular)
dsakit stack               # five values to push; then two are popped
dsakit sort ALGORITHM      # bubble, insertion, selection, merge, quick or string
```

For `sort`, input is an element count followed by the elements, except for
`string`, which reads a single word. `merge` accepts at most 30 elements and
`quick` at most 20. The `bubble` session also prints the average mark and
the marks above it. Malformed or missing input ends the command with an
error message on standard error and exit status 1.

```
echo "5 50 30 70 20 40 30 30" | dsakit bst
echo "4 3 1 4 2" | dsakit sort quick
```

## Running the tests

```
pip install ".[test]"
pytest
```
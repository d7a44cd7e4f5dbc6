# dsalgo

A collection of classic data structures and algorithms, each in its own
small module with a plain Python interface. It has no dependencies outside
the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsalgo.minheap` | `MinHeap`, a binary min-heap ordered by the items' own `<` |
| `dsalgo.jobs` | `Job`, `JobScheduler`, `format_job`, `read_job` and an interactive job-queue shell |
| `dsalgo.priority_queues` | `SortedArrayPriorityQueue`, `HeapPriorityQueue`, `benchmark` |
| `dsalgo.heaps` | `heap_sort`, `up_heap`, `build_max_heap` |
| `dsalgo.chained_dictionary` | `ChainedDictionary`, string keys to integers with separate chaining; `hash_key` |
| `dsalgo.linear_probing` | `ProbingHashTable` with tombstone deletion, `SlotStatus`, `TableFullError` |
| `dsalgo.open_addressing` | `LinearProbingTable`, `QuadraticProbingTable`, `DoubleHashingTable`, `SeparateChainingTable`, `collision_report` |
| `dsalgo.bucket_table` | `BucketHashTable`, integer keys to string values |
| `dsalgo.bounded_queue` | `BoundedQueue`, a fixed-capacity FIFO queue |
| `dsalgo.stacks` | `ArrayStack` (fixed size) and `LinkedStack` (unbounded) |
| `dsalgo.doubly_linked_list` | `DoublyLinkedList` with sentinel nodes, `ListNode` |
| `dsalgo.cursor_list` | `CursorList`, a linked list stored in a fixed array with a free list |
| `dsalgo.unsorted_removal` | `remove_element`, `remove_all` |
| `dsalgo.threaded_trees` | `ThreadedTree`, `DoubleThreadedTree` |
| `dsalgo.nary_tree` | `NaryTree` with a per-node child limit |
| `dsalgo.avl_tree` | `AVLTree`, a self-balancing search tree |
| `dsalgo.complete_tree` | `TreeNode`, `insert_level_order`, `is_complete` |
| `dsalgo.searching` | `lookup`, binary search returning `-(insertion point) - 1` when absent |
| `dsalgo.sorting` | `counting_sort`, `radix_sort`, `digit_at` |
| `dsalgo.dijkstra` | `dijkstra`, single-source shortest paths |
| `dsalgo.spans` | `span_quadratic`, `span_linear`, `span_vector` |
| `dsalgo.furlongs` | `to_kilometres`, `parse_furlongs`, `greeting` |

Errors are raised as exceptions: empty heaps and priority queues raise
`IndexError`, missing keys raise `KeyError`, full tables raise
`TableFullError`, and the queues and stacks raise their own overflow and
underflow errors (`QueueOverflowError`, `QueueUnderflowError`,
`StackOverflowError`, `StackUnderflowError`).

## Examples

A min-heap:

```python
from dsalgo.minheap import MinHeap

heap = MinHeap()
for value in (5, 3, 7, 1):
    heap.insert(value)
print(heap.extract_min())   # 1
print(len(heap))            # 3
```

Jobs are ordered system-first, then by execution time:

```python
from dsalgo.jobs import Job, JobScheduler

scheduler = JobScheduler()
scheduler.submit(Job("user", 1.0, "alice", "compile_code", "cpu"))
scheduler.submit(Job("system", 2.0, "root", "network_check", "network"))
print(scheduler.execute().command_name)   # network_check
```

An AVL tree keeps itself balanced:

```python
from dsalgo.avl_tree import AVLTree

tree = AVLTree()
for key in (30, 20, 10):
    tree.insert(key)
print(tree.pre_order())   # [20, 10, 30]
print(tree.height())      # 2
```

Shortest paths over an adjacency list of `(weight, node)` pairs;
unreachable nodes get `math.inf`:

```python
from dsalgo.dijkstra import dijkstra

graph = [[(10, 1), (5, 3)], [(1, 2)], [], [(3, 1)]]
print(dijkstra(0, graph))   # [0, 8, 9, 5]
```

## Command-line tools

Three small programs are installed with the package:

```
dsalgo-jobs       # interactive job queue: submit, execute, lottery, quit
dsalgo-spans      # run the span algorithms on sample inputs and time them
dsalgo-furlongs   # convert a distance in furlongs to kilometres
```

`dsalgo-jobs` reads commands from standard input by name or number and
stops on `quit` or at the end of input.

## Limits

The job queue lives in memory only: jobs are not saved between runs of
`dsalgo-jobs`. The hash tables have fixed sizes and never grow.
"""Classic data structures and algorithms: heaps, hash tables, queues, stacks,
linked lists, trees, sorting, searching and shortest paths."""

__version__ = "0.1.0"

__all__ = [
    "avl_tree",
    "bounded_queue",
    "bucket_table",
    "chained_dictionary",
    "complete_tree",
    "cursor_list",
    "dijkstra",
    "doubly_linked_list",
    "furlongs",
    "heaps",
    "jobs",
    "linear_probing",
    "minheap",
    "nary_tree",
    "open_addressing",
    "priority_queues",
    "searching",
    "sorting",
    "spans",
    "stacks",
    "threaded_trees",
    "unsorted_removal",
]
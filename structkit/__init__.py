"""Classic data structures: a max-heap, linear and circular queues, binary trees, binary search trees and expression trees."""

__version__ = "0.1.0"
__all__ = [
    "heap",
    "linear_queue",
    "circular_queue",
    "exptree",
    "binary_tree",
    "bst",
]
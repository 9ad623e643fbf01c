"""Classic data structures and algorithms: trees, lists, heaps, graphs, DP and recursion."""

__version__ = "0.1.0"

__all__ = [
    "binary_tree",
    "bst",
    "dynamic",
    "graph",
    "linked_list",
    "median",
    "puzzles",
    "recursion",
]
"""Classic algorithm and data-structure drills as plain Python functions."""

__version__ = "0.1.0"

__all__ = [
    "maths",
    "stacks",
    "linked_list",
    "strings",
    "two_pointers",
    "greedy",
    "recursion",
    "hashing",
    "backtracking",
    "monotonic",
    "binary_tree",
    "binary_search",
    "tree_structure",
    "bst",
    "bits",
]
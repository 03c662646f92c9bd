"""Classic data structures, sorting and searching algorithms."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "bst",
    "deques",
    "hashtable",
    "lists",
    "ordered_list",
    "queues",
    "search",
    "sorting",
    "stacks",
]
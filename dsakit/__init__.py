"""Classic data structures and algorithms, with a command-line front end."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "cli",
    "heaps",
    "linkedlist",
    "matrix",
    "queues",
    "recursion",
    "stacks",
    "text",
    "trees",
]
"""Classic data-structure and algorithm exercises as a small Python library."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "bits",
    "circular",
    "doubly",
    "hashing",
    "heaps",
    "median",
    "numbers",
    "patterns",
    "recursion",
    "searching",
    "singly",
    "sorting",
]
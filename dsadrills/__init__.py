"""Classic programming drills: text patterns, frequency counting, recursion and sorting."""

__version__ = "0.1.0"
__all__ = ["patterns", "hashing", "recursion", "sorting"]
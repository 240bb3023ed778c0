"""Classic algorithm exercises as plain Python functions."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked_list", "dp", "backtracking", "puzzles"]
"""Classic array, subarray, search, matrix and text-pattern exercises."""

__version__ = "0.1.0"

__all__ = ["arrays", "matrix", "patterns", "searching", "subarrays", "sums"]
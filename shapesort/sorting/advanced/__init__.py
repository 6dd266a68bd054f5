"""Sorts with guaranteed O(n log n) running time."""

"""Quadratic and partition-based sorts."""

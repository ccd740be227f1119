"""Merge sorted integer lists into one sorted list using a priority queue."""

__version__ = "1.1.0"
__all__ = ["intlist", "merger", "cli"]
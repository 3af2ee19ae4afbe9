"""Bounded queues, a stack, a binary search tree, classic sorts and a command-line front end."""

__version__ = "0.1.0"
__all__ = ["queues", "stack", "sorting", "bst", "cli"]
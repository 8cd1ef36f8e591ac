"""Classic data structures and algorithms: stacks, linked lists and recursion."""

__version__ = "0.1.0"
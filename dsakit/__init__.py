"""Classic data structures and algorithms: recursion, strings, arrays, packed
matrices, linked lists, stacks, queues, expressions and search trees."""

__version__ = "0.1.0"
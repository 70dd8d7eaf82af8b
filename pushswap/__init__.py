"""Sort integers with two stacks and a restricted set of operations."""

__version__ = "1.0.0"
"""Sort integers with two stacks and report the operations used."""

__version__ = "1.0.0"
__all__ = ["cli", "parse", "sort", "stacks"]
"""Functions solving classic beginner contest problems on strings, numbers and sequences."""

__version__ = "0.1.0"
__all__ = ["numbers", "sequences", "strings"]
"""Word index of text files, held in an ordered list or a binary search tree."""

__version__ = "0.1.0"
__all__ = ["__version__"]
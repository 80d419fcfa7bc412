"""Deduplicating directory archiver: pack a tree into one file and unpack it again."""

__version__ = "1.0"
__all__ = ["__version__"]
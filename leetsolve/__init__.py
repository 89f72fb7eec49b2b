"""Solutions to classic algorithm problems: arrays, hashing, linked lists, two pointers and an LRU cache."""

__version__ = "0.1.0"
"""Hash set, singly linked list and trie data structures."""

__version__ = "1.0.0"
__all__ = ["hashset", "slist", "trie"]
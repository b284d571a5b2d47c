"""Trie: fast mapping from strings or byte sequences to values."""

from __future__ import annotations

from typing import Any, Optional, Union

TextKey = Union[str, bytes]
BinaryKey = Union[bytes, bytearray, memoryview]


class _TrieNode:
    """A node of the trie.

    ``use_count`` is the number of stored keys that pass through or end at
    this node.
    """

    __slots__ = ("data", "use_count", "children")

    def __init__(self) -> None:
        self.data: Any = None
        self.use_count = 0
        self.children: dict[int, _TrieNode] = {}


def _text_key(key: TextKey) -> bytes:
    if isinstance(key, str):
        encoded = key.encode("utf-8")
    elif isinstance(key, (bytes, bytearray)):
        encoded = bytes(key)
    else:
        raise TypeError(f"trie key must be str or bytes, not {type(key).__name__}")
    if b"\x00" in encoded:
        raise ValueError("text key must not contain a NUL character")
    return encoded


def _binary_key(key: BinaryKey) -> bytes:
    if isinstance(key, str):
        raise TypeError("binary key must be a bytes-like object, not str")
    return bytes(key)


class Trie:
    """A mapping from keys to values stored as a tree of byte transitions.

    Text keys (``insert``, ``lookup``, ``remove``) are strings, encoded as
    UTF-8, and may not contain NUL.  Binary keys (the ``*_binary`` methods)
    are arbitrary byte sequences.  A text key and the binary key made of its
    encoded bytes refer to the same entry.  ``None`` cannot be stored.
    """

    def __init__(self) -> None:
        self._root: Optional[_TrieNode] = None

    def _find_end(self, key: bytes) -> Optional[_TrieNode]:
        node = self._root
        for byte in key:
            if node is None:
                return None
            node = node.children.get(byte)
        return node

    def _insert(self, key: bytes, value: Any) -> None:
        if value is None:
            raise ValueError("cannot store None in a trie")

        node = self._find_end(key)
        if node is not None and node.data is not None:
            node.data = value
            return

        if self._root is None:
            self._root = _TrieNode()
        node = self._root
        node.use_count += 1
        for byte in key:
            child = node.children.get(byte)
            if child is None:
                child = _TrieNode()
                node.children[byte] = child
            node = child
            node.use_count += 1
        node.data = value

    def _lookup(self, key: bytes) -> Any:
        node = self._find_end(key)
        return None if node is None else node.data

    def _remove(self, key: bytes) -> bool:
        node = self._find_end(key)
        if node is None or node.data is None:
            return False
        node.data = None

        node = self._root
        assert node is not None
        node.use_count -= 1
        if node.use_count <= 0:
            self._root = None
            return True
        for byte in key:
            child = node.children[byte]
            child.use_count -= 1
            if child.use_count <= 0:
                # Everything below this node belonged only to the removed key.
                del node.children[byte]
                break
            node = child
        return True

    def insert(self, key: TextKey, value: Any) -> None:
        """Store ``value`` under a text key, replacing any existing value."""
        self._insert(_text_key(key), value)

    def insert_binary(self, key: BinaryKey, value: Any) -> None:
        """Store ``value`` under a binary key, replacing any existing value."""
        self._insert(_binary_key(key), value)

    def lookup(self, key: TextKey) -> Any:
        """Return the value stored under a text key, or None if absent."""
        return self._lookup(_text_key(key))

    def lookup_binary(self, key: BinaryKey) -> Any:
        """Return the value stored under a binary key, or None if absent."""
        return self._lookup(_binary_key(key))

    def remove(self, key: TextKey) -> bool:
        """Remove the entry for a text key; return False if it was absent."""
        return self._remove(_text_key(key))

    def remove_binary(self, key: BinaryKey) -> bool:
        """Remove the entry for a binary key; return False if it was absent."""
        return self._remove(_binary_key(key))

    def __len__(self) -> int:
        return 0 if self._root is None else self._root.use_count
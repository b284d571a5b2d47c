"""Unordered set of values kept in a chained hash table."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Any, Optional

HashFunc = Callable[[Any], int]
EqualFunc = Callable[[Any, Any], Any]
FreeFunc = Callable[[Any], None]

# Good hash table primes: each roughly double the previous one and as far
# as possible from the nearest powers of two.
_PRIMES = (
    193, 389, 769, 1543, 3079, 6151, 12289, 24593, 49157, 98317,
    196613, 393241, 786433, 1572869, 3145739, 6291469,
    12582917, 25165843, 50331653, 100663319, 201326611,
    402653189, 805306457, 1610612741,
)


class HashSet:
    """A set of values, each stored at most once.

    Values are located with ``hash_func`` and compared with ``equal_func``,
    which returns a true value when its two arguments are equivalent.  An
    optional ``free_func`` is called on each value removed from the set.
    """

    def __init__(
        self,
        hash_func: HashFunc = hash,
        equal_func: EqualFunc = operator.eq,
        free_func: Optional[FreeFunc] = None,
    ) -> None:
        self.hash_func = hash_func
        self.equal_func = equal_func
        self.free_func = free_func
        self._entries = 0
        self._prime_index = 0
        self._table: list[list[Any]] = self._new_table()

    def _new_table(self) -> list[list[Any]]:
        if self._prime_index < len(_PRIMES):
            size = _PRIMES[self._prime_index]
        else:
            size = self._entries * 10
        return [[] for _ in range(size)]

    def _chain_for(self, value: Any) -> list[Any]:
        return self._table[self.hash_func(value) % len(self._table)]

    def _enlarge(self) -> None:
        old_table = self._table
        self._prime_index += 1
        self._table = self._new_table()
        for chain in old_table:
            for value in chain:
                self._chain_for(value).insert(0, value)

    def register_free_function(self, free_func: Optional[FreeFunc]) -> None:
        """Set the function called on values removed from the set."""
        self.free_func = free_func

    def insert(self, value: Any) -> bool:
        """Add a value; return False if an equal value is already present."""
        if (self._entries * 3) // len(self._table) > 0:
            self._enlarge()

        chain = self._chain_for(value)
        if any(self.equal_func(value, existing) for existing in chain):
            return False

        chain.insert(0, value)
        self._entries += 1
        return True

    def remove(self, value: Any) -> bool:
        """Remove a value; return False if it was not in the set."""
        chain = self._chain_for(value)
        for position, existing in enumerate(chain):
            if self.equal_func(value, existing):
                del chain[position]
                self._entries -= 1
                if self.free_func is not None:
                    self.free_func(existing)
                return True
        return False

    def __contains__(self, value: Any) -> bool:
        return any(self.equal_func(value, existing) for existing in self._chain_for(value))

    def __len__(self) -> int:
        return self._entries

    def __iter__(self) -> Iterator[Any]:
        for chain in self._table:
            yield from list(chain)

    def to_list(self) -> list[Any]:
        """Return every value in the set, in iteration order."""
        return list(self)

    def union(self, other: HashSet) -> HashSet:
        """Return a new set holding the values of either set."""
        result = HashSet(self.hash_func, self.equal_func)
        for value in self:
            result.insert(value)
        for value in other:
            if value not in result:
                result.insert(value)
        return result

    def intersection(self, other: HashSet) -> HashSet:
        """Return a new set holding the values found in both sets."""
        result = HashSet(self.hash_func, other.equal_func)
        for value in self:
            if value in other:
                result.insert(value)
        return result
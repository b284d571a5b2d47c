"""Singly linked list of values, with an iterator that can remove entries."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

CompareFunc = Callable[[Any, Any], int]
EqualFunc = Callable[[Any, Any], Any]


class SListEntry:
    """One entry of a singly linked list: a value and a link to the next entry."""

    __slots__ = ("data", "next")

    def __init__(self, data: Any, next: Optional[SListEntry] = None) -> None:
        self.data = data
        self.next = next

    def __repr__(self) -> str:
        return f"SListEntry({self.data!r})"


class SListIterator:
    """Iterator over a list's values that allows removing the current value.

    Removing the value last returned by ``__next__`` keeps the iterator
    valid; iteration continues with the entry that followed it.
    """

    def __init__(self, slist: SinglyLinkedList) -> None:
        self._list = slist
        # The entry whose ``next`` link leads to the current entry, or None
        # when that link is the list's head.
        self._prev: Optional[SListEntry] = None
        self._current: Optional[SListEntry] = None

    def _link(self) -> Optional[SListEntry]:
        if self._prev is None:
            return self._list._head
        return self._prev.next

    def _set_link(self, entry: Optional[SListEntry]) -> None:
        if self._prev is None:
            self._list._head = entry
        else:
            self._prev.next = entry

    def _current_is_live(self) -> bool:
        return self._current is not None and self._current is self._link()

    def has_more(self) -> bool:
        """Return True if another value remains to be read."""
        if not self._current_is_live():
            return self._link() is not None
        return self._current.next is not None

    def __iter__(self) -> SListIterator:
        return self

    def __next__(self) -> Any:
        if not self._current_is_live():
            self._current = self._link()
        else:
            self._prev = self._current
            self._current = self._current.next

        if self._current is None:
            raise StopIteration
        return self._current.data

    def remove(self) -> None:
        """Remove the value last returned; do nothing if there is none."""
        if not self._current_is_live():
            return
        self._set_link(self._current.next)
        self._current = None


class SinglyLinkedList:
    """A list of values linked in one direction."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[SListEntry] = None
        tail: Optional[SListEntry] = None
        for value in values or ():
            entry = SListEntry(value)
            if tail is None:
                self._head = entry
            else:
                tail.next = entry
            tail = entry

    @property
    def head(self) -> Optional[SListEntry]:
        """The first entry, or None if the list is empty."""
        return self._head

    def _entries(self) -> Iterator[SListEntry]:
        entry = self._head
        while entry is not None:
            yield entry
            entry = entry.next

    def prepend(self, data: Any) -> SListEntry:
        """Add a value at the start of the list and return its entry."""
        entry = SListEntry(data, self._head)
        self._head = entry
        return entry

    def append(self, data: Any) -> SListEntry:
        """Add a value at the end of the list and return its entry."""
        entry = SListEntry(data)
        if self._head is None:
            self._head = entry
        else:
            last = self._head
            while last.next is not None:
                last = last.next
            last.next = entry
        return entry

    def nth_entry(self, n: int) -> SListEntry:
        """Return the entry at index ``n``; raise IndexError if out of range."""
        if n >= 0:
            for index, entry in enumerate(self._entries()):
                if index == n:
                    return entry
        raise IndexError(f"list index {n} out of range")

    def nth_data(self, n: int) -> Any:
        """Return the value at index ``n``; raise IndexError if out of range."""
        return self.nth_entry(n).data

    def __len__(self) -> int:
        return sum(1 for _ in self._entries())

    def to_list(self) -> list[Any]:
        """Return the values of the list, in order."""
        return [entry.data for entry in self._entries()]

    def remove_entry(self, entry: Optional[SListEntry]) -> bool:
        """Unlink an entry; return False if it is not in this list."""
        if self._head is None or entry is None:
            return False
        if self._head is entry:
            self._head = entry.next
            return True
        for previous in self._entries():
            if previous.next is entry:
                previous.next = entry.next
                return True
        return False

    def remove_data(self, equal_func: EqualFunc, data: Any) -> int:
        """Remove every value equal to ``data``; return how many were removed."""
        removed = 0
        previous: Optional[SListEntry] = None
        entry = self._head
        while entry is not None:
            following = entry.next
            if equal_func(entry.data, data):
                if previous is None:
                    self._head = following
                else:
                    previous.next = following
                removed += 1
            else:
                previous = entry
            entry = following
        return removed

    def sort(self, compare_func: CompareFunc) -> None:
        """Sort the list in place by ``compare_func`` (negative: first arg goes first).

        The first entry of each run is the pivot; entries comparing less than
        it go before it and all others after it.
        """
        ordered: list[SListEntry] = []
        work: list[tuple[bool, Any]] = [(True, list(self._entries()))]
        while work:
            is_run, item = work.pop()
            if not is_run:
                ordered.append(item)
                continue
            if len(item) < 2:
                ordered.extend(item)
                continue
            pivot, *rest = item
            less: list[SListEntry] = []
            more: list[SListEntry] = []
            for entry in rest:
                (less if compare_func(entry.data, pivot.data) < 0 else more).append(entry)
            less.reverse()
            more.reverse()
            work.append((True, more))
            work.append((False, pivot))
            work.append((True, less))

        self._head = None
        for entry in reversed(ordered):
            entry.next = self._head
            self._head = entry

    def find_data(self, equal_func: EqualFunc, data: Any) -> Optional[SListEntry]:
        """Return the first entry whose value equals ``data``, or None."""
        for entry in self._entries():
            if equal_func(entry.data, data):
                return entry
        return None

    def iterate(self) -> SListIterator:
        """Return an iterator over the values that supports removal."""
        return SListIterator(self)

    def __iter__(self) -> SListIterator:
        return self.iterate()

    def __repr__(self) -> str:
        return f"SinglyLinkedList({self.to_list()!r})"
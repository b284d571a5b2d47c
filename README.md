# calgo

`calgo` provides three classic collection data structures. It needs only
the Python standard library.

- `HashSet` (`calgo.hashset`): an unordered set. It keeps its values in
  chained buckets and finds them with a hash function and an equality
  function. By default these are the built-in `hash` and `operator.eq`.
- `SinglyLinkedList` (`calgo.slist`): a singly linked list. It supports
  prepend and append, access by index, search and removal through a
  callback, and quicksort with a comparison function. Its iterator can
  remove the current entry while it walks the list.
- `Trie` (`calgo.trie`): a mapping from string or byte keys to values.

## Installation

```
pip install calgo
```

To install the test requirements as well:

```
pip install "calgo[test]"
```

## Hash set

```python
from calgo.hashset import HashSet

s = HashSet()            # hash_func=hash, equal_func=operator.eq
s.insert("apple")        # True: the value was added
s.insert("apple")        # False: an equal value was already there
"apple" in s             # True
len(s)                   # 1
s.remove("apple")        # True: the value was found and removed
s.remove("apple")        # False: the value was not in the set

a = HashSet(hash, lambda x, y: x == y)
b = HashSet(hash, lambda x, y: x == y)
for n in (1, 2, 3):
    a.insert(n)
for n in (2, 3, 4):
    b.insert(n)
sorted(a.union(b))          # [1, 2, 3, 4]
sorted(a.intersection(b))   # [2, 3]
```

The equality function must return a true value when its two arguments are
equivalent. You can iterate over a set directly, or call `to_list()` to get
its values in iteration order. The order is not defined.

A free function can be passed as `free_func` to the constructor or set
later with `register_free_function`. `remove` calls it with each value that
it takes out of the set. The sets that `union` and `intersection` return do
not have a free function.

## Singly linked list

```python
from calgo.slist import SinglyLinkedList

lst = SinglyLinkedList([3, 1, 2])
lst.prepend(0)
lst.append(5)
lst.to_list()            # [0, 3, 1, 2, 5]
len(lst)                 # 5
lst.nth_data(1)          # 3
lst.sort(lambda a, b: (a > b) - (a < b))
list(lst)                # [0, 1, 2, 3, 5]

lst.remove_data(lambda a, b: a == b, 2)   # 1: the number of entries removed

it = lst.iterate()
for value in it:
    if value % 2:
        it.remove()      # the iterator stays valid after a removal
lst.to_list()            # [0]
```

`nth_entry`, `prepend`, `append` and `find_data` return an `SListEntry`,
which has `data` and `next` attributes. `nth_entry` and `nth_data` raise
`IndexError` when the index is out of range. `find_data` returns `None` when
no value matches. To unlink an entry, pass it to `remove_entry`, which
returns `False` if the entry is not in the list. The `head` property gives
the first entry, or `None` for an empty list.

An `SListIterator` also has `has_more()`, which tells whether another value
remains to be read.

## Trie

```python
from calgo.trie import Trie

t = Trie()
t.insert("hello", "there")
t.insert("hell", "testing")
t.lookup("hello")        # "there"
t.lookup("help")         # None
len(t)                   # 2
t.remove("hell")         # True
t.remove("hell")         # False: the key is no longer present

t.insert_binary(b"abc\x00\x01\xff", "binary value")
t.lookup_binary(b"abc\x00\x01\xff")   # "binary value"
```

A text key is a `str`, which is encoded as UTF-8, or a `bytes` value. It may
not contain a NUL character; if it does, `ValueError` is raised. The
`*_binary` methods take any bytes-like object, NUL bytes included, and raise
`TypeError` when given a `str`. A text key and the binary key made of its
encoded bytes refer to the same entry.

Inserting a key that is already present replaces its value. `None` cannot be
stored: inserting it raises `ValueError` and leaves the trie unchanged.

## Running the tests

```
pytest
```
import pytest

from calgo.hashset import HashSet


def _nocase_hash(text):
    return hash(text.lower())


def _nocase_equal(a, b):
    return a.lower() == b.lower()


@pytest.fixture
def big_set():
    values = HashSet()
    for i in range(10000):
        values.insert(i)
    return values


def test_empty_set():
    values = HashSet()
    assert len(values) == 0
    assert values.to_list() == []
    assert 1 not in values


def test_insert_and_query():
    values = HashSet()
    assert values.insert("apple") is True
    assert values.insert("pear") is True
    assert len(values) == 2
    assert "apple" in values
    assert "pear" in values
    assert "plum" not in values


def test_duplicate_insert_rejected():
    values = HashSet()
    assert values.insert(42) is True
    assert values.insert(42) is False
    assert len(values) == 1


def test_many_values_survive_enlarging(big_set):
    assert len(big_set) == 10000
    assert all(i in big_set for i in range(10000))
    assert -1 not in big_set
    assert 10000 not in big_set
    assert sorted(big_set) == list(range(10000))


def test_remove(big_set):
    assert big_set.remove(10000) is False
    assert big_set.remove(-5) is False
    for i in range(0, 10000, 2):
        assert big_set.remove(i) is True
    assert len(big_set) == 5000
    assert 4 not in big_set
    assert 5 in big_set
    assert big_set.remove(4) is False


def test_to_list_matches_iteration(big_set):
    as_list = big_set.to_list()
    assert as_list == list(big_set)
    assert len(as_list) == len(big_set)
    assert len(set(as_list)) == len(as_list)


def test_custom_hash_and_equality():
    values = HashSet(_nocase_hash, _nocase_equal)
    assert values.insert("Hello") is True
    assert values.insert("HELLO") is False
    assert "hello" in values
    assert values.remove("hElLo") is True
    assert len(values) == 0


def test_free_function_called_on_remove():
    freed = []
    values = HashSet(free_func=freed.append)
    values.insert("a")
    values.insert("b")
    values.remove("a")
    values.remove("missing")
    assert freed == ["a"]


def test_register_free_function_replaces():
    first, second = [], []
    values = HashSet(free_func=first.append)
    values.insert(1)
    values.insert(2)
    values.register_free_function(second.append)
    values.remove(1)
    values.register_free_function(None)
    values.remove(2)
    assert first == []
    assert second == [1]
    assert len(values) == 0


def test_union():
    left = HashSet()
    right = HashSet()
    for value in (1, 2, 3, 4, 5, 6, 7):
        left.insert(value)
    for value in (5, 6, 7, 8, 9, 10, 11):
        right.insert(value)
    result = left.union(right)
    assert sorted(result) == list(range(1, 12))
    assert len(result) == 11
    assert len(left) == 7
    assert len(right) == 7


def test_intersection():
    left = HashSet()
    right = HashSet()
    for value in (1, 2, 3, 4, 5, 6, 7):
        left.insert(value)
    for value in (5, 6, 7, 8, 9, 10, 11):
        right.insert(value)
    result = left.intersection(right)
    assert sorted(result) == [5, 6, 7]
    assert len(result) == 3


def test_intersection_uses_other_equality():
    exact = HashSet(_nocase_hash)
    nocase = HashSet(_nocase_hash, _nocase_equal)
    exact.insert("Word")
    exact.insert("Other")
    nocase.insert("WORD")
    result = exact.intersection(nocase)
    assert result.to_list() == ["Word"]
    assert "word" in result


def test_union_and_intersection_of_empty_sets():
    empty = HashSet()
    filled = HashSet()
    filled.insert("x")
    assert empty.union(filled).to_list() == ["x"]
    assert len(empty.intersection(filled)) == 0
    assert len(filled.intersection(empty)) == 0


def test_results_do_not_carry_free_function():
    freed = []
    left = HashSet(free_func=freed.append)
    left.insert("k")
    merged = left.union(HashSet())
    merged.remove("k")
    assert freed == []
    assert "k" in left
    assert len(merged) == 0


def test_reinsert_after_remove():
    values = HashSet()
    values.insert("again")
    assert values.remove("again") is True
    assert values.insert("again") is True
    assert values.to_list() == ["again"]
import random

import pytest

from dsakit.linkedlist.unrolled import UnrolledLinkedList

OPERATIONS = ["append", "insert", "pop", "remove", "set"]


def _filled(values, capacity=4):
    lst = UnrolledLinkedList(capacity)
    for value in values:
        lst.append(value)
    return lst


def test_new_with_valid_capacity_is_empty():
    created = UnrolledLinkedList(4)
    assert len(created) == 0
    assert created.is_empty()


def test_new_with_small_capacity_raises():
    with pytest.raises(ValueError):
        UnrolledLinkedList(3)


def test_add():
    lst = _filled([1])
    assert len(lst) == 1
    for value in [2, 3, 4, 5]:
        lst.append(value)
    assert len(lst) == 5
    assert list(lst) == [1, 2, 3, 4, 5]


def test_remove():
    lst = _filled([1, 2, 3, 5, 6, 7, 8])
    outcomes = []
    for value in [2, 4, 7]:
        outcomes.append((lst.remove(value), len(lst)))
    assert outcomes == [(True, 6), (False, 6), (True, 5)]
    assert list(lst) == [1, 3, 5, 6, 8]


@pytest.mark.parametrize("index, expected", [(0, 1), (2, 3)])
def test_get(index, expected):
    assert _filled([1, 2, 3])[index] == expected


@pytest.mark.parametrize("index", [3, -1])
def test_get_out_of_bounds(index):
    lst = _filled([1, 2, 3])
    with pytest.raises(IndexError):
        lst[index]
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_set():
    lst = _filled([1, 2, 3])
    assert lst.set(0, 10) == 1
    assert lst.set(2, 30) == 3
    with pytest.raises(IndexError):
        lst.set(3, 40)
    assert list(lst) == [10, 2, 30]


def test_clear():
    lst = _filled([1, 2, 3, 4, 5])
    lst.clear()
    assert len(lst) == 0
    assert lst.is_empty()
    assert list(lst) == []


@pytest.mark.parametrize("value, expected", [(2, True), (4, False)])
def test_contains(value, expected):
    assert (value in _filled([1, 2, 3])) is expected


def test_insert():
    lst = _filled([1, 3])
    steps = [(1, 2), (3, 4), (4, 5), (5, 6), (6, 7), (7, 8), (8, 9), (3, 20)]
    sizes = []
    for index, value in steps:
        lst.insert(index, value)
        sizes.append(len(lst))
    assert sizes == [3, 4, 5, 6, 7, 8, 9, 10]
    with pytest.raises(IndexError):
        lst.insert(20, 5)
    assert list(lst) == [1, 2, 3, 20, 4, 5, 6, 7, 8, 9]


def test_pop():
    lst = _filled([1, 2, 3])
    assert lst.pop(1) == 2
    assert len(lst) == 2
    with pytest.raises(IndexError):
        lst.pop(2)
    assert len(lst) == 2


def test_search():
    lst = _filled([5, 6, 7, 8, 9, 6])
    assert [lst.search(value) for value in (6, 9, 42)] == [1, 4, -1]


def _random_step(rng, lst, model):
    """Apply one random operation to both lists; return (got, expected)."""
    op = rng.choice(OPERATIONS)
    if not model and op in ("pop", "set"):
        op = "append"
    value = rng.randint(0, 50)
    if op == "append":
        lst.append(value)
        model.append(value)
        return None, None
    if op == "insert":
        index = rng.randint(0, len(model))
        lst.insert(index, value)
        model.insert(index, value)
        return None, None
    if op == "pop":
        index = rng.randrange(len(model))
        return lst.pop(index), model.pop(index)
    if op == "remove":
        expected = value in model
        if expected:
            model.remove(value)
        return lst.remove(value), expected
    index = rng.randrange(len(model))
    expected = model[index]
    model[index] = value
    return lst.set(index, value), expected


def test_matches_builtin_list_under_random_operations():
    rng = random.Random(7)
    lst = UnrolledLinkedList(5)
    model = []
    for _ in range(600):
        got, expected = _random_step(rng, lst, model)
        assert got == expected
        assert len(lst) == len(model)
        assert list(lst) == model
    assert [lst[index] for index in range(len(model))] == model
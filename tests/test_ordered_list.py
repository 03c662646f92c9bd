import random

import pytest

from dsalgo.ordered_list import OrderedList


def test_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        OrderedList(0)


def test_add_keeps_values_sorted():
    values = [5, 3, 8, 1, 3, 9, -2, 5]
    lst = OrderedList(2)
    for value in values:
        lst.add(value)
    assert list(lst) == sorted(values)
    assert len(lst) == len(values)


def test_random_adds_stay_sorted():
    rng = random.Random(7)
    lst = OrderedList(1)
    values = [rng.randrange(-50, 50) for _ in range(200)]
    for value in values:
        lst.add(value)
        contents = list(lst)
        assert contents == sorted(contents)
    assert list(lst) == sorted(values)


def test_get_and_invalid_index():
    lst = OrderedList()
    for value in (30, 10, 20):
        lst.add(value)
    assert [lst.get(i) for i in range(3)] == [10, 20, 30]
    with pytest.raises(IndexError, match="Invalid index: 3"):
        lst.get(3)
    with pytest.raises(IndexError, match="Invalid index: -1"):
        lst.get(-1)


def test_remove_at():
    lst = OrderedList()
    for value in (4, 2, 6):
        lst.add(value)
    lst.remove_at(1)
    assert list(lst) == [2, 6]
    with pytest.raises(IndexError):
        lst.remove_at(2)
    lst.remove_at(0)
    lst.remove_at(0)
    assert list(lst) == []


def test_set_within_neighbours():
    lst = OrderedList()
    for value in (10, 20, 30):
        lst.add(value)
    lst.set(25, 1)
    assert list(lst) == [10, 25, 30]
    lst.set(-100, 0)
    lst.set(1000, 2)
    assert list(lst) == [-100, 25, 1000]


def test_set_out_of_order_raises_and_keeps_contents():
    lst = OrderedList()
    for value in (10, 20, 30):
        lst.add(value)
    with pytest.raises(ValueError, match="Invalid input"):
        lst.set(31, 1)
    with pytest.raises(ValueError, match="Invalid input"):
        lst.set(21, 0)
    with pytest.raises(IndexError):
        lst.set(5, 3)
    assert list(lst) == [10, 20, 30]
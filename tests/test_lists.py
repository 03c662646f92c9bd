import random

import pytest

from dsalgo.lists import ArrayList, DoublyLinkedList, LinkedList


def _list_of(kind, values=()):
    lst = ArrayList(2) if kind is ArrayList else kind()
    for value in values:
        lst.add(value)
    return lst


@pytest.mark.parametrize("capacity", [0, -1])
def test_array_list_rejects_non_positive_capacity(capacity):
    with pytest.raises(ValueError):
        ArrayList(capacity)


@pytest.mark.parametrize("kind", [ArrayList, LinkedList, DoublyLinkedList])
def test_add_and_get(kind):
    values = [3, 1, 4, 1, 5, 9, 2, 6]
    lst = _list_of(kind, values)
    assert len(lst) == len(values)
    assert list(lst) == values
    assert [lst.get(i) for i in range(len(values))] == values


@pytest.mark.parametrize("kind", [ArrayList, LinkedList, DoublyLinkedList])
def test_invalid_indices_raise(kind):
    lst = _list_of(kind, [7])
    attempts = [
        (lambda: lst.get(1), "Invalid index: 1"),
        (lambda: lst.set(0, -1), "Invalid index: -1"),
        (lambda: lst.insert(0, 2), "Invalid index: 2"),
        (lambda: lst.remove_at(1), "Invalid index: 1"),
    ]
    for attempt, message in attempts:
        with pytest.raises(IndexError, match=message):
            attempt()
    assert list(lst) == [7]


@pytest.mark.parametrize("kind", [ArrayList, LinkedList, DoublyLinkedList])
def test_set_replaces_value(kind):
    lst = _list_of(kind, [10, 20, 30])
    lst.set(99, 1)
    assert list(lst) == [10, 99, 30]


@pytest.mark.parametrize("kind", [ArrayList, LinkedList, DoublyLinkedList])
def test_insert_at_front_middle_and_end(kind):
    lst = _list_of(kind)
    for value, index in [(2, 0), (1, 0), (4, 2), (3, 2)]:
        lst.insert(value, index)
    assert list(lst) == [1, 2, 3, 4]


@pytest.mark.parametrize("kind", [ArrayList, LinkedList, DoublyLinkedList])
def test_remove_every_position_down_to_empty(kind):
    lst = _list_of(kind, range(5))
    for index in (4, 0, 1):
        lst.remove_at(index)
    assert list(lst) == [1, 3]
    for _ in range(2):
        lst.remove_at(0)
    assert (len(lst), list(lst)) == (0, [])
    lst.add(8)
    assert list(lst) == [8]


@pytest.mark.parametrize("kind", [ArrayList, LinkedList, DoublyLinkedList])
@pytest.mark.parametrize("count", [0, 1, 2, 5])
def test_reverse(kind, count):
    values = list(range(count))
    lst = _list_of(kind, values)
    lst.reverse()
    assert list(lst) == values[::-1]
    lst.add(100)
    assert list(lst) == values[::-1] + [100]


def test_doubly_linked_reversed_iteration_matches_forward():
    lst = _list_of(DoublyLinkedList, (4, 5, 6))
    lst.insert(3, 0)
    lst.remove_at(3)
    assert list(reversed(lst)) == [5, 4, 3]
    lst.reverse()
    assert list(reversed(lst)) == list(lst)[::-1]


@pytest.mark.parametrize("kind", [ArrayList, LinkedList, DoublyLinkedList])
def test_random_operations_match_builtin_list(kind):
    rng = random.Random(99)
    lst = _list_of(kind)
    reference = []
    for _ in range(300):
        choice = rng.randrange(4)
        value = rng.randrange(1000)
        if choice == 0:
            lst.add(value)
            reference.append(value)
        elif choice == 1:
            index = rng.randrange(len(reference) + 1)
            lst.insert(value, index)
            reference.insert(index, value)
        elif reference:
            index = rng.randrange(len(reference))
            if choice == 2:
                lst.remove_at(index)
                del reference[index]
            else:
                lst.set(value, index)
                reference[index] = value
        assert len(lst) == len(reference)
    assert list(lst) == reference
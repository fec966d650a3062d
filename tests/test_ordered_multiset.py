import pytest

from contestkit.ordered_multiset import OrderedMultiset

VALUES = [5, 1, 3, 3, 9, 1, 3, 7]


def test_iteration_is_sorted():
    ms = OrderedMultiset(VALUES)
    assert list(ms) == sorted(VALUES)
    assert len(ms) == len(VALUES)


def test_reverse_iteration_is_descending():
    ms = OrderedMultiset(VALUES, reverse=True)
    assert list(ms) == sorted(VALUES, reverse=True)


def test_at_and_getitem_follow_order():
    for reverse in (False, True):
        ms = OrderedMultiset(VALUES, reverse=reverse)
        expected = sorted(VALUES, reverse=reverse)
        assert [ms.at(i) for i in range(len(ms))] == expected
        assert ms[-1] == expected[-1]


def test_indices_and_count():
    for reverse in (False, True):
        ms = OrderedMultiset(VALUES, reverse=reverse)
        expected = sorted(VALUES, reverse=reverse)
        for value in set(VALUES):
            first = ms.first_index(value)
            last = ms.last_index(value)
            assert expected[first] == value
            assert expected[last] == value
            assert expected.index(value) == first
            assert last - first + 1 == ms.count(value) == VALUES.count(value)


def test_missing_value():
    ms = OrderedMultiset(VALUES)
    assert 4 not in ms
    assert ms.first_index(4) == -1
    assert ms.last_index(4) == -1
    assert ms.count(4) == 0


def test_order_of_key_counts_elements_before():
    ms = OrderedMultiset(VALUES)
    assert ms.order_of_key(3) == sum(v < 3 for v in VALUES)
    rev = OrderedMultiset(VALUES, reverse=True)
    assert rev.order_of_key(3) == sum(v > 3 for v in VALUES)


def test_erase_removes_one_occurrence():
    ms = OrderedMultiset(VALUES)
    assert ms.erase(3) is True
    assert ms.count(3) == VALUES.count(3) - 1
    assert ms.erase(42) is False
    assert len(ms) == len(VALUES) - 1


def test_insert_and_clear():
    ms = OrderedMultiset()
    for value in VALUES:
        ms.insert(value)
    assert list(ms) == sorted(VALUES)
    ms.clear()
    assert len(ms) == 0
    assert list(ms) == []


def test_index_out_of_range():
    ms = OrderedMultiset([1, 2])
    with pytest.raises(IndexError):
        ms.at(2)
    with pytest.raises(IndexError):
        ms[-3]
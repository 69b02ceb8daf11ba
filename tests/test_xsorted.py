"""
Unit tests for supercollections.util.xsorted module.
"""

from supercollections.util.xsorted import sorted_by_comparator


def test_sorts_by_comparator() -> None:
    assert sorted_by_comparator([3, 1, 2], lambda a, b: a - b) == [1, 2, 3]
    assert sorted_by_comparator([3, 1, 2], lambda a, b: b - a) == [3, 2, 1]


def test_sort_is_stable() -> None:
    items = [(1, 'a'), (0, 'b'), (1, 'c'), (0, 'd')]
    assert sorted_by_comparator(items, lambda x, y: x[0] - y[0]) == [
        (0, 'b'), (0, 'd'), (1, 'a'), (1, 'c'),
    ]


def test_does_not_modify_input() -> None:
    items = [3, 1, 2]
    result = sorted_by_comparator(items, lambda a, b: a - b)
    assert items == [3, 1, 2]
    assert isinstance(result, list)


def test_empty_input() -> None:
    assert sorted_by_comparator([], lambda a, b: 0) == []

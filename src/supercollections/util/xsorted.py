from collections.abc import Callable, Iterable
from functools import cmp_to_key
from sortedcontainers import SortedKeyList
from typing import TypeVar

_E = TypeVar('_E')


def sorted_by_comparator(
        items: Iterable[_E],
        comparator: Callable[[_E, _E], int],
        ) -> list[_E]:
    """
    Returns a new list containing the specified items, ordered by a
    three-way `comparator` that returns a negative number, zero, or a
    positive number when its first argument is less than, equal to, or
    greater than its second argument.
    
    The sort is stable: items that compare equal keep their original
    relative order.
    """
    return list(SortedKeyList(items, key=cmp_to_key(comparator)))

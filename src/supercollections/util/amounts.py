"""
Helpers for the `amount` argument of the first(), last() and random()
family of operations.

Each operation returns a single element (or None) when called without an
amount, and a list when called with one.
"""

from collections.abc import Callable, Sequence
from supercollections.util.xrandom import random_of, randoms_of
from typing import TypeVar

_E = TypeVar('_E')


def checked_amount(amount: int) -> int:
    """
    Raises:
    * TypeError -- if amount is not an int.
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f'Expected an int amount but got {type(amount).__name__}')
    return amount


def last_of(
        array: Sequence[_E],
        amount: int | None,
        first_func: Callable[[int], list[_E]],
        ) -> _E | None | list[_E]:
    """
    Returns the last element of `array`, or the last `amount` elements.
    
    A negative amount is passed on to `first_func` as a positive amount.
    An amount larger than the array gives the whole array.
    """
    if amount is None:
        return array[-1] if len(array) != 0 else None
    if checked_amount(amount) < 0:
        return first_func(-amount)
    if amount == 0:
        return []
    return list(array[-amount:])


def random_from(array: Sequence[_E], amount: int | None) -> _E | None | list[_E]:
    """
    Returns a random element of `array` or None if it is empty,
    or `amount` random elements chosen with replacement.
    """
    if amount is None:
        return random_of(array) if len(array) != 0 else None
    return randoms_of(array, checked_amount(amount))

"""
An insertion-ordered set with a library of convenience operations.
"""

from collections.abc import Callable, Iterable, Iterator, MutableSet, Sequence, Set
from itertools import islice
from supercollections.util.amounts import checked_amount, last_of, random_from
from supercollections.util.cachedview import is_view_current
from supercollections.util.xsorted import sorted_by_comparator
from typing import Generic, overload, TypeVar
from typing_extensions import override, Self

_V = TypeVar('_V')
_T = TypeVar('_T')


class OrderedSet(Generic[_V], MutableSet[_V]):
    """
    Set that remembers the order in which values were first added,
    and offers ordered, random, and functional accessors over its values.
    
    An ordered list view of the values is cached until the set is next
    mutated. See array().
    """
    
    # Optimize per-instance memory use, since there may be very many small sets
    __slots__ = (
        '_dict',
        '_array',
    )
    
    def __init__(self, values: Iterable[_V] | None=None) -> None:
        """
        Raises:
        * TypeError -- if values is not iterable or contains an unhashable value.
        """
        if values is None:
            self._dict = {}  # type: dict[_V, None]
        else:
            try:
                value_iter = iter(values)
            except TypeError:
                raise TypeError(
                    f'Expected an iterable of values but got {type(values).__name__}') from None
            self._dict = dict.fromkeys(value_iter)
        self._array = None  # type: list[_V] | None
    
    @classmethod
    def with_entries(cls, values: Iterable[_V] | None=None) -> Self:
        """
        Creates a set of this class containing the specified values.
        
        All operations that derive a new set from an existing one create it
        with this method.
        """
        return cls(values)
    
    # === Core ===
    
    @override
    def add(self, value: _V) -> Self:  # type: ignore[override]
        """Adds the specified value, placing it last if it is new. Returns this set."""
        self._array = None
        self._dict[value] = None
        return self
    
    def delete(self, value: _V) -> bool:
        """
        Removes the specified value if present.
        
        Returns whether a value was removed.
        """
        self._array = None
        try:
            del self._dict[value]
        except KeyError:
            return False
        else:
            return True
    
    def has(self, value: _V) -> bool:
        return value in self._dict
    
    @override
    def clear(self) -> None:
        self._array = None
        self._dict.clear()
    
    @property
    def size(self) -> int:
        return len(self._dict)
    
    # === Cached Views ===
    
    def array(self) -> Sequence[_V]:
        """
        Returns the values of this set in order.
        
        The returned list is cached and returned again by later calls
        until this set is mutated. It must not be modified by the caller.
        """
        array = self._array
        if array is None or not is_view_current(array, self._dict.keys(), 'array'):
            array = self._array = list(self._dict)
        return array
    
    # === Ordered Access ===
    
    @overload
    def first(self) -> _V | None:
        ...
    @overload
    def first(self, amount: int) -> list[_V]:
        ...
    def first(self, amount: int | None=None):
        """
        Returns the first value, or None if this set is empty.
        
        If `amount` is given, returns a list of up to `amount` first values.
        A negative `amount` returns the last `-amount` values instead.
        """
        if amount is None:
            return next(iter(self._dict), None)
        if checked_amount(amount) < 0:
            return self.last(-amount)
        return list(islice(self._dict, amount))
    
    @overload
    def last(self) -> _V | None:
        ...
    @overload
    def last(self, amount: int) -> list[_V]:
        ...
    def last(self, amount: int | None=None):
        """
        Returns the last value, or None if this set is empty.
        
        If `amount` is given, returns a list of up to `amount` last values.
        A negative `amount` returns the first `-amount` values instead.
        """
        return last_of(self.array(), amount, self.first)
    
    @overload
    def random(self) -> _V | None:
        ...
    @overload
    def random(self, amount: int) -> list[_V]:
        ...
    def random(self, amount: int | None=None):
        """
        Returns a value chosen uniformly at random, or None if this set is empty.
        
        If `amount` is given, returns a list of `amount` values, each chosen
        independently. Values may repeat. An empty set or a negative `amount`
        gives an empty list.
        """
        return random_from(self.array(), amount)
    
    # === Search ===
    
    def find(self, predicate: Callable[[_V], object]) -> _V | None:
        for value in self._dict:
            if predicate(value):
                return value
        return None
    
    def some(self, predicate: Callable[[_V], object]) -> bool:
        return any(predicate(value) for value in self._dict)
    
    def every(self, predicate: Callable[[_V], object]) -> bool:
        return all(predicate(value) for value in self._dict)
    
    # === Transforms ===
    
    def sweep(self, predicate: Callable[[_V], object]) -> int:
        """
        Removes every value matching the predicate.
        
        Returns the number of removed values.
        """
        doomed_values = [value for value in self._dict if predicate(value)]
        for value in doomed_values:
            self.delete(value)
        return len(doomed_values)
    
    def filter(self, predicate: Callable[[_V], object]) -> Self:
        return self.with_entries(value for value in self._dict if predicate(value))
    
    def partition(self, predicate: Callable[[_V], object]) -> tuple[Self, Self]:
        """
        Returns a pair of new sets: the values matching the predicate
        and the values not matching it, each in order.
        """
        passed = self.with_entries()
        failed = self.with_entries()
        for value in self._dict:
            if predicate(value):
                passed._dict[value] = None
            else:
                failed._dict[value] = None
        return (passed, failed)
    
    def map(self, fn: Callable[[_V], _T]) -> 'OrderedSet[_T]':
        """
        Returns a new set of `fn(value)` for each value in order.
        
        Values that map to an equal result collapse into one,
        at the position of the first of them.
        """
        return self.with_entries(fn(value) for value in self._dict)  # type: ignore[arg-type, return-value]
    
    def reduce(self, fn: Callable[[_T, _V], _T], initial: _T) -> _T:
        result = initial
        for value in self._dict:
            result = fn(result, value)
        return result
    
    def each(self, fn: Callable[[_V], object]) -> Self:
        """Calls `fn(value)` for each value in order. Returns this set."""
        for value in self._dict:
            fn(value)
        return self
    
    for_each = each
    
    def tap(self, fn: Callable[[Self], object]) -> Self:
        fn(self)
        return self
    
    def sort(self, comparator: Callable[[_V, _V], int]) -> Self:
        """
        Reorders the values of this set in place and returns this set.
        
        Values that compare equal keep their relative order.
        """
        values = sorted_by_comparator(self._dict, comparator)
        self.clear()
        self._dict.update(dict.fromkeys(values))
        return self
    
    # === Combination ===
    
    def intersect(self, other: Iterable[_V]) -> Self:
        """
        Returns a new set with the values of `other` that are also in this set,
        in the order of `other`.
        """
        return self.with_entries(value for value in other if value in self._dict)
    
    def clone(self) -> Self:
        """Returns a shallow copy of this set."""
        return self.with_entries(self._dict)
    
    def concat(self, *others: Iterable[_V]) -> Self:
        """
        Returns a new set with the values of this set followed by the new
        values of each of `others`, in argument order. No source set is modified.
        """
        result = self.clone()
        for other in others:
            for value in other:
                result.add(value)
        return result
    
    def equals(self, other: Set[_V]) -> bool:
        """Returns whether `other` contains exactly the values of this set, in any order."""
        if other is self:
            return True
        if len(other) != len(self._dict):
            return False
        for value in self._dict:
            if value not in other:
                return False
        return True
    
    # === MutableSet ===
    
    @override
    def discard(self, value: _V) -> None:
        self.delete(value)
    
    @override
    def __contains__(self, value: object) -> bool:
        return value in self._dict
    
    @override
    def __iter__(self) -> Iterator[_V]:
        return iter(self._dict)
    
    def __reversed__(self) -> Iterator[_V]:
        return reversed(self._dict)
    
    @override
    def __len__(self) -> int:
        return len(self._dict)
    
    @override
    def pop(self) -> _V:
        """
        Removes and returns the last value.
        
        Raises:
        * KeyError -- if this set is empty.
        """
        if len(self._dict) == 0:
            raise KeyError('pop(): set is empty')
        self._array = None
        (value, _) = self._dict.popitem()
        return value
    
    def __copy__(self) -> Self:
        return self.clone()
    
    def __repr__(self) -> str:
        if len(self._dict) == 0:
            return f'{type(self).__name__}()'
        return f'{type(self).__name__}({list(self._dict)!r})'

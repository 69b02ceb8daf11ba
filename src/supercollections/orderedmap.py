"""
An insertion-ordered mapping with a library of convenience operations on top
of the built-in `dict`.
"""

from collections.abc import (
    Callable, ItemsView, Iterable, Iterator, KeysView, Mapping, MutableMapping,
    Sequence, ValuesView,
)
from itertools import islice
from supercollections.util.amounts import checked_amount, last_of, random_from
from supercollections.util.cachedview import is_view_current
from supercollections.util.xsorted import sorted_by_comparator
from typing import Generic, overload, TypeVar, Union
from typing_extensions import override, Self

_K = TypeVar('_K')
_V = TypeVar('_V')
_T = TypeVar('_T')

_Entries = Union[Mapping[_K, _V], Iterable[tuple[_K, _V]], None]


class OrderedMap(Generic[_K, _V], MutableMapping[_K, _V]):
    """
    Mapping that remembers the order in which keys were first inserted,
    and offers ordered, random, and functional accessors over its entries.
    
    Ordered list views of the values and keys are cached until the map is
    next mutated. See array() and key_array().
    
    Callbacks passed to find(), filter(), map() and friends are called
    as `fn(value, key)`.
    """
    
    # Optimize per-instance memory use, since there may be very many small maps
    __slots__ = (
        '_dict',
        '_array',
        '_key_array',
    )
    
    def __init__(self, entries: '_Entries[_K, _V]'=None) -> None:
        """
        Arguments:
        * entries -- a Mapping, or an iterable of (key, value) pairs, or None.
        
        Raises:
        * TypeError -- if entries is not iterable.
        * InvalidEntryError -- if an item of entries is not a (key, value) pair.
        """
        self._dict = dict(_pairs_from(entries))  # type: dict[_K, _V]
        self._array = None  # type: list[_V] | None
        self._key_array = None  # type: list[_K] | None
    
    @classmethod
    def with_entries(cls, entries: '_Entries[_K, _V]'=None) -> Self:
        """
        Creates a map of this class containing the specified entries.
        
        All operations that derive a new map from an existing one create it
        with this method, so subclasses only need to override it if their
        constructor has a different signature.
        """
        return cls(entries)
    
    # === Core ===
    
    @override
    def get(self, key: _K, default: _V | None=None) -> _V | None:  # type: ignore[override]
        return self._dict.get(key, default)
    
    def set(self, key: _K, value: _V) -> Self:
        """
        Sets the value for the specified key.
        
        An existing key keeps its position. A new key is placed last.
        """
        self._invalidate()
        self._dict[key] = value
        return self
    
    def delete(self, key: _K) -> bool:
        """
        Removes the specified key if present.
        
        Returns whether an entry was removed.
        """
        self._invalidate()
        try:
            del self._dict[key]
        except KeyError:
            return False
        else:
            return True
    
    def has(self, key: _K) -> bool:
        return key in self._dict
    
    @override
    def clear(self) -> None:
        self._invalidate()
        self._dict.clear()
    
    @property
    def size(self) -> int:
        return len(self._dict)
    
    def _invalidate(self) -> None:
        self._array = None
        self._key_array = None
    
    # === Cached Views ===
    
    def array(self) -> Sequence[_V]:
        """
        Returns the values of this map in order.
        
        The returned list is cached and returned again by later calls
        until this map is mutated. It must not be modified by the caller.
        """
        array = self._array
        if array is None or not is_view_current(array, self._dict.values(), 'array'):
            array = self._array = list(self._dict.values())
        return array
    
    def key_array(self) -> Sequence[_K]:
        """
        Returns the keys of this map in order.
        
        The returned list is cached and returned again by later calls
        until this map is mutated. It must not be modified by the caller.
        """
        key_array = self._key_array
        if key_array is None or not is_view_current(key_array, self._dict.keys(), 'key_array'):
            key_array = self._key_array = list(self._dict.keys())
        return key_array
    
    # === Ordered Access ===
    
    @overload
    def first(self) -> _V | None:
        ...
    @overload
    def first(self, amount: int) -> list[_V]:
        ...
    def first(self, amount: int | None=None):
        """
        Returns the first value, or None if this map is empty.
        
        If `amount` is given, returns a list of up to `amount` first values.
        A negative `amount` returns the last `-amount` values instead.
        """
        if amount is None:
            return next(iter(self._dict.values()), None)
        if checked_amount(amount) < 0:
            return self.last(-amount)
        return list(islice(self._dict.values(), amount))
    
    @overload
    def first_key(self) -> _K | None:
        ...
    @overload
    def first_key(self, amount: int) -> list[_K]:
        ...
    def first_key(self, amount: int | None=None):
        if amount is None:
            return next(iter(self._dict), None)
        if checked_amount(amount) < 0:
            return self.last_key(-amount)
        return list(islice(self._dict, amount))
    
    @overload
    def last(self) -> _V | None:
        ...
    @overload
    def last(self, amount: int) -> list[_V]:
        ...
    def last(self, amount: int | None=None):
        """
        Returns the last value, or None if this map is empty.
        
        If `amount` is given, returns a list of up to `amount` last values.
        A negative `amount` returns the first `-amount` values instead.
        """
        return last_of(self.array(), amount, self.first)
    
    @overload
    def last_key(self) -> _K | None:
        ...
    @overload
    def last_key(self, amount: int) -> list[_K]:
        ...
    def last_key(self, amount: int | None=None):
        return last_of(self.key_array(), amount, self.first_key)
    
    # === Random Access ===
    
    @overload
    def random(self) -> _V | None:
        ...
    @overload
    def random(self, amount: int) -> list[_V]:
        ...
    def random(self, amount: int | None=None):
        """
        Returns a value chosen uniformly at random, or None if this map is empty.
        
        If `amount` is given, returns a list of `amount` values, each chosen
        independently. Values may repeat. An empty map or a negative `amount`
        gives an empty list.
        """
        return random_from(self.array(), amount)
    
    @overload
    def random_key(self) -> _K | None:
        ...
    @overload
    def random_key(self, amount: int) -> list[_K]:
        ...
    def random_key(self, amount: int | None=None):
        return random_from(self.key_array(), amount)
    
    # === Search ===
    
    def find(self, predicate: Callable[[_V, _K], object]) -> _V | None:
        for (key, value) in self._dict.items():
            if predicate(value, key):
                return value
        return None
    
    def find_key(self, predicate: Callable[[_V, _K], object]) -> _K | None:
        for (key, value) in self._dict.items():
            if predicate(value, key):
                return key
        return None
    
    def some(self, predicate: Callable[[_V, _K], object]) -> bool:
        return any(predicate(value, key) for (key, value) in self._dict.items())
    
    def every(self, predicate: Callable[[_V, _K], object]) -> bool:
        return all(predicate(value, key) for (key, value) in self._dict.items())
    
    # === Transforms ===
    
    def sweep(self, predicate: Callable[[_V, _K], object]) -> int:
        """
        Removes every entry matching the predicate.
        
        Returns the number of removed entries.
        """
        doomed_keys = [key for (key, value) in self._dict.items() if predicate(value, key)]
        for key in doomed_keys:
            self.delete(key)
        return len(doomed_keys)
    
    def filter(self, predicate: Callable[[_V, _K], object]) -> Self:
        """Returns a new map with the entries matching the predicate, in order."""
        return self.with_entries(
            (key, value) for (key, value) in self._dict.items() if predicate(value, key))
    
    def partition(self, predicate: Callable[[_V, _K], object]) -> tuple[Self, Self]:
        """
        Returns a pair of new maps: the entries matching the predicate
        and the entries not matching it, each in order.
        """
        passed = self.with_entries()
        failed = self.with_entries()
        for (key, value) in self._dict.items():
            if predicate(value, key):
                passed._dict[key] = value
            else:
                failed._dict[key] = value
        return (passed, failed)
    
    def map(self, fn: Callable[[_V, _K], _T]) -> 'OrderedMap[_K, _T]':
        """
        Returns a new map with the same keys in the same order,
        where each value is replaced by `fn(value, key)`.
        """
        return self.with_entries(  # type: ignore[arg-type, return-value]
            (key, fn(value, key)) for (key, value) in self._dict.items())
    
    def reduce(self, fn: Callable[[_T, _V, _K], _T], initial: _T) -> _T:
        result = initial
        for (key, value) in self._dict.items():
            result = fn(result, value, key)
        return result
    
    def each(self, fn: Callable[[_V, _K], object]) -> Self:
        """Calls `fn(value, key)` for each entry in order. Returns this map."""
        for (key, value) in self._dict.items():
            fn(value, key)
        return self
    
    for_each = each
    
    def tap(self, fn: Callable[[Self], object]) -> Self:
        """Calls `fn(self)`. Returns this map."""
        fn(self)
        return self
    
    def sort(self, comparator: Callable[[_V, _V, _K, _K], int]) -> Self:
        """
        Reorders the entries of this map in place and returns this map.
        
        `comparator(first_value, second_value, first_key, second_key)` returns
        a negative number, zero, or a positive number. Entries that compare
        equal keep their relative order.
        """
        entries = sorted_by_comparator(
            self._dict.items(),
            lambda a, b: comparator(a[1], b[1], a[0], b[0]))
        self.clear()
        self._dict.update(entries)
        return self
    
    # === Combination ===
    
    def intersect(self, other: Mapping[_K, _V]) -> Self:
        """
        Returns a new map with the entries of `other` whose keys are also
        in this map, with the values and order of `other`.
        """
        return self.with_entries(
            (key, value) for (key, value) in other.items() if key in self._dict)
    
    def clone(self) -> Self:
        """Returns a shallow copy of this map."""
        return self.with_entries(self._dict.items())
    
    def concat(self, *others: Mapping[_K, _V]) -> Self:
        """
        Returns a new map with the entries of this map followed by the
        entries of each of `others`, in argument order. On a key collision
        the value from the later map wins. No source map is modified.
        """
        result = self.clone()
        for other in others:
            for (key, value) in other.items():
                result.set(key, value)
        return result
    
    def equals(self, other: Mapping[_K, _V]) -> bool:
        """
        Returns whether `other` has the same keys as this map, each with
        an equal value. Order is not compared.
        """
        if other is self:
            return True
        if len(other) != len(self._dict):
            return False
        for (key, value) in self._dict.items():
            if key not in other:
                return False
            other_value = other[key]
            if other_value is not value and other_value != value:
                return False
        return True
    
    # === MutableMapping ===
    
    @override
    def __getitem__(self, key: _K) -> _V:
        return self._dict[key]
    
    @override
    def __setitem__(self, key: _K, value: _V) -> None:
        self.set(key, value)
    
    @override
    def __delitem__(self, key: _K) -> None:
        if not self.delete(key):
            raise KeyError(key)
    
    @override
    def __contains__(self, key: object) -> bool:
        return key in self._dict
    
    @override
    def __iter__(self) -> Iterator[_K]:
        return iter(self._dict)
    
    def __reversed__(self) -> Iterator[_K]:
        return reversed(self._dict)
    
    @override
    def __len__(self) -> int:
        return len(self._dict)
    
    @override
    def keys(self) -> KeysView[_K]:
        return self._dict.keys()
    
    @override
    def values(self) -> ValuesView[_V]:
        return self._dict.values()
    
    @override
    def items(self) -> ItemsView[_K, _V]:
        return self._dict.items()
    
    @override
    def popitem(self, last: bool=True) -> tuple[_K, _V]:
        """
        Removes and returns the last (key, value) pair,
        or the first pair if `last` is False.
        
        Raises:
        * KeyError -- if this map is empty.
        """
        if len(self._dict) == 0:
            raise KeyError('popitem(): map is empty')
        key = next(reversed(self._dict)) if last else next(iter(self._dict))
        self._invalidate()
        return (key, self._dict.pop(key))
    
    def __copy__(self) -> Self:
        return self.clone()
    
    def __repr__(self) -> str:
        if len(self._dict) == 0:
            return f'{type(self).__name__}()'
        return f'{type(self).__name__}({list(self._dict.items())!r})'


class InvalidEntryError(TypeError):
    """An entry used to build an OrderedMap is not a (key, value) pair."""
    def __init__(self, index: int, entry: object) -> None:
        super().__init__(f'Entry #{index} is not a (key, value) pair: {entry!r}')
        self.index = index
        self.entry = entry


# ------------------------------------------------------------------------------
# Utility

def _pairs_from(entries: '_Entries[_K, _V]') -> Iterator[tuple[_K, _V]]:
    if entries is None:
        return
    if isinstance(entries, Mapping):
        yield from entries.items()
        return
    try:
        entry_iter = iter(entries)
    except TypeError:
        raise TypeError(
            f'Expected a mapping or an iterable of (key, value) pairs '
            f'but got {type(entries).__name__}') from None
    for (index, entry) in enumerate(entry_iter):
        try:
            (key, value) = entry
        except (TypeError, ValueError):
            raise InvalidEntryError(index, entry) from None
        yield (key, value)


# ------------------------------------------------------------------------------

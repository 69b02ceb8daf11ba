"""
Ordered collections with a library of convenience operations on top of the
built-in `dict`:

* OrderedMap -- an insertion-ordered key-value mapping.
* OrderedSet -- an insertion-ordered set of unique values.
"""

from supercollections.orderedmap import InvalidEntryError, OrderedMap
from supercollections.orderedset import OrderedSet

__all__ = ['InvalidEntryError', 'OrderedMap', 'OrderedSet']

# NOTE: Also update pyproject.toml when changing the version
__version__ = '1.0.0'

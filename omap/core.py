# -----------------------------------------------------------------------------
# OrderedMap is an insertion ordered mapping (using collections.OrderedDict
# for storage) that adds positional access, searching, transformation,
# aggregation and sorting functions on top of the standard mapping interface.
# ------------------------------------------------------------------------------

from __future__ import annotations

import itertools
import logging
import sys
from collections import OrderedDict, abc
from typing import (Any, Callable, Iterable, Iterator, List, Mapping, MutableMapping,
                    Optional, Tuple, TypeVar, Union, overload)

if sys.version_info < (3, 11):
    from typing_extensions import Self
else:
    from typing import Self

from .util.tools import Comparator, sort_entries
from .util.tools import default_sort as _default_sort

__all__ = [
    'OrderedMap',
    'OMapError',
    'EmptyReduceError',
    'AbsentType',
    'ABSENT',
    ]

#------------------------------------------------------------------------------
# Global
#------------------------------------------------------------------------------

g_logger = logging.getLogger(__name__)

_K = TypeVar("_K")
_V = TypeVar("_V")
_T = TypeVar("_T")

_Entries = Union[Mapping[_K, _V], Iterable[Tuple[_K, _V]]]

#------------------------------------------------------------------------------
# Errors
#------------------------------------------------------------------------------

class OMapError(Exception):
    """Base class for all OrderedMap errors."""
    pass

class EmptyReduceError(OMapError, TypeError):
    """Raised when reducing an empty OrderedMap without an initial value."""
    pass

#------------------------------------------------------------------------------
# The value returned when there is nothing to return. None can be a legitimate
# stored value so a separate singleton is used.
#------------------------------------------------------------------------------

class AbsentType(object):
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "ABSENT"

    def __reduce__(self):
        return (AbsentType, ())

ABSENT = AbsentType()

# Marks that no initial value was passed to reduce()
_NOINIT = object()

#------------------------------------------------------------------------------
# OrderedMap
#------------------------------------------------------------------------------

class OrderedMap(MutableMapping[_K, _V]):
    """An insertion ordered mapping with array-like convenience functions.

    ``OrderedMap`` behaves like a ``dict`` (it is a ``MutableMapping``) and
    preserves the order in which keys were first inserted. Re-setting an
    existing key updates the value without changing its position. On top of
    the mapping interface it provides positional access (``first``, ``last``),
    searching (``find``, ``find_key``), transformation (``filter``, ``map``,
    ``map_values``, ``flat_map``, ``concat``), aggregation (``some``,
    ``every``, ``reduce``) and sorting (``sort``, ``sorted``).

    Functions that build a new map call a factory to create an empty map of
    the same kind. By default this is the ``empty()`` classmethod, so a
    sub-class with a different constructor signature should either override
    ``empty()`` or pass a ``factory`` to the constructor. Maps created this way
    inherit the factory of the map they were derived from.

    Callbacks are passed ``(value, key, omap)``. Modifying the map from within
    a callback while it is being iterated is not supported and will raise a
    ``RuntimeError``. The map is not thread-safe.

    Args:
      entries: an optional mapping or iterable of ``(key, value)`` pairs. For
         duplicate keys the last value wins but the first position is kept.
      factory: an optional zero-argument callable returning an empty
         ``OrderedMap``.

    """

    default_sort = staticmethod(_default_sort)

    def __init__(self, entries: Optional[_Entries] = None, *,
                 factory: Optional[Callable[[], 'OrderedMap']] = None) -> None:
        self._dict: 'OrderedDict[_K, _V]' = OrderedDict()
        self._factory = factory
        if entries is not None: self.update(entries)

    @classmethod
    def empty(cls) -> 'OrderedMap':
        """Return a new empty map of this kind."""
        return cls()

    # Create an empty map of the same kind as this map
    def _make(self) -> Any:
        factory = self._factory if self._factory is not None else self.empty
        tmp = factory()
        if not isinstance(tmp, OrderedMap):
            raise TypeError(("The OrderedMap factory {} returned {} which is not "
                             "an OrderedMap").format(factory, tmp))
        tmp._factory = self._factory
        return tmp

    #--------------------------------------------------------------------------
    # Mapping interface
    #--------------------------------------------------------------------------

    def __getitem__(self, key: _K) -> _V:
        return self._dict[key]

    def __setitem__(self, key: _K, value: _V) -> None:
        self._dict[key] = value

    def __delitem__(self, key: _K) -> None:
        del self._dict[key]

    def __contains__(self, key: object) -> bool:
        return key in self._dict

    def __iter__(self) -> Iterator[_K]:
        return iter(self._dict)

    def __reversed__(self) -> Iterator[_K]:
        return reversed(self._dict)

    def __len__(self) -> int:
        return len(self._dict)

    def __bool__(self) -> bool:
        return bool(self._dict)

    def keys(self):
        return self._dict.keys()

    def values(self):
        return self._dict.values()

    def items(self):
        return self._dict.items()

    def entries(self):
        """Return a view of the ``(key, value)`` pairs (same as ``items()``)."""
        return self._dict.items()

    def clear(self) -> None:
        self._dict.clear()

    def popitem(self, last: bool = True) -> Tuple[_K, _V]:
        """Remove and return the newest pair (or the oldest if ``last`` is False)."""
        return self._dict.popitem(last)

    def set(self, key: _K, value: _V) -> Self:
        """Set the value for a key and return the map."""
        self[key] = value
        return self

    def has(self, key: _K) -> bool:
        return key in self._dict

    def delete(self, key: _K) -> bool:
        """Remove a key. Returns True if the key was present."""
        if key not in self._dict: return False
        del self[key]
        return True

    @property
    def size(self) -> int:
        """The number of pairs in the map."""
        return len(self._dict)

    #--------------------------------------------------------------------------
    # Key checks
    #--------------------------------------------------------------------------

    def has_all(self, *keys: _K) -> bool:
        """Return True if every key is in the map (True if no keys are given)."""
        return all(key in self._dict for key in keys)

    def has_any(self, *keys: _K) -> bool:
        """Return True if at least one key is in the map (False if no keys are given)."""
        return any(key in self._dict for key in keys)

    #--------------------------------------------------------------------------
    # Positional access. A negative amount takes from the other end.
    #--------------------------------------------------------------------------

    @overload
    def first(self) -> Union[_V, AbsentType]: ...

    @overload
    def first(self, amount: int) -> List[_V]: ...

    def first(self, amount=None):
        """Return the first value, or a list of the first ``amount`` values.

        With no argument returns ``ABSENT`` if the map is empty. A negative
        ``amount`` returns ``last(-amount)``.

        """
        if amount is None: return next(iter(self._dict.values()), ABSENT)
        if amount < 0: return self.last(-amount)
        return list(itertools.islice(self._dict.values(), amount))

    @overload
    def first_key(self) -> Union[_K, AbsentType]: ...

    @overload
    def first_key(self, amount: int) -> List[_K]: ...

    def first_key(self, amount=None):
        """Return the first key, or a list of the first ``amount`` keys."""
        if amount is None: return next(iter(self._dict), ABSENT)
        if amount < 0: return self.last_key(-amount)
        return list(itertools.islice(self._dict, amount))

    @overload
    def last(self) -> Union[_V, AbsentType]: ...

    @overload
    def last(self, amount: int) -> List[_V]: ...

    def last(self, amount=None):
        """Return the last value, or a list of the last ``amount`` values.

        The list keeps insertion order (oldest to newest). A negative
        ``amount`` returns ``first(-amount)``.

        """
        if amount is None: return next(reversed(self._dict.values()), ABSENT)
        if amount < 0: return self.first(-amount)
        if not amount: return []
        return list(self._dict.values())[-amount:]

    @overload
    def last_key(self) -> Union[_K, AbsentType]: ...

    @overload
    def last_key(self, amount: int) -> List[_K]: ...

    def last_key(self, amount=None):
        """Return the last key, or a list of the last ``amount`` keys."""
        if amount is None: return next(reversed(self._dict), ABSENT)
        if amount < 0: return self.first_key(-amount)
        if not amount: return []
        return list(self._dict)[-amount:]

    #--------------------------------------------------------------------------
    # Searching
    #--------------------------------------------------------------------------

    def find(self, predicate: Callable[[_V, _K, Self], Any]) -> Union[_V, AbsentType]:
        """Return the first value for which ``predicate`` is true, or ``ABSENT``.

        To look up a value by key use ``get()`` instead.

        """
        for key, value in self._dict.items():
            if predicate(value, key, self): return value
        return ABSENT

    def find_key(self, predicate: Callable[[_V, _K, Self], Any]) -> Union[_K, AbsentType]:
        """Return the first key for which ``predicate`` is true, or ``ABSENT``."""
        for key, value in self._dict.items():
            if predicate(value, key, self): return key
        return ABSENT

    def some(self, predicate: Callable[[_V, _K, Self], Any]) -> bool:
        for key, value in self._dict.items():
            if predicate(value, key, self): return True
        return False

    def every(self, predicate: Callable[[_V, _K, Self], Any]) -> bool:
        for key, value in self._dict.items():
            if not predicate(value, key, self): return False
        return True

    #--------------------------------------------------------------------------
    # In-place modification. These return the map so calls can be chained.
    #--------------------------------------------------------------------------

    def update_value(self, key: _K, fn: Callable[[_V, _K, Self], _V]) -> Self:
        """Replace the value of ``key`` with ``fn(value, key, omap)``.

        Does nothing if the key is not in the map. The key keeps its position.

        """
        if key in self._dict:
            self[key] = fn(self._dict[key], key, self)
        return self

    def each(self, fn: Callable[[_V, _K, Self], Any]) -> Self:
        """Call ``fn(value, key, omap)`` for every pair and return the map."""
        for key, value in self._dict.items():
            fn(value, key, self)
        return self

    def reverse(self) -> Self:
        """Reverse the order of the map in place."""
        for key in list(self._dict):
            self._dict.move_to_end(key, last=False)
        g_logger.debug("Reversed %s of size %d", type(self).__name__, len(self._dict))
        return self

    def sort(self, compare: Comparator = _default_sort) -> Self:
        """Sort the map in place.

        ``compare(value_a, value_b, key_a, key_b)`` returns a negative number,
        zero or a positive number. The sort is stable. The default orders by
        the natural ordering of the values. If ``compare`` raises an exception
        the map is left unchanged.

        """
        entries = sort_entries(self._dict.items(), compare)
        for key, _ in entries:
            self._dict.move_to_end(key)
        g_logger.debug("Sorted %s of size %d", type(self).__name__, len(self._dict))
        return self

    #--------------------------------------------------------------------------
    # Functions that return a new map (or a list). The map itself is never
    # modified.
    #--------------------------------------------------------------------------

    def clone(self) -> Self:
        """Return a shallow copy of the map."""
        tmp = self._make()
        tmp.update(self._dict)
        return tmp

    def copy(self) -> Self:
        return self.clone()

    def sorted(self, compare: Comparator = _default_sort) -> Self:
        """Return a sorted copy of the map (see ``sort()``)."""
        return self.clone().sort(compare)

    def filter(self, predicate: Callable[[_V, _K, Self], Any]) -> Self:
        """Return a new map of the pairs for which ``predicate`` is true."""
        tmp = self._make()
        for key, value in self._dict.items():
            if predicate(value, key, self): tmp[key] = value
        return tmp

    def map(self, fn: Callable[[_V, _K, Self], _T]) -> List[_T]:
        """Return a list of ``fn(value, key, omap)`` for every pair."""
        return [fn(value, key, self) for key, value in self._dict.items()]

    def map_values(self, fn: Callable[[_V, _K, Self], _T]) -> 'OrderedMap[_K, _T]':
        """Return a new map with the same keys and the values replaced by ``fn``."""
        tmp = self._make()
        for key, value in self._dict.items():
            tmp[key] = fn(value, key, self)
        return tmp

    def flat_map(self, fn: Callable[[_V, _K, Self], _Entries]) -> 'OrderedMap[Any, Any]':
        """Map every pair to a map and join the results with ``concat()``.

        Where the maps share a key the later map wins.

        """
        return self._make().concat(*self.map(fn))

    def concat(self, *others: _Entries) -> Self:
        """Return a new map that combines this map with the others.

        Each of the other maps is overlaid in turn: new keys are appended and
        existing keys are given the new value but keep their position.

        """
        tmp = self.clone()
        for other in others: tmp.update(other)
        return tmp

    def reduce(self, fn: Callable[[Any, _V, _K, Self], Any], initial: Any = _NOINIT) -> Any:
        """Fold the values from first to last using ``fn(acc, value, key, omap)``.

        If no ``initial`` value is given then the first value is used and the
        fold starts with the second pair.

        Raises:
          EmptyReduceError: the map is empty and there is no initial value.

        """
        items = iter(self._dict.items())
        if initial is _NOINIT:
            try:
                _, accumulator = next(items)
            except StopIteration:
                raise EmptyReduceError(("Reduce of empty {} with no initial "
                                        "value").format(type(self).__name__)) from None
        else:
            accumulator = initial
        for key, value in items:
            accumulator = fn(accumulator, value, key, self)
        return accumulator

    #--------------------------------------------------------------------------
    # Special functions
    #--------------------------------------------------------------------------

    def __eq__(self, other):
        """Order matters when comparing to another OrderedMap but not a dict."""
        if isinstance(other, OrderedMap):
            return self._dict == other._dict
        if isinstance(other, dict):
            return dict(self._dict) == other
        return NotImplemented

    __hash__ = None  # type: ignore

    def __or__(self, other):
        if not isinstance(other, abc.Mapping): return NotImplemented
        return self.concat(other)

    def __ior__(self, other):
        self.update(other)
        return self

    #--------------------------------------------------------------------------
    # String representation
    #--------------------------------------------------------------------------

    def __str__(self):
        return "{" + ", ".join(["{!r}: {!r}".format(k, v)
                                for k, v in self._dict.items()]) + "}"

    def __repr__(self):
        if not self: return "{}()".format(type(self).__name__)
        return "{}({})".format(type(self).__name__, self.__str__())

#------------------------------------------------------------------------------
# main
#------------------------------------------------------------------------------
if __name__ == "__main__":
    raise RuntimeError('Cannot run modules')

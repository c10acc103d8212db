# -----------------------------------------------------------------------------
# Some generic ordering helpers used by the OrderedMap sort functions
# ------------------------------------------------------------------------------

import functools
from typing import Any, Callable, Iterable, List, Tuple, TypeVar

__all__ = [
    'default_sort',
    'sort_entries',
    ]

_K = TypeVar("_K")
_V = TypeVar("_V")

Comparator = Callable[[Any, Any, Any, Any], Any]

# ------------------------------------------------------------------------------
# Natural ordering of two values. Returns 0 for equal elements and otherwise
# -1/1. Only requires the '>' and '==' operators so it works for numbers,
# strings, tuples and anything else with a consistent ordering.
# ------------------------------------------------------------------------------
def default_sort(first_value: Any, second_value: Any, *args: Any) -> int:
    if first_value > second_value: return 1
    if first_value == second_value: return 0
    return -1


# ------------------------------------------------------------------------------
# Stable sort of (key, value) pairs using a comparator that is passed the two
# values followed by the two keys. Returns a new list.
# ------------------------------------------------------------------------------
def sort_entries(entries: Iterable[Tuple[_K, _V]],
                 compare: Comparator = default_sort) -> List[Tuple[_K, _V]]:
    def _cmp(a, b):
        return compare(a[1], b[1], a[0], b[0])
    return sorted(entries, key=functools.cmp_to_key(_cmp))


#------------------------------------------------------------------------------
# main
#------------------------------------------------------------------------------
if __name__ == "__main__":
    raise RuntimeError('Cannot run modules')

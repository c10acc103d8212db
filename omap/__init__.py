# -----------------------------------------------------------------------------
# OMap: an insertion ordered mapping with array-like convenience functions.
# -----------------------------------------------------------------------------

from .core import *

__version__ = '1.0.0'

__all__ = [
    'OrderedMap',
    'OMapError',
    'EmptyReduceError',
    'AbsentType',
    'ABSENT',
    ]

from .tools import default_sort, sort_entries

__all__ = [
    'default_sort',
    'sort_entries',
    ]

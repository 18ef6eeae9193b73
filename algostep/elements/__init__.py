from .validation import as_value_list, is_sorted, NOT_AN_ARRAY, EMPTY_ARRAY
from .indexed_array import IndexedArray, prepare

__all__ = [
    "as_value_list",
    "is_sorted",
    "NOT_AN_ARRAY",
    "EMPTY_ARRAY",
    "IndexedArray",
    "prepare",
]

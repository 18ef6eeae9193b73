"""Search producers.

Searches that need sorted input read a sorted view of the caller's array and
report every position in terms of the caller's array.
"""

from .sortedness import SortednessPolicy, sorted_view, unsorted_view
from .linear_search import linear_search
from .binary_search import binary_search
from .jump_search import jump_search
from .interpolation_search import interpolation_search
from .exponential_search import exponential_search

__all__ = [
    "SortednessPolicy",
    "sorted_view",
    "unsorted_view",
    "linear_search",
    "binary_search",
    "jump_search",
    "interpolation_search",
    "exponential_search",
]

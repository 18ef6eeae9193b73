"""Sort producers. Each takes an array and yields steps over a private copy."""

from .bubble_sort import bubble_sort
from .selection_sort import selection_sort
from .insertion_sort import insertion_sort
from .merge_sort import merge_sort

__all__ = ["bubble_sort", "selection_sort", "insertion_sort", "merge_sort"]

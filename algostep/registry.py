"""
Lookup of producers by name.

Names are the snake_case function names; the camelCase names used by browser
front ends (``bubbleSort``, ``breadthFirstSearch``) resolve to the same
entries.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional

from algostep.config import PlaybackConfig
from algostep.exceptions import UnknownAlgorithmError
from algostep.searching import (
    SortednessPolicy,
    binary_search,
    exponential_search,
    interpolation_search,
    jump_search,
    linear_search,
)
from algostep.sorting import bubble_sort, insertion_sort, merge_sort, selection_sort
from algostep.steps import Number, Step
from algostep.traversal import TraversalOrder, breadth_first_search, depth_first_search


class Family(str, Enum):
    SORTING = "sorting"
    SEARCHING = "searching"
    TRAVERSAL = "traversal"


@dataclass(frozen=True)
class AlgorithmEntry:
    name: str
    family: Family
    producer: Callable[..., Iterator[Step]]
    needs_sorted_input: bool = False


_ENTRIES: Dict[str, AlgorithmEntry] = {
    entry.name: entry
    for entry in (
        AlgorithmEntry("bubble_sort", Family.SORTING, bubble_sort),
        AlgorithmEntry("selection_sort", Family.SORTING, selection_sort),
        AlgorithmEntry("insertion_sort", Family.SORTING, insertion_sort),
        AlgorithmEntry("merge_sort", Family.SORTING, merge_sort),
        AlgorithmEntry("linear_search", Family.SEARCHING, linear_search),
        AlgorithmEntry("binary_search", Family.SEARCHING, binary_search, True),
        AlgorithmEntry("jump_search", Family.SEARCHING, jump_search, True),
        AlgorithmEntry(
            "interpolation_search", Family.SEARCHING, interpolation_search, True
        ),
        AlgorithmEntry(
            "exponential_search", Family.SEARCHING, exponential_search, True
        ),
        AlgorithmEntry("breadth_first_search", Family.TRAVERSAL, breadth_first_search),
        AlgorithmEntry("depth_first_search", Family.TRAVERSAL, depth_first_search),
    )
}

_ALIASES = {"bfs": "breadth_first_search", "dfs": "depth_first_search"}


def _normalize(name: str) -> str:
    name = name.strip()
    if name.isupper():
        name = name.lower()
    snake = re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower().replace("-", "_")
    return _ALIASES.get(snake, snake)


def available_algorithms() -> List[str]:
    return list(_ENTRIES)


def get_entry(name: str) -> AlgorithmEntry:
    try:
        return _ENTRIES[_normalize(name)]
    except KeyError:
        raise UnknownAlgorithmError(name, available_algorithms()) from None


def get_producer(name: str) -> Callable[..., Iterator[Step]]:
    return get_entry(name).producer


def family_of(name: str) -> Family:
    return get_entry(name).family


def default_delay_ms(name: str, config: Optional[PlaybackConfig] = None) -> float:
    config = config or PlaybackConfig()
    return config.delay_for(get_entry(name).name)


def create_producer(
    name: str,
    values: Any,
    target: Optional[Number] = None,
    order: Any = TraversalOrder.PREORDER,
    policy: SortednessPolicy = SortednessPolicy.REMAP,
) -> Iterator[Step]:
    """
    Instantiate the named producer with the arguments its family takes.

    Sorts ignore ``target``; searches require it; ``order`` only applies to
    depth-first search and ``policy`` only to searches that need sorted input.
    """
    entry = get_entry(name)
    if entry.family is Family.SORTING:
        return entry.producer(values)
    if entry.family is Family.SEARCHING:
        if target is None:
            raise ValueError(f"{entry.name} requires a target value")
        if entry.needs_sorted_input:
            return entry.producer(values, target, policy=policy)
        return entry.producer(values, target)
    if entry.producer is depth_first_search:
        return entry.producer(values, target, order=order)
    return entry.producer(values, target)

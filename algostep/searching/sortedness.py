"""How searches that need sorted input treat unsorted input."""

from enum import Enum
from typing import Any, Optional, Tuple

from algostep.elements import IndexedArray, as_value_list, is_sorted, prepare
from algostep.exceptions import InvalidInputError
from algostep.steps import ErrorStep


class SortednessPolicy(str, Enum):
    """
    REMAP searches a stable-sorted copy and reports positions of the input.
    REJECT ends the run with an ``error`` step unless the input is sorted.
    """

    REMAP = "remap"
    REJECT = "reject"


def sorted_view(
    values: Any,
    algorithm_name: str,
    policy: SortednessPolicy = SortednessPolicy.REMAP,
) -> Tuple[Optional[IndexedArray], Optional[ErrorStep]]:
    """Return ``(view, None)`` to search, or ``(None, error_step)`` to stop."""
    try:
        if SortednessPolicy(policy) is SortednessPolicy.REMAP:
            return prepare(values), None
        copied = as_value_list(values)
    except InvalidInputError as e:
        return None, ErrorStep(message=str(e))

    if not is_sorted(copied):
        return None, ErrorStep(message=f"Array must be sorted for {algorithm_name}.")
    return IndexedArray.identity(copied), None


def unsorted_view(values: Any) -> Tuple[Optional[IndexedArray], Optional[ErrorStep]]:
    """Positions as given, for searches that do not need sorted input."""
    try:
        return IndexedArray.identity(values), None
    except InvalidInputError as e:
        return None, ErrorStep(message=str(e))

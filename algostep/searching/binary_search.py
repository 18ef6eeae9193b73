from typing import Any, Generator

from algostep.searching.sortedness import SortednessPolicy, sorted_view
from algostep.steps import (
    CompareStep,
    FoundStep,
    Number,
    NotFoundStep,
    RangeStep,
    Step,
)


def binary_search(
    values: Any,
    target: Number,
    policy: SortednessPolicy = SortednessPolicy.REMAP,
) -> Generator[Step, None, int]:
    """
    Binary search producer.

    Each round reports the current window as a ``range`` step before
    comparing its midpoint with the target. Returns the input position of the
    match, or -1.
    """
    view, error = sorted_view(values, "Binary Search", policy)
    if error is not None:
        yield error
        return -1

    left, right = 0, len(view) - 1
    while left <= right:
        yield RangeStep(
            bounds=(left, right),
            indices=view.originals(range(left, right + 1)),
            target=target,
        )

        mid = (left + right) // 2
        yield CompareStep(indices=(view.original(mid),), target=target)

        if view[mid] == target:
            yield FoundStep(index=view.original(mid), value=view[mid], target=target)
            return view.original(mid)
        if view[mid] < target:
            left = mid + 1
        else:
            right = mid - 1

    yield NotFoundStep(target=target)
    return -1

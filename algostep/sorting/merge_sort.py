"""Top-down merge sort producer."""

from typing import Any, Iterator, List

from algostep.sorting._common import finish, working_copy
from algostep.steps import (
    CompareStep,
    CopyStep,
    DivideStep,
    MergeStep,
    PlaceStep,
    SortedStep,
    Step,
)


def merge_sort(values: Any) -> Iterator[Step]:
    """
    Merge sort producer.

    A ``divide`` precedes the split of every range longer than one element.
    Both halves are fully sorted, left first, before the ``merge`` of the
    range starts. Compare, place and copy steps point at positions of the
    array being sorted, never at the temporary halves. Each finished merge is
    reported as a ``sorted`` range; the run ends with ``complete``.
    """
    steps, error = working_copy(values)
    if error is not None:
        yield error
        return

    yield from _sort_range(steps, 0, len(steps) - 1)
    yield from finish(steps)


def _sort_range(steps: List[Any], left: int, right: int) -> Iterator[Step]:
    if left >= right:
        return

    yield DivideStep(indices=(left, right))
    mid = (left + right) // 2
    yield from _sort_range(steps, left, mid)
    yield from _sort_range(steps, mid + 1, right)
    yield from _merge(steps, left, mid, right)


def _merge(steps: List[Any], left: int, mid: int, right: int) -> Iterator[Step]:
    yield MergeStep(indices=(left, mid, right))

    left_half = steps[left : mid + 1]
    right_half = steps[mid + 1 : right + 1]
    i = j = 0
    k = left

    while i < len(left_half) and j < len(right_half):
        yield CompareStep(indices=(left + i, mid + 1 + j))
        # <= keeps equal elements in input order
        if left_half[i] <= right_half[j]:
            steps[k] = left_half[i]
            i += 1
        else:
            steps[k] = right_half[j]
            j += 1
        yield PlaceStep(index=k, array=tuple(steps))
        k += 1

    while i < len(left_half):
        steps[k] = left_half[i]
        yield CopyStep(index=k, array=tuple(steps))
        i += 1
        k += 1

    while j < len(right_half):
        steps[k] = right_half[j]
        yield CopyStep(index=k, array=tuple(steps))
        j += 1
        k += 1

    yield SortedStep(indices=tuple(range(left, right + 1)))

from typing import Any, Iterator

from algostep.sorting._common import finish, working_copy
from algostep.steps import (
    CompareStep,
    CurrentStep,
    InsertStep,
    ShiftStep,
    SortedStep,
    Step,
)


def insertion_sort(values: Any) -> Iterator[Step]:
    """
    Insertion sort producer.

    Every comparison against the element being inserted is announced, even
    the last one that stops the shifting. After inserting element ``i`` the
    prefix ``0..i`` is reported as ``sorted``.
    """
    steps, error = working_copy(values)
    if error is not None:
        yield error
        return

    for i in range(1, len(steps)):
        current = steps[i]
        j = i - 1
        yield CurrentStep(index=i)

        while j >= 0:
            yield CompareStep(indices=(j, j + 1))
            if not steps[j] > current:
                break
            steps[j + 1] = steps[j]
            yield ShiftStep(index=j + 1, array=tuple(steps))
            j -= 1

        steps[j + 1] = current
        yield InsertStep(index=j + 1, array=tuple(steps))
        yield SortedStep(indices=tuple(range(i + 1)))

    yield from finish(steps)

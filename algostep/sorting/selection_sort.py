from typing import Any, Iterator

from algostep.sorting._common import finish, working_copy
from algostep.steps import (
    CompareStep,
    NewMinStep,
    SortedStep,
    SortingStep,
    Step,
    SwapStep,
)


def selection_sort(values: Any) -> Iterator[Step]:
    """
    Selection sort producer.

    For each position ``i`` it announces the slot being filled (``sorting``),
    compares every remaining element against the running minimum, reports each
    new minimum, swaps the minimum into place and marks ``i`` as ``sorted``.
    """
    steps, error = working_copy(values)
    if error is not None:
        yield error
        return

    n = len(steps)
    for i in range(n - 1):
        min_index = i
        yield SortingStep(index=i)

        for j in range(i + 1, n):
            yield CompareStep(indices=(j, min_index))
            if steps[j] < steps[min_index]:
                min_index = j
                yield NewMinStep(index=min_index)

        if min_index != i:
            steps[i], steps[min_index] = steps[min_index], steps[i]
            yield SwapStep(indices=(i, min_index), array=tuple(steps))

        yield SortedStep(indices=(i,))

    # The last slot holds the maximum once every other slot is filled.
    yield SortedStep(indices=(n - 1,))
    yield from finish(steps)

from typing import Any, Iterator

from algostep.sorting._common import finish, working_copy
from algostep.steps import CompareStep, Step, SwapStep


def bubble_sort(values: Any) -> Iterator[Step]:
    """
    Bubble sort producer.

    Yields ``compare`` for every adjacent pair and ``swap`` (with the full
    array) whenever the pair is exchanged. No ``sorted`` steps are emitted;
    the run ends with ``complete``.
    """
    steps, error = working_copy(values)
    if error is not None:
        yield error
        return

    n = len(steps)
    for i in range(n):
        for j in range(n - i - 1):
            yield CompareStep(indices=(j, j + 1))
            if steps[j] > steps[j + 1]:
                steps[j], steps[j + 1] = steps[j + 1], steps[j]
                yield SwapStep(indices=(j, j + 1), array=tuple(steps))

    yield from finish(steps)

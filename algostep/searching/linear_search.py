from typing import Any, Generator

from algostep.searching.sortedness import unsorted_view
from algostep.steps import CompareStep, FoundStep, Number, NotFoundStep, Step


def linear_search(values: Any, target: Number) -> Generator[Step, None, int]:
    """
    Linear search producer.

    Compares each position in input order. Returns the found position, or -1.
    """
    view, error = unsorted_view(values)
    if error is not None:
        yield error
        return -1

    for i, value in enumerate(view.sorted_values):
        yield CompareStep(indices=(i,), target=target)
        if value == target:
            yield FoundStep(index=i, value=value, target=target)
            return i

    yield NotFoundStep(target=target)
    return -1

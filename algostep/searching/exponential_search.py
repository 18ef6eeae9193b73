from typing import Any, Generator

from algostep.searching.sortedness import SortednessPolicy, sorted_view
from algostep.steps import CompareStep, FoundStep, Number, NotFoundStep, Step


def exponential_search(
    values: Any,
    target: Number,
    policy: SortednessPolicy = SortednessPolicy.REMAP,
) -> Generator[Step, None, int]:
    """
    Exponential search producer.

    Checks the first element, then doubles a probe from 1 until it runs past
    the array or reaches a value not smaller than the target, and finally
    scans ``[probe // 2, min(probe, n - 1)]`` linearly.
    """
    view, error = sorted_view(values, "Exponential Search", policy)
    if error is not None:
        yield error
        return -1

    n = len(view)
    yield CompareStep(indices=(view.original(0),), target=target)
    if view[0] == target:
        yield FoundStep(index=view.original(0), value=view[0], target=target)
        return view.original(0)

    probe = 1
    while probe < n:
        yield CompareStep(indices=(view.original(probe),), target=target)
        if not view[probe] < target:
            break
        probe *= 2

    for j in range(probe // 2, min(probe, n - 1) + 1):
        yield CompareStep(indices=(view.original(j),), target=target)
        if view[j] == target:
            yield FoundStep(index=view.original(j), value=view[j], target=target)
            return view.original(j)

    yield NotFoundStep(target=target)
    return -1

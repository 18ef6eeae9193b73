import math
from typing import Any, Generator

from algostep.searching.sortedness import SortednessPolicy, sorted_view
from algostep.steps import CompareStep, FoundStep, Number, NotFoundStep, Step


def jump_search(
    values: Any,
    target: Number,
    policy: SortednessPolicy = SortednessPolicy.REMAP,
) -> Generator[Step, None, int]:
    """
    Jump search producer.

    Probes the last element of consecutive blocks of ``floor(sqrt(n))``
    elements until one is not smaller than the target, then scans that block
    linearly. Every reported position refers to the input array.
    """
    view, error = sorted_view(values, "Jump Search", policy)
    if error is not None:
        yield error
        return -1

    n = len(view)
    block = max(1, math.isqrt(n))
    prev = 0
    step = block

    while True:
        probe = min(step, n) - 1
        yield CompareStep(indices=(view.original(probe),), target=target)
        if not view[probe] < target:
            break
        prev = step
        step += block
        if prev >= n:
            yield NotFoundStep(target=target)
            return -1

    for i in range(prev, min(step, n)):
        yield CompareStep(indices=(view.original(i),), target=target)
        if view[i] == target:
            yield FoundStep(index=view.original(i), value=view[i], target=target)
            return view.original(i)

    yield NotFoundStep(target=target)
    return -1

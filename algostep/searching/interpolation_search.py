import math
from typing import Any, Generator

from algostep.searching.sortedness import SortednessPolicy, sorted_view
from algostep.steps import CompareStep, FoundStep, Number, NotFoundStep, Step


def interpolation_search(
    values: Any,
    target: Number,
    policy: SortednessPolicy = SortednessPolicy.REMAP,
) -> Generator[Step, None, int]:
    """
    Interpolation search producer.

    Estimates the target position by linear interpolation between the window
    endpoints. The run ends with ``not-found`` when the window stops bracketing
    the target, when the estimate falls outside the window or repeats the
    previous estimate, and when both endpoints hold the same value other than
    the target.
    """
    view, error = sorted_view(values, "Interpolation Search", policy)
    if error is not None:
        yield error
        return -1

    low, high = 0, len(view) - 1
    last_pos = -1

    while low <= high and view[low] <= target <= view[high]:
        if view[high] == view[low]:
            yield CompareStep(indices=(view.original(low),), target=target)
            if view[low] == target:
                yield FoundStep(index=view.original(low), value=view[low], target=target)
                return view.original(low)
            break

        pos = low + math.floor(
            (high - low) / (view[high] - view[low]) * (target - view[low])
        )
        if pos == last_pos or pos < low or pos > high:
            break
        last_pos = pos

        yield CompareStep(indices=(view.original(pos),), target=target)
        if view[pos] == target:
            yield FoundStep(index=view.original(pos), value=view[pos], target=target)
            return view.original(pos)

        if view[pos] < target:
            low = pos + 1
        else:
            high = pos - 1

    yield NotFoundStep(target=target)
    return -1

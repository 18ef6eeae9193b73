"""Closed vocabulary of step tags."""

from enum import Enum
from typing import FrozenSet


class StepType(str, Enum):
    """Every tag a producer may emit. The vocabulary is closed."""

    COMPARE = "compare"
    SWAP = "swap"
    RANGE = "range"
    FOUND = "found"
    NOT_FOUND = "not-found"
    SORTING = "sorting"
    CURRENT = "current"
    NEW_MIN = "newMin"
    SHIFT = "shift"
    INSERT = "insert"
    PLACE = "place"
    COPY = "copy"
    SORTED = "sorted"
    DIVIDE = "divide"
    MERGE = "merge"
    COMPLETE = "complete"
    QUEUE = "queue"
    STACK = "stack"
    VISIT = "visit"
    BACKTRACK = "backtrack"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


# The Driver stops pulling after dispatching any of these.
TERMINAL_TYPES: FrozenSet[StepType] = frozenset(
    {StepType.FOUND, StepType.NOT_FOUND, StepType.COMPLETE, StepType.ERROR}
)

# Steps whose payload may carry the complete array. A traversal `complete`
# has no array, so `Step.snapshot` is None for it.
SNAPSHOT_TYPES: FrozenSet[StepType] = frozenset(
    {
        StepType.SWAP,
        StepType.SHIFT,
        StepType.INSERT,
        StepType.PLACE,
        StepType.COPY,
        StepType.COMPLETE,
    }
)

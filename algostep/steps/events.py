"""
Step events emitted by algorithm producers.

Each tag of :class:`StepType` has its own frozen dataclass carrying only the
fields that tag defines, so consumers dispatch on ``step.type`` (or on the
class) and never probe for optional keys. Array snapshots are tuples holding
the complete array at that moment; consumers replace their working copy with
them wholesale.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Dict, Optional, Tuple, Type, Union

from algostep.exceptions import UnknownStepTypeError
from algostep.steps.step_types import SNAPSHOT_TYPES, TERMINAL_TYPES, StepType

Number = Union[int, float]
Snapshot = Tuple[Any, ...]


@dataclass(frozen=True)
class Step:
    """Base class for all step events."""

    type: ClassVar[StepType]

    @property
    def is_terminal(self) -> bool:
        return self.type in TERMINAL_TYPES

    @property
    def snapshot(self) -> Optional[Snapshot]:
        """The complete array carried by this step, if the tag defines one."""
        if self.type not in SNAPSHOT_TYPES:
            return None
        return getattr(self, "array", None)

    @property
    def highlighted(self) -> Tuple[int, ...]:
        """Positions (array slots or tree node indices) this step points at."""
        if hasattr(self, "indices"):
            return tuple(getattr(self, "indices"))
        index = getattr(self, "index", None)
        return (index,) if index is not None else ()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type.value}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = list(value) if isinstance(value, tuple) else value
        return data


# --- comparisons and search windows ---


@dataclass(frozen=True)
class CompareStep(Step):
    """Two elements, or one element against the target, are being compared."""

    type: ClassVar[StepType] = StepType.COMPARE
    indices: Tuple[int, ...]
    target: Optional[Number] = None


@dataclass(frozen=True)
class RangeStep(Step):
    """Active search window.

    ``bounds`` is the inclusive ``(left, right)`` window over the values being
    searched; ``indices`` lists the original input positions inside it.
    """

    type: ClassVar[StepType] = StepType.RANGE
    bounds: Tuple[int, int]
    indices: Tuple[int, ...]
    target: Number


@dataclass(frozen=True)
class FoundStep(Step):
    type: ClassVar[StepType] = StepType.FOUND
    index: int
    value: Any
    target: Optional[Number] = None


@dataclass(frozen=True)
class NotFoundStep(Step):
    type: ClassVar[StepType] = StepType.NOT_FOUND
    target: Optional[Number]


@dataclass(frozen=True)
class ErrorStep(Step):
    type: ClassVar[StepType] = StepType.ERROR
    message: str


# --- sorting ---


@dataclass(frozen=True)
class SwapStep(Step):
    type: ClassVar[StepType] = StepType.SWAP
    indices: Tuple[int, int]
    array: Snapshot


@dataclass(frozen=True)
class SortingStep(Step):
    """Position a selection pass is currently filling."""

    type: ClassVar[StepType] = StepType.SORTING
    index: int


@dataclass(frozen=True)
class CurrentStep(Step):
    """Element an insertion pass is currently placing."""

    type: ClassVar[StepType] = StepType.CURRENT
    index: int


@dataclass(frozen=True)
class NewMinStep(Step):
    type: ClassVar[StepType] = StepType.NEW_MIN
    index: int


@dataclass(frozen=True)
class ShiftStep(Step):
    type: ClassVar[StepType] = StepType.SHIFT
    index: int
    array: Snapshot


@dataclass(frozen=True)
class InsertStep(Step):
    type: ClassVar[StepType] = StepType.INSERT
    index: int
    array: Snapshot


@dataclass(frozen=True)
class PlaceStep(Step):
    type: ClassVar[StepType] = StepType.PLACE
    index: int
    array: Snapshot


@dataclass(frozen=True)
class CopyStep(Step):
    type: ClassVar[StepType] = StepType.COPY
    index: int
    array: Snapshot


@dataclass(frozen=True)
class SortedStep(Step):
    """Positions now in final (or, for merge sort, range-final) order."""

    type: ClassVar[StepType] = StepType.SORTED
    indices: Tuple[int, ...]


@dataclass(frozen=True)
class DivideStep(Step):
    type: ClassVar[StepType] = StepType.DIVIDE
    indices: Tuple[int, int]


@dataclass(frozen=True)
class MergeStep(Step):
    """Start of a merge of ``[left, mid]`` and ``[mid + 1, right]``."""

    type: ClassVar[StepType] = StepType.MERGE
    indices: Tuple[int, int, int]


@dataclass(frozen=True)
class CompleteStep(Step):
    """End of a sort run. ``indices`` is the sorted ``(first, last)`` range."""

    type: ClassVar[StepType] = StepType.COMPLETE
    indices: Tuple[int, int]
    array: Snapshot


# --- traversal ---


@dataclass(frozen=True)
class QueueStep(Step):
    type: ClassVar[StepType] = StepType.QUEUE
    indices: Tuple[int, ...]


@dataclass(frozen=True)
class StackStep(Step):
    type: ClassVar[StepType] = StepType.STACK
    indices: Tuple[int, ...]


@dataclass(frozen=True)
class VisitStep(Step):
    type: ClassVar[StepType] = StepType.VISIT
    index: int
    value: Any
    level: int


@dataclass(frozen=True)
class BacktrackStep(Step):
    type: ClassVar[StepType] = StepType.BACKTRACK
    index: int


@dataclass(frozen=True)
class TraversalCompleteStep(Step):
    """End of a traversal. ``found`` is None when no target was given."""

    type: ClassVar[StepType] = StepType.COMPLETE
    traversal: Tuple[Any, ...]
    found: Optional[bool] = None


_STEP_CLASSES: Dict[StepType, Type[Step]] = {
    cls.type: cls
    for cls in (
        CompareStep,
        RangeStep,
        FoundStep,
        NotFoundStep,
        ErrorStep,
        SwapStep,
        SortingStep,
        CurrentStep,
        NewMinStep,
        ShiftStep,
        InsertStep,
        PlaceStep,
        CopyStep,
        SortedStep,
        DivideStep,
        MergeStep,
        CompleteStep,
        QueueStep,
        StackStep,
        VisitStep,
        BacktrackStep,
    )
}


def step_from_dict(data: Dict[str, Any]) -> Step:
    """Rebuild a step from the mapping produced by :meth:`Step.to_dict`."""
    payload = dict(data)
    tag = payload.pop("type", None)
    try:
        step_type = StepType(tag)
    except ValueError as e:
        raise UnknownStepTypeError(f"Unknown step type: {tag!r}") from e

    cls = _STEP_CLASSES[step_type]
    if step_type is StepType.COMPLETE and "traversal" in payload:
        cls = TraversalCompleteStep

    kwargs = {
        f.name: tuple(payload[f.name])
        if isinstance(payload.get(f.name), list)
        else payload.get(f.name)
        for f in fields(cls)
        if f.name in payload
    }
    return cls(**kwargs)

"""Step event vocabulary shared by producers and the playback layer."""

from .step_types import StepType, TERMINAL_TYPES, SNAPSHOT_TYPES
from .events import (
    Step,
    Number,
    Snapshot,
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
    TraversalCompleteStep,
    step_from_dict,
)

__all__ = [
    "StepType",
    "TERMINAL_TYPES",
    "SNAPSHOT_TYPES",
    "Step",
    "Number",
    "Snapshot",
    "CompareStep",
    "RangeStep",
    "FoundStep",
    "NotFoundStep",
    "ErrorStep",
    "SwapStep",
    "SortingStep",
    "CurrentStep",
    "NewMinStep",
    "ShiftStep",
    "InsertStep",
    "PlaceStep",
    "CopyStep",
    "SortedStep",
    "DivideStep",
    "MergeStep",
    "CompleteStep",
    "QueueStep",
    "StackStep",
    "VisitStep",
    "BacktrackStep",
    "TraversalCompleteStep",
    "step_from_dict",
]

"""Presentation-owned view of a run, updated from dispatched steps."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from algostep.steps import (
    ErrorStep,
    FoundStep,
    RangeStep,
    Step,
    StepType,
    TraversalCompleteStep,
    VisitStep,
)


@dataclass
class PlaybackState:
    """
    Mirror of what a renderer would draw, kept up to date by :meth:`apply`.

    The array is replaced wholesale by every step that carries a snapshot and
    is never patched in place. Sorted positions only accumulate. Instances
    are callable so they can be passed straight to the Driver as ``on_event``.
    """

    array: List[Any]
    highlight: Tuple[int, ...] = ()
    highlight_kind: Optional[StepType] = None
    sorted_positions: Set[int] = field(default_factory=set)
    window: Optional[Tuple[int, int]] = None
    frontier: Tuple[int, ...] = ()
    visited: List[int] = field(default_factory=list)
    traversal: Tuple[Any, ...] = ()
    found_index: Optional[int] = None
    error: Optional[str] = None
    finished: bool = False
    steps_applied: int = 0

    @classmethod
    def for_input(cls, values: Any) -> "PlaybackState":
        return cls(array=list(values) if isinstance(values, (list, tuple)) else [])

    def __call__(self, step: Step) -> None:
        self.apply(step)

    def apply(self, step: Step) -> None:
        self.steps_applied += 1
        snapshot = step.snapshot
        if snapshot is not None:
            self.array = list(snapshot)

        self.highlight = step.highlighted
        self.highlight_kind = step.type
        handler = self._handlers().get(step.type)
        if handler is not None:
            handler(step)
        if step.is_terminal:
            self.finished = True

    def _handlers(self) -> Dict[StepType, Callable[[Any], None]]:
        return {
            StepType.SORTED: self._on_sorted,
            StepType.RANGE: self._on_range,
            StepType.QUEUE: self._on_frontier,
            StepType.STACK: self._on_frontier,
            StepType.VISIT: self._on_visit,
            StepType.FOUND: self._on_found,
            StepType.COMPLETE: self._on_complete,
            StepType.ERROR: self._on_error,
        }

    def _on_sorted(self, step: Step) -> None:
        self.sorted_positions.update(step.highlighted)

    def _on_range(self, step: RangeStep) -> None:
        self.window = step.bounds

    def _on_frontier(self, step: Step) -> None:
        self.frontier = step.highlighted

    def _on_visit(self, step: VisitStep) -> None:
        self.visited.append(step.index)

    def _on_found(self, step: FoundStep) -> None:
        self.found_index = step.index

    def _on_complete(self, step: Step) -> None:
        if isinstance(step, TraversalCompleteStep):
            self.traversal = step.traversal
        else:
            self.sorted_positions.update(range(len(self.array)))
        self.highlight = ()

    def _on_error(self, step: ErrorStep) -> None:
        self.error = step.message
        self.highlight = ()

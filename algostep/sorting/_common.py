"""Helpers shared by the sort producers."""

from typing import Any, Iterator, List, Optional

from algostep.elements.validation import as_value_list
from algostep.exceptions import InvalidInputError
from algostep.steps import CompleteStep, ErrorStep, Step


def working_copy(values: Any) -> tuple[Optional[List[Any]], Optional[ErrorStep]]:
    """Return ``(copy, None)`` for valid input or ``(None, error_step)``."""
    try:
        return as_value_list(values), None
    except InvalidInputError as e:
        return None, ErrorStep(message=str(e))


def finish(steps: List[Any]) -> Iterator[Step]:
    yield CompleteStep(indices=(0, len(steps) - 1), array=tuple(steps))

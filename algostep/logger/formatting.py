"""Text formatting utilities for step logs."""

from dataclasses import fields
from typing import Any, Iterable, List

from algostep.steps import Step


def format_indices(indices: Iterable[int]) -> str:
    """Format positions as ``[0, 3]``; empty input renders as ``∅``."""
    values = list(indices)
    if not values:
        return "∅"
    return "[" + ", ".join(str(i) for i in values) + "]"


def format_snapshot(values: Iterable[Any]) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"


def format_step_payload(step: Step) -> str:
    """Render every field of ``step`` as ``name=value`` pairs."""
    parts: List[str] = []
    for f in fields(step):
        value = getattr(step, f.name)
        if value is None:
            continue
        if f.name in ("indices", "bounds"):
            rendered = format_indices(value)
        elif isinstance(value, tuple):
            rendered = format_snapshot(value)
        else:
            rendered = str(value)
        parts.append(f"{f.name}={rendered}")
    return " ".join(parts)


def format_step_row(step: Step, position: int) -> List[Any]:
    return [position, step.type.value, format_step_payload(step)]

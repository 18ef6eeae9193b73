"""
Index remapping for searches that need sorted input.

Searching algorithms such as jump or interpolation search only work on sorted
values, while the caller highlights positions in the array it actually holds.
:func:`prepare` produces a sorted working copy together with the bijection back
to the caller's positions; producers search the copy and report
``original_index_of[p]`` for every working position ``p`` they touch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Tuple

import numpy as np

from algostep.elements.validation import as_value_list


@dataclass(frozen=True)
class IndexedArray:
    """Sorted values paired with the input position each one came from."""

    sorted_values: Tuple[Any, ...]
    original_index_of: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.sorted_values) != len(self.original_index_of):
            raise ValueError(
                "sorted_values and original_index_of must have the same length, "
                f"got {len(self.sorted_values)} and {len(self.original_index_of)}"
            )

    def __len__(self) -> int:
        return len(self.sorted_values)

    def __getitem__(self, position: int) -> Any:
        return self.sorted_values[position]

    def original(self, position: int) -> int:
        """Translate a working position to the caller's position."""
        return self.original_index_of[position]

    def originals(self, positions: Iterable[int]) -> Tuple[int, ...]:
        return tuple(self.original_index_of[p] for p in positions)

    @property
    def is_identity(self) -> bool:
        """True when the input was already sorted, so positions coincide."""
        return all(p == original for p, original in enumerate(self.original_index_of))

    @classmethod
    def identity(cls, values: Any) -> IndexedArray:
        """Wrap ``values`` as-is, without sorting."""
        copied = as_value_list(values)
        return cls(tuple(copied), tuple(range(len(copied))))


def prepare(values: Any) -> IndexedArray:
    """
    Stable-sort ``values`` ascending and remember where each element came from.

    Equal values keep their relative input order, so repeated runs over the
    same input visit positions in the same order. Values are compared as Python objects, so large ints mixed with floats
    keep their exact order.

    Raises:
        InvalidInputError: If ``values`` is not an array or is empty.
    """
    copied = as_value_list(values)
    order = np.argsort(np.asarray(copied, dtype=object), kind="stable")
    original_index_of = tuple(int(i) for i in order)
    sorted_values = tuple(copied[i] for i in original_index_of)
    return IndexedArray(sorted_values, original_index_of)

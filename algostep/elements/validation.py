"""Input checks shared by every producer."""

from typing import Any, List

import numpy as np

from algostep.exceptions import InvalidInputError

NOT_AN_ARRAY = "Input must be an array."
EMPTY_ARRAY = "Array must not be empty."


def as_value_list(values: Any) -> List[Any]:
    """Return a private list copy of ``values``.

    Lists, tuples and one-dimensional numpy arrays are accepted. numpy scalars
    are converted to plain Python numbers so snapshots compare and serialize
    like ordinary lists.

    Raises:
        InvalidInputError: If ``values`` is not an array or is empty.
    """
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise InvalidInputError(NOT_AN_ARRAY)
        copied: List[Any] = values.tolist()
    elif isinstance(values, (list, tuple)):
        copied = list(values)
    else:
        raise InvalidInputError(NOT_AN_ARRAY)

    if not copied:
        raise InvalidInputError(EMPTY_ARRAY)
    return copied


def is_sorted(values: List[Any]) -> bool:
    return all(values[i - 1] <= values[i] for i in range(1, len(values)))

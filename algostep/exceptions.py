"""
Custom exceptions for the algostep package.

Malformed algorithm input is reported to the playback layer as an ``error``
step, never raised. ``InvalidInputError`` is only visible to code that calls the
validation helpers directly; every other exception signals a caller error.
"""

from __future__ import annotations


class AlgoStepError(Exception):
    """Base exception for algostep errors."""

    pass


class InvalidInputError(AlgoStepError):
    """Raised when algorithm input is not a non-empty array of values."""

    pass


class UnknownAlgorithmError(AlgoStepError, KeyError):
    """Raised when a producer is looked up under a name that is not registered."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown algorithm '{name}'. Available: {', '.join(available)}"
        )

    def __str__(self) -> str:
        # KeyError would otherwise wrap the message in quotes
        return self.args[0]


class InvalidTraversalOrderError(AlgoStepError, ValueError):
    """Raised when a depth-first traversal is asked for an unsupported order."""

    pass


class UnknownStepTypeError(AlgoStepError, ValueError):
    """Raised when a serialized step carries a tag outside the step vocabulary."""

    pass


class MissingTerminalStepError(AlgoStepError):
    """Raised when a producer is exhausted without emitting a terminal step."""

    pass

from .driver import PlaybackDriver, PlaybackResult, StepCallback, run
from .state import PlaybackState

__all__ = [
    "PlaybackDriver",
    "PlaybackResult",
    "StepCallback",
    "PlaybackState",
    "run",
]

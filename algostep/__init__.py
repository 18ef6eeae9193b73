"""Step-by-step playback of classic array and tree algorithms."""

__all__ = [
    "StepType",
    "Step",
    "PlaybackDriver",
    "PlaybackResult",
    "PlaybackState",
    "PlaybackConfig",
    "run",
    "create_producer",
    "get_producer",
    "available_algorithms",
]


def __getattr__(name):
    if name in {"StepType", "Step"}:
        from .steps import StepType, Step

        return locals()[name]
    if name in {"PlaybackDriver", "PlaybackResult", "PlaybackState", "run"}:
        from .playback import PlaybackDriver, PlaybackResult, PlaybackState, run

        return locals()[name]
    if name == "PlaybackConfig":
        from .config import PlaybackConfig

        return PlaybackConfig
    if name in {"create_producer", "get_producer", "available_algorithms"}:
        from .registry import create_producer, get_producer, available_algorithms

        return locals()[name]
    raise AttributeError(name)

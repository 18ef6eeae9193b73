"""Playback configuration."""

import os
from dataclasses import dataclass, field
from typing import Dict

from algostep.searching.sortedness import SortednessPolicy


class Config:
    """Environment-driven settings."""

    LOG_LEVEL = os.environ.get("ALGOSTEP_LOG_LEVEL", "INFO")
    # Multiplies every per-algorithm delay; 0 plays back without pauses.
    DELAY_SCALE = float(os.environ.get("ALGOSTEP_DELAY_SCALE", "1.0"))


def _default_delays() -> Dict[str, float]:
    return {
        "bubble_sort": 300,
        "selection_sort": 400,
        "insertion_sort": 400,
        "merge_sort": 400,
        "linear_search": 800,
        "binary_search": 800,
        "jump_search": 800,
        "interpolation_search": 800,
        "exponential_search": 800,
        "breadth_first_search": 1000,
        "depth_first_search": 1200,
    }


@dataclass
class PlaybackConfig:
    """Configuration for a playback run.

    Delays are in milliseconds and keyed by the algorithm's registry name.
    """

    delays_ms: Dict[str, float] = field(default_factory=_default_delays)
    default_delay_ms: float = 500
    initial_pause_ms: float = 1000
    delay_scale: float = field(default_factory=lambda: Config.DELAY_SCALE)
    sortedness_policy: SortednessPolicy = SortednessPolicy.REMAP
    strict: bool = True
    logger_name: str = "algostep.playback"

    def __post_init__(self) -> None:
        if self.delay_scale < 0:
            raise ValueError(f"delay_scale must be non-negative, got {self.delay_scale}")
        self.sortedness_policy = SortednessPolicy(self.sortedness_policy)

    def delay_for(self, algorithm: str) -> float:
        return self.delays_ms.get(algorithm, self.default_delay_ms) * self.delay_scale

    @property
    def scaled_initial_pause_ms(self) -> float:
        return self.initial_pause_ms * self.delay_scale

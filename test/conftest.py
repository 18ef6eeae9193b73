import logging
from typing import Iterable, List

import pytest

from algostep.logger import step_logger
from algostep.steps import Step


def pytest_configure(config):
    """Set up logging before tests run."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@pytest.fixture
def step_trace():
    """The shared step logger, enabled for one test and reset afterwards."""
    step_logger.clear()
    step_logger.disabled = False
    yield step_logger
    step_logger.clear()
    step_logger.disabled = True


class FakeSleep:
    """Records requested pauses instead of sleeping."""

    def __init__(self):
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def fake_sleep():
    return FakeSleep()


def collect(producer: Iterable[Step]) -> List[Step]:
    return list(producer)


def types_of(steps: Iterable[Step]) -> List[str]:
    return [step.type.value for step in steps]


def replay_snapshots(initial, steps: Iterable[Step]) -> list:
    """Apply every snapshot-carrying step to a copy of ``initial``."""
    array = list(initial)
    for step in steps:
        if step.snapshot is not None:
            array = list(step.snapshot)
    return array

"""
Generic playback of step producers.

The Driver pulls one step at a time, hands it to the presentation callback and
waits before pulling the next one, so the pace of an algorithm is entirely
controlled here. It knows nothing about which algorithm it is playing; it only
looks at the step tag to decide when to stop.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

from algostep.exceptions import MissingTerminalStepError
from algostep.logger import Logger
from algostep.steps import Step

StepCallback = Callable[[Step], None]


@dataclass
class PlaybackResult:
    """Outcome of one playback run."""

    steps_dispatched: int
    terminal: Optional[Step] = None
    aborted: bool = False

    @property
    def completed(self) -> bool:
        return self.terminal is not None


class PlaybackDriver:
    """
    Pulls steps from a single producer and paces their dispatch.

    Args:
        delay_ms: Pause after each dispatched step. May be changed between
            steps with :meth:`set_delay`.
        sleep: Function used to wait, called with seconds. Tests inject a fake.
        logger: Logger for run-level messages.
        trace: Optional step logger that records every dispatched step.
        initial_pause_ms: Pause before the first pull, letting the presentation
            show the untouched input.
        strict: Raise :class:`MissingTerminalStepError` when a producer ends
            without a terminal step.
    """

    def __init__(
        self,
        delay_ms: float = 0,
        sleep: Callable[[float], None] = time.sleep,
        logger: Optional[logging.Logger] = None,
        trace: Optional[Logger] = None,
        initial_pause_ms: float = 0,
        strict: bool = True,
    ):
        self.delay_ms = self._checked_delay(delay_ms)
        self.initial_pause_ms = self._checked_delay(initial_pause_ms)
        self.sleep = sleep
        self.logger = logger or logging.getLogger(__name__)
        self.trace = trace
        self.strict = strict
        self._aborted = False

    @staticmethod
    def _checked_delay(delay_ms: float) -> float:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {delay_ms}")
        return float(delay_ms)

    def set_delay(self, delay_ms: float) -> None:
        """Change the pause applied after the next dispatched step."""
        self.delay_ms = self._checked_delay(delay_ms)

    def abort(self) -> None:
        """Stop pulling at the next step boundary."""
        self._aborted = True

    def _note(self, message: str, warning: bool = False) -> None:
        """Log a run-level message, mirrored into the trace when one is set."""
        if warning:
            self.logger.warning(message)
        else:
            self.logger.info(message)
        if self.trace is not None:
            (self.trace.warning if warning else self.trace.info)(message)

    def _pause(self, delay_ms: float) -> None:
        if delay_ms > 0:
            self.sleep(delay_ms / 1000.0)

    def run(self, producer: Iterable[Step], on_event: StepCallback) -> PlaybackResult:
        """
        Play ``producer`` until it emits a terminal step.

        ``on_event`` is called synchronously for every step, including the
        terminal one. A producer that is abandoned (terminal step, abort) is
        closed so its frames are released.
        """
        self._aborted = False
        steps: Iterator[Step] = iter(producer)
        result = PlaybackResult(steps_dispatched=0)
        if self.trace is not None:
            self.trace.section("Playback")
        self._note(f"Playback started (delay={self.delay_ms:.0f}ms)")

        try:
            self._pause(self.initial_pause_ms)
            while not self._aborted:
                try:
                    step = next(steps)
                except StopIteration:
                    break

                result.steps_dispatched += 1
                self.logger.debug(f"Step {result.steps_dispatched}: {step}")
                on_event(step)
                if self.trace is not None:
                    self.trace.log_step(step, result.steps_dispatched)

                if step.is_terminal:
                    result.terminal = step
                    break
                if not self._aborted:
                    self._pause(self.delay_ms)
        finally:
            close = getattr(steps, "close", None)
            if close is not None:
                close()
            if self.trace is not None:
                self.trace.end_section()

        result.aborted = self._aborted and result.terminal is None
        if result.aborted:
            self._note(f"Playback aborted after {result.steps_dispatched} step(s)")
        elif result.terminal is None:
            message = (
                f"Producer ended after {result.steps_dispatched} step(s) "
                "without a terminal step"
            )
            if self.strict:
                raise MissingTerminalStepError(message)
            self._note(message, warning=True)
        else:
            self._note(
                f"Playback finished with '{result.terminal.type}' after "
                f"{result.steps_dispatched} step(s)"
            )
        return result


def run(
    producer: Iterable[Step],
    on_event: StepCallback,
    delay_ms: float = 0,
    sleep: Callable[[float], None] = time.sleep,
) -> PlaybackResult:
    """Play ``producer`` with a fixed pause of ``delay_ms`` between steps."""
    return PlaybackDriver(delay_ms=delay_ms, sleep=sleep).run(producer, on_event)

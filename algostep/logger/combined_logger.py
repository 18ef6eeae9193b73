"""Combined logger with step tracing."""

from typing import Any, Iterable, List, Optional

from tabulate import tabulate

from algostep.logger.formatting import format_step_row
from algostep.logger.table_logger import TableLogger
from algostep.steps import Step

STEP_HEADERS = ["#", "step", "payload"]


class Logger(TableLogger):
    """
    Logger that records dispatched steps as a table.

    Usage:
        logger = Logger("bubble_sort")
        logger.section("Playback")
        logger.log_step(step, 1)
        ...
        logger.end_section()   # renders the buffered step table
        logger.write_html("trace.html")
    """

    def __init__(self, name: str):
        TableLogger.__init__(self, name)
        self._step_rows: List[List[Any]] = []
        self._row_classes: List[str] = []

    def log_step(self, step: Step, position: int) -> None:
        """Buffer one step; the table is rendered when the section ends."""
        if self.disabled:
            return
        row = format_step_row(step, position)
        self.logger.debug(f"{row[0]:>4}  {row[1]:<10} {row[2]}")
        self._step_rows.append(row)
        self._row_classes.append("step-terminal" if step.is_terminal else "")

    def log_steps(self, steps: Iterable[Step], title: Optional[str] = None) -> None:
        """Render a complete step sequence as one table."""
        if self.disabled:
            return
        rows = [format_step_row(step, i) for i, step in enumerate(steps, start=1)]
        self.table(rows, headers=STEP_HEADERS, title=title, tablefmt="simple")

    def flush_steps(self) -> None:
        if self.disabled or not self._step_rows:
            return
        self.logger.info(tabulate(self._step_rows, headers=STEP_HEADERS, tablefmt="simple"))
        self.raw_html(
            self._create_html_table(self._step_rows, STEP_HEADERS, self._row_classes)
        )
        self._step_rows = []
        self._row_classes = []

    def end_section(self):
        self.flush_steps()
        super().end_section()

    def clear(self):
        super().clear()
        self._step_rows = []
        self._row_classes = []

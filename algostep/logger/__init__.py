"""Logging package for algostep."""

from algostep.logger.base_logger import AlgorithmLogger
from algostep.logger.table_logger import TableLogger
from algostep.logger.combined_logger import Logger
from algostep.logger.formatting import (
    format_indices,
    format_snapshot,
    format_step_payload,
    format_step_row,
)

# Shared step tracer, enabled by the CLI's --trace-html option
step_logger = Logger("algostep.trace")
step_logger.disabled = True

__all__ = [
    "AlgorithmLogger",
    "TableLogger",
    "Logger",
    "step_logger",
    "format_indices",
    "format_snapshot",
    "format_step_payload",
    "format_step_row",
]

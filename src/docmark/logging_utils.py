#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/logging_utils.py
"""Logging configuration for the docmark command line.

Handlers are attached to the ``docmark`` package logger rather than the root
logger, so embedding applications keep control of their own logging. Records
are tagged with the docmark component that emitted them (``parsers.inline``,
``ast.splitting``, ...) instead of the full dotted module name.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "docmark"

_CONSOLE_FORMAT = "docmark %(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(component)s] %(message)s"


class ComponentFilter(logging.Filter):
    """Add a ``component`` attribute: the logger name relative to the package."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name.startswith(PACKAGE_LOGGER_NAME + "."):
            name = name[len(PACKAGE_LOGGER_NAME) + 1 :]
        record.component = name
        return True


def resolve_level(log_level: int | str) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value; unknown names mean INFO."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure the docmark package logger.

    Calling this again replaces the handlers from the previous call.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and the emitting component for debugging traces.

    Returns
    -------
    logging.Logger
        The configured ``docmark`` logger.

    """
    resolved_level = resolve_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(resolved_level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if trace_mode:
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    else:
        formatter = logging.Formatter(_CONSOLE_FORMAT)
    component_filter = ComponentFilter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(component_filter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning(f"Could not create log file {log_file}: {exc}")
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            file_handler.addFilter(component_filter)
            package_logger.addHandler(file_handler)
            package_logger.debug(f"Logging to file: {log_file}")

    return package_logger

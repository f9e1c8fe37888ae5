#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdinline/logging_utils.py
"""Log handler setup for the mdinline command.

Library modules only create ``logging.getLogger(__name__)`` loggers and never
attach handlers. The command line tool attaches its handlers to the
``mdinline`` namespace logger, so the root logger and any handlers installed
by a host application are left alone.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from mdinline.exceptions import FileError

PACKAGE_LOGGER = "mdinline"

# Plain messages for normal runs; --trace adds time, origin and line number
MESSAGE_FORMAT = "mdinline: %(levelname)s: %(message)s"
TRACE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-8s %(name)s:%(lineno)d %(message)s"
TRACE_DATE_FORMAT = "%H:%M:%S"


def configure_logging(
    log_level: int | str,
    log_file: str | Path | None = None,
    trace: bool = False,
) -> logging.Logger:
    """Route mdinline log records to stderr and, optionally, a file.

    Calling this again replaces the handlers installed by the previous call.

    Parameters
    ----------
    log_level : int or str
        Level for the ``mdinline`` logger, e.g. ``logging.DEBUG`` or ``"INFO"``
    log_file : str or Path, optional
        File that receives the same records, opened for appending
    trace : bool, default False
        Use the detailed trace format

    Returns
    -------
    logging.Logger
        The configured ``mdinline`` logger

    Raises
    ------
    FileError
        If ``log_file`` cannot be opened. The stderr handler is already in
        place, so the error itself can still be logged.

    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.setLevel(log_level.upper() if isinstance(log_level, str) else log_level)
    package_logger.propagate = False

    if trace:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(MESSAGE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file is not None:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            raise FileError(f"Cannot open log file {log_file}: {e}", file_path=str(log_file), original_error=e) from e
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    return package_logger

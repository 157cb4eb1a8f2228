# chuk_tool_format/logging/__init__.py
"""
Structured logging for chuk_tool_format.

A default stderr handler with :class:`StructuredFormatter` is attached to the
package logger at import time; call :func:`setup_logging` to change level,
format or add a log file.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

from .context import LogContext, StructuredAdapter, get_logger, log_context
from .formatter import StructuredFormatter

__all__ = [
    "LogContext",
    "StructuredAdapter",
    "StructuredFormatter",
    "get_logger",
    "log_context",
    "setup_logging",
]

_ROOT = "chuk_tool_format"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


async def setup_logging(
    level: int = logging.INFO,
    structured: bool = True,
    log_file: Optional[str] = None,
) -> None:
    """(Re)configure the package logger."""
    root_logger = logging.getLogger(_ROOT)
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    formatter: logging.Formatter = (
        StructuredFormatter() if structured else logging.Formatter(_PLAIN_FORMAT)
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    root_logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger(f"{_ROOT}.logging").info(
        "Logging initialized",
        extra={"context": {"level": logging.getLevelName(level), "structured": structured}},
    )


# default handler -------------------------------------------------------
_root_logger = logging.getLogger(_ROOT)
if not _root_logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setLevel(logging.WARNING)
    _handler.setFormatter(StructuredFormatter())
    _root_logger.addHandler(_handler)

"""Logging utilities for java-assistant tools and transports."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_LOGGER_NAME = "java_assistant"
_CONSOLE_FORMAT = "[java-assistant] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the java_assistant hierarchy, e.g. ``tools.check_code_quality``."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging(
    *, verbose: bool = False, log_file: str | Path | None = None
) -> logging.Logger:
    """Send package logs to stderr and, when ``log_file`` is given, append them there too.

    Calling this again replaces the handlers installed by the previous call.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Never stdout: the MCP stdio transport writes protocol frames there.
    logger.addHandler(_handler(logging.StreamHandler(sys.stderr), level, _CONSOLE_FORMAT))

    if log_file is not None:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(
            _handler(logging.FileHandler(path, encoding="utf-8"), level, _FILE_FORMAT)
        )

    return logger


__all__ = ["configure_logging", "get_logger"]

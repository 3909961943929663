"""Logging setup for billzy.

All modules log through one ``billzy`` namespace logger that writes to
stderr, so CLI output on stdout stays clean:

    from billzy.runtime import get_logger
    logger = get_logger(__name__)

The parser logs per-line decisions at DEBUG and a one-line summary at INFO.
Line text is never logged above DEBUG since receipts carry card details.

Environment variables:
    BILLZY_LOG_LEVEL: DEBUG, INFO, WARNING (default) or ERROR
"""

import logging
import os
import sys
from typing import TextIO

LOGGER_NAMESPACE = "billzy"
LOG_LEVEL_ENV = "BILLZY_LOG_LEVEL"

DEFAULT_LOG_LEVEL = logging.WARNING

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

_LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

_handler: logging.Handler | None = None


def level_from_env(value: str | None = None) -> int:
    """Map a ``BILLZY_LOG_LEVEL`` value to a logging level; unknown values give the default."""
    if value is None:
        value = os.environ.get(LOG_LEVEL_ENV, "")
    return _LEVEL_NAMES.get(value.strip().upper(), DEFAULT_LOG_LEVEL)


def _formatter_for(level: int) -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT_DEBUG if level <= logging.DEBUG else LOG_FORMAT)


def configure_logging(level: int | None = None, stream: TextIO | None = None) -> None:
    """Attach the stderr handler to the ``billzy`` logger once.

    Args:
        level: Log level; None reads ``BILLZY_LOG_LEVEL``.
        stream: Output stream; defaults to stderr.
    """
    global _handler
    if _handler is not None:
        return

    if level is None:
        level = level_from_env()

    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(_formatter_for(level))

    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    namespace_logger.setLevel(level)
    namespace_logger.addHandler(_handler)
    namespace_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, under the ``billzy`` namespace."""
    configure_logging()
    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def set_log_level(level: int) -> None:
    """Change the level at runtime (``billzy -v`` switches to DEBUG)."""
    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    namespace_logger.setLevel(level)
    for handler in namespace_logger.handlers:
        handler.setFormatter(_formatter_for(level))

"""
Logging configuration.

Modules obtain their logger through ``get_logger(__name__)`` and attach
structured context with ``extra={...}``.
"""

import logging
import sys

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_ROOT_LOGGER_NAME = "passage"

_initialized = False


def init_logging(level: str | int = "INFO") -> None:
    """
    Configure the package logger.

    Safe to call more than once; only the level is updated after the first call.

    Args:
        level: Logging level name or number.
    """
    global _initialized

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(level.upper() if isinstance(level, str) else level)

    if _initialized:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(handler)
    root.propagate = False
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the package namespace.

    Args:
        name: Module name, usually ``__name__``.

    Returns:
        Logger instance.
    """
    if name.startswith("passage_"):
        name = f"{_ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)

"""Centralized logging configuration for the ``finance_tracker`` package.

- ``configure_logging(...)``: attach a single ``StreamHandler`` to the package
  logger (``"finance_tracker"``). Called once by the CLI at startup.
- ``get_logger(name)``: acquire a logger by name, making sure the package
  logger has at least a ``NullHandler`` while unconfigured.

Library modules never attach their own handlers; they call
``get_logger(__name__)`` and rely on the entrypoint to configure output.
"""
import logging
import os
import sys
from typing import IO, Optional, Union

_PKG_LOGGER_NAME = "finance_tracker"
_LEVEL_ENV_VAR = "FINANCE_TRACKER_LOG_LEVEL"
_DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def _level_from_string(level: str) -> Optional[int]:
    # Numeric strings or standard names (INFO/DEBUG/...)
    level = level.strip().upper()
    if level.isdigit():
        return int(level)
    numeric = getattr(logging, level, None)
    return numeric if isinstance(numeric, int) else None


def _parse_level(level: Union[int, str, None]) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        parsed = _level_from_string(level)
        if parsed is not None:
            return parsed
    env_val = os.getenv(_LEVEL_ENV_VAR)
    if env_val:
        parsed = _level_from_string(env_val)
        if parsed is not None:
            return parsed
    return logging.WARNING


def configure_logging(
    level: Union[int, str, None] = None,
    fmt: Optional[str] = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """
    Configure the package logger exactly once.

    Args:
        level: Level as int or name. If None, uses FINANCE_TRACKER_LOG_LEVEL
            when set, otherwise WARNING.
        fmt: Optional format string
        stream: Output stream for the handler
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    numeric_level = _parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt or _DEFAULT_FORMAT))

    logger.setLevel(numeric_level)
    logger.addHandler(handler)
    # Avoid double emission via the root logger
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, silent until configure_logging() runs"""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)

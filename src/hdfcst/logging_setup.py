"""Centralized logging configuration for the ``hdfcst`` package.

``configure_logging`` attaches a single ``StreamHandler`` to the package root
logger and is called by the CLI at startup. Library modules only call
``get_logger(__name__)`` and never attach handlers of their own.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional, Union

_PKG_LOGGER_NAME = "hdfcst"
_HANDLER_NAME = "hdfcst-cli"

LOG_LEVEL_ENV = "HDFCST_LOG_LEVEL"
DEFAULT_FORMAT = "%(levelname)s: %(message)s"


def _parse_level(level: Optional[Union[int, str]]) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        raise ValueError(f"Unknown log level '{level}'")
    env_val = os.getenv(LOG_LEVEL_ENV)
    if env_val:
        return _parse_level(env_val)
    return logging.WARNING


def configure_logging(
    level: Optional[Union[int, str]] = None,
    *,
    fmt: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Attach the package's stream handler, replacing one from an earlier call.

    Parameters
    ----------
    level:
        Logging level as ``int`` or level-name string (e.g., ``"INFO"``). If
        ``None``, defaults to the ``HDFCST_LOG_LEVEL`` environment variable
        when set, otherwise ``logging.WARNING``.
    fmt:
        Optional logging format string. Defaults to ``DEFAULT_FORMAT``.
    stream:
        Output stream for the handler. Defaults to the current ``sys.stderr``.
    """

    numeric_level = _parse_level(level)
    logger = logging.getLogger(_PKG_LOGGER_NAME)

    # Drop NullHandlers and any handler from a previous call.
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler) or h.get_name() == _HANDLER_NAME:
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))

    logger.setLevel(numeric_level)
    logger.addHandler(handler)
    logger.propagate = False


def reset_logging() -> None:
    """Remove the package handlers and restore propagation to the root logger."""
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, ensuring safe defaults for library use."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)

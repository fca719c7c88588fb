"""Logging utilities for the inventory runtime."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union


_HANDLER_NAME = "_assetregistry_stream_handler"
PACKAGE_LOGGER = "assetregistry"

LevelLike = Union[int, str]


def resolve_level(level: LevelLike) -> int:
    """Translate ``"INFO"``/``"debug"``/``20`` into a numeric logging level."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return value


def _tagged_handler(logger: logging.Logger) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if getattr(handler, _HANDLER_NAME, False):
            return handler
    return None


def configure_runtime_logging(
    level: LevelLike = logging.INFO,
    formatter: Optional[logging.Formatter] = None,
    *,
    logger_name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """
    Route the inventory's per-operation traces to stdout.

    The handler is attached to ``logger_name`` (the package logger by default)
    and tagged, so repeated calls only update its level and format. Records
    stop propagating to the root logger to avoid printing them twice.
    """
    level = resolve_level(level)
    if formatter is None:
        formatter = logging.Formatter("[%(levelname)s] %(message)s")

    logger = logging.getLogger(logger_name)
    handler = _tagged_handler(logger)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        setattr(handler, _HANDLER_NAME, True)
        logger.addHandler(handler)
    handler.setLevel(level)
    handler.setFormatter(formatter)

    logger.setLevel(level)
    logger.propagate = False
    return logger


def install_stdout_logger(
    level: LevelLike = logging.INFO,
    *,
    include_timestamp: bool = True,
    prefix: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """Replace the handlers of logger ``prefix`` with one stdout handler, for scripts."""
    level = resolve_level(level)
    fmt = "%(asctime)s [%(name)s] %(levelname)s %(message)s" if include_timestamp else "[%(name)s] %(levelname)s %(message)s"
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))
    logger = logging.getLogger(prefix)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger

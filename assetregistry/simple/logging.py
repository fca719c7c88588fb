"""Helper logging configuration for simple demos."""

from __future__ import annotations

import logging
from typing import Union

from assetregistry.core.utils.logging import PACKAGE_LOGGER, install_stdout_logger


DEMO_LOGGER_NAME = "InventoryDemo"


def configure_demo_logging(
    *,
    include_timestamp: bool = True,
    inventory_level: Union[int, str] = logging.WARNING,
) -> logging.Logger:
    """
    Set up the demo narrator logger and the inventory's own trace logger.

    Every inventory call logs at INFO, so demos default ``inventory_level`` to
    WARNING; pass ``"INFO"`` to watch each operation.
    """
    inventory_logger = install_stdout_logger(inventory_level, include_timestamp=include_timestamp, prefix=PACKAGE_LOGGER)
    inventory_logger.propagate = False
    return install_stdout_logger(logging.INFO, include_timestamp=include_timestamp, prefix=DEMO_LOGGER_NAME)

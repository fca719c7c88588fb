"""
Exception types raised by the inventory.

Missing records are never errors: lookups and deletions by unknown id return
``None`` and absent criteria produce neutral results.
"""

from __future__ import annotations


class InventoryError(Exception):
    """Base class for all inventory errors."""


class InvalidArgumentError(InventoryError, ValueError):
    """A required argument (asset field, asset or asset list) was ``None``."""


class AssetValidationError(InventoryError, ValueError):
    """An asset attribute failed validation (non-positive cores/memory, unknown enum name)."""


class ConfigError(InventoryError, ValueError):
    """The YAML configuration is malformed."""

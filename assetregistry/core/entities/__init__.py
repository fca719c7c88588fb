"""
Domain entities used throughout the inventory.
"""

from assetregistry.config.policy import CPU, OperatingSystem  # noqa: F401

from .asset import Asset, build_asset  # noqa: F401

__all__ = [
    "Asset",
    "CPU",
    "OperatingSystem",
    "build_asset",
]

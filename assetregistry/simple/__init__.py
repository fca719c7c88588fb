"""
Helpers for demos and scripts built on top of :class:`assetregistry.core.Inventory`.
"""

from .logging import DEMO_LOGGER_NAME, configure_demo_logging  # noqa: F401
from .render import describe_assets, format_asset_row, pretty_print_summary  # noqa: F401

__all__ = [
    "DEMO_LOGGER_NAME",
    "configure_demo_logging",
    "describe_assets",
    "format_asset_row",
    "pretty_print_summary",
]

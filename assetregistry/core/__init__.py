"""
Core package bootstrap for the inventory runtime.

Re-exports the primary façade class so callers can simply do::

    from assetregistry.core import Inventory
"""

from __future__ import annotations

from assetregistry.core.inventory import Inventory

__all__ = ["Inventory"]

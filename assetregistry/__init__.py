"""
assetregistry package.

In-memory inventory of compute assets with criteria based search and
aggregation. Public symbols are resolved lazily so packaging tools can read
metadata without importing PyYAML.
"""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "ALL",
    "Asset",
    "CPU",
    "Inventory",
    "OperatingSystem",
    "QueryCriteria",
    "__version__",
]


try:
    __version__ = version("assetregistry-core")
except PackageNotFoundError:
    __version__ = "0.0.0"


_LAZY_TARGETS = {
    "ALL": ("assetregistry.core.query", "ALL"),
    "Asset": ("assetregistry.core.entities", "Asset"),
    "CPU": ("assetregistry.config.policy", "CPU"),
    "Inventory": ("assetregistry.core.inventory", "Inventory"),
    "OperatingSystem": ("assetregistry.config.policy", "OperatingSystem"),
    "QueryCriteria": ("assetregistry.core.query", "QueryCriteria"),
}


def __getattr__(name: str):
    """Dynamically load public symbols on first access."""
    target = _LAZY_TARGETS.get(name)
    if target is None:
        raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

    module_name, attribute = target
    module = import_module(module_name)
    value = getattr(module, attribute)
    globals()[name] = value  # cache for subsequent lookups
    return value

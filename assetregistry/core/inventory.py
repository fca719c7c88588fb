"""
Client-facing Inventory façade.

The façade owns one :class:`AssetStore` and one :class:`QueryEngine` and
exposes the registry and query operations as a synchronous API. Every
operation runs under a single re-entrant lock so that match-then-remove in
:meth:`Inventory.delete_assets` cannot interleave with other calls.

Typical usage::

    inventory = Inventory()
    asset_id = inventory.add_asset(Asset.create(os="linux", cpu="amd", cores=12, memory=32))
    inventory.search(QueryCriteria.build(cpu="amd"))
    inventory.total_cores()                  # whole inventory
    inventory.total_cores(QueryCriteria())   # empty criteria -> 0
"""

from __future__ import annotations

import logging
import threading
from contextlib import nullcontext
from typing import Any, ContextManager, Dict, List, Optional, Sequence

from assetregistry.core.config import InventoryConfig, get_inventory_config
from assetregistry.core.entities.asset import Asset
from assetregistry.core.query.criteria import QueryCriteria
from assetregistry.core.query.engine import ALL, CriteriaArg, CriteriaList, QueryEngine, describe_criteria_list
from assetregistry.core.store import AssetStore
from assetregistry.core.utils import configure_runtime_logging

logger = logging.getLogger(__name__)


class Inventory:
    """In-memory compute asset inventory."""

    def __init__(self, name: str = "default", *, thread_safe: bool = True) -> None:
        self.name = name
        self._store = AssetStore()
        self._engine = QueryEngine(self._store)
        self._lock: Optional[threading.RLock] = threading.RLock() if thread_safe else None

    @classmethod
    def from_config(cls, config: Optional[InventoryConfig] = None) -> "Inventory":
        """Build an inventory from YAML configuration and apply its logging settings."""
        if config is None:
            config = get_inventory_config()
        fmt = "%(asctime)s [%(name)s] %(levelname)s %(message)s" if config.include_timestamp else "[%(levelname)s] %(message)s"
        configure_runtime_logging(config.log_level, logging.Formatter(fmt, datefmt="%H:%M:%S"))
        inventory = cls(config.name, thread_safe=config.thread_safe)
        logger.info("Inventory[%s] initialised (thread_safe=%s)", config.name, config.thread_safe)
        return inventory

    def _guard(self) -> ContextManager[Any]:
        return self._lock if self._lock is not None else nullcontext()

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"Inventory(name={self.name!r}, assets={len(self._store)})"

    # ---------------------------------------------------------------------
    # Registry operations
    # ---------------------------------------------------------------------

    def add_asset(self, asset: Asset) -> str:
        """Add ``asset`` and return its id. Raises :class:`InvalidArgumentError` on ``None``."""
        with self._guard():
            asset_id = self._store.insert(asset)
        logger.info("addAsset: %s", asset)
        return asset_id

    def add_assets(self, assets: Sequence[Asset]) -> List[str]:
        """Add assets one at a time; ids are returned in input order."""
        with self._guard():
            ids = self._store.insert_all(assets)
        logger.info("addAssets: added %d assets to inventory[%s]", len(ids), self.name)
        return ids

    def get_asset_by_id(self, asset_id: str) -> Optional[Asset]:
        logger.info("getAssetById %s", asset_id)
        with self._guard():
            return self._store.get_by_id(asset_id)

    def delete_asset_by_id(self, asset_id: str) -> Optional[Asset]:
        logger.info("delete asset with id: %s", asset_id)
        with self._guard():
            return self._store.remove_by_id(asset_id)

    def delete_assets_by_ids(self, asset_ids: Sequence[str]) -> List[Asset]:
        logger.info("deleteAssetsByIds: deleting a list of assets by id")
        with self._guard():
            return self._store.remove_all(asset_ids)

    def delete_assets(self, criteria: CriteriaArg) -> List[Asset]:
        if criteria is None:
            logger.info("Input criteria is null, returning empty list")
            return []
        logger.info("deleteAssets matching %s", criteria)
        with self._guard():
            return self._engine.delete_assets(criteria)

    def delete_assets_all(self, criteria_list: CriteriaList) -> List[Asset]:
        if criteria_list is None:
            logger.info("Input criteria is null, returning empty list")
            return []
        logger.info("Deleting assets matching any of %s", describe_criteria_list(criteria_list))
        with self._guard():
            return self._engine.delete_assets_all(criteria_list)

    # ---------------------------------------------------------------------
    # Full inventory helpers
    # ---------------------------------------------------------------------

    def get_full_inventory(self) -> List[Asset]:
        with self._guard():
            return self._engine.full_inventory()

    def get_full_inventory_size(self) -> int:
        with self._guard():
            return self._engine.full_inventory_size()

    def summary(self) -> Dict[str, int]:
        """Aggregate snapshot of the whole inventory, taken under one lock."""
        with self._guard():
            return {
                "total_assets": self._engine.total_assets(),
                "total_cores": self._engine.total_cores(),
                "total_memory": self._engine.total_memory(),
                "max_cores": self._engine.max_cores(),
                "max_memory": self._engine.max_memory(),
                "min_cores": self._engine.min_cores(),
                "min_memory": self._engine.min_memory(),
            }

    # ---------------------------------------------------------------------
    # Single criteria queries
    # ---------------------------------------------------------------------

    def search(self, criteria: CriteriaArg) -> List[Asset]:
        """
        Return assets matching ``criteria``.

        ``None`` or an empty criteria value returns an empty list; :data:`ALL`
        returns every asset, like :meth:`get_full_inventory`.
        """
        if criteria is ALL:
            return self.get_full_inventory()
        if criteria is None or criteria.is_empty():
            return []
        logger.info("search for assets matching criteria: %s", criteria)
        with self._guard():
            return self._engine.search(criteria)

    def total_assets(self, criteria: CriteriaArg = ALL) -> int:
        logger.info("totaling assets matching criteria: %s", criteria)
        with self._guard():
            return self._engine.total_assets(criteria)

    def total_memory(self, criteria: CriteriaArg = ALL) -> int:
        logger.info("totalMemory for criteria: %s", criteria)
        with self._guard():
            return self._engine.total_memory(criteria)

    def total_cores(self, criteria: CriteriaArg = ALL) -> int:
        logger.info("totalCores for criteria: %s", criteria)
        with self._guard():
            return self._engine.total_cores(criteria)

    def max_memory(self, criteria: CriteriaArg = ALL) -> int:
        logger.info("maxMemory for criteria: %s", criteria)
        with self._guard():
            return self._engine.max_memory(criteria)

    def max_cores(self, criteria: CriteriaArg = ALL) -> int:
        logger.info("maxCores for criteria: %s", criteria)
        with self._guard():
            return self._engine.max_cores(criteria)

    def min_memory(self, criteria: CriteriaArg = ALL) -> int:
        logger.info("minMemory for criteria: %s", criteria)
        with self._guard():
            return self._engine.min_memory(criteria)

    def min_cores(self, criteria: CriteriaArg = ALL) -> int:
        logger.info("minCores for criteria: %s", criteria)
        with self._guard():
            return self._engine.min_cores(criteria)

    # ---------------------------------------------------------------------
    # Criteria list queries (OR across the list)
    # ---------------------------------------------------------------------

    def search_all(self, criteria_list: CriteriaList) -> List[Asset]:
        """Concatenate :meth:`search` results; an asset matching two entries appears twice."""
        logger.info("search for assets matching any of %s", describe_criteria_list(criteria_list))
        with self._guard():
            return self._engine.search_all(criteria_list)

    def total_assets_all(self, criteria_list: CriteriaList) -> int:
        if criteria_list is None:
            logger.info("Input criteria is null, returning 0.")
        with self._guard():
            return self._engine.total_assets_all(criteria_list)

    def total_memory_all(self, criteria_list: CriteriaList) -> int:
        if criteria_list is None:
            logger.info("Input criteria is null, returning 0.")
        with self._guard():
            return self._engine.total_memory_all(criteria_list)

    def total_cores_all(self, criteria_list: CriteriaList) -> int:
        if criteria_list is None:
            logger.info("Input criteria is null, returning 0.")
        with self._guard():
            return self._engine.total_cores_all(criteria_list)

    def max_memory_all(self, criteria_list: CriteriaList) -> int:
        if criteria_list is None:
            logger.info("Input criteria is null, returning 0.")
        with self._guard():
            return self._engine.max_memory_all(criteria_list)

    def max_cores_all(self, criteria_list: CriteriaList) -> int:
        if criteria_list is None:
            logger.info("Input criteria is null, returning 0.")
        with self._guard():
            return self._engine.max_cores_all(criteria_list)

    def min_memory_all(self, criteria_list: CriteriaList) -> int:
        """Minimum over per-criterion minima; ``[]`` returns ``MIN_SENTINEL``, ``None`` returns 0."""
        if criteria_list is None:
            logger.info("Input criteria is null, returning 0.")
        with self._guard():
            return self._engine.min_memory_all(criteria_list)

    def min_cores_all(self, criteria_list: CriteriaList) -> int:
        if criteria_list is None:
            logger.info("Input criteria is null, returning 0.")
        with self._guard():
            return self._engine.min_cores_all(criteria_list)

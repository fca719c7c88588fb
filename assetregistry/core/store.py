"""
Central asset store.

Owns the id -> Asset mapping. The store is a plain container with no locking
of its own; :class:`assetregistry.core.inventory.Inventory` serialises access.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from assetregistry.config.policy import NON_NULL_ARGUMENT
from assetregistry.core.entities.asset import Asset
from assetregistry.core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class AssetStore:
    """In-memory registry keyed by ``asset_id``."""

    def __init__(self) -> None:
        self.records: Dict[str, Asset] = {}

    def insert(self, asset: Asset) -> str:
        """Store ``asset`` under its id (overwriting an existing entry) and return the id."""
        if asset is None:
            raise InvalidArgumentError(NON_NULL_ARGUMENT)
        self.records[asset.asset_id] = asset
        return asset.asset_id

    def insert_all(self, assets: Iterable[Asset]) -> List[str]:
        if assets is None:
            raise InvalidArgumentError(NON_NULL_ARGUMENT)
        return [self.insert(asset) for asset in assets]

    def get_by_id(self, asset_id: str) -> Optional[Asset]:
        return self.records.get(asset_id)

    def remove_by_id(self, asset_id: str) -> Optional[Asset]:
        return self.records.pop(asset_id, None)

    def remove_all(self, asset_ids: Iterable[str]) -> List[Asset]:
        """Remove each id in order, skipping unknown ids."""
        removed: List[Asset] = []
        for asset_id in asset_ids or ():
            asset = self.remove_by_id(asset_id)
            if asset is not None:
                removed.append(asset)
        return removed

    def all_entries(self) -> List[Tuple[str, Asset]]:
        """Snapshot of every ``(asset_id, asset)`` pair in scan order."""
        return list(self.records.items())

    def clear(self) -> None:
        logger.debug("Clearing %d assets from store", len(self.records))
        self.records.clear()

    def __len__(self) -> int:
        return len(self.records)

    def __contains__(self, asset_id: object) -> bool:
        return asset_id in self.records

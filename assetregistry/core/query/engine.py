"""
Query engine evaluating criteria against an :class:`AssetStore`.

Aggregate methods take an optional criteria argument defaulting to :data:`ALL`,
which selects the whole store. This is distinct from an *empty*
:class:`QueryCriteria`, which matches nothing, and from an explicit ``None``,
which is treated as "no filter given" and yields a neutral result.

Criteria lists are combined with OR:

* ``search_all`` concatenates per-criterion results, so an asset matching two
  entries is returned twice.
* ``delete_assets_all`` removes per criterion in list order; an asset is
  removed (and reported) only by the first criterion that matches it.
* ``total_*_all`` sums per-criterion totals, ``max_*_all`` takes the maximum
  of the per-criterion maxima, ``min_*_all`` the minimum of the per-criterion
  minima seeded at :data:`MIN_SENTINEL`.
"""

from __future__ import annotations

import logging
import operator
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from assetregistry.config.policy import EMPTY_AGGREGATE, MIN_SENTINEL
from assetregistry.core.entities.asset import Asset
from assetregistry.core.query.criteria import QueryCriteria, build_predicate
from assetregistry.core.store import AssetStore

logger = logging.getLogger(__name__)


class _WholeInventory:
    """Marker selecting every asset in the store."""

    _instance: Optional["_WholeInventory"] = None

    def __new__(cls) -> "_WholeInventory":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ALL"


ALL = _WholeInventory()

CriteriaArg = Union[QueryCriteria, _WholeInventory, None]
CriteriaList = Optional[Sequence[CriteriaArg]]


class QueryEngine:
    """Search, delete and aggregate assets held by an :class:`AssetStore`."""

    def __init__(self, store: AssetStore):
        self.store = store

    # ------------------------------------------------------------------
    # Matching

    def _matching_entries(self, criteria: CriteriaArg) -> List[Tuple[str, Asset]]:
        entries = self.store.all_entries()
        if criteria is ALL:
            return entries
        predicate = build_predicate(criteria)
        return [(asset_id, asset) for asset_id, asset in entries if predicate(asset)]

    def full_inventory(self) -> List[Asset]:
        return [asset for _, asset in self.store.all_entries()]

    def full_inventory_size(self) -> int:
        return len(self.store)

    # ------------------------------------------------------------------
    # Search / delete

    def search(self, criteria: CriteriaArg) -> List[Asset]:
        """Assets matching ``criteria``; ``None`` and empty criteria return ``[]``."""
        return [asset for _, asset in self._matching_entries(criteria)]

    def search_all(self, criteria_list: CriteriaList) -> List[Asset]:
        if criteria_list is None:
            return []
        result: List[Asset] = []
        for criteria in criteria_list:
            result.extend(self.search(criteria))
        return result

    def delete_assets(self, criteria: CriteriaArg) -> List[Asset]:
        """Remove every asset matching ``criteria`` and return the removed assets."""
        if criteria is None or criteria is ALL or criteria.is_empty():
            return []

        matched = self._matching_entries(criteria)
        removed: List[Asset] = []
        for asset_id, _ in matched:
            asset = self.store.remove_by_id(asset_id)
            if asset is not None:
                removed.append(asset)
        logger.debug("Removed %d assets matching %s", len(removed), criteria)
        return removed

    def delete_assets_all(self, criteria_list: CriteriaList) -> List[Asset]:
        if criteria_list is None:
            return []
        removed: List[Asset] = []
        for criteria in criteria_list:
            removed.extend(self.delete_assets(criteria))
        return removed

    # ------------------------------------------------------------------
    # Single criteria aggregates

    def _values(self, criteria: CriteriaArg, attribute: str) -> List[int]:
        return [getattr(asset, attribute) for _, asset in self._matching_entries(criteria)]

    def total_assets(self, criteria: CriteriaArg = ALL) -> int:
        return len(self._matching_entries(criteria))

    def total_memory(self, criteria: CriteriaArg = ALL) -> int:
        return sum(self._values(criteria, "memory"))

    def total_cores(self, criteria: CriteriaArg = ALL) -> int:
        return sum(self._values(criteria, "cores"))

    def max_memory(self, criteria: CriteriaArg = ALL) -> int:
        return max(self._values(criteria, "memory"), default=EMPTY_AGGREGATE)

    def max_cores(self, criteria: CriteriaArg = ALL) -> int:
        return max(self._values(criteria, "cores"), default=EMPTY_AGGREGATE)

    def min_memory(self, criteria: CriteriaArg = ALL) -> int:
        return min(self._values(criteria, "memory"), default=EMPTY_AGGREGATE)

    def min_cores(self, criteria: CriteriaArg = ALL) -> int:
        return min(self._values(criteria, "cores"), default=EMPTY_AGGREGATE)

    # ------------------------------------------------------------------
    # Criteria list aggregates

    @staticmethod
    def _reduce(
        criteria_list: CriteriaList,
        aggregate: Callable[[CriteriaArg], int],
        combine: Callable[[int, int], int],
        seed: int,
    ) -> int:
        if criteria_list is None:
            return EMPTY_AGGREGATE
        result = seed
        for criteria in criteria_list:
            result = combine(result, aggregate(criteria))
        return result

    def total_assets_all(self, criteria_list: CriteriaList) -> int:
        return self._reduce(criteria_list, self.total_assets, operator.add, 0)

    def total_memory_all(self, criteria_list: CriteriaList) -> int:
        return self._reduce(criteria_list, self.total_memory, operator.add, 0)

    def total_cores_all(self, criteria_list: CriteriaList) -> int:
        return self._reduce(criteria_list, self.total_cores, operator.add, 0)

    def max_memory_all(self, criteria_list: CriteriaList) -> int:
        return self._reduce(criteria_list, self.max_memory, max, EMPTY_AGGREGATE)

    def max_cores_all(self, criteria_list: CriteriaList) -> int:
        return self._reduce(criteria_list, self.max_cores, max, EMPTY_AGGREGATE)

    def min_memory_all(self, criteria_list: CriteriaList) -> int:
        return self._reduce(criteria_list, self.min_memory, min, MIN_SENTINEL)

    def min_cores_all(self, criteria_list: CriteriaList) -> int:
        return self._reduce(criteria_list, self.min_cores, min, MIN_SENTINEL)


def describe_criteria_list(criteria_list: Optional[Iterable[CriteriaArg]]) -> List[str]:
    """Describe each element of ``criteria_list`` for log output."""
    if criteria_list is None:
        return []
    described: List[str] = []
    for criteria in criteria_list:
        if isinstance(criteria, QueryCriteria):
            described.append(criteria.describe())
        else:
            described.append(repr(criteria))
    return described

"""
Criteria model and query engine for the inventory.
"""

from __future__ import annotations

from .criteria import AssetPredicate, QueryCriteria, build_predicate
from .engine import ALL, QueryEngine, describe_criteria_list

__all__ = [
    "ALL",
    "AssetPredicate",
    "QueryCriteria",
    "QueryEngine",
    "build_predicate",
    "describe_criteria_list",
]

"""
Query criteria used to filter the inventory.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Callable, List, Optional, Union

from assetregistry.config.policy import CPU, OperatingSystem, normalize_cpu, normalize_operating_system
from assetregistry.core.entities.asset import Asset, require_positive_int
from assetregistry.core.errors import AssetValidationError

AssetPredicate = Callable[[Asset], bool]


def _match_nothing(_asset: Asset) -> bool:
    return False


@dataclass(frozen=True)
class QueryCriteria:
    """
    Sparse filter over asset attributes.

    Every field is optional; ``None`` means "do not constrain on this
    attribute". An asset matches when all present fields are equal to its
    attributes. A criteria value with no fields set is *empty* and matches no
    assets at all.
    """

    os: Optional[OperatingSystem] = None
    cpu: Optional[CPU] = None
    cores: Optional[int] = None
    memory: Optional[int] = None

    def __post_init__(self) -> None:
        if self.os is not None:
            os_value = normalize_operating_system(self.os)
            if os_value is None:
                raise AssetValidationError(f"Unknown operating system: {self.os!r}")
            object.__setattr__(self, "os", os_value)
        if self.cpu is not None:
            cpu_value = normalize_cpu(self.cpu)
            if cpu_value is None:
                raise AssetValidationError(f"Unknown CPU: {self.cpu!r}")
            object.__setattr__(self, "cpu", cpu_value)
        for name in ("cores", "memory"):
            value = getattr(self, name)
            if value is not None:
                require_positive_int(name, value)

    @classmethod
    def build(
        cls,
        *,
        os: Union[OperatingSystem, str, None] = None,
        cpu: Union[CPU, str, None] = None,
        cores: Optional[int] = None,
        memory: Optional[int] = None,
    ) -> "QueryCriteria":
        return cls(os=os, cpu=cpu, cores=cores, memory=memory)

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def describe(self) -> str:
        present = [f"{f.name}={getattr(self, f.name)!s}" for f in fields(self) if getattr(self, f.name) is not None]
        if not present:
            return "<empty>"
        return ", ".join(present)

    def matches(self, asset: Asset) -> bool:
        return build_predicate(self)(asset)

    def __str__(self) -> str:
        return f"QueryCriteria({self.describe()})"


def build_predicate(criteria: Optional[QueryCriteria]) -> AssetPredicate:
    """
    Compose a single predicate from the present fields of ``criteria``.

    The predicate is the logical AND of one equality check per present field.
    ``None`` and empty criteria yield a predicate that rejects every asset.
    """
    if criteria is None or criteria.is_empty():
        return _match_nothing

    checks: List[AssetPredicate] = []
    if criteria.os is not None:
        checks.append(lambda asset, expected=criteria.os: asset.os == expected)
    if criteria.cpu is not None:
        checks.append(lambda asset, expected=criteria.cpu: asset.cpu == expected)
    if criteria.cores is not None:
        checks.append(lambda asset, expected=criteria.cores: asset.cores == expected)
    if criteria.memory is not None:
        checks.append(lambda asset, expected=criteria.memory: asset.memory == expected)

    def _predicate(asset: Asset) -> bool:
        return all(check(asset) for check in checks)

    return _predicate

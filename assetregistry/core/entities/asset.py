"""
Asset entity definitions.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Union

from assetregistry.config.policy import (
    CPU,
    NON_NULL_MESSAGE,
    POSITIVE_ARG_MESSAGE,
    OperatingSystem,
    normalize_cpu,
    normalize_operating_system,
)
from assetregistry.core.errors import AssetValidationError, InvalidArgumentError


def _new_asset_id() -> str:
    return str(uuid.uuid4())


def require_positive_int(name: str, value: Any) -> int:
    """Return ``value`` if it is a positive ``int`` (``bool`` excluded), else raise."""
    if value is None:
        raise InvalidArgumentError(f"{NON_NULL_MESSAGE}: '{name}' is missing")
    if isinstance(value, bool) or not isinstance(value, int):
        raise AssetValidationError(f"Asset '{name}' must be an integer, got {value!r}")
    if value <= 0:
        raise AssetValidationError(f"{POSITIVE_ARG_MESSAGE} ({name}={value})")
    return value


@dataclass(frozen=True)
class Asset:
    """
    One compute asset in the inventory.

    All four descriptive attributes are required. ``asset_id`` is generated
    at construction time and never changes; instances are immutable.

    Attributes:
        os: Operating system (enum member or case-insensitive name).
        cpu: CPU vendor (enum member or case-insensitive name).
        cores: Number of cores, must be positive.
        memory: Memory in GB, must be positive.
        asset_id: Unique identifier, a random UUID unless restored via
            :meth:`from_dict`.

    Raises:
        InvalidArgumentError: if any attribute is ``None``.
        AssetValidationError: if cores/memory are not positive integers or an
            enum name is unknown, or ``asset_id`` is not a non-empty string.
    """

    os: OperatingSystem
    cpu: CPU
    cores: int
    memory: int
    asset_id: str = field(default_factory=_new_asset_id)

    def __post_init__(self) -> None:
        if self.os is None or self.cpu is None:
            raise InvalidArgumentError(NON_NULL_MESSAGE)

        os_value = normalize_operating_system(self.os)
        if os_value is None:
            raise AssetValidationError(f"Unknown operating system: {self.os!r}")
        cpu_value = normalize_cpu(self.cpu)
        if cpu_value is None:
            raise AssetValidationError(f"Unknown CPU: {self.cpu!r}")

        # frozen dataclass: coerced values are written through object.__setattr__
        object.__setattr__(self, "os", os_value)
        object.__setattr__(self, "cpu", cpu_value)
        object.__setattr__(self, "cores", require_positive_int("cores", self.cores))
        object.__setattr__(self, "memory", require_positive_int("memory", self.memory))

        if not isinstance(self.asset_id, str) or not self.asset_id.strip():
            raise AssetValidationError(f"Asset id must be a non-empty string, got {self.asset_id!r}")

    @classmethod
    def create(
        cls,
        *,
        os: Union[OperatingSystem, str],
        cpu: Union[CPU, str],
        cores: int,
        memory: int,
    ) -> "Asset":
        """Build a validated asset with a freshly generated id."""
        return cls(os=os, cpu=cpu, cores=cores, memory=memory)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "asset_id": self.asset_id,
            "os": self.os.value,
            "cpu": self.cpu.value,
            "cores": self.cores,
            "memory": self.memory,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Asset":
        """
        从字典恢复 Asset 对象

        The ``asset_id`` key is optional; a new id is generated when it is
        missing.
        """
        if payload is None:
            raise InvalidArgumentError(NON_NULL_MESSAGE)
        kwargs: Dict[str, Any] = {
            "os": payload.get("os"),
            "cpu": payload.get("cpu"),
            "cores": payload.get("cores"),
            "memory": payload.get("memory"),
        }
        asset_id = payload.get("asset_id")
        if asset_id:
            kwargs["asset_id"] = str(asset_id)
        return cls(**kwargs)

    def __str__(self) -> str:
        return (
            f"Asset ID: {self.asset_id} Operating System: {self.os.name} CPU: {self.cpu.name}"
            f" Cores: {self.cores} Memory (GB): {self.memory}"
        )


def build_asset(
    *,
    os: Union[OperatingSystem, str],
    cpu: Union[CPU, str],
    cores: int,
    memory: int,
) -> Asset:
    """Functional alias of :meth:`Asset.create`."""
    return Asset.create(os=os, cpu=cpu, cores=cores, memory=memory)

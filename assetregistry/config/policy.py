"""
Inventory policy definitions and constants.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Dict, Optional, Type, TypeVar, Union


class OperatingSystem(str, Enum):
    """
    Operating systems an asset can report.

    Using ``str`` as a mixin makes the enum JSON-serialisable and lets it
    compare equal to its lowercase value.
    """

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"


class CPU(str, Enum):
    """CPU vendors an asset can report."""

    AMD = "amd"
    APPLE_SILICON = "apple_silicon"
    INTEL = "intel"


EnumT = TypeVar("EnumT", OperatingSystem, CPU)


# Seed for the running minimum over a criteria list. An empty list returns it
# unchanged, a ``None`` list returns 0 instead.
MIN_SENTINEL: int = sys.maxsize

# Aggregates over an empty match set.
EMPTY_AGGREGATE: int = 0

NON_NULL_ARGUMENT = "Cannot add a null object to the inventory."
NON_NULL_MESSAGE = "Asset cannot be created with null arguments"
POSITIVE_ARG_MESSAGE = "Asset requires non-zero, positive arguments for cores and memory"


OPERATING_SYSTEM_ALIASES: Dict[str, str] = {
    "win": OperatingSystem.WINDOWS.value,
    "windows": OperatingSystem.WINDOWS.value,
    "mac": OperatingSystem.MACOS.value,
    "macos": OperatingSystem.MACOS.value,
    "osx": OperatingSystem.MACOS.value,
    "darwin": OperatingSystem.MACOS.value,
    "linux": OperatingSystem.LINUX.value,
}


CPU_ALIASES: Dict[str, str] = {
    "amd": CPU.AMD.value,
    "apple": CPU.APPLE_SILICON.value,
    "apple_silicon": CPU.APPLE_SILICON.value,
    "apple-silicon": CPU.APPLE_SILICON.value,
    "apple_sillicon": CPU.APPLE_SILICON.value,
    "intel": CPU.INTEL.value,
}


def _resolve(
    value: Union[str, EnumT, None],
    enum_cls: Type[EnumT],
    aliases: Dict[str, str],
) -> Optional[EnumT]:
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None

    raw = value.strip().lower()
    if not raw:
        return None
    try:
        return enum_cls(aliases.get(raw, raw))
    except ValueError:
        return None


def normalize_operating_system(value: Union[str, OperatingSystem, None]) -> Optional[OperatingSystem]:
    """
    Convert user input into :class:`OperatingSystem`.

    Accepts enum members, case-insensitive names (``"LINUX"``, ``"macos"``) and
    aliases such as ``"osx"`` or ``"win"``.

    Returns:
        The normalised enum value, or ``None`` if the input is invalid.
    """
    return _resolve(value, OperatingSystem, OPERATING_SYSTEM_ALIASES)


def normalize_cpu(value: Union[str, CPU, None]) -> Optional[CPU]:
    """Convert user input into :class:`CPU`, or ``None`` if the input is invalid."""
    return _resolve(value, CPU, CPU_ALIASES)

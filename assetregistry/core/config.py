"""Configuration helpers for assetregistry.

This module loads optional YAML configuration files to customize runtime
behaviour such as locking and log output.  Configuration precedence:

1. Environment variable ``ASSETREGISTRY_CONFIG`` pointing to a YAML file.
2. ``assetregistry.yaml`` in the current working directory.
3. Built-in defaults bundled with the package (``config/default.yaml``).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

import yaml

from assetregistry.core.errors import ConfigError
from assetregistry.core.utils.logging import resolve_level

__all__ = [
    "InventoryConfig",
    "get_inventory_config",
    "load_inventory_config",
    "reset_inventory_config",
]


_ENV_VAR = "ASSETREGISTRY_CONFIG"
_CWD_FILE = "assetregistry.yaml"


@dataclass
class InventoryConfig:
    name: str = "default"
    thread_safe: bool = True
    log_level: int = logging.INFO
    include_timestamp: bool = False


_inventory_config: Optional[InventoryConfig] = None


def _resolve_config_path() -> Optional[Path]:
    env_path = os.environ.get(_ENV_VAR)
    if env_path:
        candidate = Path(env_path).expanduser()
        if candidate.is_file():
            return candidate

    cwd_file = Path.cwd() / _CWD_FILE
    if cwd_file.is_file():
        return cwd_file
    return None


def _load_yaml_dict(path: Optional[Path] = None) -> Dict[str, object]:
    if path is None:
        path = _resolve_config_path()
    if path is not None:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    else:
        # Fallback to bundled default configuration
        from importlib import resources

        with resources.files("assetregistry.config").joinpath("default.yaml").open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}

    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a mapping")
    return data


def _section(data: Dict[str, object], key: str) -> Dict[str, object]:
    node = data.get(key) or {}
    if not isinstance(node, dict):
        raise ConfigError(f"'{key}' section must be a mapping")
    return node


def _build_inventory_config(data: Dict[str, object]) -> InventoryConfig:
    inventory = _section(data, "inventory")
    log_section = _section(data, "logging")

    name = str(inventory.get("name", "default")).strip() or "default"
    thread_safe = inventory.get("thread_safe", True)
    if not isinstance(thread_safe, bool):
        raise ConfigError("'inventory.thread_safe' must be a boolean")

    try:
        log_level = resolve_level(log_section.get("level", "INFO"))
    except ValueError as exc:
        raise ConfigError(f"Invalid 'logging.level': {exc}") from exc
    include_timestamp = bool(log_section.get("include_timestamp", False))

    return InventoryConfig(
        name=name,
        thread_safe=thread_safe,
        log_level=log_level,
        include_timestamp=include_timestamp,
    )


def load_inventory_config(path: Optional[Path] = None) -> InventoryConfig:
    """Parse a configuration file without touching the cached configuration."""
    return _build_inventory_config(_load_yaml_dict(path))


def get_inventory_config() -> InventoryConfig:
    global _inventory_config
    if _inventory_config is None:
        _inventory_config = load_inventory_config()
    return _inventory_config


def reset_inventory_config() -> None:
    """Reset cached inventory configuration (intended for tests)."""
    global _inventory_config
    _inventory_config = None

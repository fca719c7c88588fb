"""
Shared pytest fixtures.
"""

from __future__ import annotations

import logging

import pytest

from assetregistry.config.policy import CPU, OperatingSystem
from assetregistry.core.config import reset_inventory_config
from assetregistry.core.entities.asset import Asset
from assetregistry.core.inventory import Inventory

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s", force=True)
logging.getLogger("assetregistry").setLevel(logging.DEBUG)


@pytest.fixture
def make_asset():
    """Factory for assets with sensible defaults."""

    def _make(
        os: OperatingSystem = OperatingSystem.LINUX,
        cpu: CPU = CPU.INTEL,
        cores: int = 12,
        memory: int = 32,
    ) -> Asset:
        return Asset.create(os=os, cpu=cpu, cores=cores, memory=memory)

    return _make


@pytest.fixture
def inventory():
    """Provide an isolated, empty Inventory instance per test."""
    return Inventory(name="test-inventory")


@pytest.fixture
def populated_inventory(inventory, make_asset):
    """Inventory with one asset per OS/CPU pairing used across the query tests."""
    inventory.add_assets(
        [
            make_asset(OperatingSystem.WINDOWS, CPU.AMD, 32, 128),
            make_asset(OperatingSystem.WINDOWS, CPU.INTEL, 8, 16),
            make_asset(OperatingSystem.MACOS, CPU.APPLE_SILICON, 24, 128),
            make_asset(OperatingSystem.MACOS, CPU.INTEL, 12, 32),
            make_asset(OperatingSystem.LINUX, CPU.AMD, 64, 256),
            make_asset(OperatingSystem.LINUX, CPU.INTEL, 16, 64),
        ]
    )
    return inventory


@pytest.fixture(autouse=True)
def clear_config(monkeypatch):
    monkeypatch.delenv("ASSETREGISTRY_CONFIG", raising=False)
    reset_inventory_config()
    yield
    reset_inventory_config()


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handler/level/propagation changes made by logging helpers."""
    logger = logging.getLogger("assetregistry")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    handlers, level, propagate = saved
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate

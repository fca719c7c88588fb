"""
Tests for the demo rendering and logging helpers.
"""

from __future__ import annotations

import logging

from assetregistry.core.utils import configure_runtime_logging, install_stdout_logger
from assetregistry.simple import (
    DEMO_LOGGER_NAME,
    configure_demo_logging,
    describe_assets,
    format_asset_row,
    pretty_print_summary,
)


def test_pretty_print_summary(populated_inventory, capsys):
    pretty_print_summary(populated_inventory.summary(), "Inventory")
    out = capsys.readouterr().out

    assert out.startswith("Inventory")
    assert "156" in out
    assert "8 - 64" in out


def test_describe_assets_lists_rows(populated_inventory, capsys):
    assets = populated_inventory.get_full_inventory()
    describe_assets("All", assets)
    out = capsys.readouterr().out

    for asset in assets:
        assert format_asset_row(asset) in out


def test_describe_assets_empty(capsys):
    describe_assets("None", [])
    assert "无匹配资产" in capsys.readouterr().out


def test_configure_demo_logging_replaces_handlers():
    first = configure_demo_logging(include_timestamp=False)
    second = configure_demo_logging()
    assert first is second
    assert second.name == DEMO_LOGGER_NAME
    assert len(second.handlers) == 1


def test_configure_demo_logging_quiets_inventory_traces(populated_inventory, capsys):
    configure_demo_logging(include_timestamp=False)
    populated_inventory.total_cores()
    assert "totalCores" not in capsys.readouterr().out

    configure_demo_logging(include_timestamp=False, inventory_level="INFO")
    populated_inventory.total_cores()
    assert "[assetregistry.core.inventory] INFO totalCores" in capsys.readouterr().out


def test_configure_runtime_logging_is_idempotent():
    configure_runtime_logging("DEBUG")
    logger = configure_runtime_logging(logging.INFO)

    tagged = [h for h in logger.handlers if getattr(h, "_assetregistry_stream_handler", False)]
    assert logger.name == "assetregistry"
    assert len(tagged) == 1
    assert tagged[0].level == logging.INFO
    assert logger.propagate is False
    assert not any(getattr(h, "_assetregistry_stream_handler", False) for h in logging.getLogger().handlers)


def test_install_stdout_logger():
    logger = install_stdout_logger("WARNING", include_timestamp=False, prefix="assetregistry-test")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1

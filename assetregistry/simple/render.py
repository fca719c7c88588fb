"""Rendering helpers for friendly CLI/demo output."""

from __future__ import annotations

from typing import Any, Dict, Sequence

from assetregistry.core.entities.asset import Asset


def format_asset_row(asset: Asset) -> str:
    return (
        f"{asset.asset_id[:8]}  {asset.os.name:<8} {asset.cpu.name:<14}"
        f" cores={asset.cores:<4} memory={asset.memory}GB"
    )


def describe_assets(title: str, assets: Sequence[Asset]) -> None:
    print(title)
    if not assets:
        print("  - 无匹配资产\n")
        return
    print(f"  - 数量: {len(assets)}")
    for asset in assets:
        print(f"    • {format_asset_row(asset)}")
    print()


def pretty_print_summary(summary: Dict[str, Any], title: str) -> None:
    print(title)
    print(f"  - 资产总数: {summary.get('total_assets', 0)}")
    print(f"  - 核心总数: {summary.get('total_cores', 0)}")
    print(f"  - 内存总量: {summary.get('total_memory', 0)} GB")
    print(f"  - 核心范围: {summary.get('min_cores', 0)} - {summary.get('max_cores', 0)}")
    print(f"  - 内存范围: {summary.get('min_memory', 0)} - {summary.get('max_memory', 0)} GB")
    print()

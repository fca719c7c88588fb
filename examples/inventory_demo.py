"""
Inventory walkthrough: populate, query with single and multiple criteria,
aggregate and delete.

Run with::

    python examples/inventory_demo.py
"""

from __future__ import annotations

from assetregistry import Asset, Inventory, QueryCriteria
from assetregistry.simple import configure_demo_logging, describe_assets, pretty_print_summary


def main() -> None:
    inventory = Inventory.from_config()
    # after from_config so the demo level wins over the configured one
    logger = configure_demo_logging(include_timestamp=False)

    inventory.add_assets(
        [
            Asset.create(os="windows", cpu="amd", cores=32, memory=128),
            Asset.create(os="windows", cpu="intel", cores=8, memory=16),
            Asset.create(os="macos", cpu="apple_silicon", cores=24, memory=128),
            Asset.create(os="macos", cpu="intel", cores=12, memory=32),
            Asset.create(os="linux", cpu="amd", cores=64, memory=256),
            Asset.create(os="linux", cpu="intel", cores=16, memory=64),
        ]
    )
    pretty_print_summary(inventory.summary(), "=== 初始库存 ===")

    amd = QueryCriteria.build(cpu="amd")
    describe_assets("=== AMD 资产 ===", inventory.search(amd))
    logger.info("AMD 核心总数: %d", inventory.total_cores(amd))

    workstations = [
        QueryCriteria.build(os="windows", memory=128),
        QueryCriteria.build(os="macos", cpu="apple_silicon"),
    ]
    describe_assets("=== 工作站 (OR) ===", inventory.search_all(workstations))
    logger.info("工作站最大内存: %d GB", inventory.max_memory_all(workstations))

    logger.info("空查询条件匹配数: %d", inventory.total_assets(QueryCriteria()))

    removed = inventory.delete_assets_all(
        [QueryCriteria.build(os="linux"), QueryCriteria.build(os="linux", cpu="amd")]
    )
    describe_assets("=== 已删除 ===", removed)
    pretty_print_summary(inventory.summary(), "=== 删除后库存 ===")


if __name__ == "__main__":
    main()

import logging

import click

from wms.infrastructure.cli.inventory_commands import (
    inventory_add,
    inventory_list,
    inventory_remove,
    inventory_show,
    inventory_transfer,
    inventory_update,
)
from wms.infrastructure.cli.warehouse_commands import (
    warehouse_audit,
    warehouse_create,
    warehouse_delete,
    warehouse_items,
    warehouse_list,
    warehouse_show,
    warehouse_update,
)
from wms.infrastructure.config import settings


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log at DEBUG level.")
def cli(verbose: bool) -> None:
    """WMS — Warehouse Management System"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def warehouse() -> None:
    """Manage warehouses."""


@cli.group()
def inventory() -> None:
    """Manage inventory items."""


# Register subcommands
warehouse.add_command(warehouse_audit)
warehouse.add_command(warehouse_create)
warehouse.add_command(warehouse_delete)
warehouse.add_command(warehouse_items)
warehouse.add_command(warehouse_list)
warehouse.add_command(warehouse_show)
warehouse.add_command(warehouse_update)
inventory.add_command(inventory_add)
inventory.add_command(inventory_list)
inventory.add_command(inventory_remove)
inventory.add_command(inventory_show)
inventory.add_command(inventory_transfer)
inventory.add_command(inventory_update)

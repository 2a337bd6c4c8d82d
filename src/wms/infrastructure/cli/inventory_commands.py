"""CLI commands for inventory items."""

from __future__ import annotations

import click

from wms.application.bulk_transfer import BulkTransferHandler
from wms.application.create_item import CreateItemHandler
from wms.application.delete_item import DeleteItemHandler
from wms.application.dto import ItemDTO, ItemPatch, TransferLineSpec
from wms.application.show_items import ListItemsHandler, ShowItemHandler
from wms.application.update_item import UpdateItemHandler
from wms.domain.exceptions import DomainException
from wms.infrastructure.bootstrap import unit_of_work
from wms.infrastructure.cli.errors import to_click_exception


def _parse_lines(raw: str) -> list[TransferLineSpec]:
    """Parse 'itemId:20,itemId:5' into TransferLineSpec list."""
    specs: list[TransferLineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ItemId:Quantity'."
            )
        item_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for item '{item_id}'."
            )
        specs.append(TransferLineSpec.from_mapping({"itemId": item_id.strip(), "quantity": qty}))
    return specs


def _given(changes: dict) -> dict:
    return {key: value for key, value in changes.items() if value is not None}


def display_items(items: list[ItemDTO]) -> None:
    """Shared formatting for item tables."""
    if not items:
        click.echo("No inventory items found.")
        return

    click.echo(f"{'ID':<34} {'SKU':<10} {'Name':<20} {'Qty':>6}  {'Warehouse'}")
    click.echo("-" * 100)
    for item in items:
        click.echo(
            f"{item.id:<34} {item.sku:<10} {item.name:<20} {item.quantity:>6}  {item.warehouse_id}"
        )


@click.command("add")
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, type=int, help="Units to store.")
@click.option("--warehouse", "warehouse_id", required=True, help="Warehouse ID.")
@click.option("--sku", default=None, help="SKU; generated from the warehouse if omitted.")
@click.option("--description", default=None, help="Description.")
@click.option("--storage-location", default=None, help="Aisle / shelf.")
@click.option("--category", default=None, help="Category.")
def inventory_add(
    name: str,
    quantity: int,
    warehouse_id: str,
    sku: str | None,
    description: str | None,
    storage_location: str | None,
    category: str | None,
) -> None:
    """Add an item to a warehouse (reserves capacity)."""
    handler = CreateItemHandler(unit_of_work())

    try:
        dto = handler.handle(
            name=name,
            quantity=quantity,
            warehouse_id=warehouse_id,
            sku=sku,
            description=description,
            storage_location=storage_location,
            category=category,
        )
    except DomainException as exc:
        raise to_click_exception(exc) from exc

    click.echo(f"Item {dto.id} '{dto.name}' added as {dto.sku} ({dto.quantity} units)")


@click.command("list")
def inventory_list() -> None:
    """List all inventory items."""
    display_items(ListItemsHandler(unit_of_work()).handle())


@click.command("show")
@click.option("--id", "item_id", required=True, help="Item ID.")
def inventory_show(item_id: str) -> None:
    """Show details of an inventory item."""
    try:
        dto = ShowItemHandler(unit_of_work()).handle(item_id)
    except DomainException as exc:
        raise to_click_exception(exc) from exc

    click.echo(f"Item {dto.id}")
    click.echo(f"Name:      {dto.name}")
    click.echo(f"SKU:       {dto.sku}")
    click.echo(f"Quantity:  {dto.quantity}")
    click.echo(f"Warehouse: {dto.warehouse_id}")
    if dto.storage_location:
        click.echo(f"Storage:   {dto.storage_location}")
    if dto.category:
        click.echo(f"Category:  {dto.category}")
    if dto.description:
        click.echo(f"About:     {dto.description}")
    click.echo(f"Created:   {dto.created_at}")


@click.command("update")
@click.option("--id", "item_id", required=True, help="Item ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--quantity", type=int, default=None, help="New quantity.")
@click.option("--warehouse", "warehouse_id", default=None, help="Move to this warehouse ID.")
@click.option("--sku", default=None, help="New SKU.")
@click.option("--description", default=None, help="New description.")
@click.option("--storage-location", default=None, help="New aisle / shelf.")
@click.option("--category", default=None, help="New category.")
def inventory_update(
    item_id: str,
    name: str | None,
    quantity: int | None,
    warehouse_id: str | None,
    sku: str | None,
    description: str | None,
    storage_location: str | None,
    category: str | None,
) -> None:
    """Update an item; quantity and warehouse changes rebalance capacity."""
    changes = {
        "name": name,
        "description": description,
        "storageLocation": storage_location,
        "category": category,
        "quantity": quantity,
        "sku": sku,
        "warehouse": warehouse_id,
    }

    try:
        patch = ItemPatch.from_mapping(_given(changes))
        dto = UpdateItemHandler(unit_of_work()).handle(item_id, patch)
    except DomainException as exc:
        raise to_click_exception(exc) from exc

    click.echo(f"Item {dto.id} updated: {dto.sku}, {dto.quantity} units in {dto.warehouse_id}")


@click.command("remove")
@click.option("--id", "item_id", required=True, help="Item ID.")
def inventory_remove(item_id: str) -> None:
    """Delete an item (releases its capacity)."""
    try:
        dto = DeleteItemHandler(unit_of_work()).handle(item_id)
    except DomainException as exc:
        raise to_click_exception(exc) from exc

    click.echo(f"Item {dto.id} deleted — {dto.quantity} units released.")


@click.command("transfer")
@click.option("--from", "source_id", required=True, help="Source warehouse ID.")
@click.option("--to", "destination_id", required=True, help="Destination warehouse ID.")
@click.option("--items", "items_str", required=True, help="Lines as 'ItemId:Qty,ItemId:Qty'.")
def inventory_transfer(source_id: str, destination_id: str, items_str: str) -> None:
    """Move items between warehouses in one operation."""
    lines = _parse_lines(items_str)

    try:
        receipt = BulkTransferHandler(unit_of_work()).handle(source_id, destination_id, lines)
    except DomainException as exc:
        raise to_click_exception(exc) from exc

    click.echo(
        f"Transferred {receipt.total_units} units to '{receipt.destination_warehouse_name}'"
    )
    for line in receipt.items:
        how = "moved" if line.repointed else "new record"
        click.echo(f"  {line.name:<20} {line.quantity:>6}  {line.sku:<10} ({how})")

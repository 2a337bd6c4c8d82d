"""CLI commands for the Warehouse aggregate."""

from __future__ import annotations

import click

from wms.application.audit_capacity import AuditCapacityHandler
from wms.application.create_warehouse import CreateWarehouseHandler
from wms.application.delete_warehouse import DeleteWarehouseHandler
from wms.application.dto import WarehouseDTO, WarehousePatch
from wms.application.show_items import ListWarehouseItemsHandler
from wms.application.show_warehouses import ListWarehousesHandler, ShowWarehouseHandler
from wms.application.update_warehouse import UpdateWarehouseHandler
from wms.domain.exceptions import DomainException
from wms.infrastructure.bootstrap import unit_of_work
from wms.infrastructure.cli.errors import to_click_exception
from wms.infrastructure.cli.inventory_commands import display_items


def _display_warehouse(dto: WarehouseDTO) -> None:
    click.echo(f"Warehouse {dto.id}")
    click.echo(f"Name:     {dto.name}")
    click.echo(f"Location: {dto.location}")
    click.echo(f"Capacity: {dto.current_capacity}/{dto.max_capacity}  ({dto.headroom} free)")
    if dto.manager:
        click.echo(f"Manager:  {dto.manager}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo(f"Created:  {dto.created_at}")


@click.command("create")
@click.option("--name", required=True, help="Warehouse name.")
@click.option("--location", required=True, help="Warehouse location.")
@click.option("--max-capacity", required=True, type=int, help="Maximum units the warehouse can hold.")
@click.option("--manager", default=None, help="Manager name.")
@click.option("--notes", default=None, help="Free-form notes.")
def warehouse_create(
    name: str, location: str, max_capacity: int, manager: str | None, notes: str | None
) -> None:
    """Create a new, empty warehouse."""
    handler = CreateWarehouseHandler(unit_of_work())

    try:
        dto = handler.handle(
            name=name, location=location, max_capacity=max_capacity,
            manager=manager, notes=notes,
        )
    except DomainException as exc:
        raise to_click_exception(exc) from exc

    click.echo(f"Warehouse {dto.id} '{dto.name}' created (capacity {dto.max_capacity})")


@click.command("list")
def warehouse_list() -> None:
    """List all warehouses."""
    warehouses = ListWarehousesHandler(unit_of_work()).handle()

    if not warehouses:
        click.echo("No warehouses found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} {'Location':<16} {'Used':>6} {'Max':>6}")
    click.echo("-" * 86)
    for w in warehouses:
        click.echo(
            f"{w.id:<34} {w.name:<20} {w.location:<16} {w.current_capacity:>6} {w.max_capacity:>6}"
        )


@click.command("show")
@click.option("--id", "warehouse_id", required=True, help="Warehouse ID.")
def warehouse_show(warehouse_id: str) -> None:
    """Show details of a warehouse."""
    try:
        dto = ShowWarehouseHandler(unit_of_work()).handle(warehouse_id)
    except DomainException as exc:
        raise to_click_exception(exc) from exc

    _display_warehouse(dto)


@click.command("items")
@click.option("--id", "warehouse_id", required=True, help="Warehouse ID.")
def warehouse_items(warehouse_id: str) -> None:
    """List the items stored in a warehouse."""
    try:
        items = ListWarehouseItemsHandler(unit_of_work()).handle(warehouse_id)
    except DomainException as exc:
        raise to_click_exception(exc) from exc

    display_items(items)


@click.command("update")
@click.option("--id", "warehouse_id", required=True, help="Warehouse ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--location", default=None, help="New location.")
@click.option("--max-capacity", type=int, default=None, help="New maximum capacity.")
@click.option("--manager", default=None, help="New manager name.")
@click.option("--notes", default=None, help="New notes.")
def warehouse_update(
    warehouse_id: str,
    name: str | None,
    location: str | None,
    max_capacity: int | None,
    manager: str | None,
    notes: str | None,
) -> None:
    """Update a warehouse's details or maximum capacity."""
    changes = {
        "name": name, "location": location, "maxCapacity": max_capacity,
        "manager": manager, "notes": notes,
    }

    try:
        patch = WarehousePatch.from_mapping(
            {key: value for key, value in changes.items() if value is not None}
        )
        dto = UpdateWarehouseHandler(unit_of_work()).handle(warehouse_id, patch)
    except DomainException as exc:
        raise to_click_exception(exc) from exc

    _display_warehouse(dto)


@click.command("delete")
@click.option("--id", "warehouse_id", required=True, help="Warehouse ID.")
def warehouse_delete(warehouse_id: str) -> None:
    """Delete an empty warehouse."""
    try:
        DeleteWarehouseHandler(unit_of_work()).handle(warehouse_id)
    except DomainException as exc:
        raise to_click_exception(exc) from exc

    click.echo(f"Warehouse {warehouse_id} deleted.")


@click.command("audit")
def warehouse_audit() -> None:
    """Check every warehouse's stored units against its items."""
    discrepancies = AuditCapacityHandler(unit_of_work()).handle()

    if not discrepancies:
        click.echo("All warehouse capacities balance.")
        return

    click.echo(f"{'Warehouse':<20} {'Recorded':>9} {'Actual':>8} {'Max':>6}")
    click.echo("-" * 46)
    for d in discrepancies:
        click.echo(f"{d.warehouse_name:<20} {d.recorded:>9} {d.actual:>8} {d.max_capacity:>6}")
    raise click.ClickException(f"{len(discrepancies)} warehouse(s) out of balance")

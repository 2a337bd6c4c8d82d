"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the outer layers and the application handlers
without exposing domain internals. ``from_mapping`` is the single way raw
input becomes a patch: the CLI feeds it the options a user passed, and an
HTTP adapter would feed it request bodies as they arrive. It accepts
camelCase or snake_case keys and refuses fields a client may not write.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields

from wms.domain.exceptions import ValidationError
from wms.domain.model.inventory_item import InventoryItem
from wms.domain.model.warehouse import Warehouse

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

# Server-managed warehouse fields a client may never write.
_MANAGED_WAREHOUSE_FIELDS = {"current_capacity", "inventory_counter"}


def _snake(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def _normalise(data: dict, allowed: set[str], aliases: dict[str, str]) -> dict:
    result = {}
    for key, value in data.items():
        name = aliases.get(key, _snake(key))
        if name not in allowed:
            raise ValidationError(f"Unknown field '{key}'")
        result[name] = value
    return result


# --- Input -------------------------------------------------------------------


@dataclass(frozen=True)
class ItemPatch:
    """Input: fields to change on an inventory item. None means "leave as is"."""

    name: str | None = None
    description: str | None = None
    storage_location: str | None = None
    category: str | None = None
    quantity: int | None = None
    sku: str | None = None
    warehouse_id: str | None = None

    @classmethod
    def from_mapping(cls, data: dict) -> ItemPatch:
        allowed = {f.name for f in fields(cls)}
        return cls(**_normalise(data, allowed, {"warehouse": "warehouse_id"}))


@dataclass(frozen=True)
class WarehousePatch:
    """Input: fields to change on a warehouse. None means "leave as is"."""

    name: str | None = None
    location: str | None = None
    max_capacity: int | None = None
    manager: str | None = None
    notes: str | None = None

    @classmethod
    def from_mapping(cls, data: dict) -> WarehousePatch:
        managed = {key for key in data if _snake(key) in _MANAGED_WAREHOUSE_FIELDS}
        if managed:
            raise ValidationError(
                f"{', '.join(sorted(managed))} cannot be updated directly. "
                "It is managed automatically by inventory changes."
            )
        allowed = {f.name for f in fields(cls)}
        return cls(**_normalise(data, allowed, {}))


@dataclass(frozen=True)
class TransferLineSpec:
    """Input: move ``quantity`` units of one item."""

    item_id: str
    quantity: int

    @classmethod
    def from_mapping(cls, data: dict) -> TransferLineSpec:
        item_id = data.get("itemId", data.get("item_id"))
        if item_id is None:
            raise ValidationError("Transfer line is missing 'itemId'")
        if "quantity" not in data:
            raise ValidationError("Transfer line is missing 'quantity'")
        return cls(item_id=item_id, quantity=data["quantity"])


# --- Output ------------------------------------------------------------------


@dataclass(frozen=True)
class WarehouseDTO:
    id: str
    name: str
    location: str
    max_capacity: int
    current_capacity: int
    headroom: int
    manager: str | None
    notes: str | None
    created_at: str

    @staticmethod
    def from_domain(warehouse: Warehouse) -> WarehouseDTO:
        return WarehouseDTO(
            id=warehouse.id,
            name=warehouse.name,
            location=warehouse.location,
            max_capacity=warehouse.max_capacity,
            current_capacity=warehouse.current_capacity,
            headroom=warehouse.headroom,
            manager=warehouse.manager,
            notes=warehouse.notes,
            created_at=warehouse.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )


@dataclass(frozen=True)
class ItemDTO:
    id: str
    name: str
    sku: str
    quantity: int
    warehouse_id: str
    description: str | None
    storage_location: str | None
    category: str | None
    created_at: str

    @staticmethod
    def from_domain(item: InventoryItem) -> ItemDTO:
        return ItemDTO(
            id=item.id,
            name=item.name,
            sku=item.sku,
            quantity=item.quantity,
            warehouse_id=item.warehouse_id,
            description=item.description,
            storage_location=item.storage_location,
            category=item.category,
            created_at=item.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )


@dataclass(frozen=True)
class TransferredItemDTO:
    """Output: what happened to one line of a bulk transfer."""

    source_item_id: str
    destination_item_id: str
    name: str
    quantity: int
    sku: str
    repointed: bool  # True if the original record itself moved


@dataclass(frozen=True)
class TransferReceiptDTO:
    source_warehouse_id: str
    destination_warehouse_id: str
    destination_warehouse_name: str
    total_units: int
    items: list[TransferredItemDTO]


@dataclass(frozen=True)
class CapacityDiscrepancyDTO:
    """Output: a warehouse whose recorded capacity disagrees with its items."""

    warehouse_id: str
    warehouse_name: str
    recorded: int
    actual: int
    max_capacity: int

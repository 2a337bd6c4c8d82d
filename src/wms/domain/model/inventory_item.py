"""InventoryItem entity — a batch of stock held in exactly one warehouse."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from wms.domain.exceptions import ValidationError
from wms.domain.model.value_objects import Quantity, Sku


@dataclass
class InventoryItem:
    """A stocked item identified by a SKU inside its owning warehouse.

    The item's ``quantity`` is counted in its warehouse's
    ``current_capacity``; any change to quantity or ``warehouse_id`` must
    be mirrored by the CapacityService before the item is saved.
    """

    id: str
    name: str
    sku: str
    quantity: int
    warehouse_id: str
    description: str | None = None
    storage_location: str | None = None
    category: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        item_id: str,
        name: str,
        sku: Sku,
        quantity: Quantity,
        warehouse_id: str,
        description: str | None = None,
        storage_location: str | None = None,
        category: str | None = None,
    ) -> InventoryItem:
        if not name or not name.strip():
            raise ValidationError("Item name is required")
        return InventoryItem(
            id=item_id,
            name=name.strip(),
            sku=sku.value,
            quantity=quantity.value,
            warehouse_id=warehouse_id,
            description=description,
            storage_location=storage_location,
            category=category,
        )

    def copy_to(self, item_id: str, warehouse_id: str, sku: Sku, quantity: Quantity) -> InventoryItem:
        """A fresh record in another warehouse carrying this item's descriptive fields."""
        return InventoryItem.create(
            item_id=item_id,
            name=self.name,
            sku=sku,
            quantity=quantity,
            warehouse_id=warehouse_id,
            description=self.description,
            storage_location=self.storage_location,
            category=self.category,
        )

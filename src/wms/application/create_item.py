"""Application service: Create Inventory Item use case.

Orchestrates the SKU allocator, the capacity service and the inventory
store. Everything runs in one transaction and capacity is reserved
before the item is written, so a failure at any step leaves neither a
reservation nor an orphaned item behind.
"""

from __future__ import annotations

import logging

from wms.application.dto import ItemDTO
from wms.domain.exceptions import EntityNotFoundError
from wms.domain.model.inventory_item import InventoryItem
from wms.domain.model.value_objects import Quantity, Sku
from wms.domain.repository.unit_of_work import UnitOfWork
from wms.domain.service.capacity_service import CapacityService
from wms.domain.service.sku_allocator import SkuAllocator

logger = logging.getLogger(__name__)


class CreateItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        quantity: int,
        warehouse_id: str,
        sku: str | None = None,
        description: str | None = None,
        storage_location: str | None = None,
        category: str | None = None,
    ) -> ItemDTO:
        """Create an item in a warehouse.

        Steps:
        1. Resolve the warehouse (fail if not found).
        2. Validate a supplied SKU, or allocate one.
        3. Reserve ``quantity`` units of capacity.
        4. Persist the item and return a DTO.
        """
        qty = Quantity(quantity)
        capacity = CapacityService(self._uow.warehouses)
        allocator = SkuAllocator(self._uow.warehouses, self._uow.items)

        with self._uow.transaction():
            warehouse = self._uow.warehouses.get_by_id(warehouse_id)
            if warehouse is None:
                raise EntityNotFoundError(f"Warehouse '{warehouse_id}' not found")

            if sku is not None:
                item_sku = Sku(sku)
                allocator.validate_unique(item_sku, warehouse.id)
            else:
                item_sku = allocator.allocate(warehouse.id)

            item = InventoryItem.create(
                item_id=self._uow.items.next_id(),
                name=name,
                sku=item_sku,
                quantity=qty,
                warehouse_id=warehouse.id,
                description=description,
                storage_location=storage_location,
                category=category,
            )

            if qty.value > 0:
                capacity.reserve(warehouse.id, qty.value)
            self._uow.items.save(item)

        logger.info(
            "Created item %s (%s) with %d units in warehouse %s",
            item.id, item.sku, item.quantity, item.warehouse_id,
        )
        return ItemDTO.from_domain(item)

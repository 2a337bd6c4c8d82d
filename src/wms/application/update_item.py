"""Application service: Update Inventory Item use case.

Handles descriptive edits, quantity changes (rebalancing the owning
warehouse by the net difference) and moves to another warehouse
(releasing the old quantity at the origin, reserving the new quantity at
the target). SKU and capacity checks all pass before the item is saved,
and the whole update is one transaction: if the target warehouse lacks
space, the item and both warehouses stay exactly as they were.
"""

from __future__ import annotations

import logging

from wms.application.dto import ItemDTO, ItemPatch
from wms.domain.exceptions import EntityNotFoundError, ValidationError
from wms.domain.model.value_objects import Quantity, Sku
from wms.domain.repository.unit_of_work import UnitOfWork
from wms.domain.service.capacity_service import CapacityService
from wms.domain.service.sku_allocator import SkuAllocator

logger = logging.getLogger(__name__)


class UpdateItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, item_id: str, patch: ItemPatch) -> ItemDTO:
        capacity = CapacityService(self._uow.warehouses)
        allocator = SkuAllocator(self._uow.warehouses, self._uow.items)

        with self._uow.transaction():
            item = self._uow.items.get_by_id(item_id)
            if item is None:
                raise EntityNotFoundError(f"Item '{item_id}' not found")

            origin_id = item.warehouse_id
            target_id = patch.warehouse_id or origin_id
            moving = target_id != origin_id
            if moving and self._uow.warehouses.get_by_id(target_id) is None:
                raise EntityNotFoundError(f"Warehouse '{target_id}' not found")

            old_qty = item.quantity
            new_qty = Quantity(patch.quantity).value if patch.quantity is not None else old_qty

            # A moving item must not clash with the target's SKUs either,
            # even when its SKU text is unchanged.
            new_sku = Sku(patch.sku) if patch.sku is not None else Sku(item.sku)
            if new_sku.value != item.sku or moving:
                allocator.validate_unique(new_sku, target_id, exclude_item_id=item.id)

            if patch.name is not None and not patch.name.strip():
                raise ValidationError("Item name is required")

            # --- Capacity -----------------------------------------------------
            if moving:
                if old_qty > 0:
                    capacity.release(origin_id, old_qty)
                if new_qty > 0:
                    capacity.reserve(target_id, new_qty)
            else:
                capacity.adjust(origin_id, new_qty - old_qty)

            # --- Field changes, only after every check passed -----------------
            if patch.name is not None:
                item.name = patch.name.strip()
            if patch.description is not None:
                item.description = patch.description
            if patch.storage_location is not None:
                item.storage_location = patch.storage_location
            if patch.category is not None:
                item.category = patch.category
            item.quantity = new_qty
            item.sku = new_sku.value
            item.warehouse_id = target_id
            self._uow.items.save(item)

        if moving:
            logger.info(
                "Moved item %s from warehouse %s to %s (%d -> %d units)",
                item.id, origin_id, target_id, old_qty, new_qty,
            )
        else:
            logger.info("Updated item %s (%d -> %d units)", item.id, old_qty, new_qty)
        return ItemDTO.from_domain(item)

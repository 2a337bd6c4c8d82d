"""Application service: Bulk Transfer use case.

Moves a list of ``(item, quantity)`` lines from one warehouse to another
as a single logical operation.

Uses a two-phase approach inside one transaction:
  Phase 1 — load and validate: both warehouses, the aggregate headroom
            at the destination, and every line (item exists, lives in
            the source, has enough stock). Fails fast before any write.
  Phase 2 — mutate, line by line in input order: either re-point the
            source record to the destination (full move, SKU free
            there) or create a fresh destination record with a newly
            allocated SKU (partial move, or SKU already taken), then
            shrink or retire the source. Capacity moves once at the end.

Should anything fail in phase 2 (for example a concurrent request took
the destination's last free units), the transaction rolls back every
item and warehouse write made so far.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from wms.application.dto import TransferLineSpec, TransferReceiptDTO, TransferredItemDTO
from wms.domain.exceptions import (
    EntityNotFoundError,
    InvalidAmountError,
    ItemNotInSourceError,
    ValidationError,
)
from wms.domain.model.inventory_item import InventoryItem
from wms.domain.model.value_objects import Quantity
from wms.domain.model.warehouse import Warehouse
from wms.domain.repository.unit_of_work import UnitOfWork
from wms.domain.service.capacity_service import CapacityService
from wms.domain.service.sku_allocator import SkuAllocator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _PlannedLine:
    item: InventoryItem
    quantity: int

    @property
    def is_full_move(self) -> bool:
        return self.quantity == self.item.quantity


class BulkTransferHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        source_warehouse_id: str,
        destination_warehouse_id: str,
        lines: list[TransferLineSpec],
    ) -> TransferReceiptDTO:
        if source_warehouse_id == destination_warehouse_id:
            raise ValidationError("Source and destination warehouses must differ")

        item_ids = [line.item_id for line in lines]
        if len(set(item_ids)) != len(item_ids):
            raise ValidationError("Each item may appear only once per transfer")

        capacity = CapacityService(self._uow.warehouses)
        allocator = SkuAllocator(self._uow.warehouses, self._uow.items)

        with self._uow.transaction():
            # Phase 1: validate everything before the first write
            active = [line for line in lines if _positive(line.quantity)]
            total_units = sum(line.quantity for line in active)

            destination = capacity.ensure_headroom(destination_warehouse_id, total_units)
            if self._uow.warehouses.get_by_id(source_warehouse_id) is None:
                raise EntityNotFoundError(
                    f"Source warehouse '{source_warehouse_id}' not found"
                )
            planned = [self._plan(line, source_warehouse_id) for line in active]

            # Phase 2: apply item effects in input order
            moved = [self._apply(plan, destination, allocator) for plan in planned]

            # Aggregate capacity change, once
            if total_units > 0:
                capacity.release(source_warehouse_id, total_units)
                capacity.reserve(destination.id, total_units)

        logger.info(
            "Transferred %d units in %d lines from warehouse %s to %s",
            total_units, len(moved), source_warehouse_id, destination.id,
        )
        return TransferReceiptDTO(
            source_warehouse_id=source_warehouse_id,
            destination_warehouse_id=destination.id,
            destination_warehouse_name=destination.name,
            total_units=total_units,
            items=moved,
        )

    # --- Phases ---------------------------------------------------------------

    def _plan(self, line: TransferLineSpec, source_warehouse_id: str) -> _PlannedLine:
        item = self._uow.items.get_by_id(line.item_id)
        if item is None:
            raise EntityNotFoundError(f"Item '{line.item_id}' not found")
        if item.warehouse_id != source_warehouse_id:
            raise ItemNotInSourceError(
                f"Item '{item.name}' ({item.id}) is not stored in the source warehouse"
            )
        if line.quantity > item.quantity:
            raise InvalidAmountError(
                f"Cannot transfer {line.quantity} of '{item.name}' "
                f"— only {item.quantity} in stock"
            )
        return _PlannedLine(item=item, quantity=line.quantity)

    def _apply(
        self,
        plan: _PlannedLine,
        destination: Warehouse,
        allocator: SkuAllocator,
    ) -> TransferredItemDTO:
        source_item = plan.item
        sku_taken = (
            self._uow.items.find_by_sku(source_item.sku, destination.id) is not None
        )

        if plan.is_full_move and not sku_taken:
            source_item.warehouse_id = destination.id
            self._uow.items.save(source_item)
            return TransferredItemDTO(
                source_item_id=source_item.id,
                destination_item_id=source_item.id,
                name=source_item.name,
                quantity=plan.quantity,
                sku=source_item.sku,
                repointed=True,
            )

        new_item = source_item.copy_to(
            item_id=self._uow.items.next_id(),
            warehouse_id=destination.id,
            sku=allocator.allocate(destination.id),
            quantity=Quantity(plan.quantity),
        )
        if plan.is_full_move:
            self._uow.items.delete(source_item.id)
        else:
            source_item.quantity -= plan.quantity
            self._uow.items.save(source_item)
        self._uow.items.save(new_item)

        return TransferredItemDTO(
            source_item_id=source_item.id,
            destination_item_id=new_item.id,
            name=new_item.name,
            quantity=plan.quantity,
            sku=new_item.sku,
            repointed=False,
        )


def _positive(quantity: int) -> bool:
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise InvalidAmountError(f"Transfer quantity must be an integer, got {quantity!r}")
    return quantity > 0

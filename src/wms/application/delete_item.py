"""Application service: Delete Inventory Item use case.

Releasing the item's capacity and deleting the record happen in one
transaction; if the release fails, the item is kept.
"""

from __future__ import annotations

import logging

from wms.application.dto import ItemDTO
from wms.domain.exceptions import EntityNotFoundError
from wms.domain.repository.unit_of_work import UnitOfWork
from wms.domain.service.capacity_service import CapacityService

logger = logging.getLogger(__name__)


class DeleteItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, item_id: str) -> ItemDTO:
        capacity = CapacityService(self._uow.warehouses)

        with self._uow.transaction():
            item = self._uow.items.get_by_id(item_id)
            if item is None:
                raise EntityNotFoundError(f"Item '{item_id}' not found")

            if item.quantity > 0:
                capacity.release(item.warehouse_id, item.quantity)
            self._uow.items.delete(item.id)

        logger.info(
            "Deleted item %s, released %d units in warehouse %s",
            item.id, item.quantity, item.warehouse_id,
        )
        return ItemDTO.from_domain(item)

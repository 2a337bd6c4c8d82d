"""Application service: Delete Warehouse use case.

A warehouse can only be deleted once it is empty: no stored units and
no item records still pointing at it. Items are never cascaded away.
"""

from __future__ import annotations

import logging

from wms.domain.exceptions import EntityNotFoundError, WarehouseNotEmptyError
from wms.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DeleteWarehouseHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, warehouse_id: str) -> None:
        with self._uow.transaction():
            warehouse = self._uow.warehouses.get_by_id(warehouse_id)
            if warehouse is None:
                raise EntityNotFoundError(f"Warehouse '{warehouse_id}' not found")

            if not warehouse.is_empty:
                raise WarehouseNotEmptyError(
                    f"Warehouse '{warehouse.name}' still stores "
                    f"{warehouse.current_capacity} units"
                )
            remaining = self._uow.items.list_by_warehouse(warehouse.id)
            if remaining:
                raise WarehouseNotEmptyError(
                    f"Warehouse '{warehouse.name}' still has {len(remaining)} item records"
                )
            self._uow.warehouses.delete(warehouse.id)

        logger.info("Deleted warehouse %s '%s'", warehouse.id, warehouse.name)

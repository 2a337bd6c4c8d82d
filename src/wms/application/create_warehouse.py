"""Application service: Create Warehouse use case."""

from __future__ import annotations

import logging

from wms.application.dto import WarehouseDTO
from wms.domain.exceptions import ValidationError
from wms.domain.model.warehouse import Warehouse
from wms.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class CreateWarehouseHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        location: str,
        max_capacity: int,
        manager: str | None = None,
        notes: str | None = None,
    ) -> WarehouseDTO:
        """Create an empty warehouse.

        ``current_capacity`` always starts at zero; it is not an input.
        """
        with self._uow.transaction():
            warehouse = Warehouse.create(
                warehouse_id=self._uow.warehouses.next_id(),
                name=name,
                location=location,
                max_capacity=max_capacity,
                manager=manager,
                notes=notes,
            )
            existing = self._uow.warehouses.get_by_name_and_location(
                warehouse.name, warehouse.location
            )
            if existing is not None:
                raise ValidationError(
                    f"Warehouse '{warehouse.name}' already exists in {warehouse.location}"
                )
            self._uow.warehouses.save(warehouse)

        logger.info("Created warehouse %s '%s'", warehouse.id, warehouse.name)
        return WarehouseDTO.from_domain(warehouse)

"""Application service: Update Warehouse use case.

Only descriptive fields and ``max_capacity`` can change here. The
stored unit count is managed by inventory operations alone.
"""

from __future__ import annotations

from wms.application.dto import WarehouseDTO, WarehousePatch
from wms.domain.exceptions import EntityNotFoundError, ValidationError
from wms.domain.repository.unit_of_work import UnitOfWork


class UpdateWarehouseHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, warehouse_id: str, patch: WarehousePatch) -> WarehouseDTO:
        with self._uow.transaction():
            warehouse = self._uow.warehouses.get_by_id(warehouse_id)
            if warehouse is None:
                raise EntityNotFoundError(f"Warehouse '{warehouse_id}' not found")

            warehouse.rename(name=patch.name, location=patch.location)
            if patch.max_capacity is not None:
                warehouse.resize(patch.max_capacity)
            warehouse.describe(manager=patch.manager, notes=patch.notes)

            clash = self._uow.warehouses.get_by_name_and_location(
                warehouse.name, warehouse.location
            )
            if clash is not None and clash.id != warehouse.id:
                raise ValidationError(
                    f"Warehouse '{warehouse.name}' already exists in {warehouse.location}"
                )
            self._uow.warehouses.save(warehouse)

        return WarehouseDTO.from_domain(warehouse)

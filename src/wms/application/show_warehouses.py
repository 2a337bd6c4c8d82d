"""Application service: warehouse queries (no side effects)."""

from __future__ import annotations

from wms.application.dto import WarehouseDTO
from wms.domain.exceptions import EntityNotFoundError
from wms.domain.repository.unit_of_work import UnitOfWork


class ShowWarehouseHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, warehouse_id: str) -> WarehouseDTO:
        warehouse = self._uow.warehouses.get_by_id(warehouse_id)
        if warehouse is None:
            raise EntityNotFoundError(f"Warehouse '{warehouse_id}' not found")
        return WarehouseDTO.from_domain(warehouse)


class ListWarehousesHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[WarehouseDTO]:
        return [WarehouseDTO.from_domain(w) for w in self._uow.warehouses.list_all()]

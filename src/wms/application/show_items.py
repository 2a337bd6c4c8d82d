"""Application service: inventory item queries (no side effects)."""

from __future__ import annotations

from wms.application.dto import ItemDTO
from wms.domain.exceptions import EntityNotFoundError
from wms.domain.repository.unit_of_work import UnitOfWork


class ShowItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, item_id: str) -> ItemDTO:
        item = self._uow.items.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError(f"Item '{item_id}' not found")
        return ItemDTO.from_domain(item)


class ListItemsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[ItemDTO]:
        return [ItemDTO.from_domain(item) for item in self._uow.items.list_all()]


class ListWarehouseItemsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, warehouse_id: str) -> list[ItemDTO]:
        if self._uow.warehouses.get_by_id(warehouse_id) is None:
            raise EntityNotFoundError(f"Warehouse '{warehouse_id}' not found")
        return [
            ItemDTO.from_domain(item)
            for item in self._uow.items.list_by_warehouse(warehouse_id)
        ]

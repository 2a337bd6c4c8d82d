"""Unit of work over the JSON document store."""

from __future__ import annotations

from contextlib import AbstractContextManager

from wms.domain.repository.unit_of_work import UnitOfWork
from wms.infrastructure.persistence.json_document_store import JsonDocumentStore
from wms.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from wms.infrastructure.persistence.json_warehouse_repository import (
    JsonWarehouseRepository,
)


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store
        self.warehouses = JsonWarehouseRepository(store)
        self.items = JsonInventoryRepository(store)

    def transaction(self) -> AbstractContextManager[None]:
        return self._store.transaction()

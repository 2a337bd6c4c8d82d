"""JSON-document-backed implementation of InventoryRepository."""

from __future__ import annotations

import uuid
from datetime import datetime

from wms.domain.model.inventory_item import InventoryItem
from wms.domain.repository.inventory_repository import InventoryRepository
from wms.infrastructure.persistence.json_document_store import JsonDocumentStore

COLLECTION = "inventory_items"


class JsonInventoryRepository(InventoryRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- InventoryRepository interface ----------------------------------------

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def get_by_id(self, item_id: str) -> InventoryItem | None:
        with self._store.transaction():
            for raw in self._records():
                if raw["id"] == item_id:
                    return self._to_domain(raw)
        return None

    def list_all(self) -> list[InventoryItem]:
        with self._store.transaction():
            return [self._to_domain(raw) for raw in self._records()]

    def list_by_warehouse(self, warehouse_id: str) -> list[InventoryItem]:
        with self._store.transaction():
            return [
                self._to_domain(raw)
                for raw in self._records()
                if raw["warehouse_id"] == warehouse_id
            ]

    def find_by_sku(
        self,
        sku: str,
        warehouse_id: str,
        exclude_id: str | None = None,
    ) -> InventoryItem | None:
        with self._store.transaction():
            for raw in self._records():
                if (
                    raw["sku"] == sku
                    and raw["warehouse_id"] == warehouse_id
                    and raw["id"] != exclude_id
                ):
                    return self._to_domain(raw)
        return None

    def save(self, item: InventoryItem) -> None:
        with self._store.transaction():
            records = self._records()
            for i, raw in enumerate(records):
                if raw["id"] == item.id:
                    records[i] = self._to_raw(item)
                    return
            records.append(self._to_raw(item))

    def delete(self, item_id: str) -> bool:
        with self._store.transaction():
            records = self._records()
            for i, raw in enumerate(records):
                if raw["id"] == item_id:
                    del records[i]
                    return True
        return False

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: InventoryItem) -> dict:
        return {
            "id": item.id,
            "name": item.name,
            "sku": item.sku,
            "quantity": item.quantity,
            "warehouse_id": item.warehouse_id,
            "description": item.description,
            "storage_location": item.storage_location,
            "category": item.category,
            "created_at": item.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryItem:
        return InventoryItem(
            id=raw["id"],
            name=raw["name"],
            sku=raw["sku"],
            quantity=raw["quantity"],
            warehouse_id=raw["warehouse_id"],
            description=raw.get("description"),
            storage_location=raw.get("storage_location"),
            category=raw.get("category"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- Document helpers -----------------------------------------------------

    def _records(self) -> list[dict]:
        return self._store.collection(COLLECTION)

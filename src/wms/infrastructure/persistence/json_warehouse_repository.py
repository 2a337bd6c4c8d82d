"""JSON-document-backed implementation of WarehouseRepository."""

from __future__ import annotations

import uuid
from datetime import datetime

from wms.domain.model.warehouse import Warehouse
from wms.domain.repository.warehouse_repository import WarehouseRepository
from wms.infrastructure.persistence.json_document_store import JsonDocumentStore

COLLECTION = "warehouses"


class JsonWarehouseRepository(WarehouseRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- WarehouseRepository interface ----------------------------------------

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def get_by_id(self, warehouse_id: str) -> Warehouse | None:
        with self._store.transaction():
            raw = self._find_raw(warehouse_id)
            return self._to_domain(raw) if raw is not None else None

    def get_by_name_and_location(self, name: str, location: str) -> Warehouse | None:
        with self._store.transaction():
            for raw in self._records():
                if raw["name"] == name and raw["location"] == location:
                    return self._to_domain(raw)
        return None

    def list_all(self) -> list[Warehouse]:
        with self._store.transaction():
            return [self._to_domain(raw) for raw in self._records()]

    def save(self, warehouse: Warehouse) -> None:
        with self._store.transaction():
            raw = self._find_raw(warehouse.id)
            if raw is None:
                self._records().append(self._to_raw(warehouse))
                return
            # Counters belong to increment_capacity / next_sequence
            fresh = self._to_raw(warehouse)
            fresh["current_capacity"] = raw["current_capacity"]
            fresh["inventory_counter"] = raw["inventory_counter"]
            raw.update(fresh)

    def delete(self, warehouse_id: str) -> bool:
        with self._store.transaction():
            records = self._records()
            for i, raw in enumerate(records):
                if raw["id"] == warehouse_id:
                    del records[i]
                    return True
        return False

    def increment_capacity(self, warehouse_id: str, delta: int) -> Warehouse | None:
        with self._store.transaction():
            raw = self._find_raw(warehouse_id)
            if raw is None:
                return None
            if not 0 <= raw["current_capacity"] + delta <= raw["max_capacity"]:
                return None
            raw["current_capacity"] += delta
            return self._to_domain(raw)

    def next_sequence(self, warehouse_id: str) -> int | None:
        with self._store.transaction():
            raw = self._find_raw(warehouse_id)
            if raw is None:
                return None
            raw["inventory_counter"] += 1
            return raw["inventory_counter"]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(warehouse: Warehouse) -> dict:
        return {
            "id": warehouse.id,
            "name": warehouse.name,
            "location": warehouse.location,
            "max_capacity": warehouse.max_capacity,
            "current_capacity": warehouse.current_capacity,
            "inventory_counter": warehouse.inventory_counter,
            "manager": warehouse.manager,
            "notes": warehouse.notes,
            "created_at": warehouse.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Warehouse:
        return Warehouse(
            id=raw["id"],
            name=raw["name"],
            location=raw["location"],
            max_capacity=raw["max_capacity"],
            current_capacity=raw.get("current_capacity", 0),
            inventory_counter=raw.get("inventory_counter", 0),
            manager=raw.get("manager"),
            notes=raw.get("notes"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- Document helpers -----------------------------------------------------

    def _records(self) -> list[dict]:
        return self._store.collection(COLLECTION)

    def _find_raw(self, warehouse_id: str) -> dict | None:
        for raw in self._records():
            if raw["id"] == warehouse_id:
                return raw
        return None

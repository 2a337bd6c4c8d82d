"""Abstract repository for InventoryItem entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from wms.domain.model.inventory_item import InventoryItem


class InventoryRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a fresh, unique item ID."""

    @abstractmethod
    def get_by_id(self, item_id: str) -> InventoryItem | None:
        """Return an item by its ID, or None."""

    @abstractmethod
    def list_all(self) -> list[InventoryItem]:
        """Return every inventory item."""

    @abstractmethod
    def list_by_warehouse(self, warehouse_id: str) -> list[InventoryItem]:
        """Return the items stored in one warehouse."""

    @abstractmethod
    def find_by_sku(
        self,
        sku: str,
        warehouse_id: str,
        exclude_id: str | None = None,
    ) -> InventoryItem | None:
        """Return the item in ``warehouse_id`` using ``sku``, ignoring ``exclude_id``."""

    @abstractmethod
    def save(self, item: InventoryItem) -> None:
        """Persist a new or updated item."""

    @abstractmethod
    def delete(self, item_id: str) -> bool:
        """Remove an item. Returns False if it did not exist."""

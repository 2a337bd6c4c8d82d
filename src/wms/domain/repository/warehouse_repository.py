"""Abstract repository for the Warehouse aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from wms.domain.model.warehouse import Warehouse


class WarehouseRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a fresh, unique warehouse ID."""

    @abstractmethod
    def get_by_id(self, warehouse_id: str) -> Warehouse | None:
        """Return a warehouse by its ID, or None if not found."""

    @abstractmethod
    def get_by_name_and_location(self, name: str, location: str) -> Warehouse | None:
        """Return the warehouse with this exact (name, location) pair, or None."""

    @abstractmethod
    def list_all(self) -> list[Warehouse]:
        """Return every warehouse."""

    @abstractmethod
    def save(self, warehouse: Warehouse) -> None:
        """Persist a new warehouse or the descriptive fields of an existing one.

        ``current_capacity`` and ``inventory_counter`` of an existing
        document are left untouched; only ``increment_capacity`` and
        ``next_sequence`` may change them.
        """

    @abstractmethod
    def delete(self, warehouse_id: str) -> bool:
        """Remove a warehouse. Returns False if it did not exist."""

    @abstractmethod
    def increment_capacity(self, warehouse_id: str, delta: int) -> Warehouse | None:
        """Atomically add ``delta`` to ``current_capacity``.

        The increment is applied only if the persisted value stays within
        ``0 <= current_capacity + delta <= max_capacity``. Returns the
        updated warehouse, or None if it does not exist or the guard failed.
        """

    @abstractmethod
    def next_sequence(self, warehouse_id: str) -> int | None:
        """Atomically increment ``inventory_counter`` and return the new value."""

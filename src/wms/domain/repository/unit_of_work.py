"""Abstract unit of work spanning both stores.

Operations that touch an item and one or two warehouses (or many items
in a bulk transfer) run inside ``transaction()``: either every write in
the block becomes visible, or none does.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from wms.domain.repository.inventory_repository import InventoryRepository
from wms.domain.repository.warehouse_repository import WarehouseRepository


class UnitOfWork(ABC):

    warehouses: WarehouseRepository
    items: InventoryRepository

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Open a transaction; nested calls join the enclosing one.

        Leaving the block normally commits. Leaving it with an exception
        rolls back every write made inside it and re-raises.
        """

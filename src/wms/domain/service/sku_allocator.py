"""Domain service: SKU allocation and validation, scoped per warehouse.

Generated SKUs take the form ``<PREFIX>-<NNNN>``: the upper-cased first
letter of the warehouse name and the warehouse's next sequence number,
zero-padded to four digits. The sequence comes from an atomic
increment-and-read on the warehouse's counter, so two allocations in the
same warehouse never share a number.
"""

from __future__ import annotations

from wms.domain.exceptions import DuplicateSkuError, EntityNotFoundError
from wms.domain.model.value_objects import Sku
from wms.domain.repository.inventory_repository import InventoryRepository
from wms.domain.repository.warehouse_repository import WarehouseRepository


class SkuAllocator:

    def __init__(
        self,
        warehouse_repo: WarehouseRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._warehouse_repo = warehouse_repo
        self._inventory_repo = inventory_repo

    def allocate(self, warehouse_id: str) -> Sku:
        """Return a SKU not used by any item in the warehouse.

        Sequence numbers whose SKU is already taken (typed in by hand or
        carried over by a transferred item) are skipped.
        """
        warehouse = self._warehouse_repo.get_by_id(warehouse_id)
        if warehouse is None:
            raise EntityNotFoundError(f"Warehouse '{warehouse_id}' not found")

        while True:
            sequence = self._warehouse_repo.next_sequence(warehouse_id)
            if sequence is None:
                raise EntityNotFoundError(f"Warehouse '{warehouse_id}' not found")
            sku = Sku.generate(warehouse.name, sequence)
            if self._inventory_repo.find_by_sku(sku.value, warehouse_id) is None:
                return sku

    def validate_unique(
        self,
        sku: Sku,
        warehouse_id: str,
        exclude_item_id: str | None = None,
    ) -> None:
        """Raise DuplicateSkuError if another item in the warehouse uses ``sku``."""
        clash = self._inventory_repo.find_by_sku(sku.value, warehouse_id, exclude_item_id)
        if clash is not None:
            raise DuplicateSkuError(
                f"SKU '{sku}' already exists in this warehouse (item '{clash.name}')"
            )

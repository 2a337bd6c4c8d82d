"""Domain service: Capacity bookkeeping.

The only path through which a warehouse's ``current_capacity`` changes.
Every change is a single guarded increment against the persisted value
(``WarehouseRepository.increment_capacity``), never a read-then-write
performed here, so concurrent requests cannot lose updates. Headroom is
therefore judged at the moment of the write, not from an earlier snapshot.
"""

from __future__ import annotations

import logging

from wms.domain.exceptions import (
    CapacityExceededError,
    EntityNotFoundError,
    InvalidAmountError,
    InvariantViolationError,
)
from wms.domain.model.warehouse import Warehouse
from wms.domain.repository.warehouse_repository import WarehouseRepository

logger = logging.getLogger(__name__)


class CapacityService:

    def __init__(self, warehouse_repo: WarehouseRepository) -> None:
        self._warehouse_repo = warehouse_repo

    def reserve(self, warehouse_id: str, amount: int) -> Warehouse:
        """Claim ``amount`` units of capacity in a warehouse.

        Raises CapacityExceededError if the warehouse lacks headroom.
        """
        _require_positive(amount, "Reservation")
        updated = self._warehouse_repo.increment_capacity(warehouse_id, amount)
        if updated is not None:
            return updated

        warehouse = self._require_warehouse(warehouse_id)
        logger.warning(
            "Rejected reservation of %d units in warehouse %s (headroom %d)",
            amount, warehouse.id, warehouse.headroom,
        )
        raise CapacityExceededError(
            f"Warehouse '{warehouse.name}' does not have enough space "
            f"(need {amount}, have {warehouse.headroom} available)"
        )

    def release(self, warehouse_id: str, amount: int) -> Warehouse:
        """Give ``amount`` units of capacity back to a warehouse.

        Releasing more than the warehouse holds means the books are
        already wrong; that raises InvariantViolationError instead of
        clamping to zero.
        """
        _require_positive(amount, "Release")
        updated = self._warehouse_repo.increment_capacity(warehouse_id, -amount)
        if updated is not None:
            return updated

        warehouse = self._require_warehouse(warehouse_id)
        logger.error(
            "Release of %d units from warehouse %s would leave %d",
            amount, warehouse.id, warehouse.current_capacity - amount,
        )
        raise InvariantViolationError(
            f"Cannot release {amount} units from '{warehouse.name}' "
            f"— only {warehouse.current_capacity} currently stored"
        )

    def adjust(self, warehouse_id: str, delta: int) -> Warehouse:
        """Apply a signed net change, e.g. ``-3`` when a quantity drops from 10 to 7."""
        if delta > 0:
            return self.reserve(warehouse_id, delta)
        if delta < 0:
            return self.release(warehouse_id, -delta)
        return self._require_warehouse(warehouse_id)

    def ensure_headroom(self, warehouse_id: str, amount: int) -> Warehouse:
        """Pre-flight check that a warehouse could accept ``amount`` more units.

        Performs no write; the later ``reserve`` remains the authority.
        """
        warehouse = self._require_warehouse(warehouse_id)
        if amount > warehouse.headroom:
            raise CapacityExceededError(
                f"Warehouse '{warehouse.name}' has {warehouse.headroom} units "
                f"of space left but {amount} units are being moved"
            )
        return warehouse

    # --- Internal helpers -----------------------------------------------------

    def _require_warehouse(self, warehouse_id: str) -> Warehouse:
        warehouse = self._warehouse_repo.get_by_id(warehouse_id)
        if warehouse is None:
            raise EntityNotFoundError(f"Warehouse '{warehouse_id}' not found")
        return warehouse


def _require_positive(amount: int, label: str) -> None:
    if not isinstance(amount, int) or isinstance(amount, bool) or amount <= 0:
        raise InvalidAmountError(f"{label} amount must be a positive integer, got {amount!r}")

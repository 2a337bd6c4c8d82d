"""Warehouse aggregate — the root for capacity bookkeeping.

A warehouse knows how many units it may hold (``max_capacity``) and how
many units its items currently occupy (``current_capacity``). The latter
is derived state: it only ever moves through the repository's atomic
``increment_capacity`` primitive, driven by the CapacityService.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from wms.domain.exceptions import CapacityExceededError, ValidationError
from wms.domain.model.value_objects import Quantity


@dataclass
class Warehouse:
    """Aggregate root for warehouses.

    Invariants:
    - ``0 <= current_capacity <= max_capacity``
    - ``inventory_counter`` never decreases

    Use ``Warehouse.create()`` for new warehouses; ``__init__`` stays
    simple so repositories can reconstitute persisted documents.
    """

    id: str
    name: str
    location: str
    max_capacity: int
    current_capacity: int = 0
    inventory_counter: int = 0
    manager: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW warehouses only) -------------------------------

    @staticmethod
    def create(
        warehouse_id: str,
        name: str,
        location: str,
        max_capacity: int,
        manager: str | None = None,
        notes: str | None = None,
    ) -> Warehouse:
        """Create an empty warehouse, enforcing all invariants."""
        return Warehouse(
            id=warehouse_id,
            name=_required_text(name, "Warehouse name"),
            location=_required_text(location, "Warehouse location"),
            max_capacity=Quantity(max_capacity).value,
            manager=_optional_text(manager),
            notes=_optional_text(notes),
        )

    # --- Mutations on descriptive fields --------------------------------------

    def rename(self, name: str | None = None, location: str | None = None) -> None:
        if name is not None:
            self.name = _required_text(name, "Warehouse name")
        if location is not None:
            self.location = _required_text(location, "Warehouse location")

    def resize(self, max_capacity: int) -> None:
        """Change the maximum capacity.

        Shrinking below the units already stored would break the
        capacity invariant, so it is rejected.
        """
        new_max = Quantity(max_capacity).value
        if new_max < self.current_capacity:
            raise CapacityExceededError(
                f"Cannot set max capacity of '{self.name}' to {new_max} "
                f"— {self.current_capacity} units are already stored"
            )
        self.max_capacity = new_max

    def describe(self, manager: str | None = None, notes: str | None = None) -> None:
        if manager is not None:
            self.manager = _optional_text(manager)
        if notes is not None:
            self.notes = _optional_text(notes)

    # --- Computed properties --------------------------------------------------

    @property
    def headroom(self) -> int:
        return self.max_capacity - self.current_capacity

    @property
    def is_empty(self) -> bool:
        return self.current_capacity == 0

    def admits(self, delta: int) -> bool:
        """True if ``current_capacity + delta`` stays within bounds."""
        return 0 <= self.current_capacity + delta <= self.max_capacity


def _required_text(value: str, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


def _optional_text(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None

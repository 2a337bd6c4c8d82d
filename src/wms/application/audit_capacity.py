"""Application service: Capacity Audit use case (query).

Recomputes each warehouse's stored units from its items and reports the
warehouses whose recorded ``current_capacity`` disagrees, or lies
outside ``0..max_capacity``. An empty result means the books balance.
"""

from __future__ import annotations

from collections import Counter

from wms.application.dto import CapacityDiscrepancyDTO
from wms.domain.repository.unit_of_work import UnitOfWork


class AuditCapacityHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[CapacityDiscrepancyDTO]:
        with self._uow.transaction():
            warehouses = self._uow.warehouses.list_all()
            stored: Counter[str] = Counter()
            for item in self._uow.items.list_all():
                stored[item.warehouse_id] += item.quantity

        return [
            CapacityDiscrepancyDTO(
                warehouse_id=w.id,
                warehouse_name=w.name,
                recorded=w.current_capacity,
                actual=stored[w.id],
                max_capacity=w.max_capacity,
            )
            for w in warehouses
            if w.current_capacity != stored[w.id] or not w.admits(0)
        ]

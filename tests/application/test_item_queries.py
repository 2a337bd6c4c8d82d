"""Tests for the read-only item and audit use cases."""

import pytest

from wms.application.audit_capacity import AuditCapacityHandler
from wms.application.show_items import (
    ListItemsHandler,
    ListWarehouseItemsHandler,
    ShowItemHandler,
)
from wms.domain.exceptions import EntityNotFoundError
from tests.fakes import FakeUnitOfWork, make_item, make_warehouse


def _uow(a_current: int = 15):
    return FakeUnitOfWork(
        warehouses=[
            make_warehouse("A", "Alpha", 100, current_capacity=a_current),
            make_warehouse("B", "Bravo", 100, location="DC"),
        ],
        items=[
            make_item("I1", "A", "LT-123", 10),
            make_item("I2", "A", "LT-124", 5),
        ],
    )


class TestItemQueries:

    def test_show(self):
        dto = ShowItemHandler(_uow()).handle("I1")
        assert dto.sku == "LT-123"
        assert dto.warehouse_id == "A"

    def test_show_unknown(self):
        with pytest.raises(EntityNotFoundError):
            ShowItemHandler(_uow()).handle("nope")

    def test_list_all(self):
        assert len(ListItemsHandler(_uow()).handle()) == 2

    def test_list_by_warehouse(self):
        uow = _uow()
        assert [i.id for i in ListWarehouseItemsHandler(uow).handle("A")] == ["I1", "I2"]
        assert ListWarehouseItemsHandler(uow).handle("B") == []

    def test_list_by_unknown_warehouse(self):
        with pytest.raises(EntityNotFoundError):
            ListWarehouseItemsHandler(_uow()).handle("nope")

    def test_queries_have_no_side_effects(self):
        uow = _uow()
        before = uow.snapshot()
        ShowItemHandler(uow).handle("I1")
        ListItemsHandler(uow).handle()
        ListWarehouseItemsHandler(uow).handle("A")
        assert uow.snapshot() == before


class TestAuditCapacity:

    def test_balanced_books(self):
        assert AuditCapacityHandler(_uow()).handle() == []

    def test_reports_mismatch(self):
        report = AuditCapacityHandler(_uow(a_current=12)).handle()
        assert len(report) == 1
        assert report[0].warehouse_id == "A"
        assert report[0].recorded == 12
        assert report[0].actual == 15

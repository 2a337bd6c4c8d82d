"""Integration tests for warehouse use cases."""

import pytest

from wms.application.create_warehouse import CreateWarehouseHandler
from wms.application.delete_warehouse import DeleteWarehouseHandler
from wms.application.dto import WarehousePatch
from wms.application.show_warehouses import ListWarehousesHandler, ShowWarehouseHandler
from wms.application.update_warehouse import UpdateWarehouseHandler
from wms.domain.exceptions import (
    CapacityExceededError,
    EntityNotFoundError,
    ValidationError,
    WarehouseNotEmptyError,
)
from tests.fakes import FakeUnitOfWork, make_item, make_warehouse


class TestCreateWarehouse:

    def test_creates_empty_warehouse(self):
        uow = FakeUnitOfWork()
        dto = CreateWarehouseHandler(uow).handle("Test Warehouse A", "Baltimore", 110)
        assert dto.current_capacity == 0
        assert dto.headroom == 110
        assert uow.warehouses.get_by_id(dto.id).name == "Test Warehouse A"

    def test_metadata_kept(self):
        uow = FakeUnitOfWork()
        dto = CreateWarehouseHandler(uow).handle(
            "North", "DC", 10, manager="Dana", notes="Dock 4"
        )
        assert dto.manager == "Dana"
        assert dto.notes == "Dock 4"

    def test_same_name_and_location_rejected(self):
        uow = FakeUnitOfWork()
        handler = CreateWarehouseHandler(uow)
        handler.handle("North", "DC", 10)
        with pytest.raises(ValidationError, match="already exists"):
            handler.handle(" North ", "DC", 20)
        assert len(uow.warehouses.list_all()) == 1

    def test_same_name_other_location_allowed(self):
        uow = FakeUnitOfWork()
        handler = CreateWarehouseHandler(uow)
        handler.handle("North", "DC", 10)
        handler.handle("North", "Baltimore", 10)
        assert len(uow.warehouses.list_all()) == 2


class TestUpdateWarehouse:

    def _uow(self):
        return FakeUnitOfWork(warehouses=[
            make_warehouse("A", "Alpha", 100, current_capacity=40),
            make_warehouse("B", "Bravo", 50, location="DC"),
        ])

    def test_rename_and_resize(self):
        uow = self._uow()
        dto = UpdateWarehouseHandler(uow).handle(
            "A", WarehousePatch(name="Alpha Prime", max_capacity=60)
        )
        assert dto.name == "Alpha Prime"
        assert dto.max_capacity == 60
        assert dto.current_capacity == 40

    def test_shrink_below_stored_units_rejected(self):
        uow = self._uow()
        before = uow.snapshot()
        with pytest.raises(CapacityExceededError):
            UpdateWarehouseHandler(uow).handle("A", WarehousePatch(max_capacity=39))
        assert uow.snapshot() == before

    def test_rename_onto_existing_pair_rejected(self):
        uow = self._uow()
        with pytest.raises(ValidationError, match="already exists"):
            UpdateWarehouseHandler(uow).handle(
                "A", WarehousePatch(name="Bravo", location="DC")
            )

    def test_current_capacity_cannot_be_patched(self):
        with pytest.raises(ValidationError, match="managed automatically"):
            WarehousePatch.from_mapping({"name": "X", "currentCapacity": 0})

    def test_unknown_warehouse(self):
        with pytest.raises(EntityNotFoundError):
            UpdateWarehouseHandler(self._uow()).handle("nope", WarehousePatch(name="X"))


class TestDeleteWarehouse:

    def test_delete_empty(self):
        uow = FakeUnitOfWork(warehouses=[make_warehouse("A", "Alpha", 100)])
        DeleteWarehouseHandler(uow).handle("A")
        assert uow.warehouses.get_by_id("A") is None

    def test_delete_with_stock_rejected(self):
        uow = FakeUnitOfWork(
            warehouses=[make_warehouse("A", "Alpha", 100, current_capacity=10)],
            items=[make_item("I1", "A", "LT-123", 10)],
        )
        with pytest.raises(WarehouseNotEmptyError, match="10 units"):
            DeleteWarehouseHandler(uow).handle("A")
        assert uow.warehouses.get_by_id("A") is not None
        assert uow.items.get_by_id("I1") is not None

    def test_delete_with_empty_item_records_rejected(self):
        uow = FakeUnitOfWork(
            warehouses=[make_warehouse("A", "Alpha", 100)],
            items=[make_item("I1", "A", "LT-123", 0)],
        )
        with pytest.raises(WarehouseNotEmptyError, match="1 item records"):
            DeleteWarehouseHandler(uow).handle("A")

    def test_unknown_warehouse(self):
        with pytest.raises(EntityNotFoundError):
            DeleteWarehouseHandler(FakeUnitOfWork()).handle("nope")


class TestWarehouseQueries:

    def test_show(self):
        uow = FakeUnitOfWork(warehouses=[make_warehouse("A", "Alpha", 100, current_capacity=30)])
        dto = ShowWarehouseHandler(uow).handle("A")
        assert dto.headroom == 70

    def test_show_unknown(self):
        with pytest.raises(EntityNotFoundError):
            ShowWarehouseHandler(FakeUnitOfWork()).handle("nope")

    def test_list(self):
        uow = FakeUnitOfWork(warehouses=[
            make_warehouse("A", "Alpha", 100),
            make_warehouse("B", "Bravo", 100),
        ])
        assert [w.name for w in ListWarehousesHandler(uow).handle()] == ["Alpha", "Bravo"]

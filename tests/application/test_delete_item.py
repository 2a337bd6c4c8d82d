"""Integration tests for the DeleteItem use case."""

import pytest

from wms.application.delete_item import DeleteItemHandler
from wms.domain.exceptions import EntityNotFoundError, InvariantViolationError
from tests.fakes import FakeUnitOfWork, make_item, make_warehouse


class TestDeleteItem:

    def test_releases_capacity_and_deletes(self):
        uow = FakeUnitOfWork(
            warehouses=[make_warehouse("A", "Alpha", 100, current_capacity=15)],
            items=[make_item("I1", "A", "LT-123", 10), make_item("I2", "A", "LT-124", 5)],
        )
        dto = DeleteItemHandler(uow).handle("I1")
        assert dto.quantity == 10
        assert uow.items.get_by_id("I1") is None
        assert uow.warehouses.get_by_id("A").current_capacity == 5

    def test_zero_quantity_item(self):
        uow = FakeUnitOfWork(
            warehouses=[make_warehouse("A", "Alpha", 100)],
            items=[make_item("I1", "A", "LT-123", 0)],
        )
        DeleteItemHandler(uow).handle("I1")
        assert uow.items.list_all() == []

    def test_unknown_item(self):
        uow = FakeUnitOfWork(warehouses=[make_warehouse("A", "Alpha", 100)])
        with pytest.raises(EntityNotFoundError):
            DeleteItemHandler(uow).handle("nope")

    def test_failed_release_keeps_item(self):
        """Books already wrong: the warehouse records fewer units than the item holds."""
        uow = FakeUnitOfWork(
            warehouses=[make_warehouse("A", "Alpha", 100, current_capacity=3)],
            items=[make_item("I1", "A", "LT-123", 10)],
        )
        before = uow.snapshot()
        with pytest.raises(InvariantViolationError):
            DeleteItemHandler(uow).handle("I1")
        assert uow.snapshot() == before

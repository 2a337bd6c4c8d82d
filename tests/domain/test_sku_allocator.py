"""Unit tests for the SkuAllocator domain service."""

import pytest

from wms.domain.exceptions import DuplicateSkuError, EntityNotFoundError
from wms.domain.model.value_objects import Sku
from wms.domain.service.sku_allocator import SkuAllocator
from tests.fakes import (
    FakeInventoryRepository,
    FakeWarehouseRepository,
    make_item,
    make_warehouse,
)


def _setup(items=None, counter: int = 0):
    warehouses = FakeWarehouseRepository([
        make_warehouse("W1", "Test Warehouse A", 100, inventory_counter=counter),
        make_warehouse("W2", "Depot", 100),
    ])
    inventory = FakeInventoryRepository(items)
    return SkuAllocator(warehouses, inventory), warehouses


class TestAllocate:

    def test_first_allocation(self):
        allocator, _ = _setup()
        assert allocator.allocate("W1") == Sku("T-0001")

    def test_sequential_allocations_differ(self):
        allocator, _ = _setup()
        skus = [allocator.allocate("W1").value for _ in range(3)]
        assert skus == ["T-0001", "T-0002", "T-0003"]

    def test_counter_advances_once_per_allocation(self):
        allocator, warehouses = _setup(counter=4)
        assert allocator.allocate("W1") == Sku("T-0005")
        assert warehouses.get_by_id("W1").inventory_counter == 5

    def test_sequences_are_per_warehouse(self):
        allocator, _ = _setup()
        allocator.allocate("W1")
        assert allocator.allocate("W2") == Sku("D-0001")

    def test_skips_sequence_already_taken(self):
        allocator, warehouses = _setup(items=[make_item("I1", "W1", "T-0001", 5)])
        assert allocator.allocate("W1") == Sku("T-0002")
        assert warehouses.get_by_id("W1").inventory_counter == 2

    def test_unknown_warehouse(self):
        allocator, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            allocator.allocate("nope")


class TestValidateUnique:

    def test_free_sku_passes(self):
        allocator, _ = _setup(items=[make_item("I1", "W1", "LT-123", 5)])
        allocator.validate_unique(Sku("LT-124"), "W1")

    def test_duplicate_in_same_warehouse_rejected(self):
        allocator, _ = _setup(items=[make_item("I1", "W1", "LT-123", 5)])
        with pytest.raises(DuplicateSkuError, match="LT-123"):
            allocator.validate_unique(Sku("LT-123"), "W1")

    def test_same_sku_in_other_warehouse_allowed(self):
        allocator, _ = _setup(items=[make_item("I1", "W1", "LT-123", 5)])
        allocator.validate_unique(Sku("LT-123"), "W2")

    def test_item_does_not_clash_with_itself(self):
        allocator, _ = _setup(items=[make_item("I1", "W1", "LT-123", 5)])
        allocator.validate_unique(Sku("LT-123"), "W1", exclude_item_id="I1")

    def test_exclusion_only_covers_that_item(self):
        allocator, _ = _setup(items=[
            make_item("I1", "W1", "LT-123", 5),
            make_item("I2", "W1", "LT-999", 5),
        ])
        with pytest.raises(DuplicateSkuError):
            allocator.validate_unique(Sku("LT-123"), "W1", exclude_item_id="I2")

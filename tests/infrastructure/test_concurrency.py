"""Concurrent requests against one JSON data file from threads and processes."""

import multiprocessing
from concurrent.futures import ThreadPoolExecutor

from wms.application.create_item import CreateItemHandler
from wms.application.create_warehouse import CreateWarehouseHandler
from wms.domain.exceptions import CapacityExceededError
from wms.domain.service.sku_allocator import SkuAllocator
from wms.infrastructure.persistence.json_document_store import JsonDocumentStore
from wms.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


def _uow(tmp_path):
    return JsonUnitOfWork(JsonDocumentStore(tmp_path / "wms.json"))


def test_concurrent_allocations_are_distinct(tmp_path):
    uow = _uow(tmp_path)
    w = CreateWarehouseHandler(uow).handle("Test Warehouse", "Baltimore", 1000)
    allocator = SkuAllocator(uow.warehouses, uow.items)

    with ThreadPoolExecutor(max_workers=8) as pool:
        skus = list(pool.map(lambda _: allocator.allocate(w.id).value, range(40)))

    assert len(set(skus)) == 40
    assert uow.warehouses.get_by_id(w.id).inventory_counter == 40


def test_concurrent_creates_never_overbook(tmp_path):
    uow = _uow(tmp_path)
    w = CreateWarehouseHandler(uow).handle("Test Warehouse", "Baltimore", 50)
    handler = CreateItemHandler(uow)

    def create(_):
        try:
            handler.handle(name="Box", quantity=3, warehouse_id=w.id)
            return True
        except CapacityExceededError:
            return False

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(create, range(30)))

    items = uow.items.list_by_warehouse(w.id)
    assert results.count(True) == 16
    assert len(items) == 16
    assert len({i.sku for i in items}) == 16
    assert uow.warehouses.get_by_id(w.id).current_capacity == 48


def _create_boxes(data_file, warehouse_id, count):
    handler = CreateItemHandler(JsonUnitOfWork(JsonDocumentStore(data_file)))
    for n in range(count):
        handler.handle(name=f"Box {n}", quantity=1, warehouse_id=warehouse_id)


def test_creates_from_separate_processes_all_persist(tmp_path):
    data_file = tmp_path / "wms.json"
    w = CreateWarehouseHandler(_uow(tmp_path)).handle("Test Warehouse", "Baltimore", 1000)

    ctx = multiprocessing.get_context("spawn")
    workers = [
        ctx.Process(target=_create_boxes, args=(data_file, w.id, 20)) for _ in range(4)
    ]
    for p in workers:
        p.start()
    for p in workers:
        p.join(timeout=120)

    assert [p.exitcode for p in workers] == [0, 0, 0, 0]

    uow = JsonUnitOfWork(JsonDocumentStore(data_file))
    items = uow.items.list_by_warehouse(w.id)
    warehouse = uow.warehouses.get_by_id(w.id)
    assert len(items) == 80
    assert len({i.sku for i in items}) == 80
    assert warehouse.current_capacity == sum(i.quantity for i in items) == 80
    assert warehouse.inventory_counter == 80

"""Integration tests for the PlaceOrder use case.

Uses the in-memory fake database, no SQL, no file I/O.
"""

import threading

import pytest

from ecoshop.application.dto import OrderItemSpec
from ecoshop.application.place_order import PlaceOrderHandler
from ecoshop.application.update_product import UpdateProductHandler
from ecoshop.domain.exceptions import (
    InsufficientStockError,
    ProductNotFoundError,
    StockError,
    StorageFailureError,
    ValidationError,
)
from ecoshop.domain.model.principal import Principal
from ecoshop.domain.model.product import Product
from ecoshop.domain.model.value_objects import Money
from tests.fakes import FakeDatabase

ALICE = Principal(user_id=2)
ADMIN = Principal(user_id=1, is_admin=True)


def _setup(*products: Product) -> tuple[PlaceOrderHandler, FakeDatabase]:
    if not products:
        products = (
            Product(id=1, name="Widget", price=Money.of("10.00"), stock=5),
            Product(id=2, name="Gadget", price=Money.of("24.99"), stock=50),
        )
    db = FakeDatabase(products)
    return PlaceOrderHandler(db.uow_factory), db


class TestPlaceOrderHappyPath:

    def test_single_line_order(self):
        handler, db = _setup()

        dto = handler.handle(ALICE, [OrderItemSpec(product_id=1, quantity=3)])

        assert dto.total_amount == "30.00"
        assert dto.status == "pending"
        assert dto.user_id == 2
        assert db.stock_of(1) == 2

    def test_multi_line_totals(self):
        handler, db = _setup()

        dto = handler.handle(ALICE, [OrderItemSpec(1, 2), OrderItemSpec(2, 3)])

        assert [(i.product_id, i.quantity, i.price, i.total_price) for i in dto.order_items] == [
            (1, 2, "10.00", "20.00"),
            (2, 3, "24.99", "74.97"),
        ]
        assert dto.total_amount == "94.97"
        assert db.stock_of(2) == 47

    def test_total_equals_sum_of_items(self):
        handler, db = _setup()
        handler.handle(ALICE, [OrderItemSpec(1, 1), OrderItemSpec(2, 7)])

        order = db.orders[1]
        total = Money.zero()
        for item in order.items:
            total = total + item.price * item.quantity
        assert order.total_amount == total

    def test_sequential_ids(self):
        handler, _ = _setup()
        dto1 = handler.handle(ALICE, [OrderItemSpec(1, 1)])
        dto2 = handler.handle(ALICE, [OrderItemSpec(2, 1)])
        assert dto2.id == dto1.id + 1


class TestPlaceOrderFailures:

    def test_insufficient_stock_changes_nothing(self):
        handler, db = _setup(Product(id=1, name="Widget", price=Money.of("10.00"), stock=2))

        with pytest.raises(InsufficientStockError, match="Available: 2, Requested: 3"):
            handler.handle(ALICE, [OrderItemSpec(1, 3)])

        assert db.stock_of(1) == 2
        assert db.orders == {}

    def test_unknown_product_rejected_without_side_effects(self):
        handler, db = _setup()

        with pytest.raises(ProductNotFoundError) as info:
            handler.handle(ALICE, [OrderItemSpec(1, 1), OrderItemSpec(42, 1)])

        assert info.value.index == 1
        assert db.stock_of(1) == 5
        assert db.orders == {}

    def test_duplicate_lines_exceeding_stock_rejected(self):
        handler, db = _setup(Product(id=1, name="Widget", price=Money.of("10.00"), stock=3))

        with pytest.raises(InsufficientStockError, match="Requested: 4"):
            handler.handle(ALICE, [OrderItemSpec(1, 2), OrderItemSpec(1, 2)])

        assert db.stock_of(1) == 3

    def test_empty_items_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="At least one item") as info:
            handler.handle(ALICE, [])
        assert info.value.field == "items"

    def test_zero_quantity_rejected_with_field(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="at least 1") as info:
            handler.handle(ALICE, [OrderItemSpec(1, 1), OrderItemSpec(2, 0)])
        assert info.value.field == "items.1.quantity"

    def test_storage_failure_changes_nothing(self):
        handler, db = _setup()
        db.fail_order_insert = True

        with pytest.raises(StorageFailureError):
            handler.handle(ALICE, [OrderItemSpec(1, 3)])

        assert db.stock_of(1) == 5
        assert db.orders == {}


class TestPlaceOrderPriceLock:

    def test_price_change_does_not_touch_existing_order(self):
        handler, db = _setup()
        dto = handler.handle(ALICE, [OrderItemSpec(1, 1)])

        UpdateProductHandler(db.uow_factory).handle(ADMIN, 1, price="99.99")

        order = db.orders[dto.id]
        assert order.items[0].price == Money.of("10.00")
        assert order.total_amount == Money.of("10.00")
        assert db.products[1].price == Money.of("99.99")


class TestPlaceOrderConcurrency:

    def test_concurrent_orders_never_oversell(self):
        handler, db = _setup(Product(id=1, name="Widget", price=Money.of("10.00"), stock=5))
        results: list[str] = []
        barrier = threading.Barrier(2)

        def buy() -> None:
            barrier.wait()
            try:
                handler.handle(ALICE, [OrderItemSpec(1, 3)])
                results.append("ok")
            except StockError:
                results.append("rejected")

        threads = [threading.Thread(target=buy) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(results) == ["ok", "rejected"]
        assert db.stock_of(1) == 2
        assert len(db.orders) == 1

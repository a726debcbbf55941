"""Unit tests for the StockValidator domain service."""

import pytest

from ecoshop.domain.exceptions import (
    InsufficientStockError,
    ProductNotFoundError,
    ValidationError,
)
from ecoshop.domain.model.placement import OrderLineRequest
from ecoshop.domain.model.product import Product
from ecoshop.domain.model.value_objects import Money, Quantity
from ecoshop.domain.service.stock_validator import StockValidator
from tests.fakes import FakeProductRepository


def _repo() -> FakeProductRepository:
    return FakeProductRepository([
        Product(id=1, name="Bamboo Toothbrush", price=Money.of("5.99"), stock=5),
        Product(id=2, name="Solar Power Bank", price=Money.of("39.99"), stock=3),
    ])


def _lines(*pairs: tuple[int, int]) -> list[OrderLineRequest]:
    return [OrderLineRequest(product_id=pid, quantity=Quantity(qty)) for pid, qty in pairs]


class TestValidate:

    def test_returns_one_line_per_request_with_snapshot(self):
        validated = StockValidator(_repo()).validate(_lines((1, 2), (2, 1)))

        assert [v.product.id for v in validated] == [1, 2]
        assert validated[0].product.price == Money.of("5.99")
        assert validated[0].product.stock == 5
        assert validated[1].quantity == 1

    def test_exact_stock_passes(self):
        validated = StockValidator(_repo()).validate(_lines((2, 3)))
        assert validated[0].quantity == 3

    def test_empty_request_rejected(self):
        with pytest.raises(ValidationError, match="At least one item") as info:
            StockValidator(_repo()).validate([])
        assert info.value.field == "items"

    def test_unknown_product_reports_item_index(self):
        with pytest.raises(ProductNotFoundError) as info:
            StockValidator(_repo()).validate(_lines((1, 1), (99, 1)))
        assert info.value.product_id == 99
        assert info.value.index == 1
        assert info.value.field == "items.1.product_id"

    def test_insufficient_stock_reports_counts(self):
        with pytest.raises(InsufficientStockError) as info:
            StockValidator(_repo()).validate(_lines((2, 4)))
        assert info.value.available == 3
        assert info.value.requested == 4
        assert str(info.value) == (
            "Insufficient stock for product: Solar Power Bank. Available: 3, Requested: 4"
        )

    def test_any_failing_line_fails_the_whole_request(self):
        with pytest.raises(InsufficientStockError, match="Solar Power Bank"):
            StockValidator(_repo()).validate(_lines((1, 1), (2, 10)))


class TestDuplicateLines:

    def test_duplicate_lines_are_checked_against_combined_quantity(self):
        repo = FakeProductRepository([
            Product(id=1, name="Beeswax Food Wraps", price=Money.of("18.99"), stock=3),
        ])
        with pytest.raises(InsufficientStockError) as info:
            StockValidator(repo).validate(_lines((1, 2), (1, 2)))
        assert info.value.requested == 4
        assert info.value.available == 3

    def test_duplicate_lines_within_stock_keep_separate_lines(self):
        validated = StockValidator(_repo()).validate(_lines((1, 2), (1, 3)))
        assert [v.quantity for v in validated] == [2, 3]

    def test_validation_does_not_touch_stock(self):
        repo = _repo()
        StockValidator(repo).validate(_lines((1, 5)))
        assert repo.get_by_id(1).stock == 5

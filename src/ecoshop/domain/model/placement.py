"""Ephemeral values that flow through the place-order workflow."""

from __future__ import annotations

from dataclasses import dataclass

from ecoshop.domain.model.product import Product
from ecoshop.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderLineRequest:
    """One requested (product, quantity) pairing.  Not persisted."""

    product_id: int
    quantity: Quantity


@dataclass(frozen=True)
class ProductSnapshot:
    """What the validator observed about a product."""

    id: int
    name: str
    price: Money
    stock: int

    @staticmethod
    def of(product: Product) -> ProductSnapshot:
        return ProductSnapshot(
            id=product.id,
            name=product.name,
            price=product.price,
            stock=product.stock,
        )


@dataclass(frozen=True)
class ValidatedLine:
    request: OrderLineRequest
    product: ProductSnapshot

    @property
    def quantity(self) -> int:
        return self.request.quantity.value

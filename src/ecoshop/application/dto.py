"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the outer surfaces (CLI, response shaping) and
the application layer without exposing domain internals.  Money is
rendered as a two-decimal string so no float ever touches an amount.
"""

from __future__ import annotations

from dataclasses import dataclass

from ecoshop.domain.model.order import Order
from ecoshop.domain.model.product import Product


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product ID + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class OrderItemDTO:
    id: int | None
    product_id: int
    product_name: str
    quantity: int
    price: str  # formatted, e.g. "10.00"
    total_price: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "product_id": self.product_id,
            "product_name": self.product_name,
            "quantity": self.quantity,
            "price": self.price,
            "total_price": self.total_price,
        }


@dataclass(frozen=True)
class OrderDTO:
    id: int
    user_id: int
    total_amount: str
    status: str
    order_items: list[OrderItemDTO]
    created_at: str
    updated_at: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "total_amount": self.total_amount,
            "status": self.status,
            "order_items": [item.to_dict() for item in self.order_items],
            "items_count": len(self.order_items),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    description: str
    price: str
    stock: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "stock": self.stock,
        }


# --- Mapping ------------------------------------------------------------------


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        user_id=order.user_id,
        total_amount=str(order.total_amount),
        status=order.status.value,
        order_items=[
            OrderItemDTO(
                id=item.id,
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity,
                price=str(item.price),
                total_price=str(item.total_price),
            )
            for item in order.items
        ],
        created_at=order.created_at.isoformat(),
        updated_at=order.updated_at.isoformat(),
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=str(product.price),
        stock=product.stock,
    )

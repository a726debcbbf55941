"""Order aggregate and its status state machine.

The Order owns its line items.  Items carry the unit price captured
when the order was placed, and the order total is fixed at that moment;
neither is recomputed from the catalog afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from ecoshop.domain.exceptions import InvalidStatusTransitionError, ValidationError
from ecoshop.domain.model.value_objects import Money


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        try:
            return OrderStatus(raw.strip().lower())
        except (AttributeError, ValueError) as exc:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"The selected status is invalid. Expected one of: {allowed}",
                field="status",
            ) from exc


# completed and cancelled are terminal
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELLED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def check_transition(current: OrderStatus, target: OrderStatus) -> None:
    """Raise InvalidStatusTransitionError unless *current* -> *target* is allowed."""
    if target not in ALLOWED_TRANSITIONS[current]:
        raise InvalidStatusTransitionError(
            f"Cannot change order status from {current.value} to {target.value}",
            field="status",
        )


@dataclass(frozen=True)
class OrderItem:
    """A persisted line item.  Never mutated after creation."""

    id: int | None
    product_id: int
    product_name: str
    quantity: int
    price: Money  # locked at order-creation time

    @property
    def total_price(self) -> Money:
        return self.price * self.quantity


@dataclass
class Order:
    """A persisted order as returned by the order repository.

    Always fully materialized: ``items`` holds every line item of the
    order, never a lazily-loaded subset.
    """

    id: int
    user_id: int
    total_amount: Money
    status: OrderStatus
    items: list[OrderItem]
    created_at: datetime
    updated_at: datetime

    @property
    def items_count(self) -> int:
        return len(self.items)

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id


@dataclass(frozen=True)
class OrderLineDraft:
    product_id: int
    product_name: str
    quantity: int
    price: Money

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity


@dataclass(frozen=True)
class OrderDraft:
    """An assembled but not yet persisted order."""

    user_id: int
    total_amount: Money
    lines: list[OrderLineDraft] = field(default_factory=list)
    status: OrderStatus = OrderStatus.PENDING

    def quantities_by_product(self) -> dict[int, int]:
        """Total requested quantity per product id."""
        totals: dict[int, int] = {}
        for line in self.lines:
            totals[line.product_id] = totals.get(line.product_id, 0) + line.quantity
        return totals

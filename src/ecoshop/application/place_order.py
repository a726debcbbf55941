"""Application service: Place Order use case.

Orchestrates the three phases of order placement:

1. Stock Validator: read-only check in its own short unit of work.
2. Order Assembler: pure pricing from the validated snapshots.
3. Inventory Committer: the single write transaction that re-checks
   stock under lock, persists the order and decrements inventory.

The caller sees either a fully created order or a classified failure.
"""

from __future__ import annotations

import logging

from ecoshop.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from ecoshop.domain.exceptions import ValidationError
from ecoshop.domain.model.placement import OrderLineRequest
from ecoshop.domain.model.principal import Principal
from ecoshop.domain.model.value_objects import Quantity
from ecoshop.domain.repository.unit_of_work import UnitOfWorkFactory
from ecoshop.domain.service.inventory_committer import InventoryCommitter
from ecoshop.domain.service.order_assembler import assemble_order
from ecoshop.domain.service.stock_validator import StockValidator

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory
        self._committer = InventoryCommitter(uow_factory)

    def handle(self, principal: Principal, item_specs: list[OrderItemSpec]) -> OrderDTO:
        lines = self._to_line_requests(item_specs)

        with self._uow_factory() as uow:
            validated = StockValidator(uow.products).validate(lines)

        draft = assemble_order(principal.user_id, validated)
        order = self._committer.commit(draft)

        logger.info(
            "User %s placed order #%s with %d items",
            principal.user_id, order.id, order.items_count,
        )
        return order_to_dto(order)

    # --- Input mapping --------------------------------------------------------

    @staticmethod
    def _to_line_requests(item_specs: list[OrderItemSpec]) -> list[OrderLineRequest]:
        if not item_specs:
            raise ValidationError(
                "At least one item is required for the order.", field="items"
            )

        lines: list[OrderLineRequest] = []
        for index, spec in enumerate(item_specs):
            if isinstance(spec.product_id, bool) or not isinstance(spec.product_id, int):
                raise ValidationError(
                    "Product ID is required for each item.",
                    field=f"items.{index}.product_id",
                )
            try:
                quantity = Quantity(spec.quantity)
            except ValidationError as exc:
                raise ValidationError(str(exc), field=f"items.{index}.quantity") from exc
            lines.append(OrderLineRequest(product_id=spec.product_id, quantity=quantity))
        return lines

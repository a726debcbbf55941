"""Application service: Update Order Status use case.

Admin only.  Transitions follow the order status state machine:
pending -> processing|cancelled, processing -> completed|cancelled;
completed and cancelled are terminal.  The write is conditional on the
status that was read, so two concurrent updates cannot both apply.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from ecoshop.application.dto import OrderDTO, order_to_dto
from ecoshop.domain.exceptions import EntityNotFoundError, InvalidStatusTransitionError
from ecoshop.domain.model.order import OrderStatus, check_transition
from ecoshop.domain.model.principal import Principal, require_admin
from ecoshop.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, principal: Principal, order_id: int, status: str) -> OrderDTO:
        require_admin(principal, "Access denied. Only admins can update orders.")
        target = OrderStatus.parse(status)

        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")

            check_transition(order.status, target)

            now = datetime.now(timezone.utc)
            if not uow.orders.update_status(order_id, order.status, target, now):
                raise InvalidStatusTransitionError(
                    f"Order #{order_id} is no longer {order.status.value}; "
                    "it was changed by another request. Reload and try again.",
                    field="status",
                )
            uow.commit()

        logger.info(
            "Order #%s status changed %s -> %s by user %s",
            order_id, order.status.value, target.value, principal.user_id,
        )
        order.status = target
        order.updated_at = now
        return order_to_dto(order)

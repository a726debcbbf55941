"""Application service: Delete Order use case.

Admin only.  Removes the order and its items; stock is not restored.
"""

from __future__ import annotations

import logging

from ecoshop.domain.exceptions import EntityNotFoundError
from ecoshop.domain.model.principal import Principal, require_admin
from ecoshop.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, principal: Principal, order_id: int) -> None:
        require_admin(principal, "Access denied. Only admins can delete orders.")

        with self._uow_factory() as uow:
            if uow.orders.get_by_id(order_id) is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")
            uow.orders.delete(order_id)
            uow.commit()

        logger.info("Order #%s deleted by user %s", order_id, principal.user_id)

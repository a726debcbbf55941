"""Application service: Show Order use case (query).

Regular users may only view their own orders; admins may view any.
"""

from __future__ import annotations

from ecoshop.application.dto import OrderDTO, order_to_dto
from ecoshop.domain.exceptions import EntityNotFoundError
from ecoshop.domain.model.principal import Principal, require_owner_or_admin
from ecoshop.domain.repository.unit_of_work import UnitOfWorkFactory


class ShowOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, principal: Principal, order_id: int) -> OrderDTO:
        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        require_owner_or_admin(
            principal,
            order.user_id,
            "Access denied. You can only view your own orders.",
        )
        return order_to_dto(order)

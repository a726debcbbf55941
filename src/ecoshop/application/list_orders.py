"""Application service: List Orders use case (query)."""

from __future__ import annotations

from ecoshop.application.dto import OrderDTO, order_to_dto
from ecoshop.domain.model.principal import Principal
from ecoshop.domain.repository.unit_of_work import UnitOfWorkFactory


class ListOrdersHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, principal: Principal) -> list[OrderDTO]:
        """Admins see every order; everyone else sees only their own."""
        with self._uow_factory() as uow:
            if principal.is_admin:
                orders = uow.orders.list_all()
            else:
                orders = uow.orders.list_for_user(principal.user_id)
        return [order_to_dto(order) for order in orders]

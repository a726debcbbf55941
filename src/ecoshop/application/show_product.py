"""Application service: Show Product use case (query, public)."""

from __future__ import annotations

from ecoshop.application.dto import ProductDTO, product_to_dto
from ecoshop.domain.exceptions import EntityNotFoundError
from ecoshop.domain.repository.unit_of_work import UnitOfWorkFactory


class ShowProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: int) -> ProductDTO:
        with self._uow_factory() as uow:
            product = uow.products.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product_to_dto(product)

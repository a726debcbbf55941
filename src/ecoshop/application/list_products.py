"""Application service: List Products use case (query)."""

from __future__ import annotations

from ecoshop.application.dto import ProductDTO, product_to_dto
from ecoshop.domain.repository.unit_of_work import UnitOfWorkFactory


class ListProductsHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self) -> list[ProductDTO]:
        with self._uow_factory() as uow:
            products = uow.products.list_all()
        return [product_to_dto(p) for p in products]

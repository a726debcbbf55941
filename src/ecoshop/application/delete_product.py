"""Application service: Delete Product use case.

Admin only.  A product that existing order items still point at cannot
be deleted: item names are read from the catalog, so removing the row
would orphan order history.
"""

from __future__ import annotations

import logging

from ecoshop.application.add_product import ADMIN_ONLY
from ecoshop.domain.exceptions import EntityNotFoundError, ValidationError
from ecoshop.domain.model.principal import Principal, require_admin
from ecoshop.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, principal: Principal, product_id: int) -> None:
        require_admin(principal, ADMIN_ONLY)

        with self._uow_factory() as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product #{product_id} not found")
            if uow.products.is_referenced(product_id):
                raise ValidationError(
                    f"Product '{product.name}' appears in existing orders and cannot be deleted",
                    field="product",
                )
            uow.products.delete(product_id)
            uow.commit()

        logger.info("Product #%s deleted by user %s", product_id, principal.user_id)

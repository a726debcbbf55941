"""Application service: Update Product use case.

Changes catalog details only.  Existing orders keep the price they were
placed at, and stock is not adjustable here.
"""

from __future__ import annotations

import dataclasses

from ecoshop.application.add_product import ADMIN_ONLY
from ecoshop.application.dto import ProductDTO, product_to_dto
from ecoshop.domain.exceptions import EntityNotFoundError, ValidationError
from ecoshop.domain.model.principal import Principal, require_admin
from ecoshop.domain.model.value_objects import Money
from ecoshop.domain.repository.unit_of_work import UnitOfWorkFactory


class UpdateProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        principal: Principal,
        product_id: int,
        name: str | None = None,
        price: str | None = None,
        description: str | None = None,
    ) -> ProductDTO:
        require_admin(principal, ADMIN_ONLY)

        changes: dict = {}
        if name is not None:
            changes["name"] = name.strip()
        if price is not None:
            changes["price"] = Money.of(price)
        if description is not None:
            changes["description"] = description
        if not changes:
            raise ValidationError("Nothing to update")

        with self._uow_factory() as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product #{product_id} not found")

            if "name" in changes:
                clash = uow.products.get_by_name(changes["name"])
                if clash is not None and clash.id != product_id:
                    raise ValidationError(
                        f"Product '{changes['name']}' already exists", field="name"
                    )

            updated = dataclasses.replace(product, **changes)
            uow.products.save(updated)
            uow.commit()

        return product_to_dto(updated)

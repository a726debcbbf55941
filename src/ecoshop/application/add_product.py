"""Application service: Add Product use case."""

from __future__ import annotations

from ecoshop.application.dto import ProductDTO, product_to_dto
from ecoshop.domain.exceptions import ValidationError
from ecoshop.domain.model.principal import Principal, require_admin
from ecoshop.domain.model.value_objects import Money
from ecoshop.domain.repository.unit_of_work import UnitOfWorkFactory

ADMIN_ONLY = "Access denied. Admin privileges required."


class AddProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        principal: Principal,
        name: str,
        price: str,
        stock: int,
        description: str = "",
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        require_admin(principal, ADMIN_ONLY)

        if not name or not name.strip():
            raise ValidationError("Product name is required", field="name")
        if isinstance(stock, bool) or not isinstance(stock, int) or stock < 0:
            raise ValidationError("Product stock must be at least 0", field="stock")

        with self._uow_factory() as uow:
            if uow.products.get_by_name(name.strip()) is not None:
                raise ValidationError(f"Product '{name.strip()}' already exists", field="name")

            product = uow.products.add(
                name=name.strip(),
                price=Money.of(price),
                stock=stock,
                description=description,
            )
            uow.commit()

        return product_to_dto(product)

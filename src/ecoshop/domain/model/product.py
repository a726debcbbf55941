"""Product entity.

Products live independently of orders. Their price and description may
change over time, but orders only ever hold a price snapshot taken when
they were placed.
"""

from __future__ import annotations

from dataclasses import dataclass

from ecoshop.domain.exceptions import ValidationError
from ecoshop.domain.model.value_objects import Money

MAX_NAME_LENGTH = 255


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Plain immutable data.  Stock only moves through the product
    repository's guarded decrement, which runs inside the order commit
    transaction; nothing on the entity itself mutates it.
    """

    id: int
    name: str
    price: Money
    stock: int
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required", field="name")
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValidationError(
                f"Product name may not be greater than {MAX_NAME_LENGTH} characters",
                field="name",
            )
        if isinstance(self.stock, bool) or not isinstance(self.stock, int):
            raise ValidationError("Product stock must be an integer", field="stock")
        if self.stock < 0:
            raise ValidationError("Product stock cannot be negative", field="stock")

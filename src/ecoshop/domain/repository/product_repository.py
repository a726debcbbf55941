"""Abstract repository for the Product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer and are always bound to one unit of work.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from ecoshop.domain.model.product import Product
from ecoshop.domain.model.value_objects import Money


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, ordered by ID."""

    @abstractmethod
    def add(self, name: str, price: Money, stock: int, description: str = "") -> Product:
        """Insert a new product and return it with its generated ID."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist name, price and description changes of an existing product.

        Stock is deliberately not written here; see ``decrement_stock``.
        """

    @abstractmethod
    def get_for_update(self, product_ids: Iterable[int]) -> dict[int, Product]:
        """Load and lock the given products for the rest of the transaction.

        Rows are locked in ascending ID order.  Missing IDs are simply
        absent from the returned mapping.
        """

    @abstractmethod
    def decrement_stock(self, product_id: int, quantity: int) -> bool:
        """Reduce stock by *quantity* only if at least that much is left.

        Returns False (and changes nothing) when the guard fails.
        """

    @abstractmethod
    def is_referenced(self, product_id: int) -> bool:
        """Return True if any order item still points at the product."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product from the catalog."""

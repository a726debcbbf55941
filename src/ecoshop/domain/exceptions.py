"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the outer layers (CLI, response shaping) can catch them uniformly and
translate them into user-facing messages and status codes.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated.

    ``field`` names the offending input field (e.g. ``items.0.quantity``)
    when the error can be pinned to one.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidStatusTransitionError(ValidationError):
    """An order status change that the state machine does not allow."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """A requested line item references a product that does not exist."""

    def __init__(self, product_id: int, index: int) -> None:
        super().__init__(
            f"The selected product does not exist (product {product_id}, item {index})."
        )
        self.product_id = product_id
        self.index = index

    @property
    def field(self) -> str:
        return f"items.{self.index}.product_id"


class StockError(DomainException):
    """Base class for stock availability failures."""

    def __init__(self, message: str, product_id: int) -> None:
        super().__init__(message)
        self.product_id = product_id


class InsufficientStockError(StockError):
    """The catalog does not hold enough units to satisfy the request."""

    def __init__(
        self,
        product_id: int,
        product_name: str,
        available: int,
        requested: int,
    ) -> None:
        super().__init__(
            f"Insufficient stock for product: {product_name}. "
            f"Available: {available}, Requested: {requested}",
            product_id,
        )
        self.product_name = product_name
        self.available = available
        self.requested = requested


class StockChangedError(StockError):
    """Stock moved between validation and commit; the caller may resubmit."""

    def __init__(self, product_id: int, available: int | None, requested: int) -> None:
        if available is None:
            detail = "product no longer exists"
        else:
            detail = f"Available: {available}, Requested: {requested}"
        super().__init__(
            f"Stock changed for product {product_id} while placing the order "
            f"({detail}). Please retry.",
            product_id,
        )
        self.available = available
        self.requested = requested


class AccessDeniedError(DomainException):
    """The principal is not allowed to perform the operation."""


class StorageFailureError(DomainException):
    """The persistence layer failed; the transaction was rolled back."""

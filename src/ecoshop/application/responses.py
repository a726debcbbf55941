"""Response shaping: map use-case results and domain errors to
HTTP-equivalent status codes and JSON-ready bodies.

Routing is left to whatever transport sits in front of the handlers;
this module only decides *what* a response looks like.
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus

from ecoshop.application.dto import OrderDTO, ProductDTO
from ecoshop.domain.exceptions import (
    AccessDeniedError,
    DomainException,
    EntityNotFoundError,
    InsufficientStockError,
    ProductNotFoundError,
    StockChangedError,
    StorageFailureError,
    ValidationError,
)


@dataclass(frozen=True)
class ApiResponse:
    status: int
    body: dict


def order_created(order: OrderDTO) -> ApiResponse:
    return ApiResponse(
        HTTPStatus.CREATED,
        {"message": "Order created successfully", "order": order.to_dict()},
    )


def order_detail(order: OrderDTO) -> ApiResponse:
    return ApiResponse(HTTPStatus.OK, {"order": order.to_dict()})


def order_list(orders: list[OrderDTO]) -> ApiResponse:
    return ApiResponse(HTTPStatus.OK, {"orders": [o.to_dict() for o in orders]})


def order_updated(order: OrderDTO) -> ApiResponse:
    return ApiResponse(
        HTTPStatus.OK,
        {"message": "Order updated successfully", "order": order.to_dict()},
    )


def order_deleted() -> ApiResponse:
    return ApiResponse(HTTPStatus.OK, {"message": "Order deleted successfully"})


def product_list(products: list[ProductDTO]) -> ApiResponse:
    return ApiResponse(HTTPStatus.OK, {"products": [p.to_dict() for p in products]})


def product_detail(product: ProductDTO) -> ApiResponse:
    return ApiResponse(HTTPStatus.OK, {"product": product.to_dict()})


def product_deleted() -> ApiResponse:
    return ApiResponse(HTTPStatus.OK, {"message": "Product deleted successfully"})


def error_response(exc: DomainException) -> ApiResponse:
    """Classify a domain error.  Order of the checks matters: more
    specific exception types come before their bases."""
    if isinstance(exc, ProductNotFoundError):
        message = "The selected product does not exist."
        return ApiResponse(
            HTTPStatus.UNPROCESSABLE_ENTITY,
            {"message": message, "errors": {exc.field: [message]}},
        )
    if isinstance(exc, ValidationError):
        body: dict = {"message": str(exc)}
        if exc.field:
            body["errors"] = {exc.field: [str(exc)]}
        return ApiResponse(HTTPStatus.UNPROCESSABLE_ENTITY, body)
    if isinstance(exc, InsufficientStockError):
        return ApiResponse(HTTPStatus.BAD_REQUEST, {"message": str(exc)})
    if isinstance(exc, StockChangedError):
        return ApiResponse(HTTPStatus.CONFLICT, {"message": str(exc)})
    if isinstance(exc, AccessDeniedError):
        return ApiResponse(HTTPStatus.FORBIDDEN, {"message": str(exc)})
    if isinstance(exc, EntityNotFoundError):
        return ApiResponse(HTTPStatus.NOT_FOUND, {"message": str(exc)})
    if isinstance(exc, StorageFailureError):
        return ApiResponse(HTTPStatus.INTERNAL_SERVER_ERROR, {"message": "Server Error"})
    return ApiResponse(HTTPStatus.BAD_REQUEST, {"message": str(exc)})

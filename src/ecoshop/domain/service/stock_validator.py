"""Domain service: Stock Validator.

Read-only first phase of placing an order.  Confirms that every
requested product exists and that the catalog holds enough units,
and captures a snapshot of each product so pricing later reflects what
was observed here.

This check is a fast path only.  The inventory committer re-checks
stock under the write transaction, which is the source of truth.
"""

from __future__ import annotations

import logging

from ecoshop.domain.exceptions import (
    InsufficientStockError,
    ProductNotFoundError,
    ValidationError,
)
from ecoshop.domain.model.placement import (
    OrderLineRequest,
    ProductSnapshot,
    ValidatedLine,
)
from ecoshop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class StockValidator:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def validate(self, lines: list[OrderLineRequest]) -> list[ValidatedLine]:
        """Resolve every line against the catalog, failing fast.

        Lines that repeat a product ID are checked against stock using
        their combined quantity, so two lines of 2 cannot both pass
        against a stock of 3.
        """
        if not lines:
            raise ValidationError(
                "At least one item is required for the order.", field="items"
            )

        # Phase 1: resolve products, one snapshot per product id
        snapshots: dict[int, ProductSnapshot] = {}
        requested: dict[int, int] = {}

        for index, line in enumerate(lines):
            if line.product_id not in snapshots:
                product = self._product_repo.get_by_id(line.product_id)
                if product is None:
                    raise ProductNotFoundError(line.product_id, index)
                snapshots[line.product_id] = ProductSnapshot.of(product)
            requested[line.product_id] = (
                requested.get(line.product_id, 0) + line.quantity.value
            )

        # Phase 2: check aggregated demand against the observed stock
        for product_id, quantity in requested.items():
            snapshot = snapshots[product_id]
            if snapshot.stock < quantity:
                logger.warning(
                    "Insufficient stock for product %s: available=%s requested=%s",
                    product_id, snapshot.stock, quantity,
                )
                raise InsufficientStockError(
                    product_id=product_id,
                    product_name=snapshot.name,
                    available=snapshot.stock,
                    requested=quantity,
                )

        return [ValidatedLine(request=line, product=snapshots[line.product_id]) for line in lines]

"""Domain service: Inventory Committer.

Write phase of placing an order.  Everything happens inside a single
unit of work:

  1. lock the referenced products (ascending ID order) and re-check
     stock against the combined quantity per product;
  2. insert the order header and its items;
  3. apply a guarded decrement per product.

Any failure raises before ``commit()`` and the unit of work rolls back,
so an order never exists with a subset of its items, and no stock is
decremented without its order items.
"""

from __future__ import annotations

import logging

from ecoshop.domain.exceptions import StockChangedError, StorageFailureError
from ecoshop.domain.model.order import Order, OrderDraft
from ecoshop.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class InventoryCommitter:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def commit(self, draft: OrderDraft) -> Order:
        quantities = draft.quantities_by_product()
        logger.debug(
            "Committing order for user %s: %d lines over %d products",
            draft.user_id, len(draft.lines), len(quantities),
        )

        try:
            with self._uow_factory() as uow:
                locked = uow.products.get_for_update(quantities)

                for product_id in sorted(quantities):
                    requested = quantities[product_id]
                    product = locked.get(product_id)
                    if product is None:
                        raise StockChangedError(product_id, None, requested)
                    if product.stock < requested:
                        raise StockChangedError(product_id, product.stock, requested)

                order = uow.orders.add(draft)

                for product_id in sorted(quantities):
                    if not uow.products.decrement_stock(product_id, quantities[product_id]):
                        current = uow.products.get_by_id(product_id)
                        raise StockChangedError(
                            product_id,
                            current.stock if current is not None else None,
                            quantities[product_id],
                        )

                uow.commit()
        except StockChangedError as exc:
            logger.warning(
                "Order for user %s rolled back: stock changed for product %s",
                draft.user_id, exc.product_id,
            )
            raise
        except StorageFailureError:
            logger.exception("Order for user %s rolled back: storage failure", draft.user_id)
            raise

        logger.info(
            "Order #%s committed for user %s (total %s)",
            order.id, order.user_id, order.total_amount,
        )
        return order

"""Abstract unit of work: one transaction plus the repositories bound to it.

Leaving the ``with`` block without calling ``commit()`` rolls back, so an
exception raised anywhere inside the block can never leave partial
writes behind.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from ecoshop.domain.repository.order_repository import OrderRepository
from ecoshop.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    products: ProductRepository
    orders: OrderRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every write performed in this unit of work durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard uncommitted writes.  A no-op after a successful commit."""


UnitOfWorkFactory = Callable[[], UnitOfWork]

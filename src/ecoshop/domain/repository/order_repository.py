"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ecoshop.domain.model.order import Order, OrderDraft, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def add(self, draft: OrderDraft) -> Order:
        """Insert the order header and all of its items.

        Returns the fully materialized order with generated IDs and
        timestamps.
        """

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order with all its items, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, ordered by ID."""

    @abstractmethod
    def list_for_user(self, user_id: int) -> list[Order]:
        """Return the orders placed by *user_id*, ordered by ID."""

    @abstractmethod
    def update_status(
        self,
        order_id: int,
        expected: OrderStatus,
        status: OrderStatus,
        updated_at: datetime,
    ) -> bool:
        """Move an order from *expected* to *status*.

        The write only applies while the stored status still equals
        *expected*.  Returns False (and changes nothing) otherwise.
        """

    @abstractmethod
    def delete(self, order_id: int) -> None:
        """Remove an order together with its items."""

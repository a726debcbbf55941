"""SQLAlchemy-backed implementation of OrderRepository.

Every read eagerly loads the order's items and their products in the
same query round-trip, so callers always receive complete aggregates.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session, joinedload, selectinload

from ecoshop.domain.model.order import Order, OrderDraft, OrderItem, OrderStatus
from ecoshop.domain.model.value_objects import Money
from ecoshop.domain.repository.order_repository import OrderRepository
from ecoshop.infrastructure.persistence.orm import OrderItemRow, OrderRow, is_storable_id


def _with_items():
    return selectinload(OrderRow.items).joinedload(OrderItemRow.product)


def _utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def add(self, draft: OrderDraft) -> Order:
        now = datetime.now(timezone.utc)
        row = OrderRow(
            user_id=draft.user_id,
            total_amount=draft.total_amount.amount,
            status=draft.status.value,
            created_at=now,
            updated_at=now,
            items=[
                OrderItemRow(
                    product_id=line.product_id,
                    quantity=line.quantity,
                    price=line.price.amount,
                )
                for line in draft.lines
            ],
        )
        self._session.add(row)
        self._session.flush()

        names = {line.product_id: line.product_name for line in draft.lines}
        return Order(
            id=row.id,
            user_id=row.user_id,
            total_amount=draft.total_amount,
            status=draft.status,
            items=[
                OrderItem(
                    id=item.id,
                    product_id=item.product_id,
                    product_name=names[item.product_id],
                    quantity=item.quantity,
                    price=Money.of(item.price),
                )
                for item in row.items
            ],
            created_at=now,
            updated_at=now,
        )

    def get_by_id(self, order_id: int) -> Order | None:
        if not is_storable_id(order_id):
            return None
        stmt = select(OrderRow).where(OrderRow.id == order_id).options(_with_items())
        row = self._session.scalars(stmt).first()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Order]:
        stmt = select(OrderRow).order_by(OrderRow.id).options(_with_items())
        return [self._to_domain(row) for row in self._session.scalars(stmt)]

    def list_for_user(self, user_id: int) -> list[Order]:
        stmt = (
            select(OrderRow)
            .where(OrderRow.user_id == user_id)
            .order_by(OrderRow.id)
            .options(_with_items())
        )
        return [self._to_domain(row) for row in self._session.scalars(stmt)]

    def update_status(
        self,
        order_id: int,
        expected: OrderStatus,
        status: OrderStatus,
        updated_at: datetime,
    ) -> bool:
        result = self._session.execute(
            update(OrderRow)
            .where(OrderRow.id == order_id, OrderRow.status == expected.value)
            .values(status=status.value, updated_at=updated_at),
            execution_options={"synchronize_session": False},
        )
        return result.rowcount == 1

    def delete(self, order_id: int) -> None:
        self._session.execute(
            delete(OrderItemRow).where(OrderItemRow.order_id == order_id),
            execution_options={"synchronize_session": False},
        )
        self._session.execute(
            delete(OrderRow).where(OrderRow.id == order_id),
            execution_options={"synchronize_session": False},
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        return Order(
            id=row.id,
            user_id=row.user_id,
            total_amount=Money.of(row.total_amount),
            status=OrderStatus(row.status),
            items=[
                OrderItem(
                    id=item.id,
                    product_id=item.product_id,
                    product_name=item.product.name,
                    quantity=item.quantity,
                    price=Money.of(item.price),
                )
                for item in row.items
            ],
            created_at=_utc(row.created_at),
            updated_at=_utc(row.updated_at),
        )

"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from sqlalchemy import delete, exists, func, select, update
from sqlalchemy.orm import Session

from ecoshop.domain.model.product import Product
from ecoshop.domain.model.value_objects import Money
from ecoshop.domain.repository.product_repository import ProductRepository
from ecoshop.infrastructure.persistence.orm import OrderItemRow, ProductRow, is_storable_id


class SqlProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        if not is_storable_id(product_id):
            return None
        row = self._session.get(ProductRow, product_id, populate_existing=True)
        return self._to_domain(row) if row is not None else None

    def get_by_name(self, name: str) -> Product | None:
        stmt = select(ProductRow).where(func.lower(ProductRow.name) == name.lower())
        row = self._session.scalars(stmt).first()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Product]:
        rows = self._session.scalars(select(ProductRow).order_by(ProductRow.id))
        return [self._to_domain(row) for row in rows]

    def add(self, name: str, price: Money, stock: int, description: str = "") -> Product:
        now = datetime.now(timezone.utc)
        row = ProductRow(
            name=name,
            description=description,
            price=price.amount,
            stock=stock,
            created_at=now,
            updated_at=now,
        )
        self._session.add(row)
        self._session.flush()
        return self._to_domain(row)

    def save(self, product: Product) -> None:
        self._session.execute(
            update(ProductRow)
            .where(ProductRow.id == product.id)
            .values(
                name=product.name,
                description=product.description,
                price=product.price.amount,
                updated_at=datetime.now(timezone.utc),
            ),
            execution_options={"synchronize_session": False},
        )

    def get_for_update(self, product_ids: Iterable[int]) -> dict[int, Product]:
        ids = sorted(pid for pid in set(product_ids) if is_storable_id(pid))
        if not ids:
            return {}
        stmt = (
            select(ProductRow)
            .where(ProductRow.id.in_(ids))
            .order_by(ProductRow.id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return {row.id: self._to_domain(row) for row in self._session.scalars(stmt)}

    def decrement_stock(self, product_id: int, quantity: int) -> bool:
        if not is_storable_id(product_id):
            return False
        result = self._session.execute(
            update(ProductRow)
            .where(ProductRow.id == product_id, ProductRow.stock >= quantity)
            .values(
                stock=ProductRow.stock - quantity,
                updated_at=datetime.now(timezone.utc),
            ),
            execution_options={"synchronize_session": False},
        )
        return result.rowcount == 1

    def is_referenced(self, product_id: int) -> bool:
        stmt = select(exists().where(OrderItemRow.product_id == product_id))
        return bool(self._session.scalar(stmt))

    def delete(self, product_id: int) -> None:
        self._session.execute(
            delete(ProductRow).where(ProductRow.id == product_id),
            execution_options={"synchronize_session": False},
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            price=Money.of(row.price),
            stock=row.stock,
            description=row.description or "",
        )

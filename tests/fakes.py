"""In-memory fakes for testing.

FakeDatabase holds the committed state.  Each FakeUnitOfWork works on
private copies of that state and only publishes them on commit, so
leaving the ``with`` block without committing discards every write,
just like a rolled-back transaction.  A lock held for the lifetime of a
unit of work stands in for the database's write lock.
"""

from __future__ import annotations

import copy
import dataclasses
import threading
from collections.abc import Iterable
from datetime import datetime, timezone

from ecoshop.domain.exceptions import StorageFailureError
from ecoshop.domain.model.order import Order, OrderDraft, OrderItem, OrderStatus
from ecoshop.domain.model.product import Product
from ecoshop.domain.model.value_objects import Money
from ecoshop.domain.repository.order_repository import OrderRepository
from ecoshop.domain.repository.product_repository import ProductRepository
from ecoshop.domain.repository.unit_of_work import UnitOfWork


class FakeProductRepository(ProductRepository):

    def __init__(self, products: Iterable[Product] = (), referenced: Iterable[int] = ()) -> None:
        self._store: dict[int, Product] = {p.id: p for p in products}
        self._referenced = set(referenced)

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.lower():
                return p
        return None

    def list_all(self) -> list[Product]:
        return [self._store[pid] for pid in sorted(self._store)]

    def add(self, name: str, price: Money, stock: int, description: str = "") -> Product:
        next_id = max(self._store, default=0) + 1
        product = Product(id=next_id, name=name, price=price, stock=stock, description=description)
        self._store[next_id] = product
        return product

    def save(self, product: Product) -> None:
        current = self._store[product.id]
        self._store[product.id] = dataclasses.replace(product, stock=current.stock)

    def get_for_update(self, product_ids: Iterable[int]) -> dict[int, Product]:
        return {pid: self._store[pid] for pid in sorted(set(product_ids)) if pid in self._store}

    def decrement_stock(self, product_id: int, quantity: int) -> bool:
        product = self._store.get(product_id)
        if product is None or product.stock < quantity:
            return False
        self._store[product_id] = dataclasses.replace(product, stock=product.stock - quantity)
        return True

    def is_referenced(self, product_id: int) -> bool:
        return product_id in self._referenced

    def delete(self, product_id: int) -> None:
        del self._store[product_id]


class FakeOrderRepository(OrderRepository):

    def __init__(
        self,
        orders: dict[int, Order] | None = None,
        fail_on_add: bool = False,
        concurrent_status: OrderStatus | None = None,
    ) -> None:
        self._store: dict[int, Order] = orders if orders is not None else {}
        self._fail_on_add = fail_on_add
        # status another writer commits just before our conditional update lands
        self._concurrent_status = concurrent_status

    def add(self, draft: OrderDraft) -> Order:
        if self._fail_on_add:
            raise StorageFailureError("simulated disk failure")
        order_id = max(self._store, default=0) + 1
        item_id = max((i.id for o in self._store.values() for i in o.items), default=0)
        now = datetime.now(timezone.utc)
        items = []
        for line in draft.lines:
            item_id += 1
            items.append(
                OrderItem(
                    id=item_id,
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    price=line.price,
                )
            )
        order = Order(
            id=order_id,
            user_id=draft.user_id,
            total_amount=draft.total_amount,
            status=draft.status,
            items=items,
            created_at=now,
            updated_at=now,
        )
        self._store[order_id] = order
        return copy.deepcopy(order)

    def get_by_id(self, order_id: int) -> Order | None:
        order = self._store.get(order_id)
        return copy.deepcopy(order) if order is not None else None

    def list_all(self) -> list[Order]:
        return [copy.deepcopy(self._store[oid]) for oid in sorted(self._store)]

    def list_for_user(self, user_id: int) -> list[Order]:
        return [o for o in self.list_all() if o.user_id == user_id]

    def update_status(
        self,
        order_id: int,
        expected: OrderStatus,
        status: OrderStatus,
        updated_at: datetime,
    ) -> bool:
        order = self._store[order_id]
        if self._concurrent_status is not None:
            order.status = self._concurrent_status
        if order.status is not expected:
            return False
        order.status = status
        order.updated_at = updated_at
        return True

    def delete(self, order_id: int) -> None:
        del self._store[order_id]


class FakeDatabase:
    """Committed state shared by every unit of work created from it."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self.products: dict[int, Product] = {p.id: p for p in products}
        self.orders: dict[int, Order] = {}
        self.fail_order_insert = False
        self.concurrent_status: OrderStatus | None = None
        self.commits = 0
        self.lock = threading.RLock()

    def uow_factory(self) -> FakeUnitOfWork:
        return FakeUnitOfWork(self)

    def stock_of(self, product_id: int) -> int:
        return self.products[product_id].stock

    def set_stock(self, product_id: int, stock: int) -> None:
        self.products[product_id] = dataclasses.replace(self.products[product_id], stock=stock)


class FakeUnitOfWork(UnitOfWork):

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db
        self.committed = False

    def __enter__(self) -> FakeUnitOfWork:
        self._db.lock.acquire()
        referenced = {i.product_id for o in self._db.orders.values() for i in o.items}
        self.products = FakeProductRepository(self._db.products.values(), referenced)
        self.orders = FakeOrderRepository(
            copy.deepcopy(self._db.orders),
            fail_on_add=self._db.fail_order_insert,
            concurrent_status=self._db.concurrent_status,
        )
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
        finally:
            self._db.lock.release()

    def commit(self) -> None:
        self._db.products = dict(self.products._store)
        self._db.orders = self.orders._store
        self._db.commits += 1
        self.committed = True

    def rollback(self) -> None:
        # uncommitted working copies are simply dropped
        pass

"""SQLAlchemy-backed unit of work.

One session, one transaction.  Database errors raised while the unit of
work is open are rolled back and re-raised as StorageFailureError so
callers never need to know about SQLAlchemy.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ecoshop.domain.exceptions import StorageFailureError
from ecoshop.domain.repository.unit_of_work import UnitOfWork
from ecoshop.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from ecoshop.infrastructure.persistence.sql_product_repository import SqlProductRepository

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self._session_factory()
        self.products = SqlProductRepository(self._session)
        self.orders = SqlOrderRepository(self._session)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
        finally:
            self._session.close()
        if exc is not None and isinstance(exc, SQLAlchemyError):
            logger.error("Transaction rolled back after database error: %s", exc)
            raise StorageFailureError("The database operation failed.") from exc

    def commit(self) -> None:
        try:
            self._session.commit()
        except SQLAlchemyError as exc:
            raise StorageFailureError("The database operation failed.") from exc

    def rollback(self) -> None:
        self._session.rollback()

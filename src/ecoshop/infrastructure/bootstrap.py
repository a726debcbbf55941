"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import functools
import logging

from sqlalchemy import Engine

from ecoshop.domain.repository.unit_of_work import UnitOfWorkFactory
from ecoshop.infrastructure.config import Settings
from ecoshop.infrastructure.persistence.database import (
    create_schema,
    make_engine,
    make_session_factory,
)
from ecoshop.infrastructure.persistence.sql_unit_of_work import SqlAlchemyUnitOfWork

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("ecoshop").setLevel(level.upper())


@functools.lru_cache(maxsize=None)
def engine_for(database_url: str, sqlite_timeout: float = 30.0) -> Engine:
    return make_engine(database_url, sqlite_timeout)


def unit_of_work_factory(settings: Settings) -> UnitOfWorkFactory:
    session_factory = make_session_factory(
        engine_for(settings.database_url, settings.sqlite_timeout)
    )
    return functools.partial(SqlAlchemyUnitOfWork, session_factory)


def init_database(settings: Settings) -> None:
    create_schema(engine_for(settings.database_url, settings.sqlite_timeout))

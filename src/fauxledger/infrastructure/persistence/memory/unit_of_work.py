"""In-memory Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fauxledger.application.ports import UnitOfWorkFactory
from fauxledger.infrastructure.persistence.memory.database import InMemoryDatabase
from fauxledger.infrastructure.persistence.memory.document_repository import (
    InMemoryDocumentRepository,
)


class InMemoryUnitOfWork:
    """Repository access for the duration of one held database lock."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._database = database

    @property
    def documents(self) -> InMemoryDocumentRepository:
        return self._database.documents

    @property
    def payables(self) -> InMemoryDocumentRepository:
        return self._database.payables


def create_uow_factory(database: InMemoryDatabase) -> UnitOfWorkFactory:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[InMemoryUnitOfWork]:
        async with database.lock:
            yield InMemoryUnitOfWork(database)

    return factory

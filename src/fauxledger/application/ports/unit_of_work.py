"""Unit of Work port - serialized access to the document stores."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from fauxledger.application.ports.repositories.document_repository import DocumentRepository


class UnitOfWork(Protocol):
    """Unit of Work - repository access while holding the store lock."""

    @property
    def documents(self) -> DocumentRepository: ...

    @property
    def payables(self) -> DocumentRepository: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    def __call__(self) -> AbstractAsyncContextManager[UnitOfWork]: ...

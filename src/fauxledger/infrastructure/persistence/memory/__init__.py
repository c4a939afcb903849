"""In-memory persistence."""

from fauxledger.infrastructure.persistence.memory.database import InMemoryDatabase
from fauxledger.infrastructure.persistence.memory.document_repository import (
    InMemoryDocumentRepository,
)
from fauxledger.infrastructure.persistence.memory.unit_of_work import (
    InMemoryUnitOfWork,
    create_uow_factory,
)

__all__ = [
    "InMemoryDatabase",
    "InMemoryDocumentRepository",
    "InMemoryUnitOfWork",
    "create_uow_factory",
]

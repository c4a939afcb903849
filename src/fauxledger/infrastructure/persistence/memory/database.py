"""In-memory database owning both document stores."""

import asyncio
import logging

from fauxledger.domain.entities import Document
from fauxledger.infrastructure.persistence.memory.document_repository import (
    InMemoryDocumentRepository,
)

logger = logging.getLogger(__name__)


class InMemoryDatabase:
    """Seeded accounting documents plus created invoice payables.

    Constructed once by the composition root; one lock serializes every unit of
    work over both stores.
    """

    def __init__(self, seed_documents: list[Document]) -> None:
        self.documents = InMemoryDocumentRepository("doc", seed_documents)
        self.payables = InMemoryDocumentRepository("inv")
        self.lock = asyncio.Lock()
        logger.info("In-memory database ready with %d seeded documents", len(seed_documents))

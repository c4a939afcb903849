"""Repository ports."""

from fauxledger.application.ports.repositories.document_repository import (
    DocumentRepository,
)

__all__ = [
    "DocumentRepository",
]

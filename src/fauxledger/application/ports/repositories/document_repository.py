"""Document repository port."""

from typing import Protocol

from fauxledger.domain.entities import Document


class DocumentRepository(Protocol):
    """Port for document storage."""

    async def get_by_id(self, document_id: str) -> Document | None: ...

    async def list_all(self) -> list[Document]: ...

    async def next_id(self) -> str: ...

    async def create(self, document: Document) -> Document: ...

    async def update(self, document: Document) -> Document: ...

    async def delete(self, document_id: str) -> None: ...

    def clear(self) -> None: ...

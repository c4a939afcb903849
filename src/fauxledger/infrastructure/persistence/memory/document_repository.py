"""In-memory document repository implementation."""

from fauxledger.domain.entities import Document


class InMemoryDocumentRepository:
    """Insertion-ordered document map; ids are ``{prefix}-{n:06d}`` starting at 1."""

    def __init__(self, id_prefix: str, documents: list[Document] | None = None) -> None:
        self._id_prefix = id_prefix
        self._by_id: dict[str, Document] = {d.id: d for d in documents or ()}
        self._counter = 0

    async def get_by_id(self, document_id: str) -> Document | None:
        """Get document by id."""
        return self._by_id.get(document_id)

    async def list_all(self) -> list[Document]:
        """All documents in insertion order, as of the call."""
        return list(self._by_id.values())

    async def next_id(self) -> str:
        """Reserve the next unused id."""
        while True:
            self._counter += 1
            candidate = f"{self._id_prefix}-{self._counter:06d}"
            if candidate not in self._by_id:
                return candidate

    async def create(self, document: Document) -> Document:
        """Insert document."""
        if document.id in self._by_id:
            raise ValueError(f"Document {document.id} already exists")
        self._by_id[document.id] = document
        return document

    async def update(self, document: Document) -> Document:
        """Replace stored document, keeping its position."""
        if document.id not in self._by_id:
            raise KeyError(document.id)
        self._by_id[document.id] = document
        return document

    async def delete(self, document_id: str) -> None:
        """Remove document."""
        self._by_id.pop(document_id, None)

    def clear(self) -> None:
        """Drop all documents and reset the id counter."""
        self._by_id.clear()
        self._counter = 0

    def count(self) -> int:
        return len(self._by_id)

"""Get accounting document use case."""

from fauxledger.application.ports import LatencySimulator, UnitOfWorkFactory
from fauxledger.domain.entities import Document
from fauxledger.domain.exceptions import NotFoundError


class GetDocumentUseCase:
    """Get a seeded accounting document by id."""

    def __init__(
        self, unit_of_work_factory: UnitOfWorkFactory, latency_simulator: LatencySimulator
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._latency = latency_simulator

    async def execute(self, document_id: str) -> Document:
        await self._latency.simulate()
        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_id(document_id)
        if document is None:
            raise NotFoundError("Document", document_id)
        return document

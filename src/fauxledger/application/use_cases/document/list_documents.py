"""List accounting documents use case."""

from fauxledger.application.dto.document_dto import ListQueryInput
from fauxledger.application.pagination import (
    DEFAULT_LIMIT,
    Page,
    clamp_limit,
    decode_cursor,
    paginate,
)
from fauxledger.application.ports import (
    DocumentRepository,
    LatencySimulator,
    UnitOfWork,
    UnitOfWorkFactory,
)
from fauxledger.application.query import apply_filters, apply_sort, parse_filter, parse_sort
from fauxledger.domain.entities import Document


class ListDocumentsUseCase:
    """Filter, sort and paginate the seeded accounting documents.

    Filter, sort and cursor are all validated before the store is read, so a bad
    query never observes data.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        latency_simulator: LatencySimulator,
        default_limit: int = DEFAULT_LIMIT,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._latency = latency_simulator
        self._default_limit = default_limit

    def _repository(self, uow: UnitOfWork) -> DocumentRepository:
        return uow.documents

    async def execute(self, query: ListQueryInput | None = None) -> Page[Document]:
        """List one page of documents."""
        query = query or ListQueryInput()
        await self._latency.simulate()

        filters = parse_filter(query.filter)
        sorts = parse_sort(query.sort)
        limit = clamp_limit(query.limit, self._default_limit)
        if query.cursor:
            decode_cursor(query.cursor)

        async with self._uow_factory() as uow:
            items = await self._repository(uow).list_all()

        return paginate(apply_sort(apply_filters(items, filters), sorts), limit, query.cursor)

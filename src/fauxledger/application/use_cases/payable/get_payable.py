"""Get invoice payable use case."""

from fauxledger.application.ports import LatencySimulator, UnitOfWork, UnitOfWorkFactory
from fauxledger.domain.entities import Document
from fauxledger.domain.exceptions import NotFoundError


async def load_payable(uow: UnitOfWork, payable_id: str) -> Document:
    """Fetch payable or raise NotFoundError."""
    document = await uow.payables.get_by_id(payable_id)
    if document is None:
        raise NotFoundError("Document", payable_id)
    return document


class GetPayableUseCase:
    """Get a created payable by id."""

    def __init__(
        self, unit_of_work_factory: UnitOfWorkFactory, latency_simulator: LatencySimulator
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._latency = latency_simulator

    async def execute(self, payable_id: str) -> Document:
        await self._latency.simulate()
        async with self._uow_factory() as uow:
            return await load_payable(uow, payable_id)

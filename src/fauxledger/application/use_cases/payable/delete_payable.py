"""Delete invoice payable use case."""

import logging

from fauxledger.application.ports import LatencySimulator, UnitOfWorkFactory
from fauxledger.application.use_cases.payable.get_payable import load_payable
from fauxledger.domain.workflow import DocumentWorkflow

logger = logging.getLogger(__name__)


class DeletePayableUseCase:
    """Delete a payable; only allowed while it is in the initial status."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        latency_simulator: LatencySimulator,
        workflow: DocumentWorkflow,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._latency = latency_simulator
        self._workflow = workflow

    async def execute(self, payable_id: str) -> None:
        await self._latency.simulate()
        async with self._uow_factory() as uow:
            document = await load_payable(uow, payable_id)
            self._workflow.ensure_deletable(document)
            await uow.payables.delete(payable_id)
        logger.info("Deleted payable %s", payable_id)

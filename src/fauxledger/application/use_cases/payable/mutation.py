"""Shared shape of payable mutations."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from fauxledger.application.ports import LatencySimulator, UnitOfWorkFactory
from fauxledger.application.use_cases.payable.get_payable import load_payable
from fauxledger.domain.entities import Document
from fauxledger.domain.workflow import DocumentWorkflow

logger = logging.getLogger(__name__)


class PayableMutationUseCase:
    """Simulate latency, then load, transform and store one payable under the lock.

    The transform either returns a new document or raises; the store only changes
    when it returns.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        latency_simulator: LatencySimulator,
        workflow: DocumentWorkflow,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._latency = latency_simulator
        self._workflow = workflow

    async def _mutate(
        self, payable_id: str, transform: Callable[[Document, datetime], Document]
    ) -> Document:
        await self._latency.simulate()
        async with self._uow_factory() as uow:
            current = await load_payable(uow, payable_id)
            updated = transform(current, datetime.now(UTC))
            await uow.payables.update(updated)

        if updated.status != current.status:
            logger.info(
                "Payable %s moved %s -> %s (version %d)",
                payable_id,
                current.status,
                updated.status,
                updated.version,
            )
        return updated

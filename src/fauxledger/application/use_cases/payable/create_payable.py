"""Create invoice payable use case."""

import logging
from datetime import UTC, datetime

from fauxledger.application.dto.document_dto import PayableCreateInput
from fauxledger.application.ports import LatencySimulator, UnitOfWorkFactory
from fauxledger.application.use_cases.payable.line_items import build_line_items, resolve_total
from fauxledger.domain.entities import Document
from fauxledger.domain.exceptions import ValidationError
from fauxledger.domain.value_objects import Money
from fauxledger.domain.workflow import DocumentWorkflow

logger = logging.getLogger(__name__)


class CreatePayableUseCase:
    """Create a payable in the workflow's initial status with version 1."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        latency_simulator: LatencySimulator,
        workflow: DocumentWorkflow,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._latency = latency_simulator
        self._workflow = workflow

    async def execute(self, input_data: PayableCreateInput | None = None) -> Document:
        """Create payable; the total is derived from line items when any are given."""
        input_data = input_data or PayableCreateInput()
        await self._latency.simulate()

        try:
            Money.zero(input_data.currency)
        except ValueError as e:
            raise ValidationError(str(e), field="currency", value=input_data.currency) from e

        async with self._uow_factory() as uow:
            now = datetime.now(UTC)
            doc_id = await uow.payables.next_id()
            line_items, derived_total = build_line_items(
                doc_id, input_data.line_items, input_data.currency
            )
            total = resolve_total(
                doc_id, line_items, derived_total, input_data.total_amount, input_data.currency
            )
            document = Document(
                id=doc_id,
                document_type=input_data.document_type,
                status=self._workflow.table.initial,
                document_number=input_data.document_number
                or f"{input_data.document_type}-{int(now.timestamp() * 1000)}",
                document_date=input_data.document_date or now.date(),
                created_at=now,
                updated_at=now,
                business_partner_id=input_data.business_partner_id,
                business_partner_name=input_data.business_partner_name,
                description=input_data.description,
                total_amount=total,
                line_items=line_items,
                version=1,
            )
            await uow.payables.create(document)

        logger.info("Created payable %s in status %s", document.id, document.status)
        return document

"""In-process client exposing the document operations.

Example::

    client = FauxLedgerClient(Settings(seed=123, latency_ms=200, fail_rate=0.01))
    page = await client.accounting_documents.list(
        filter="status:in:INIT|SUBMITTED", sort="createdAt:desc", limit=10
    )
    payable = await client.invoice_payables.create(
        PayableCreateInput(business_partner_name="Acme Corp", total_amount=Decimal(5000))
    )
    await client.invoice_payables.advance(payable.id)  # INIT -> SUBMITTED
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fauxledger.application.dto.document_dto import (
    LineItemInput,
    ListQueryInput,
    PayableCreateInput,
)
from fauxledger.application.pagination import Page
from fauxledger.application.ports import LatencySimulator, RandomSource, UnitOfWorkFactory
from fauxledger.application.use_cases.document.get_document import GetDocumentUseCase
from fauxledger.application.use_cases.document.list_documents import ListDocumentsUseCase
from fauxledger.application.use_cases.payable.advance_payable import AdvancePayableUseCase
from fauxledger.application.use_cases.payable.create_payable import CreatePayableUseCase
from fauxledger.application.use_cases.payable.delete_payable import DeletePayableUseCase
from fauxledger.application.use_cases.payable.get_payable import GetPayableUseCase
from fauxledger.application.use_cases.payable.list_payables import ListPayablesUseCase
from fauxledger.application.use_cases.payable.review_payable import (
    ApprovePayableUseCase,
    CancelPayableUseCase,
    DeclinePayableUseCase,
    MarkPayablePaidUseCase,
)
from fauxledger.application.use_cases.payable.set_payable_status import SetPayableStatusUseCase
from fauxledger.application.use_cases.payable.update_line_items import UpdateLineItemsUseCase
from fauxledger.config import Settings, get_settings
from fauxledger.domain.entities import Approver, Document
from fauxledger.domain.value_objects import DocumentStatus
from fauxledger.domain.workflow import DocumentWorkflow, get_workflow_table
from fauxledger.infrastructure.generator import generate_documents
from fauxledger.infrastructure.latency import RandomLatencySimulator
from fauxledger.infrastructure.persistence.memory import InMemoryDatabase, create_uow_factory


class AccountingDocuments:
    """Read-only queries over the seeded documents."""

    def __init__(
        self, list_documents: ListDocumentsUseCase, get_document: GetDocumentUseCase
    ) -> None:
        self._list = list_documents
        self._get = get_document

    async def list(
        self,
        filter: str | None = None,
        sort: str | None = None,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> Page[Document]:
        return await self._list.execute(ListQueryInput(filter, sort, limit, cursor))

    async def get(self, document_id: str) -> Document:
        return await self._get.execute(document_id)


class InvoicePayables:
    """Create payables and drive them through the workflow."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        latency_simulator: LatencySimulator,
        workflow: DocumentWorkflow,
        default_limit: int,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        deps = (unit_of_work_factory, latency_simulator, workflow)
        self._create = CreatePayableUseCase(*deps)
        self._get = GetPayableUseCase(unit_of_work_factory, latency_simulator)
        self._list = ListPayablesUseCase(unit_of_work_factory, latency_simulator, default_limit)
        self._advance = AdvancePayableUseCase(*deps)
        self._set_status = SetPayableStatusUseCase(*deps)
        self._approve = ApprovePayableUseCase(*deps)
        self._decline = DeclinePayableUseCase(*deps)
        self._cancel = CancelPayableUseCase(*deps)
        self._mark_paid = MarkPayablePaidUseCase(*deps)
        self._update_line_items = UpdateLineItemsUseCase(*deps)
        self._delete = DeletePayableUseCase(*deps)

    async def create(self, input_data: PayableCreateInput | None = None) -> Document:
        return await self._create.execute(input_data)

    async def get(self, payable_id: str) -> Document:
        return await self._get.execute(payable_id)

    async def list(
        self,
        filter: str | None = None,
        sort: str | None = None,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> Page[Document]:
        return await self._list.execute(ListQueryInput(filter, sort, limit, cursor))

    async def advance(self, payable_id: str) -> Document:
        return await self._advance.execute(payable_id)

    async def set_status(self, payable_id: str, status: str | DocumentStatus) -> Document:
        return await self._set_status.execute(payable_id, status)

    async def approve(self, payable_id: str, note: str | None = None) -> Document:
        return await self._approve.execute(payable_id, note)

    async def decline(self, payable_id: str, reason: str | None = None) -> Document:
        return await self._decline.execute(payable_id, reason)

    async def cancel(self, payable_id: str, reason: str | None = None) -> Document:
        return await self._cancel.execute(payable_id, reason)

    async def mark_paid(self, payable_id: str) -> Document:
        return await self._mark_paid.execute(payable_id)

    async def update_line_items(self, payable_id: str, line_items: list[LineItemInput]) -> Document:
        return await self._update_line_items.execute(payable_id, line_items)

    async def delete(self, payable_id: str) -> None:
        await self._delete.execute(payable_id)

    async def clear(self) -> None:
        """Drop every created payable and restart id numbering."""
        async with self._uow_factory() as uow:
            uow.payables.clear()


class FauxLedgerClient:
    """Owns one in-memory database and the use cases operating on it."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        random_source: RandomSource | None = None,
        sleep: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        table = get_workflow_table(self.settings.workflow_table)
        approver = Approver(self.settings.approver_user_id, self.settings.approver_name)
        self.workflow = DocumentWorkflow(table, approver)

        self.database = InMemoryDatabase(
            generate_documents(
                self.settings.dataset_size,
                self.settings.seed,
                statuses=table.states,
                initial_status=table.initial,
                approver=approver,
            )
        )
        uow_factory = create_uow_factory(self.database)

        simulator_kwargs = {"sleep": sleep} if sleep is not None else {}
        self.latency_simulator = RandomLatencySimulator(
            self.settings.latency_ms,
            self.settings.fail_rate,
            random_source=random_source,
            **simulator_kwargs,
        )

        self.accounting_documents = AccountingDocuments(
            ListDocumentsUseCase(
                uow_factory, self.latency_simulator, self.settings.default_page_limit
            ),
            GetDocumentUseCase(uow_factory, self.latency_simulator),
        )
        self.invoice_payables = InvoicePayables(
            uow_factory,
            self.latency_simulator,
            self.workflow,
            self.settings.default_page_limit,
        )

"""Replace line items of an invoice payable."""

from datetime import datetime

from fauxledger.application.dto.document_dto import LineItemInput
from fauxledger.application.use_cases.payable.line_items import build_line_items
from fauxledger.application.use_cases.payable.mutation import PayableMutationUseCase
from fauxledger.domain.entities import Document


class UpdateLineItemsUseCase(PayableMutationUseCase):
    """Replace line items and recompute the total; initial status only."""

    async def execute(self, payable_id: str, line_items: list[LineItemInput]) -> Document:
        def transform(document: Document, now: datetime) -> Document:
            self._workflow.ensure_editable(document)
            items, total = build_line_items(
                document.id, line_items, document.total_amount.currency
            )
            return self._workflow.replace_line_items(document, items, total, now)

        return await self._mutate(payable_id, transform)

"""Document entity."""

from dataclasses import dataclass, field
from datetime import date, datetime

from fauxledger.domain.entities.approver import Approver
from fauxledger.domain.entities.line_item import LineItem
from fauxledger.domain.value_objects import DocumentStatus, DocumentType, Money


@dataclass
class Document:
    """Financial document with workflow status and line items.

    Instances are replaced, not edited, by workflow operations so a store swap is
    the only visible effect of a mutation.
    """

    id: str
    document_type: DocumentType
    status: DocumentStatus
    document_number: str
    document_date: date
    created_at: datetime
    updated_at: datetime
    business_partner_id: str
    business_partner_name: str
    description: str
    total_amount: Money
    line_items: list[LineItem] = field(default_factory=list)
    version: int = 1
    next_approver: Approver | None = None
    approval_note: str | None = None
    decline_reason: str | None = None
    cancellation_reason: str | None = None
    canceled_at: datetime | None = None
    payment_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not precede created_at")

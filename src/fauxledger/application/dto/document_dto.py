"""Document DTOs."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from fauxledger.domain.value_objects import DocumentType


@dataclass
class ListQueryInput:
    """Textual list query as received from a caller."""

    filter: str | None = None
    sort: str | None = None
    limit: int | None = None
    cursor: str | None = None


@dataclass
class LineItemInput:
    """Line item as supplied by a caller; id and total are assigned on save."""

    description: str
    quantity: int
    unit_price: Decimal
    account_code: str
    currency: str | None = None


@dataclass
class PayableCreateInput:
    """Input for creating an invoice payable.

    ``total_amount`` is only used when no line items are given; otherwise the
    total is derived from the line items.
    """

    document_type: DocumentType = DocumentType.AP
    document_number: str | None = None
    document_date: date | None = None
    business_partner_id: str = "bp-0000"
    business_partner_name: str = "Unknown Vendor"
    description: str = ""
    total_amount: Decimal | None = None
    currency: str = "USD"
    line_items: list[LineItemInput] = field(default_factory=list)

"""Generate a reproducible synthetic dataset of accounting documents.

Every random choice is drawn from one Mulberry32 stream, so the same
``(count, seed)`` always yields the same documents field for field.
"""

from collections.abc import Sequence
from datetime import UTC, date, datetime, timedelta
from decimal import Decimal
from typing import TypeVar

from fauxledger.domain.entities import Approver, Document, LineItem
from fauxledger.domain.value_objects import DocumentStatus, DocumentType, Money
from fauxledger.domain.workflow import BRANCHING_TABLE, DEFAULT_APPROVAL_NOTE
from fauxledger.infrastructure.generator.prng import Mulberry32

T = TypeVar("T")

DOCUMENT_TYPES = (DocumentType.AP, DocumentType.AR, DocumentType.CT, DocumentType.JE)
CURRENCIES = ("USD", "EUR", "GBP", "JPY", "CAD", "AUD", "CHF")

BUSINESS_PARTNERS = (
    "Acme Software Solutions",
    "Global Consulting Partners",
    "TechVendor Inc",
    "Global Treats Ltd.",
    "Paws & Play",
    "Happy Tails Supply",
    "Furry Friends Co.",
    "Puppy Palace",
    "Canine Central",
    "Doggo Depot",
    "Tail Waggers Inc.",
)

DESCRIPTIONS = (
    "Bulk order of squeaky toys",
    "Monthly treat box subscription",
    "Dog beds for winter sale",
    "Assorted chew toys",
    "Premium dog food shipment",
    "Leashes and collars restock",
    "Grooming supplies",
    "Puppy starter kits",
    "Holiday gift bundles",
    "Training pads and accessories",
)

LINE_ITEM_DESCRIPTIONS = (
    "Squeaky Toy (500 units)",
    "Treat Box (200 units)",
    "Dog Bed (100 units)",
    "Chew Toy (300 units)",
    "Premium Dog Food (50 bags)",
    "Leash (150 units)",
    "Collar (150 units)",
    "Grooming Brush (75 units)",
    "Puppy Starter Kit (20 units)",
    "Training Pad (400 units)",
)

ACCOUNT_CODES = ("1000", "2000", "3000", "4000", "5000", "6000", "7000", "8000")

CANCELLATION_REASON = "Duplicate invoice"
DECLINE_REASON = "Amount does not match PO"

DEFAULT_APPROVER = Approver(user_id="user-finance-01", full_name="Finance Team")


class _Draws:
    """Typed helpers over the seeded stream."""

    def __init__(self, seed: int) -> None:
        self._prng = Mulberry32(seed)

    def between(self, low: int, high: int) -> int:
        return self._prng.randint(low, high)

    def pick(self, items: Sequence[T]) -> T:
        return self._prng.choice(items)

    def timestamp(self, start_year: int, end_year: int) -> datetime:
        start = datetime(start_year, 1, 1, tzinfo=UTC)
        end = datetime(end_year, 12, 31, tzinfo=UTC)
        span_ms = int((end - start).total_seconds() * 1000)
        return start + timedelta(milliseconds=int(self._prng.random() * span_ms))

    def day(self, start_year: int, end_year: int) -> date:
        return self.timestamp(start_year, end_year).date()


def generate_documents(
    count: int,
    seed: int = 42,
    statuses: Sequence[DocumentStatus] = BRANCHING_TABLE.states,
    initial_status: DocumentStatus = BRANCHING_TABLE.initial,
    approver: Approver = DEFAULT_APPROVER,
) -> list[Document]:
    """Generate ``count`` documents from ``seed``.

    Line item totals are quantity times unit price and the document total is their
    sum. Status is drawn from ``statuses``; workflow metadata matches the status.
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    if not statuses:
        raise ValueError("statuses must not be empty")

    draw = _Draws(seed)
    documents: list[Document] = []

    for i in range(count):
        doc_id = f"doc-{i:06d}"
        document_type = draw.pick(DOCUMENT_TYPES)
        currency = draw.pick(CURRENCIES)

        line_items: list[LineItem] = []
        total = Decimal(0)
        for j in range(draw.between(1, 5)):
            quantity = draw.between(1, 10)
            unit_price = Money(Decimal(draw.between(100, 10000)), currency)
            item = LineItem.build(
                id=f"li-{i}-{j}",
                description=draw.pick(LINE_ITEM_DESCRIPTIONS),
                quantity=quantity,
                unit_price=unit_price,
                account_code=draw.pick(ACCOUNT_CODES),
            )
            total += item.total_amount.amount
            line_items.append(item)

        created_at = draw.timestamp(2023, 2025)
        updated_at = max(created_at, draw.timestamp(2024, 2025))
        status = draw.pick(statuses)

        documents.append(
            Document(
                id=doc_id,
                document_type=document_type,
                status=status,
                document_number=f"{document_type}-{draw.between(10000, 99999)}",
                document_date=draw.day(2023, 2025),
                created_at=created_at,
                updated_at=updated_at,
                business_partner_id=f"bp-{draw.between(1000, 9999)}",
                business_partner_name=draw.pick(BUSINESS_PARTNERS),
                description=draw.pick(DESCRIPTIONS),
                total_amount=Money(total, currency),
                line_items=line_items,
                version=1 if status == initial_status else draw.between(2, 5),
                next_approver=(
                    Approver(approver.user_id, approver.full_name, updated_at)
                    if status == DocumentStatus.SUBMITTED
                    else None
                ),
                approval_note=(
                    DEFAULT_APPROVAL_NOTE
                    if status
                    in (DocumentStatus.APPROVED, DocumentStatus.POSTED, DocumentStatus.PAID)
                    else None
                ),
                payment_at=updated_at if status == DocumentStatus.PAID else None,
                canceled_at=updated_at if status == DocumentStatus.CANCELED else None,
                cancellation_reason=(
                    CANCELLATION_REASON if status == DocumentStatus.CANCELED else None
                ),
                decline_reason=DECLINE_REASON if status == DocumentStatus.DECLINED else None,
            )
        )

    return documents

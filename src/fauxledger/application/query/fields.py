"""Allow-listed query fields and their typed accessors.

Filter and sort expressions may only name fields in QUERY_FIELDS; the name is
resolved once at parse time and evaluation goes through ``extract``.
"""

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal

from fauxledger.domain.entities import Document
from fauxledger.domain.value_objects import format_timestamp

FieldValue = str | Decimal | None


@dataclass(frozen=True)
class QueryField:
    """Named, typed view of one document attribute."""

    name: str
    extract: Callable[[Document], FieldValue]
    numeric: bool = False


QUERY_FIELDS: dict[str, QueryField] = {
    f.name: f
    for f in (
        QueryField("status", lambda d: d.status.value),
        QueryField("documentType", lambda d: d.document_type.value),
        QueryField("documentNumber", lambda d: d.document_number),
        QueryField("documentDate", lambda d: d.document_date.isoformat()),
        QueryField("createdAt", lambda d: format_timestamp(d.created_at)),
        QueryField("updatedAt", lambda d: format_timestamp(d.updated_at)),
        QueryField("businessPartnerName", lambda d: d.business_partner_name),
        QueryField("currency", lambda d: d.total_amount.currency),
        QueryField(
            "totalTransactionAmountInMajors",
            lambda d: d.total_amount.amount,
            numeric=True,
        ),
    )
}

ALLOWED_FIELDS = frozenset(QUERY_FIELDS)

"""Domain value objects."""

from fauxledger.domain.value_objects.document_status import DocumentStatus
from fauxledger.domain.value_objects.document_type import DocumentType
from fauxledger.domain.value_objects.money import Money
from fauxledger.domain.value_objects.query_spec import (
    FilterOperator,
    FilterSpec,
    SortDirection,
    SortSpec,
)
from fauxledger.domain.value_objects.timestamp import format_timestamp

__all__ = [
    "DocumentStatus",
    "DocumentType",
    "FilterOperator",
    "FilterSpec",
    "Money",
    "SortDirection",
    "SortSpec",
    "format_timestamp",
]

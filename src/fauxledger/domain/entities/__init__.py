"""Domain entities."""

from fauxledger.domain.entities.approver import Approver
from fauxledger.domain.entities.document import Document
from fauxledger.domain.entities.line_item import LineItem

__all__ = [
    "Approver",
    "Document",
    "LineItem",
]

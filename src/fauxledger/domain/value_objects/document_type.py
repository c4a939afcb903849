"""Accounting document type."""

from enum import StrEnum


class DocumentType(StrEnum):
    """Supported document types."""

    AP = "AP"  # accounts payable
    AR = "AR"  # accounts receivable
    CT = "CT"  # credit transfer
    JE = "JE"  # journal entry

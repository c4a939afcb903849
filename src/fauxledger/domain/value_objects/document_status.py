"""Document workflow status."""

from enum import StrEnum


class DocumentStatus(StrEnum):
    """Every status used by any workflow table.

    DRAFT and POSTED belong to the linear table, INIT, CANCELED and DECLINED to the
    branching one; SUBMITTED, APPROVED and PAID are shared.
    """

    DRAFT = "DRAFT"
    INIT = "INIT"
    SUBMITTED = "SUBMITTED"
    APPROVED = "APPROVED"
    POSTED = "POSTED"
    PAID = "PAID"
    CANCELED = "CANCELED"
    DECLINED = "DECLINED"

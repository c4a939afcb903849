"""Domain exceptions.

Every error a caller can recover from derives from FauxLedgerError and carries a
``status_code`` plus the structured context needed to render a specific message.
"""

from collections.abc import Iterable


class FauxLedgerError(Exception):
    """Base exception for FauxLedger."""

    status_code: int = 500

    def details(self) -> dict[str, object]:
        """Structured payload for collaborators rendering the error."""
        return {}


class ValidationError(FauxLedgerError):
    """Malformed or disallowed filter, sort, cursor or input data."""

    status_code = 422

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        operator: str | None = None,
        value: str | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.operator = operator
        self.value = value

    def details(self) -> dict[str, object]:
        payload: dict[str, object] = {}
        if self.field is not None:
            payload["field"] = self.field
        if self.operator is not None:
            payload["operator"] = self.operator
        if self.value is not None:
            payload["value"] = self.value
        return payload


class NotFoundError(FauxLedgerError):
    """Requested resource was not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(f"{resource} not found: {identifier}")
        self.resource = resource
        self.identifier = identifier

    def details(self) -> dict[str, object]:
        return {"resource": self.resource, "id": self.identifier}


class WorkflowError(FauxLedgerError):
    """Operation is not legal from the document's current status."""

    status_code = 422

    def __init__(
        self,
        message: str,
        *,
        document_id: str,
        current_status: str,
        attempted_status: str | None = None,
        allowed_statuses: Iterable[str] = (),
    ) -> None:
        super().__init__(message)
        self.document_id = document_id
        self.current_status = current_status
        self.attempted_status = attempted_status
        self.allowed_statuses = tuple(allowed_statuses)

    def details(self) -> dict[str, object]:
        return {
            "documentId": self.document_id,
            "currentStatus": self.current_status,
            "attemptedStatus": self.attempted_status,
            "allowedStatuses": list(self.allowed_statuses),
        }


class SimulatedTransportError(FauxLedgerError):
    """Injected transient failure that mimics a network fault."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"[{status_code}] {reason}")
        self.status_code = status_code
        self.reason = reason

    def details(self) -> dict[str, object]:
        return {"transient": True, "reason": self.reason}

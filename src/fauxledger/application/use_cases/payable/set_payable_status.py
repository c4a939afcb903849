"""Set invoice payable status use case."""

from fauxledger.application.use_cases.payable.mutation import PayableMutationUseCase
from fauxledger.domain.entities import Document
from fauxledger.domain.exceptions import ValidationError
from fauxledger.domain.value_objects import DocumentStatus


def parse_status(value: str | DocumentStatus) -> DocumentStatus:
    """Resolve a status name; unknown names are a ValidationError."""
    try:
        return DocumentStatus(value)
    except ValueError:
        raise ValidationError(
            f"Unknown status: {value!r}. Known statuses: {', '.join(DocumentStatus)}",
            field="status",
            value=str(value),
        ) from None


class SetPayableStatusUseCase(PayableMutationUseCase):
    """Move a payable to an explicitly requested, directly reachable status."""

    async def execute(self, payable_id: str, target: str | DocumentStatus) -> Document:
        status = parse_status(target)
        return await self._mutate(
            payable_id, lambda doc, now: self._workflow.set_status(doc, status, now)
        )

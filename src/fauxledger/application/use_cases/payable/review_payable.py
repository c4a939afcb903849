"""State-specific review operations: approve, decline, cancel, mark paid."""

from fauxledger.application.use_cases.payable.mutation import PayableMutationUseCase
from fauxledger.domain.entities import Document


class ApprovePayableUseCase(PayableMutationUseCase):
    """Approve a submitted payable, recording an approval note."""

    async def execute(self, payable_id: str, note: str | None = None) -> Document:
        return await self._mutate(
            payable_id, lambda doc, now: self._workflow.approve(doc, now, note=note)
        )


class DeclinePayableUseCase(PayableMutationUseCase):
    """Decline a submitted payable, recording the reason."""

    async def execute(self, payable_id: str, reason: str | None = None) -> Document:
        return await self._mutate(
            payable_id, lambda doc, now: self._workflow.decline(doc, now, reason=reason)
        )


class CancelPayableUseCase(PayableMutationUseCase):
    """Cancel a payable that has not reached a terminal status."""

    async def execute(self, payable_id: str, reason: str | None = None) -> Document:
        return await self._mutate(
            payable_id, lambda doc, now: self._workflow.cancel(doc, now, reason=reason)
        )


class MarkPayablePaidUseCase(PayableMutationUseCase):
    """Record payment of an approved (or posted) payable."""

    async def execute(self, payable_id: str) -> Document:
        return await self._mutate(payable_id, self._workflow.mark_paid)

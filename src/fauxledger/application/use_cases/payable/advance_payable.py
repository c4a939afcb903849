"""Advance invoice payable use case."""

from fauxledger.application.use_cases.payable.mutation import PayableMutationUseCase
from fauxledger.domain.entities import Document


class AdvancePayableUseCase(PayableMutationUseCase):
    """Move a payable to its canonical next status."""

    async def execute(self, payable_id: str) -> Document:
        return await self._mutate(payable_id, self._workflow.advance)

"""List invoice payables use case."""

from fauxledger.application.ports import DocumentRepository, UnitOfWork
from fauxledger.application.use_cases.document.list_documents import ListDocumentsUseCase


class ListPayablesUseCase(ListDocumentsUseCase):
    """Same query engine as accounting documents, over created payables."""

    def _repository(self, uow: UnitOfWork) -> DocumentRepository:
        return uow.payables

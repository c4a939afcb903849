"""Accounting document API resources."""

import falcon
import falcon.asgi

from fauxledger.client import AccountingDocuments
from fauxledger.interfaces.api.serializers import document_to_dict, page_to_dict, parse_limit


class AccountingDocumentsResource:
    """GET /v1/accounting-documents - filtered, sorted, paginated list."""

    def __init__(self, documents: AccountingDocuments) -> None:
        self._documents = documents

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        page = await self._documents.list(
            filter=req.get_param("filter"),
            sort=req.get_param("sort"),
            limit=parse_limit(req.get_param("limit")),
            cursor=req.get_param("cursor"),
        )
        resp.media = page_to_dict(page)
        resp.status = falcon.HTTP_200


class AccountingDocumentResource:
    """GET /v1/accounting-documents/{document_id}."""

    def __init__(self, documents: AccountingDocuments) -> None:
        self._documents = documents

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        document = await self._documents.get(document_id)
        resp.media = document_to_dict(document)
        resp.status = falcon.HTTP_200

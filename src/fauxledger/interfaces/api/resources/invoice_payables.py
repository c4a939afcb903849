"""Invoice payable API resources."""

from typing import Any

import falcon
import falcon.asgi

from fauxledger.client import InvoicePayables
from fauxledger.domain.exceptions import ValidationError
from fauxledger.interfaces.api.serializers import (
    document_to_dict,
    page_to_dict,
    parse_create_input,
    parse_limit,
    parse_line_items,
)


async def _read_body(req: falcon.asgi.Request) -> dict[str, Any]:
    body = await req.get_media(default_when_empty={})
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def _optional_text(body: dict[str, Any], key: str) -> str | None:
    value = body.get(key)
    return None if value is None else str(value)


class InvoicePayablesResource:
    """GET/POST /v1/invoice-payables - list and create payables."""

    def __init__(self, payables: InvoicePayables) -> None:
        self._payables = payables

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        page = await self._payables.list(
            filter=req.get_param("filter"),
            sort=req.get_param("sort"),
            limit=parse_limit(req.get_param("limit")),
            cursor=req.get_param("cursor"),
        )
        resp.media = page_to_dict(page)
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create a payable in the initial workflow status."""
        input_data = parse_create_input(await _read_body(req))
        document = await self._payables.create(input_data)
        resp.media = document_to_dict(document)
        resp.status = falcon.HTTP_201


class InvoicePayableResource:
    """Single payable plus its workflow actions.

    Actions are routed as suffixes: ``/advance``, ``/status``, ``/approve``,
    ``/decline``, ``/cancel``, ``/mark-paid`` and ``/line-items``.
    """

    def __init__(self, payables: InvoicePayables) -> None:
        self._payables = payables

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, payable_id: str
    ) -> None:
        document = await self._payables.get(payable_id)
        resp.media = document_to_dict(document)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, payable_id: str
    ) -> None:
        """Delete a payable that is still in the initial status."""
        await self._payables.delete(payable_id)
        resp.status = falcon.HTTP_204

    async def on_post_advance(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, payable_id: str
    ) -> None:
        document = await self._payables.advance(payable_id)
        resp.media = document_to_dict(document)

    async def on_post_status(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, payable_id: str
    ) -> None:
        """Body: ``{"status": "APPROVED"}``."""
        body = await _read_body(req)
        if not body.get("status"):
            raise ValidationError("status is required", field="status")
        document = await self._payables.set_status(payable_id, str(body["status"]))
        resp.media = document_to_dict(document)

    async def on_post_approve(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, payable_id: str
    ) -> None:
        body = await _read_body(req)
        document = await self._payables.approve(payable_id, _optional_text(body, "note"))
        resp.media = document_to_dict(document)

    async def on_post_decline(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, payable_id: str
    ) -> None:
        body = await _read_body(req)
        document = await self._payables.decline(payable_id, _optional_text(body, "reason"))
        resp.media = document_to_dict(document)

    async def on_post_cancel(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, payable_id: str
    ) -> None:
        body = await _read_body(req)
        document = await self._payables.cancel(payable_id, _optional_text(body, "reason"))
        resp.media = document_to_dict(document)

    async def on_post_mark_paid(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, payable_id: str
    ) -> None:
        document = await self._payables.mark_paid(payable_id)
        resp.media = document_to_dict(document)

    async def on_put_line_items(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, payable_id: str
    ) -> None:
        """Body: ``{"lineItems": [...]}``; replaces all line items."""
        body = await _read_body(req)
        line_items = parse_line_items(body.get("lineItems"))
        document = await self._payables.update_line_items(payable_id, line_items)
        resp.media = document_to_dict(document)

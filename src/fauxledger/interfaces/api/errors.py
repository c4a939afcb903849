"""Error handlers mapping domain exceptions to responses."""

import logging

import falcon
import falcon.asgi

from fauxledger.domain.exceptions import FauxLedgerError

logger = logging.getLogger(__name__)


async def handle_domain_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: FauxLedgerError, params
) -> None:
    """Render a FauxLedgerError with its status code and structured details."""
    resp.status = falcon.code_to_http_status(ex.status_code)
    resp.media = {"error": str(ex), "type": type(ex).__name__, **ex.details()}


async def handle_unexpected_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params
) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "500 Internal Server Error"}

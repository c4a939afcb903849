"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from fauxledger.client import FauxLedgerClient
from fauxledger.domain.exceptions import FauxLedgerError
from fauxledger.interfaces.api.errors import handle_domain_error, handle_unexpected_error
from fauxledger.interfaces.api.middleware.cors import CORSMiddleware
from fauxledger.interfaces.api.resources.accounting_documents import (
    AccountingDocumentResource,
    AccountingDocumentsResource,
)
from fauxledger.interfaces.api.resources.health import HealthResource
from fauxledger.interfaces.api.resources.invoice_payables import (
    InvoicePayableResource,
    InvoicePayablesResource,
)


def create_app(client: FauxLedgerClient, cors_origins: list[str] | None = None) -> App:
    """Create Falcon ASGI app with routes and error handlers."""
    middleware = [CORSMiddleware(cors_origins)] if cors_origins else []
    app = falcon.asgi.App(middleware=middleware)

    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_error_handler(FauxLedgerError, handle_domain_error)

    health = HealthResource(client.database)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")

    app.add_route(
        "/v1/accounting-documents", AccountingDocumentsResource(client.accounting_documents)
    )
    app.add_route(
        "/v1/accounting-documents/{document_id}",
        AccountingDocumentResource(client.accounting_documents),
    )

    payable = InvoicePayableResource(client.invoice_payables)
    app.add_route("/v1/invoice-payables", InvoicePayablesResource(client.invoice_payables))
    app.add_route("/v1/invoice-payables/{payable_id}", payable)
    for action in ("advance", "status", "approve", "decline", "cancel"):
        app.add_route(f"/v1/invoice-payables/{{payable_id}}/{action}", payable, suffix=action)
    app.add_route("/v1/invoice-payables/{payable_id}/mark-paid", payable, suffix="mark_paid")
    app.add_route("/v1/invoice-payables/{payable_id}/line-items", payable, suffix="line_items")
    return app

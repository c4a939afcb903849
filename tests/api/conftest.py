"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from fauxledger.client import FauxLedgerClient
from fauxledger.config import Settings
from fauxledger.interfaces.api.app import create_app


@pytest.fixture
def ledger(settings: Settings) -> FauxLedgerClient:
    """Seeded in-process client backing the app."""
    return FauxLedgerClient(settings)


@pytest.fixture
def app(ledger: FauxLedgerClient):
    """Falcon ASGI app with all routes and error handlers."""
    return create_app(ledger, cors_origins=["http://localhost:3000"])


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def create_payable(client: TestClient):
    """POST a payable and return its JSON."""

    def _create(**body) -> dict:
        result = client.simulate_post("/v1/invoice-payables", json=body)
        assert result.status_code == 201, result.text
        return result.json

    return _create

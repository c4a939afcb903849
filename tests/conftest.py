"""Pytest fixtures for FauxLedger tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, date, datetime
from decimal import Decimal
from itertools import cycle

import pytest

from fauxledger.config import Settings
from fauxledger.domain.entities import Document, LineItem
from fauxledger.domain.value_objects import DocumentStatus, DocumentType, Money
from fauxledger.domain.workflow import BRANCHING_TABLE, DocumentWorkflow
from fauxledger.infrastructure.generator import generate_documents
from fauxledger.infrastructure.generator.seeded_generator import DEFAULT_APPROVER
from fauxledger.infrastructure.latency import RandomLatencySimulator
from fauxledger.infrastructure.persistence.memory import InMemoryDatabase, create_uow_factory


class FixedRandom:
    """Random source replaying a fixed sequence of floats."""

    def __init__(self, *values: float) -> None:
        self._values = cycle(values)

    def random(self) -> float:
        return next(self._values)


# --- Builders ---


def build_document(
    id: str = "doc-test",
    *,
    status: DocumentStatus = DocumentStatus.INIT,
    amount: str | int = "100",
    currency: str = "USD",
    partner: str = "Acme Corp",
    document_number: str = "AP-10000",
    document_type: DocumentType = DocumentType.AP,
    created_at: datetime | None = None,
    updated_at: datetime | None = None,
    version: int = 1,
) -> Document:
    created = created_at or datetime(2024, 1, 1, tzinfo=UTC)
    unit_price = Money(Decimal(str(amount)), currency)
    return Document(
        id=id,
        document_type=document_type,
        status=status,
        document_number=document_number,
        document_date=date(2024, 1, 1),
        created_at=created,
        updated_at=updated_at or created,
        business_partner_id="bp-1000",
        business_partner_name=partner,
        description="Test document",
        total_amount=unit_price,
        line_items=[LineItem.build(f"{id}-li-0", "Item", 1, unit_price, "1000")],
        version=version,
    )


# --- Fixtures ---


@pytest.fixture
def document_factory() -> Callable[..., Document]:
    """Builder for hand-made documents."""
    return build_document


@pytest.fixture
def workflow() -> DocumentWorkflow:
    """Workflow over the default branching table."""
    return DocumentWorkflow(BRANCHING_TABLE, DEFAULT_APPROVER)


@pytest.fixture
def database() -> InMemoryDatabase:
    """Database seeded with 60 generated documents."""
    return InMemoryDatabase(generate_documents(60, seed=7))


@pytest.fixture
def uow_factory(database: InMemoryDatabase):
    """UoW factory over the seeded database."""
    return create_uow_factory(database)


@pytest.fixture
def no_latency() -> RandomLatencySimulator:
    """Simulator that neither delays nor fails."""
    return RandomLatencySimulator(latency_ms=0, fail_rate=0.0)


@pytest.fixture
def failing_latency() -> RandomLatencySimulator:
    """Simulator that always fails with 503."""
    return RandomLatencySimulator(fail_rate=1.0, random_source=FixedRandom(0.5))


@pytest.fixture
def settings() -> Settings:
    """Small, fast, deterministic settings."""
    return Settings(
        _env_file=None,
        seed=42,
        dataset_size=120,
        latency_ms=0,
        fail_rate=0.0,
        workflow_table="branching",
        default_page_limit=25,
    )


@pytest.fixture
def fixed_random() -> type[FixedRandom]:
    """Replayable random source class."""
    return FixedRandom

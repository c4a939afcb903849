"""Application ports - interfaces for infrastructure adapters."""

from fauxledger.application.ports.latency_simulator import LatencySimulator, RandomSource
from fauxledger.application.ports.repositories import DocumentRepository
from fauxledger.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "DocumentRepository",
    "LatencySimulator",
    "RandomSource",
    "UnitOfWork",
    "UnitOfWorkFactory",
]

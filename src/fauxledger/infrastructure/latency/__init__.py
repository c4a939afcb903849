"""Latency and failure simulation."""

from fauxledger.infrastructure.latency.simulator import (
    TRANSPORT_FAILURES,
    RandomLatencySimulator,
)

__all__ = [
    "TRANSPORT_FAILURES",
    "RandomLatencySimulator",
]

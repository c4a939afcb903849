"""Latency simulator port."""

from typing import Protocol


class RandomSource(Protocol):
    """Source of uniform floats in [0, 1)."""

    def random(self) -> float: ...


class LatencySimulator(Protocol):
    """Suspends or fails before any store access."""

    async def simulate(self) -> None: ...

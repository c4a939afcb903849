"""Artificial network latency and transient failure injection."""

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable

from fauxledger.application.ports import RandomSource
from fauxledger.domain.exceptions import SimulatedTransportError

logger = logging.getLogger(__name__)

TRANSPORT_FAILURES: tuple[tuple[int, str], ...] = (
    (500, "Internal Server Error"),
    (502, "Bad Gateway"),
    (503, "Service Unavailable"),
    (429, "Too Many Requests"),
)

JITTER_RATIO = 0.2


class RandomLatencySimulator:
    """Fails with probability ``fail_rate``, otherwise sleeps ``latency_ms`` +/- 20%.

    Runs before any store access, so an injected failure never leaves partial state.
    Randomness and sleeping are injectable for deterministic tests.
    """

    def __init__(
        self,
        latency_ms: float = 0,
        fail_rate: float = 0.0,
        random_source: RandomSource | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if latency_ms < 0:
            raise ValueError("latency_ms must be non-negative")
        if not 0.0 <= fail_rate <= 1.0:
            raise ValueError("fail_rate must be between 0 and 1")
        self._latency_ms = latency_ms
        self._fail_rate = fail_rate
        self._random = random_source or random.Random()
        self._sleep = sleep

    async def simulate(self) -> None:
        """Raise SimulatedTransportError or suspend once."""
        if self._fail_rate > 0 and self._random.random() < self._fail_rate:
            index = int(self._random.random() * len(TRANSPORT_FAILURES))
            status, reason = TRANSPORT_FAILURES[min(index, len(TRANSPORT_FAILURES) - 1)]
            logger.warning("Injecting simulated transport failure: %s %s", status, reason)
            raise SimulatedTransportError(status, reason)

        if self._latency_ms > 0:
            jitter = self._latency_ms * JITTER_RATIO * (self._random.random() * 2 - 1)
            delay_ms = max(0.0, self._latency_ms + jitter)
            logger.debug("Simulating %.1f ms latency", delay_ms)
            await self._sleep(delay_ms / 1000)

"""Seeded 32-bit pseudo-random stream (mulberry32)."""

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_MASK = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


class Mulberry32:
    """Counter-based PRNG; identical seeds yield identical streams on any platform."""

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK

    def next_uint32(self) -> int:
        self._state = (self._state + 0x6D2B79F5) & _MASK
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK
        return (t ^ (t >> 14)) & _MASK

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        return self.next_uint32() / 4294967296

    def randint(self, low: int, high: int) -> int:
        """Uniform integer in [low, high]."""
        return low + int(self.random() * (high - low + 1))

    def choice(self, items: Sequence[T]) -> T:
        return items[int(self.random() * len(items))]

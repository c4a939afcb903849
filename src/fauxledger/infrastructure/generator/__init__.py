"""Deterministic dataset generation."""

from fauxledger.infrastructure.generator.prng import Mulberry32
from fauxledger.infrastructure.generator.seeded_generator import generate_documents

__all__ = [
    "Mulberry32",
    "generate_documents",
]

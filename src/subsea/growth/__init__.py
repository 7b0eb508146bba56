"""
Growth: counting models for exponentially growing sequences.

Components:
  - population: 7-bucket ring with rotating pointer (lanternfish)
  - polymer: pair-frequency propagation with a naive cross-check (pair insertion)
"""

from .population import PopulationCounter
from .polymer import (
    NaivePairInserter,
    PairInserter,
    RuleMissingError,
    spread
)

__all__ = [
    "PopulationCounter",
    "NaivePairInserter",
    "PairInserter",
    "RuleMissingError",
    "spread",
]

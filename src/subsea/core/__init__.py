"""
Core foundation: receipts, hashing, serialization, parameter registry.

Frozen constants and deterministic byte-level I/O shared by every solver.
"""

from .registry import param_registry, RegistryError
from .hashing import blake3_hash, text_hash
from .bytesio import (
    serialize_grid,
    serialize_dots,
    SerializationError
)
from .receipts import (
    Receipts,
    assert_double_run_equal,
    ReceiptError,
    DeterminismError
)

__all__ = [
    # Registry
    "param_registry",
    "RegistryError",

    # Hashing
    "blake3_hash",
    "text_hash",

    # Serialization
    "serialize_grid",
    "serialize_dots",
    "SerializationError",

    # Receipts
    "Receipts",
    "assert_double_run_equal",
    "ReceiptError",
    "DeterminismError",
]

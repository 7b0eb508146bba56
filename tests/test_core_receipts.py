#!/usr/bin/env python3
"""
Core Foundation Tests - Registry, Hashing, Serialization, Receipts

Tests:
  1. param_registry() completeness and frozen values
  2. blake3_hash() determinism and format
  3. serialize_grid() / serialize_dots() byte-level layout
  4. Receipts validation, digest format and double-run equality
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from subsea.core import (
    param_registry,
    blake3_hash,
    text_hash,
    serialize_grid,
    serialize_dots,
    Receipts,
    assert_double_run_equal,
    ReceiptError,
    DeterminismError,
    SerializationError,
)
from subsea.kernel import Grid


# ═══════════════════════════════════════════════════════════════════════
# Test 1: param_registry()
# ═══════════════════════════════════════════════════════════════════════

def test_param_registry_values():
    """Frozen constants the solvers depend on."""
    print("Testing param_registry...")

    reg = param_registry()
    assert reg["flash_threshold"] == 9
    assert reg["basin_delimiter"] == 9
    assert reg["parent_reproduction_days"] == 7
    assert reg["newborn_extra_days"] == 2
    assert reg["bingo_board_size"] == 5
    assert reg["steps"] == {"population": [80, 256], "polymer": [10, 40], "flash": 100, "flash_sync_limit": 10000}
    assert reg["bit_tie_break"] == {"gamma": 0, "oxygen": 1, "co2": 0}
    assert reg["hash_algo"] == "BLAKE3"

    # two calls hash identically
    r1 = Receipts("registry")
    r1.put("registry", param_registry())
    r2 = Receipts("registry")
    r2.put("registry", param_registry())
    assert r1.digest()["section_hash"] == r2.digest()["section_hash"]

    print("✓ param_registry: frozen values")


# ═══════════════════════════════════════════════════════════════════════
# Test 2: blake3_hash()
# ═══════════════════════════════════════════════════════════════════════

def test_blake3_hash():
    print("Testing blake3_hash...")

    h = blake3_hash(b"NNCB")
    assert len(h) == 64, f"Expected 64 hex chars, got {len(h)}"
    assert all(c in "0123456789abcdef" for c in h)
    assert h == blake3_hash(b"NNCB")
    assert h != blake3_hash(b"NNCC")
    assert text_hash("NNCB") == h

    # official BLAKE3 test vector for the empty input
    assert blake3_hash(b"") == "af1349b9f5f9a1a6a0404dea36dcc9499bcb25c9adc112b7cc9a93cae41f3262"

    print("✓ blake3_hash: deterministic, 64 hex chars")


# ═══════════════════════════════════════════════════════════════════════
# Test 3: serialization
# ═══════════════════════════════════════════════════════════════════════

def test_serialize_grid_layout():
    print("Testing serialize_grid...")

    grid = Grid.from_flat([1, 2, 3, 4, 5, 6], 3)
    data = serialize_grid(grid)
    assert data[:4] == b"GRD1"
    assert data[4:6] == (3).to_bytes(2, "big")
    assert data[6:8] == (2).to_bytes(2, "big")
    assert data[8:] == bytes([1, 2, 3, 4, 5, 6])

    with pytest.raises(SerializationError):
        serialize_grid(Grid.from_flat([256], 1))
    with pytest.raises(SerializationError):
        serialize_grid(Grid.from_flat([-1], 1))

    print("✓ serialize_grid: tag, dims, row-major bytes")


def test_serialize_dots_layout():
    print("Testing serialize_dots...")

    # 9 columns need 2 bytes per row; bit 7 is column 0
    grid = Grid.with_default(9, 2, False)
    grid.set(0, 0, True)
    grid.set(8, 0, True)
    grid.set(1, 1, True)
    data = serialize_dots(grid)
    assert data[:4] == b"DOT1"
    assert data[8:] == bytes([0b10000000, 0b10000000, 0b01000000, 0b00000000])

    cropped = serialize_dots(grid, columns=8, rows=1)
    assert cropped[4:8] == bytes([0, 8, 0, 1])
    assert cropped[8:] == bytes([0b10000000])

    with pytest.raises(SerializationError):
        serialize_dots(grid, columns=10)

    print("✓ serialize_dots: bit packing and crop")


# ═══════════════════════════════════════════════════════════════════════
# Test 4: Receipts
# ═══════════════════════════════════════════════════════════════════════

def test_receipts_digest_format():
    print("Testing digest format...")

    receipts = Receipts("day06-lanternfish")
    receipts.put("days", 80)
    receipts.put("histogram", [0, 1, 1, 2, 1, 0, 0, 0, 0])
    digest = receipts.digest()

    assert set(digest.keys()) == {
        "section", "registry_version", "param_registry_hash", "payload", "section_hash"
    }
    assert digest["section"] == "day06-lanternfish"
    assert list(digest["payload"].keys()) == ["days", "histogram"], "Insertion order kept"
    assert len(digest["section_hash"]) == 64

    print("✓ digest has all five fields")


def test_receipts_rejects_invalid_values():
    print("Testing receipt validation...")

    receipts = Receipts("validation")
    receipts.put("answer", 1588)

    with pytest.raises(ReceiptError):
        receipts.put("answer", 1589)
    with pytest.raises(ReceiptError):
        receipts.put("ratio", 0.5)
    with pytest.raises(ReceiptError):
        receipts.put("nested", {"a": [1, 2.0]})
    with pytest.raises(ReceiptError):
        receipts.put("keys", {1: "x"})
    with pytest.raises(ReceiptError):
        receipts.put("object", object())

    print("✓ duplicates, floats and objects rejected")


def test_double_run_equal():
    print("Testing double-run equality...")

    def build():
        r = Receipts("stable")
        r.put("value", 42)
        return r

    assert_double_run_equal(build)

    runs = iter([1, 2])

    def build_unstable():
        r = Receipts("unstable")
        r.put("value", next(runs))
        return r

    with pytest.raises(DeterminismError) as exc_info:
        assert_double_run_equal(build_unstable)
    assert exc_info.value.first_differing_key == "value"
    assert (exc_info.value.value_a, exc_info.value.value_b) == (1, 2)

    print("✓ DeterminismError names the first differing key")


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])

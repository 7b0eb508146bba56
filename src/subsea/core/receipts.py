"""
Core Component: Section Receipts & Double-Run Checker

A receipt section is the record of one solved puzzle day: the input hash,
the facts each solver chooses to expose (grid hashes, histograms, winner
turns) and the answers. Sections are bound to the parameter registry by
hash and sealed with a section_hash, so two runs can be compared by a
single string.

Payload values are restricted to exact JSON types: int, bool, str, None,
and lists/tuples/dicts of those. Floats are rejected since every answer
in this package is an exact integer.
"""

import json
from typing import Any, Callable, Dict, Optional, Tuple

from .registry import param_registry, REGISTRY_VERSION
from .hashing import blake3_hash

_MISSING = "<MISSING>"


class Receipts:
    """
    Ordered key/value facts for one section, e.g. "day09-smoke-basin".

    Usage:
        receipts = Receipts("day06-lanternfish")
        receipts.put("days", 256)
        digest = receipts.digest()
    """

    def __init__(self, section: str):
        self.section = section
        self._payload: Dict[str, Any] = {}

    def put(self, key: str, value: Any) -> None:
        """
        Record one fact. Keys are write-once.

        Raises:
            ReceiptError: On a repeated key or a value outside the allowed types.
        """
        if key in self._payload:
            raise ReceiptError(f"Key '{key}' already recorded in section '{self.section}'")
        _check_value(value, key)
        self._payload[key] = value

    def digest(self) -> dict:
        """
        Seal the section.

        Returns:
            {
              "section": ...,
              "registry_version": ...,
              "param_registry_hash": BLAKE3 of the stable registry JSON,
              "payload": facts in insertion order,
              "section_hash": BLAKE3 of the stable JSON of the four fields above
            }
        """
        sealed = {
            "section": self.section,
            "registry_version": REGISTRY_VERSION,
            "param_registry_hash": blake3_hash(stable_json(param_registry())),
            "payload": dict(self._payload),
        }
        sealed["section_hash"] = blake3_hash(stable_json(sealed))
        return sealed


def assert_double_run_equal(build: Callable[[], Receipts]) -> None:
    """
    Build the same section twice and require equal section hashes.

    Raises:
        DeterminismError: Naming the first payload key whose values differ.
    """
    first = build().digest()
    second = build().digest()
    if first["section_hash"] == second["section_hash"]:
        return

    key, value_a, value_b = _first_difference(first["payload"], second["payload"])
    raise DeterminismError(
        section=first["section"],
        first_differing_key=key,
        value_a=value_a,
        value_b=value_b,
        hash_a=first["section_hash"],
        hash_b=second["section_hash"]
    )


def _first_difference(a: dict, b: dict) -> Tuple[Optional[str], Any, Any]:
    # keys of run A first, then keys only run B recorded
    for key in list(a) + [k for k in b if k not in a]:
        value_a = a.get(key, _MISSING)
        value_b = b.get(key, _MISSING)
        if value_a != value_b:
            return key, value_a, value_b
    return None, None, None


def stable_json(obj: Any) -> bytes:
    """Sorted-key, compact, UTF-8 JSON; identical objects give identical bytes."""
    return json.dumps(obj, sort_keys=True, ensure_ascii=False, separators=(',', ':')).encode('utf-8')


def _check_value(value: Any, path: str) -> None:
    if value is None or isinstance(value, (bool, int, str)):
        return
    if isinstance(value, float):
        raise ReceiptError(f"'{path}': floats are not allowed, record exact integers")
    if isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            _check_value(item, f"{path}[{i}]")
        return
    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                raise ReceiptError(f"'{path}': dict key {k!r} is not a string")
            _check_value(v, f"{path}.{k}")
        return
    raise ReceiptError(f"'{path}': {type(value).__name__} can't be recorded")


class ReceiptError(Exception):
    """Raised on a repeated key or a value that can't be recorded."""
    pass


class DeterminismError(Exception):
    """Raised when two builds of the same section seal to different hashes."""

    def __init__(
        self,
        section: str,
        first_differing_key: Optional[str],
        value_a: Any,
        value_b: Any,
        hash_a: str,
        hash_b: str
    ):
        self.section = section
        self.first_differing_key = first_differing_key
        self.value_a = value_a
        self.value_b = value_b
        self.hash_a = hash_a
        self.hash_b = hash_b
        super().__init__(
            f"Section '{section}' is not deterministic: "
            f"'{first_differing_key}' was {value_a!r}, then {value_b!r} "
            f"({hash_a[:16]} != {hash_b[:16]})"
        )

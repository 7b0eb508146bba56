"""
Core Component: BLAKE3 Hashing

Every digest in the package (puzzle inputs, serialized grids, the
parameter registry, receipt sections) is a hex BLAKE3-256 string.
"""

import blake3


def blake3_hash(data: bytes) -> str:
    """
    Hex BLAKE3 digest of `data` (64 characters).

    Example:
        >>> len(blake3_hash(b"NNCB"))
        64
    """
    return blake3.blake3(data).hexdigest()


def text_hash(text: str) -> str:
    """BLAKE3 of the UTF-8 encoding of `text` (used for puzzle inputs)."""
    return blake3_hash(text.encode('utf-8'))

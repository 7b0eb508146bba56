"""
Core Component: Grid Byte Frames

Deterministic byte encodings of grids, used only to hash grid states into
receipts. Every frame is a 4-byte ASCII tag followed by the width and
height as big-endian uint16, then the row-major payload:

  GRD1  one uint8 per cell (heights, energy levels)
  DOT1  ceil(W/8) bytes per row, bit 7 of a byte is its leftmost column
"""

import math
from typing import Optional

from .registry import param_registry

_UINT16_MAX = 65535


def _frame_header(kind: str, columns: int, rows: int) -> bytearray:
    if columns > _UINT16_MAX or rows > _UINT16_MAX:
        raise SerializationError(f"Dimensions too large: columns={columns}, rows={rows}")
    tag = param_registry()["byte_frame_tags"][kind]
    frame = bytearray(tag.encode('ascii'))
    frame.extend(columns.to_bytes(2, byteorder='big'))
    frame.extend(rows.to_bytes(2, byteorder='big'))
    return frame


def serialize_grid(grid) -> bytes:
    """
    GRD1 frame of a grid of small non-negative integers.

    Args:
        grid: Anything with dimensions() -> (columns, rows) and a row-major
            iter() over int cells (a subsea Grid).

    Raises:
        SerializationError: If a dimension exceeds uint16 or a cell is not
            an int in 0..255.
    """
    columns, rows = grid.dimensions()
    frame = _frame_header("GRID", columns, rows)
    for i, value in enumerate(grid.iter()):
        if not isinstance(value, int) or not 0 <= value <= 255:
            raise SerializationError(
                f"Cell {i % columns},{i // columns} value {value!r} out of uint8 range"
            )
        frame.append(value)
    return bytes(frame)


def serialize_dots(grid, columns: Optional[int] = None, rows: Optional[int] = None) -> bytes:
    """
    DOT1 frame of a boolean grid, optionally cropped to its top-left
    `columns` x `rows` (the visible part of folded paper).

    Raises:
        SerializationError: If the crop is larger than the grid.
    """
    full_columns, full_rows = grid.dimensions()
    width = full_columns if columns is None else columns
    height = full_rows if rows is None else rows
    if width > full_columns or height > full_rows:
        raise SerializationError(
            f"Crop {width}x{height} exceeds grid {full_columns}x{full_rows}"
        )

    frame = _frame_header("DOTS", width, height)
    row_bytes = math.ceil(width / 8)
    for y in range(height):
        packed = bytearray(row_bytes)
        for cell in grid.iter_row(y):
            if cell.x >= width:
                break
            if cell.value:
                packed[cell.x // 8] |= 0x80 >> (cell.x % 8)
        frame.extend(packed)
    return bytes(frame)


class SerializationError(Exception):
    """Raised on oversized dimensions or a cell that doesn't fit its frame."""
    pass

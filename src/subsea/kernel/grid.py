"""
Kernel Component: Dense 2-D Grid

Flat row-major storage addressed by (column, row) with bounds-checked
access, row/column iteration and neighbour lookup.

Addressing:
  - idx = num_columns * y + x, computed in exactly one place (_idx)
  - x is the column, y is the row; (0, 0) is the top-left cell
  - No wraparound: negative or too-large coordinates are out of bounds

Invariant:
  len(data) % num_columns == 0 at all times.
"""

from copy import copy
from typing import Any, Generic, Iterable, Iterator, List, NamedTuple, Optional, Tuple, TypeVar

T = TypeVar("T")


class Cell(NamedTuple):
    """Copy-out view of one grid cell. Never stays in sync with the grid."""
    x: int
    y: int
    value: Any


class CellView:
    """
    Read/write view of one grid cell.

    Writes to `.value` go straight into the owning grid's storage.
    Do not keep a view across a resize of the same grid (append_row).
    """

    __slots__ = ("_grid", "x", "y")

    def __init__(self, grid: "Grid", x: int, y: int):
        self._grid = grid
        self.x = x
        self.y = y

    @property
    def value(self):
        return self._grid._data[self._grid._idx(self.x, self.y)]

    @value.setter
    def value(self, new_value) -> None:
        self._grid._data[self._grid._idx(self.x, self.y)] = new_value

    def __repr__(self) -> str:
        return f"CellView(x={self.x}, y={self.y}, value={self.value!r})"


class Grid(Generic[T]):
    """
    Dense 2-D container with a fixed column count.

    Construct with from_flat(), with_default(), from_first_row() + append_row(),
    or from_rows(). The constructor itself only creates an empty grid.
    """

    def __init__(self, num_columns: int):
        if num_columns <= 0:
            raise ShapeError(f"A grid needs at least one column, got {num_columns}")
        self.num_columns = num_columns
        self._data: List[T] = []

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def from_flat(cls, values: Iterable[T], num_columns: int) -> "Grid[T]":
        """
        Build a grid from row-major values.

        Args:
            values: Flat sequence of cells, row after row.
            num_columns: Width of every row.

        Returns:
            Grid with len(values) / num_columns rows.

        Raises:
            ShapeError: If len(values) is not a multiple of num_columns.
        """
        data = list(values)
        grid = cls(num_columns)
        if len(data) % num_columns != 0:
            raise ShapeError(
                f"Can't divide {len(data)} elements in {num_columns} columns"
            )
        grid._data = data
        return grid

    @classmethod
    def with_default(cls, columns: int, rows: int, default: T) -> "Grid[T]":
        """
        Grid of columns x rows where every cell is a copy of `default`.

        Any rows <= 0 gives an empty grid with `columns` columns.

        Raises:
            ShapeError: If columns <= 0 (a grid always has at least one column).
        """
        grid = cls(columns)
        grid._data = [copy(default) for _ in range(columns * max(rows, 0))]
        return grid

    @classmethod
    def from_first_row(cls, row: Iterable[T]) -> "Grid[T]":
        """One-row grid; its length fixes the column count."""
        data = list(row)
        grid = cls(len(data))
        grid._data = data
        return grid

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[T]]) -> "Grid[T]":
        """
        Build a grid row by row.

        Raises:
            ShapeError: If there are no rows, the first row is empty, or any
                later row has a different length.
        """
        rows_iter = iter(rows)
        first = next(rows_iter, None)
        if first is None:
            raise ShapeError("A grid needs at least one row")
        grid = cls.from_first_row(first)
        for row in rows_iter:
            grid.append_row(row)
        return grid

    def append_row(self, values: Iterable[T]) -> None:
        """
        Extend storage by one row at the end.

        Raises:
            ShapeError: If len(values) != num_columns (grid unchanged).
        """
        row = list(values)
        if len(row) != self.num_columns:
            raise ShapeError(
                f"Added rows must have the same number of columns as existing rows "
                f"{self.num_columns}, got {len(row)}"
            )
        self._data.extend(row)

    # ========================================================================
    # Dimensions & addressing
    # ========================================================================

    def _idx(self, x: int, y: int) -> Optional[int]:
        if x < 0 or y < 0 or x >= self.num_columns or y >= self.row_count():
            return None
        return self.num_columns * y + x

    def dimensions(self) -> Tuple[int, int]:
        """(columns, rows)"""
        return self.column_count(), self.row_count()

    def column_count(self) -> int:
        return self.num_columns

    def row_count(self) -> int:
        return len(self._data) // self.num_columns

    def __len__(self) -> int:
        return len(self._data)

    # ========================================================================
    # Access
    # ========================================================================

    def get(self, x: int, y: int) -> Optional[Cell]:
        """Cell at (x, y), or None when out of bounds."""
        idx = self._idx(x, y)
        if idx is None:
            return None
        return Cell(x, y, self._data[idx])

    def get_mut(self, x: int, y: int) -> Optional[CellView]:
        """Writable view of (x, y), or None when out of bounds."""
        if self._idx(x, y) is None:
            return None
        return CellView(self, x, y)

    def set(self, x: int, y: int, value: T) -> Optional[T]:
        """
        Replace the value at (x, y).

        Returns:
            The previous value, or None when out of bounds (grid unchanged).
        """
        idx = self._idx(x, y)
        if idx is None:
            return None
        previous = self._data[idx]
        self._data[idx] = value
        return previous

    # ========================================================================
    # Iteration (lazy, row-major)
    # ========================================================================

    def iter(self) -> Iterator[T]:
        return iter(self._data)

    def iter_mut(self) -> Iterator[CellView]:
        for idx in range(len(self._data)):
            yield CellView(self, idx % self.num_columns, idx // self.num_columns)

    def cells(self) -> Iterator[Cell]:
        for idx, value in enumerate(self._data):
            yield Cell(idx % self.num_columns, idx // self.num_columns, value)

    def iter_row(self, y: int) -> Iterator[Cell]:
        """Cells of row y; empty when y is out of bounds."""
        if 0 <= y < self.row_count():
            for x in range(self.num_columns):
                yield Cell(x, y, self._data[self._idx(x, y)])

    def iter_col(self, x: int) -> Iterator[Cell]:
        """Cells of column x; empty when x is out of bounds."""
        if 0 <= x < self.num_columns:
            for y in range(self.row_count()):
                yield Cell(x, y, self._data[self._idx(x, y)])

    # ========================================================================
    # Neighbourhoods
    # ========================================================================

    def neighbours(self, x: int, y: int) -> Tuple[Optional[Cell], Optional[Cell], Optional[Cell], Optional[Cell]]:
        """
        Orthogonal neighbours in fixed order (left, up, right, down).

        Always four slots; a slot is None where the neighbour would be off
        the grid.
        """
        return (
            self.get(x - 1, y),
            self.get(x, y - 1),
            self.get(x + 1, y),
            self.get(x, y + 1),
        )

    def surrounding(self, x: int, y: int) -> List[Cell]:
        """
        In-bounds cells of the 8-neighbourhood (orthogonal + diagonal).

        Order: up-left, up, up-right, left, right, down-left, down, down-right.
        """
        result = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                cell = self.get(x + dx, y + dy)
                if cell is not None:
                    result.append(cell)
        return result

    # ========================================================================
    # Comparison & display
    # ========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.num_columns == other.num_columns and self._data == other._data

    def render(self, fmt=str, separator: str = " ") -> str:
        """Rows joined by newlines, cells formatted with `fmt`."""
        lines = []
        for y in range(self.row_count()):
            lines.append(separator.join(fmt(cell.value) for cell in self.iter_row(y)))
        return "\n".join(lines)

    def __repr__(self) -> str:
        columns, rows = self.dimensions()
        return f"Grid({columns}x{rows})\n{self.render(repr)}"


class ShapeError(Exception):
    """Raised when grid dimensions do not fit (construction or row append)."""
    pass

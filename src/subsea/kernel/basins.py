"""
Kernel Component: Low Points & Basin Flood Fill

Breadth-first flood fill over a height grid using 4-neighbours.

Definitions:
  - Low point: strictly lower than every in-bounds orthogonal neighbour and
    not the basin delimiter height.
  - Basin: all cells reachable from a low point through 4-neighbours whose
    height is below the delimiter. Delimiter cells are never part of a basin.

Termination: the visited set grows on every enqueue and the grid is finite.
"""

from collections import deque
from math import prod
from typing import List, Optional, Set, Tuple

from ..core.registry import BASIN_DELIMITER, BASIN_TOP_COUNT
from .grid import Cell, Grid


def is_low_point(heights: Grid[int], cell: Cell, delimiter: int = BASIN_DELIMITER) -> bool:
    """True if `cell` is strictly lower than all its in-bounds 4-neighbours."""
    if cell.value == delimiter:
        return False
    return all(
        cell.value < other.value
        for other in heights.neighbours(cell.x, cell.y)
        if other is not None
    )


def low_points(heights: Grid[int], delimiter: int = BASIN_DELIMITER) -> List[Cell]:
    """All low points in row-major order."""
    return [cell for cell in heights.cells() if is_low_point(heights, cell, delimiter)]


def basin_size(heights: Grid[int], seed: Cell, delimiter: int = BASIN_DELIMITER) -> Optional[int]:
    """
    Number of cells in the basin draining into `seed`.

    Args:
        heights: Height grid.
        seed: Starting cell; must be a low point.
        delimiter: Height that bounds basins.

    Returns:
        Basin size (including the seed), or None if `seed` is not a low point.
    """
    if not is_low_point(heights, seed, delimiter):
        return None

    queue = deque([(seed.x, seed.y)])
    visited: Set[Tuple[int, int]] = {(seed.x, seed.y)}

    while queue:
        x, y = queue.popleft()
        for neighbour in heights.neighbours(x, y):
            if neighbour is None:
                continue
            key = (neighbour.x, neighbour.y)
            if neighbour.value < delimiter and key not in visited:
                visited.add(key)
                queue.append(key)

    return len(visited)


def basin_sizes(heights: Grid[int], delimiter: int = BASIN_DELIMITER) -> List[Tuple[Cell, int]]:
    """(low point, basin size) for every low point, in row-major order."""
    result = []
    for point in low_points(heights, delimiter):
        size = basin_size(heights, point, delimiter)
        if size is not None:
            result.append((point, size))
    return result


def risk_level_sum(heights: Grid[int], delimiter: int = BASIN_DELIMITER) -> int:
    """Sum of 1 + height over all low points."""
    return sum(point.value + 1 for point in low_points(heights, delimiter))


def largest_basins_product(
    heights: Grid[int],
    n: int = BASIN_TOP_COUNT,
    delimiter: int = BASIN_DELIMITER
) -> int:
    """
    Product of the `n` largest basin sizes.

    Raises:
        ValueError: If the grid has fewer than `n` basins.
    """
    sizes = sorted((size for _, size in basin_sizes(heights, delimiter)), reverse=True)
    if len(sizes) < n:
        raise ValueError(f"Expected at least {n} basins, found {len(sizes)}")
    return prod(sizes[:n])

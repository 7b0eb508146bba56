"""
Kernel: dense grid plus the traversals built on it.

Components:
  - grid: Grid (flat row-major storage), Cell, CellView, ShapeError
  - basins: low points and 4-neighbour flood fill
  - flash: cascading 8-neighbour flash simulation
"""

from .grid import (
    Grid,
    Cell,
    CellView,
    ShapeError
)
from .basins import (
    is_low_point,
    low_points,
    basin_size,
    basin_sizes,
    risk_level_sum,
    largest_basins_product
)
from .flash import OctopusGrid

__all__ = [
    # Grid
    "Grid",
    "Cell",
    "CellView",
    "ShapeError",

    # Basins
    "is_low_point",
    "low_points",
    "basin_size",
    "basin_sizes",
    "risk_level_sum",
    "largest_basins_product",

    # Flash
    "OctopusGrid",
]

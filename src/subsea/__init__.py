"""
subsea: daily puzzle solvers on a shared grid kernel.

Deterministic batch solvers with receipts: a dense 2-D grid with flood
fill and flash propagation, two counting models for exponential growth
(bucket ring, pair frequencies), and one solver module per day.
"""

__version__ = "0.1.0"

from .kernel import Grid, Cell, CellView, ShapeError, OctopusGrid
from .growth import PopulationCounter, PairInserter, NaivePairInserter, RuleMissingError
from .parsing import ParseError
from .solvers import UnsolvableError

__all__ = [
    # Kernel
    "Grid",
    "Cell",
    "CellView",
    "ShapeError",
    "OctopusGrid",

    # Growth
    "PopulationCounter",
    "PairInserter",
    "NaivePairInserter",
    "RuleMissingError",

    # Errors
    "ParseError",
    "UnsolvableError",
]

"""
Kernel Component: Cascading Flash Propagation

Discrete-step energy simulation over an integer grid with 8-neighbours.

Per step:
  1. Every cell's energy increases by 1.
  2. Fixed-point rescan: while any cell is above the threshold, scan all
     cells in row-major order; a cell above the threshold flashes: its
     energy resets to 0 and every surrounding cell still above 0 gains 1.
  3. The step result is the number of flashes.

Invariant:
  A cell flashes at most once per step. After step 1 no cell is at 0, so a
  0 can only mean "already flashed"; the neighbour increment skips zeros.

The rescan is O(area) per pass, which is fine for 10x10 puzzle grids.
"""

from typing import Optional

from ..core.registry import FLASH_THRESHOLD
from .grid import Grid


class OctopusGrid:
    """Energy levels of a rectangular octopus cavern."""

    def __init__(self, state: Grid[int], threshold: int = FLASH_THRESHOLD):
        self.state = state
        self.threshold = threshold
        self.steps_taken = 0

    def cell_count(self) -> int:
        return len(self.state)

    def _flash(self, x: int, y: int) -> None:
        middle = self.state.get_mut(x, y)
        if middle is None:
            raise IndexError(f"Flashed cell {x},{y} must be inside the grid")
        # used all of its energy to flash
        middle.value = 0
        for neighbour in self.state.surrounding(x, y):
            # zero means it already flashed this step
            if neighbour.value > 0:
                self.state.set(neighbour.x, neighbour.y, neighbour.value + 1)

    def step(self) -> int:
        """
        Advance one step.

        Returns:
            Number of flashes during this step.
        """
        for octopus in self.state.iter_mut():
            octopus.value += 1

        flashes = 0
        columns, rows = self.state.dimensions()
        while any(energy > self.threshold for energy in self.state.iter()):
            for y in range(rows):
                for x in range(columns):
                    if self.state.get(x, y).value > self.threshold:
                        flashes += 1
                        self._flash(x, y)

        self.steps_taken += 1
        return flashes

    def run(self, steps: int) -> int:
        """Total flashes over the next `steps` steps."""
        return sum(self.step() for _ in range(steps))

    def step_until_synchronized(self, max_steps: Optional[int] = None) -> Optional[int]:
        """
        Step until every cell flashes in the same step.

        Args:
            max_steps: Optional cap on the number of additional steps.

        Returns:
            The 1-based index of that step, counted from this object's
            creation (steps already taken count too), or None if the cap
            was reached first.
        """
        taken = 0
        while max_steps is None or taken < max_steps:
            taken += 1
            if self.step() == self.cell_count():
                return self.steps_taken
        return None

#!/usr/bin/env python3
"""
Cascading Flash Tests

Tests the octopus energy simulation:
1. Small 5x5 cascade with exact states after steps 1 and 2
2. Flash totals after 10 and 100 steps of the 10x10 example
3. First synchronized step, with and without a step cap
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from subsea.kernel import Grid, OctopusGrid
from subsea.parsing import parse_digit_grid
from subsea.solvers import UnsolvableError, octopus

SMALL = """11111
19991
19191
19991
11111
"""

EXAMPLE = """5483143223
2745854711
5264556173
6141336146
6357385478
4167524645
2176841721
6882881134
4846848554
5283751526
"""


def test_small_cascade():
    print("Testing 5x5 cascade...")

    cavern = OctopusGrid(parse_digit_grid(SMALL))
    assert cavern.step() == 9, "All nine 9s flash in step 1"
    assert cavern.state == parse_digit_grid("34543\n40004\n50005\n40004\n34543")

    assert cavern.step() == 0
    assert cavern.state == parse_digit_grid("45654\n51115\n61116\n51115\n45654")
    assert cavern.steps_taken == 2

    print("✓ 9 flashes, then 0")


def test_example_flash_totals():
    print("Testing flash totals...")

    assert OctopusGrid(parse_digit_grid(EXAMPLE)).run(10) == 204

    cavern = OctopusGrid(parse_digit_grid(EXAMPLE))
    assert cavern.run(100) == 1656
    assert cavern.steps_taken == 100

    print("✓ 204 @10, 1656 @100")


def test_synchronized_step():
    print("Testing synchronization...")

    assert OctopusGrid(parse_digit_grid(EXAMPLE)).step_until_synchronized() == 195

    # steps already taken count towards the index
    cavern = OctopusGrid(parse_digit_grid(EXAMPLE))
    cavern.run(100)
    assert cavern.step_until_synchronized() == 195

    print("✓ synchronized at step 195")


def test_synchronized_cap():
    print("Testing capped synchronization...")

    cavern = OctopusGrid(parse_digit_grid(EXAMPLE))
    assert cavern.step_until_synchronized(max_steps=50) is None
    assert cavern.steps_taken == 50

    print("✓ None when the cap is reached first")


def test_never_synchronized_is_unsolvable():
    """A 1x3 cavern starting at 0 0 2 never flashes all at once."""
    print("Testing unsynchronized cavern...")

    cavern = OctopusGrid(parse_digit_grid("002"))
    with pytest.raises(UnsolvableError):
        octopus.synchronized_step(cavern, limit=500)
    assert cavern.steps_taken == 500

    with pytest.raises(UnsolvableError):
        octopus.part2("002\n")
    assert octopus.part2(EXAMPLE) == 195

    print("✓ UnsolvableError after the step limit")


def test_every_cell_flashes_at_most_once():
    """A grid of all 9s flashes every cell exactly once and ends at 0."""
    print("Testing all-nines grid...")

    cavern = OctopusGrid(Grid.with_default(4, 3, 9))
    assert cavern.step() == 12
    assert list(cavern.state.iter()) == [0] * 12
    # uniform again: all reach 10 together after ten more steps
    assert cavern.step_until_synchronized() == 11

    print("✓ 12 flashes, all cells reset")


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])

"""
Day 11: Dumbo Octopus

Total flashes after 100 steps, and the first step on which every octopus
flashes at once. Some caverns never synchronize; the search stops after
SYNC_STEP_LIMIT steps and reports the input as unsolvable.
"""

from typing import List

from ..core.bytesio import serialize_grid
from ..core.hashing import blake3_hash
from ..core.receipts import Receipts
from ..core.registry import FLASH_STEPS, SYNC_STEP_LIMIT
from ..kernel.flash import OctopusGrid
from ..parsing import parse_digit_grid
from . import UnsolvableError


def synchronized_step(cavern: OctopusGrid, limit: int = SYNC_STEP_LIMIT) -> int:
    """
    Raises:
        UnsolvableError: If the cavern doesn't synchronize within `limit` steps.
    """
    step = cavern.step_until_synchronized(max_steps=limit)
    if step is None:
        raise UnsolvableError(f"Octopuses never flash together within {limit} steps")
    return step


def part1(text: str) -> int:
    return OctopusGrid(parse_digit_grid(text)).run(FLASH_STEPS)


def part2(text: str) -> int:
    return synchronized_step(OctopusGrid(parse_digit_grid(text)))


def solve(text: str, receipts: Receipts) -> List[int]:
    cavern = OctopusGrid(parse_digit_grid(text))
    receipts.put("initial_hash", blake3_hash(serialize_grid(cavern.state)))

    flashes = cavern.run(FLASH_STEPS)
    receipts.put("state_hash_after_run", blake3_hash(serialize_grid(cavern.state)))

    # part 2 counts from the first step, which may already lie inside the run
    synchronized = synchronized_step(OctopusGrid(parse_digit_grid(text)))
    receipts.put("synchronized_step", synchronized)
    return [flashes, synchronized]

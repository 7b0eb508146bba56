"""
Day 7: The Treachery of Whales

Align crab positions at the cheapest target between min and max position.
Linear fuel: |d|. Triangular fuel: d * (d + 1) / 2.
"""

from typing import Callable, List, Optional, Sequence

from ..core.receipts import Receipts
from ..parsing import parse_int_list


def linear_cost(distance: int) -> int:
    return distance


def triangular_cost(distance: int) -> int:
    return distance * (distance + 1) // 2


def minimize_fuel(positions: Sequence[int], cost: Callable[[int], int] = linear_cost) -> Optional[int]:
    """Minimal total fuel over all targets in [min, max]; None for no crabs."""
    if not positions:
        return None
    return min(
        sum(cost(abs(p - target)) for p in positions)
        for target in range(min(positions), max(positions) + 1)
    )


def part1(text: str) -> Optional[int]:
    return minimize_fuel(parse_int_list(text), linear_cost)


def part2(text: str) -> Optional[int]:
    return minimize_fuel(parse_int_list(text), triangular_cost)


def solve(text: str, receipts: Receipts) -> List[Optional[int]]:
    positions = parse_int_list(text)
    receipts.put("crabs", len(positions))
    return [minimize_fuel(positions, linear_cost), minimize_fuel(positions, triangular_cost)]

"""
Day 1: Sonar Sweep

Count depth increases between consecutive measurements, then between
sums of a sliding three-measurement window.
"""

from itertools import islice
from typing import Iterable, Iterator, List

from ..core.receipts import Receipts
from ..core.registry import SONAR_WINDOW
from ..parsing import parse_int_lines


def count_increases(values: Iterable[int]) -> int:
    """Number of times a value is larger than the one before it."""
    values = list(values)
    return sum(1 for first, second in zip(values, values[1:]) if second > first)


def window_sums(values: Iterable[int], size: int = SONAR_WINDOW) -> Iterator[int]:
    values = list(values)
    for start in range(len(values) - size + 1):
        yield sum(islice(values, start, start + size))


def part1(text: str) -> int:
    return count_increases(parse_int_lines(text))


def part2(text: str) -> int:
    return count_increases(window_sums(parse_int_lines(text)))


def solve(text: str, receipts: Receipts) -> List[int]:
    depths = parse_int_lines(text)
    receipts.put("measurements", len(depths))
    return [count_increases(depths), count_increases(window_sums(depths))]

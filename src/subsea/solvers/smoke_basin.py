"""
Day 9: Smoke Basin

Risk level sum of the low points, and the product of the three largest
basins, both computed by the basin kernel.
"""

from typing import List

from ..core.bytesio import serialize_grid
from ..core.hashing import blake3_hash
from ..core.receipts import Receipts
from ..kernel.basins import basin_sizes, largest_basins_product, risk_level_sum
from ..parsing import parse_digit_grid


def part1(text: str) -> int:
    return risk_level_sum(parse_digit_grid(text))


def part2(text: str) -> int:
    return largest_basins_product(parse_digit_grid(text))


def solve(text: str, receipts: Receipts) -> List[int]:
    heights = parse_digit_grid(text)
    columns, rows = heights.dimensions()
    receipts.put("grid", {"columns": columns, "rows": rows})
    receipts.put("grid_hash", blake3_hash(serialize_grid(heights)))
    receipts.put("basins", [
        {"x": point.x, "y": point.y, "height": point.value, "size": size}
        for point, size in basin_sizes(heights)
    ])
    return [risk_level_sum(heights), largest_basins_product(heights)]

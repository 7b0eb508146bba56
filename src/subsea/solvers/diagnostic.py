"""
Day 3: Binary Diagnostic

Report rows are fixed-width binary numbers stored as ints. Position 0 is
the leftmost (most significant) bit, so a row's int value is its decimal
reading.

Tie-breaks (frozen in the registry):
  - gamma: a position with equally many ones and zeros gets 0
  - epsilon: bitwise complement of gamma within the report width
  - oxygen generator rating: keep ones on a tie
  - CO2 scrubber rating: keep zeros on a tie
"""

from typing import List, Optional

from ..core.receipts import Receipts
from ..parsing import ParseError, lines
from . import UnsolvableError


def bit_at(value: int, position: int, width: int) -> int:
    """Bit `position` counted from the left of a `width`-bit number."""
    return (value >> (width - 1 - position)) & 1


def most_common_bit(values: List[int], position: int, width: int) -> Optional[int]:
    """1 or 0 if one is prevalent at `position`, None on a tie."""
    ones = sum(bit_at(v, position, width) for v in values)
    zeroes = len(values) - ones
    if ones > zeroes:
        return 1
    if ones < zeroes:
        return 0
    return None


class Report:
    def __init__(self, values: List[int], width: int):
        self.values = values
        self.width = width

    @classmethod
    def from_text(cls, text: str) -> "Report":
        """
        Raises:
            ParseError: If the report is empty, rows differ in width, or a
                character is not 0/1.
        """
        rows = [line.strip() for line in lines(text)]
        if not rows:
            raise ParseError("Reports may not be empty")
        width = len(rows[0])
        values = []
        for row in rows:
            if len(row) != width:
                raise ParseError("uneven size/length of bits")
            value = 0
            for c in row:
                if c not in "01":
                    raise ParseError(f"'{c}' is not a valid bit")
                value = (value << 1) | (c == "1")
            values.append(value)
        return cls(values, width)

    def gamma_rate(self) -> int:
        gamma = 0
        for position in range(self.width):
            # ties count as 0
            bit = 1 if most_common_bit(self.values, position, self.width) == 1 else 0
            gamma = (gamma << 1) | bit
        return gamma

    def epsilon_rate(self) -> int:
        return ~self.gamma_rate() & ((1 << self.width) - 1)

    def _reduce_to_single_rating(self, prefer_on_tie: int, invert_common_bit: bool) -> int:
        current = list(self.values)
        for position in range(self.width):
            if len(current) < 2:
                break
            common = most_common_bit(current, position, self.width)
            if common is None:
                keep = prefer_on_tie
            else:
                keep = common ^ 1 if invert_common_bit else common
            current = [v for v in current if bit_at(v, position, self.width) == keep]

        if len(current) != 1:
            raise UnsolvableError(
                f"Rating reduced to {len(current)} numbers instead of exactly one"
            )
        return current[0]

    def oxygen_generator_rating(self) -> int:
        return self._reduce_to_single_rating(prefer_on_tie=1, invert_common_bit=False)

    def co2_scrubber_rating(self) -> int:
        return self._reduce_to_single_rating(prefer_on_tie=0, invert_common_bit=True)

    def power_consumption(self) -> int:
        return self.gamma_rate() * self.epsilon_rate()

    def life_support_rating(self) -> int:
        return self.oxygen_generator_rating() * self.co2_scrubber_rating()


def part1(text: str) -> int:
    return Report.from_text(text).power_consumption()


def part2(text: str) -> int:
    return Report.from_text(text).life_support_rating()


def solve(text: str, receipts: Receipts) -> List[int]:
    report = Report.from_text(text)
    receipts.put("width", report.width)
    receipts.put("rates", {
        "gamma": report.gamma_rate(),
        "epsilon": report.epsilon_rate(),
        "oxygen": report.oxygen_generator_rating(),
        "co2": report.co2_scrubber_rating(),
    })
    return [report.power_consumption(), report.life_support_rating()]

"""
Day 8: Seven Segment Search

Each entry lists the ten scrambled signal patterns of a display and four
output patterns. Digits 1, 4, 7, 8 have unique segment counts; the rest
are deduced by set relations:

  6 = six segments sharing exactly one with 1
  5 = five segments, all contained in 6
  e = the segment of 6 missing from 5
  2 = five segments containing e
  9 = six segments without e
  3 = the remaining five-segment pattern
  0 = the remaining six-segment pattern

     0:      1:      2:      3:      4:
    aaaa    ....    aaaa    aaaa    ....
   b    c  .    c  .    c  .    c  b    c
   b    c  .    c  .    c  .    c  b    c
    ....    ....    dddd    dddd    dddd
   e    f  .    f  e    .  .    f  .    f
   e    f  .    f  e    .  .    f  .    f
    gggg    ....    gggg    gggg    ....
"""

from typing import Callable, FrozenSet, List, NamedTuple

from ..core.receipts import Receipts
from ..parsing import lines, split_once
from . import UnsolvableError

Pattern = FrozenSet[str]

ONE_SEGMENTS = 2
FOUR_SEGMENTS = 4
SEVEN_SEGMENTS = 3
EIGHT_SEGMENTS = 7
TWO_THREE_FIVE_SEGMENTS = 5
ZERO_SIX_NINE_SEGMENTS = 6

UNIQUE_SEGMENT_COUNTS = {ONE_SEGMENTS, FOUR_SEGMENTS, SEVEN_SEGMENTS, EIGHT_SEGMENTS}


class DigitDisplay(NamedTuple):
    signal_patterns: List[Pattern]
    output: List[Pattern]

    def _find(self, length: int, condition: Callable[[Pattern], bool] = lambda p: True) -> Pattern:
        for pattern in self.signal_patterns:
            if len(pattern) == length and condition(pattern):
                return pattern
        raise UnsolvableError(f"No {length}-segment pattern fits in {self._describe()}")

    def _describe(self) -> str:
        return " ".join("".join(sorted(p)) for p in self.signal_patterns)

    def solve(self) -> List[Pattern]:
        """
        Deduce the pattern of every digit.

        Returns:
            List where index d holds the pattern of digit d.

        Raises:
            UnsolvableError: If the patterns admit no consistent wiring.
        """
        one = self._find(ONE_SEGMENTS)
        four = self._find(FOUR_SEGMENTS)
        seven = self._find(SEVEN_SEGMENTS)
        eight = self._find(EIGHT_SEGMENTS)

        six = self._find(ZERO_SIX_NINE_SEGMENTS, lambda p: len(one & p) == 1)
        five = self._find(TWO_THREE_FIVE_SEGMENTS, lambda p: p <= six)

        rest = six - five
        if len(rest) != 1:
            raise UnsolvableError(f"Segment e is ambiguous in {self._describe()}")
        e_signal = next(iter(rest))

        two = self._find(TWO_THREE_FIVE_SEGMENTS, lambda p: e_signal in p)
        nine = self._find(ZERO_SIX_NINE_SEGMENTS, lambda p: e_signal not in p)
        three = self._find(TWO_THREE_FIVE_SEGMENTS, lambda p: p != two and p != five)
        zero = self._find(ZERO_SIX_NINE_SEGMENTS, lambda p: p != six and p != nine)

        return [zero, one, two, three, four, five, six, seven, eight, nine]

    def decode(self) -> int:
        """
        Output value as a decimal number.

        Raises:
            UnsolvableError: If the wiring can't be deduced or an output
                pattern matches no digit.
        """
        solution = self.solve()
        value = 0
        for pattern in self.output:
            try:
                digit = solution.index(pattern)
            except ValueError:
                raise UnsolvableError(
                    f"Output pattern '{''.join(sorted(pattern))}' matches no digit"
                ) from None
            value = value * 10 + digit
        return value


def parse_display(line: str) -> DigitDisplay:
    signal, output = split_once(line, "|")
    return DigitDisplay(
        [frozenset(p) for p in signal.split()],
        [frozenset(p) for p in output.split()],
    )


def parse_displays(text: str) -> List[DigitDisplay]:
    return [parse_display(line) for line in lines(text)]


def count_unique_patterns(patterns: List[Pattern]) -> int:
    return sum(1 for p in patterns if len(p) in UNIQUE_SEGMENT_COUNTS)


def part1(text: str) -> int:
    return sum(count_unique_patterns(d.output) for d in parse_displays(text))


def part2(text: str) -> int:
    return sum(d.decode() for d in parse_displays(text))


def solve(text: str, receipts: Receipts) -> List[int]:
    displays = parse_displays(text)
    receipts.put("displays", len(displays))
    return [
        sum(count_unique_patterns(d.output) for d in displays),
        sum(d.decode() for d in displays),
    ]

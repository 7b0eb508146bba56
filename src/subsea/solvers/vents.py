"""
Day 5: Hydrothermal Venture

Vent lines are horizontal, vertical or exactly 45 degrees. Every covered
point is counted in a sparse map; the answer is the number of points
covered by at least two lines.
"""

from collections import Counter
from typing import Iterable, Iterator, List, NamedTuple

from ..core.receipts import Receipts
from ..parsing import ParseError, lines, parse_int, split_once

START_END_DELIM = " -> "
POINT_DELIM = ","


class Point(NamedTuple):
    x: int
    y: int


class Line(NamedTuple):
    start: Point
    end: Point

    def is_straight(self) -> bool:
        return self.start.x == self.end.x or self.start.y == self.end.y

    def points(self) -> Iterator[Point]:
        """Every point from start to end inclusive, one step at a time."""
        dx = _step(self.start.x, self.end.x)
        dy = _step(self.start.y, self.end.y)
        length = max(abs(self.end.x - self.start.x), abs(self.end.y - self.start.y))
        for i in range(length + 1):
            yield Point(self.start.x + i * dx, self.start.y + i * dy)


def _step(first: int, second: int) -> int:
    return (second > first) - (second < first)


def parse_point(s: str) -> Point:
    x, y = split_once(s.strip(), POINT_DELIM)
    return Point(parse_int(x, s), parse_int(y, s))


def parse_line(s: str) -> Line:
    """
    Raises:
        ParseError: If the line is neither straight nor diagonal at 45 degrees.
    """
    start, end = split_once(s, START_END_DELIM)
    line = Line(parse_point(start), parse_point(end))
    if not line.is_straight() and abs(line.end.x - line.start.x) != abs(line.end.y - line.start.y):
        raise ParseError(f"Line '{s}' is neither straight nor at 45 degrees")
    return line


def parse_lines(text: str) -> List[Line]:
    return [parse_line(s) for s in lines(text)]


def coverage(vent_lines: Iterable[Line]) -> Counter:
    counts = Counter()
    for line in vent_lines:
        counts.update(line.points())
    return counts


def overlap_count(vent_lines: Iterable[Line]) -> int:
    return sum(1 for n in coverage(vent_lines).values() if n > 1)


def part1(text: str) -> int:
    return overlap_count(line for line in parse_lines(text) if line.is_straight())


def part2(text: str) -> int:
    return overlap_count(parse_lines(text))


def solve(text: str, receipts: Receipts) -> List[int]:
    vent_lines = parse_lines(text)
    straight = [line for line in vent_lines if line.is_straight()]
    receipts.put("lines", {"total": len(vent_lines), "straight": len(straight)})
    return [overlap_count(straight), overlap_count(vent_lines)]

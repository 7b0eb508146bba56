#!/usr/bin/env python3
"""
Navigation Solver Tests (days 1, 2, 3, 5, 7)

Small list/arithmetic puzzles checked against their worked examples,
plus the tie-break and error cases of the diagnostic report.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from subsea.parsing import ParseError
from subsea.solvers import UnsolvableError
from subsea.solvers import sonar, dive, diagnostic, vents, crabs

DEPTHS = """199
200
208
210
200
207
240
269
260
263
"""

COURSE = """forward 5
down 5
forward 8
up 3
down 8
forward 2
"""

REPORT = """00100
11110
10110
10111
10101
01111
00111
11100
10000
11001
00010
01010
"""

VENTS = """0,9 -> 5,9
8,0 -> 0,8
9,4 -> 3,4
2,2 -> 2,1
7,0 -> 7,4
6,4 -> 2,0
0,9 -> 2,9
3,4 -> 1,4
0,0 -> 8,8
5,5 -> 8,2
"""

CRABS = "16,1,2,0,4,2,7,1,2,14\n"


# ═══════════════════════════════════════════════════════════════════════
# Day 1: Sonar Sweep
# ═══════════════════════════════════════════════════════════════════════

def test_sonar():
    print("Testing sonar sweep...")

    assert sonar.part1(DEPTHS) == 7
    assert sonar.part2(DEPTHS) == 5
    assert list(sonar.window_sums([1, 2, 3, 4])) == [6, 9]
    assert sonar.count_increases([]) == 0

    print("✓ 7 increases, 5 window increases")


# ═══════════════════════════════════════════════════════════════════════
# Day 2: Dive
# ═══════════════════════════════════════════════════════════════════════

def test_dive():
    print("Testing dive...")

    assert dive.part1(COURSE) == 150
    assert dive.part2(COURSE) == 900

    sub = dive.AimedSubmarine().go_n(dive.parse_course(COURSE))
    assert (sub.position, sub.depth, sub.aim) == (15, 60, 10)

    with pytest.raises(ParseError):
        dive.parse_command("backward 3")
    with pytest.raises(ParseError):
        dive.parse_command("forward")

    print("✓ 150 plain, 900 aimed")


# ═══════════════════════════════════════════════════════════════════════
# Day 3: Binary Diagnostic
# ═══════════════════════════════════════════════════════════════════════

def test_diagnostic_rates():
    print("Testing diagnostic rates...")

    report = diagnostic.Report.from_text(REPORT)
    assert report.width == 5
    assert report.gamma_rate() == 22
    assert report.epsilon_rate() == 9
    assert report.oxygen_generator_rating() == 23
    assert report.co2_scrubber_rating() == 10
    assert diagnostic.part1(REPORT) == 198
    assert diagnostic.part2(REPORT) == 230

    print("✓ gamma 22, epsilon 9, oxygen 23, co2 10")


def test_diagnostic_ties():
    """Gamma takes 0 on a tie, oxygen keeps 1, CO2 keeps 0."""
    print("Testing tie-breaks...")

    report = diagnostic.Report.from_text("10\n01\n")
    assert report.gamma_rate() == 0
    assert report.epsilon_rate() == 3
    assert report.oxygen_generator_rating() == 0b10
    assert report.co2_scrubber_rating() == 0b01

    print("✓ tie-breaks as frozen in the registry")


def test_diagnostic_errors():
    print("Testing diagnostic errors...")

    with pytest.raises(ParseError):
        diagnostic.Report.from_text("")
    with pytest.raises(ParseError):
        diagnostic.Report.from_text("101\n10\n")
    with pytest.raises(ParseError):
        diagnostic.Report.from_text("102\n")

    # duplicates can never be told apart
    with pytest.raises(UnsolvableError):
        diagnostic.Report.from_text("10\n10\n").oxygen_generator_rating()

    print("✓ ParseError / UnsolvableError")


# ═══════════════════════════════════════════════════════════════════════
# Day 5: Hydrothermal Venture
# ═══════════════════════════════════════════════════════════════════════

def test_vents():
    print("Testing vents...")

    assert vents.part1(VENTS) == 5
    assert vents.part2(VENTS) == 12

    line = vents.parse_line("9,7 -> 7,9")
    assert list(line.points()) == [vents.Point(9, 7), vents.Point(8, 8), vents.Point(7, 9)]
    assert list(vents.parse_line("1,1 -> 1,1").points()) == [vents.Point(1, 1)]

    with pytest.raises(ParseError):
        vents.parse_line("0,0 -> 2,1")

    print("✓ 5 straight overlaps, 12 with diagonals")


# ═══════════════════════════════════════════════════════════════════════
# Day 7: The Treachery of Whales
# ═══════════════════════════════════════════════════════════════════════

def test_crabs():
    print("Testing crab alignment...")

    assert crabs.part1(CRABS) == 37
    assert crabs.part2(CRABS) == 168
    assert crabs.triangular_cost(11) == 66
    assert crabs.minimize_fuel([]) is None

    print("✓ 37 linear, 168 triangular")


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])

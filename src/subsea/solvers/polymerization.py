"""
Day 14: Extended Polymerization

Most common minus least common element after 10 and 40 steps of pair
insertion, both via the pair-frequency propagator.
"""

from typing import List

from ..core.receipts import Receipts
from ..core.registry import POLYMER_STEPS
from ..growth.polymer import PairInserter, spread
from ..parsing import ParseError, parse_polymer


def _inserter(text: str) -> PairInserter:
    template, rules = parse_polymer(text)
    inserter = PairInserter.from_template(rules, template)
    if inserter is None:
        raise ParseError("Empty polymer template")
    return inserter


def spread_after(text: str, steps: int) -> int:
    inserter = _inserter(text)
    for _ in range(steps):
        inserter.step()
    return spread(inserter.symbol_counts())


def part1(text: str) -> int:
    return spread_after(text, POLYMER_STEPS[0])


def part2(text: str) -> int:
    return spread_after(text, POLYMER_STEPS[1])


def solve(text: str, receipts: Receipts) -> List[int]:
    inserter = _inserter(text)
    receipts.put("rules", len(inserter.rules))

    answers = []
    for steps in POLYMER_STEPS:
        while inserter.steps < steps:
            inserter.step()
        answers.append(spread(inserter.symbol_counts()))
    receipts.put("length", inserter.length())
    receipts.put("distinct_pairs", len(inserter.state))
    return answers

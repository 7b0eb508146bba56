"""
Day 6: Lanternfish

Population after 80 and 256 days, counted by the bucket ring.
"""

from typing import List

from ..core.receipts import Receipts
from ..core.registry import POPULATION_DAYS
from ..growth.population import PopulationCounter
from ..parsing import parse_int_list


def count_after(text: str, days: int) -> int:
    return PopulationCounter.from_numbers(parse_int_list(text)).advance(days)


def part1(text: str) -> int:
    return count_after(text, POPULATION_DAYS[0])


def part2(text: str) -> int:
    return count_after(text, POPULATION_DAYS[1])


def solve(text: str, receipts: Receipts) -> List[int]:
    counter = PopulationCounter.from_numbers(parse_int_list(text))
    receipts.put("initial_histogram", counter.histogram())

    answers = []
    for days in POPULATION_DAYS:
        answers.append(counter.advance(days - counter.days))
    receipts.put("final_histogram", counter.histogram())
    receipts.put("days", counter.days)
    return answers

"""
Growth Component: Bucketed Population Counter

Counts an exponentially growing population of timers without ever
materializing individuals.

Model:
  - Adults sit in a ring of 7 day-buckets. A rotating pointer
    (zero_day_bracket) marks the bucket whose members reach timer 0 today;
    the bucket is never shifted, the pointer moves.
  - Newborns take two extra days before they join the ring, tracked by two
    staging slots (timer 8, timer 7) fed from the count read off the ring.

Per day only the 7 buckets and 2 staging slots are touched, so the
population size never appears as a loop bound.
"""

from typing import Iterable, List

from ..core.registry import PARENT_REPRODUCTION_DAYS, NEWBORN_EXTRA_DAYS
from ..parsing import ParseError


class PopulationCounter:
    """Lanternfish-style population with a 7-day reproduction cycle."""

    def __init__(self):
        self.zero_day_bracket = 0
        self.buckets: List[int] = [0] * PARENT_REPRODUCTION_DAYS
        self.seven_day = 0
        self.eight_day = 0
        self.newborn = 0
        self.days = 0

    @classmethod
    def from_numbers(cls, timers: Iterable[int]) -> "PopulationCounter":
        """
        Build from per-individual timers.

        Raises:
            ParseError: If a timer is outside 0..6 (adults only).
        """
        counter = cls()
        for timer in timers:
            if not 0 <= timer < PARENT_REPRODUCTION_DAYS:
                raise ParseError(
                    f"Timer {timer} outside 0..{PARENT_REPRODUCTION_DAYS - 1}"
                )
            counter.buckets[timer] += 1
        # members at timer 0 reproduce on the first advance
        counter.newborn = counter.buckets[counter.zero_day_bracket]
        return counter

    def advance_one_day(self) -> None:
        # today's 7-day stage rejoins the ring in the bucket that is about to
        # become timer 6
        self.buckets[self.zero_day_bracket] += self.seven_day

        self.seven_day = self.eight_day
        self.eight_day = self.newborn

        self.zero_day_bracket = (self.zero_day_bracket + 1) % PARENT_REPRODUCTION_DAYS
        self.newborn = self.buckets[self.zero_day_bracket]
        self.days += 1

    def advance(self, days: int) -> int:
        """Advance `days` days and return the new count."""
        for _ in range(days):
            self.advance_one_day()
        return self.count()

    def count(self) -> int:
        """Total population (ring plus staging slots)."""
        return self.seven_day + self.eight_day + sum(self.buckets)

    def histogram(self) -> List[int]:
        """
        Population per timer value.

        Returns:
            List of length 7 + NEWBORN_EXTRA_DAYS; index i holds the number of
            individuals whose timer is i.
        """
        ring = [
            self.buckets[(self.zero_day_bracket + i) % PARENT_REPRODUCTION_DAYS]
            for i in range(PARENT_REPRODUCTION_DAYS)
        ]
        staged = [self.seven_day, self.eight_day]
        assert len(staged) == NEWBORN_EXTRA_DAYS
        return ring + staged

    def __str__(self) -> str:
        ring = ",".join(str(n) for n in self.histogram()[:PARENT_REPRODUCTION_DAYS])
        return (
            f"zero_day_idx: {self.zero_day_bracket}    "
            f"{ring},{self.seven_day},{self.eight_day} => {self.newborn}"
        )

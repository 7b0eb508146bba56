"""
Growth Component: Pair-Frequency Propagator

Pair insertion on a polymer: between every adjacent pair (a, b) the rule
table inserts one symbol c. The sequence roughly doubles per step, so the
frequency mode keeps only counts of adjacent pairs:

  (a, b) x n  →  (a, c) x n  and  (c, b) x n

Symbol counts are recovered by attributing each pair count to its second
symbol and adding 1 for the retained first symbol of the template (the only
symbol that is never the second element of a pair).

The naive mode materializes the sequence and is kept as a cross-check for
small step counts.
"""

from collections import Counter
from typing import Dict, Optional, Tuple

Pair = Tuple[str, str]
InsertionRules = Dict[Pair, str]


class NaivePairInserter:
    """String rewriting; O(length) per step."""

    def __init__(self, rules: InsertionRules):
        self.rules = rules

    def pair_insert(self, sequence: str) -> str:
        """
        One insertion step over the full sequence.

        Raises:
            RuleMissingError: If an adjacent pair has no rule.
        """
        result = []
        for left, right in zip(sequence, sequence[1:]):
            center = self.rules.get((left, right))
            if center is None:
                raise RuleMissingError((left, right))
            # right is appended as the next pair's left
            result.append(left)
            result.append(center)
        if sequence:
            result.append(sequence[-1])
        return "".join(result)

    @staticmethod
    def count_symbols(sequence: str) -> Dict[str, int]:
        return dict(Counter(sequence))


class PairInserter:
    """Pair-count state; per-step cost depends on the number of distinct pairs."""

    def __init__(self, rules: InsertionRules, state: Dict[Pair, int], first: str):
        self.rules = rules
        self.state = state
        self.first = first
        self.steps = 0

    @classmethod
    def from_template(cls, rules: InsertionRules, template: str) -> Optional["PairInserter"]:
        """Count consecutive pairs of `template`; None for an empty template."""
        if not template:
            return None
        state = Counter(zip(template, template[1:]))
        return cls(rules, dict(state), template[0])

    def step(self) -> None:
        """
        Replace every pair by its two children.

        Raises:
            RuleMissingError: If a present pair has no rule. The state is
                left exactly as it was before the call.
        """
        new_state: Dict[Pair, int] = {}
        for pair, count in self.state.items():
            center = self.rules.get(pair)
            if center is None:
                raise RuleMissingError(pair)
            left = (pair[0], center)
            right = (center, pair[1])
            new_state[left] = new_state.get(left, 0) + count
            new_state[right] = new_state.get(right, 0) + count
        self.state = new_state
        self.steps += 1

    def symbol_counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        # only the second symbol, interior symbols are shared by two pairs
        for (_, second), count in self.state.items():
            counts[second] = counts.get(second, 0) + count
        counts[self.first] = counts.get(self.first, 0) + 1
        return counts

    def length(self) -> int:
        """Length of the represented sequence (pairs + 1)."""
        return sum(self.state.values()) + 1


def spread(counts: Dict[str, int]) -> Optional[int]:
    """Most common minus least common count; None when empty."""
    if not counts:
        return None
    return max(counts.values()) - min(counts.values())


class RuleMissingError(Exception):
    """Raised when an observed pair has no insertion rule."""

    def __init__(self, pair: Pair):
        self.pair = pair
        super().__init__(f"No rule found for pair {pair[0]}{pair[1]}")

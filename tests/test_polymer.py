#!/usr/bin/env python3
"""
Pair-Frequency Propagator Tests

Tests pair insertion in both modes:
1. Naive rewriting (exact strings)
2. Frequency propagation vs naive counts at every tractable step
3. Acceptance spreads at 10 and 40 steps
4. Missing rules leave the state untouched
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from subsea.growth import NaivePairInserter, PairInserter, RuleMissingError, spread
from subsea.parsing import parse_polymer

EXAMPLE = """NNCB

CH -> B
HH -> N
CB -> H
NH -> C
HB -> C
HC -> B
HN -> C
NN -> C
BH -> H
NC -> B
NB -> B
BN -> B
BB -> N
BC -> B
CC -> N
CN -> C
"""


def example():
    return parse_polymer(EXAMPLE)


def test_naive_steps():
    print("Testing naive insertion...")

    template, rules = example()
    naive = NaivePairInserter(rules)

    expected = [
        "NCNBCHB",
        "NBCCNBBBCBHCB",
        "NBBBCNCCNBBNBNBBCHBHHBCHB",
        "NBBNBNBBCCNBCNCCNBBNBBNBBBNBBNBBCBHCBHHNHCBBCBHCB",
    ]
    sequence = template
    for step, want in enumerate(expected, 1):
        sequence = naive.pair_insert(sequence)
        assert sequence == want, f"Step {step}: expected {want}, got {sequence}"

    print("✓ NNCB -> NCNBCHB -> ... (4 steps)")


def test_frequency_agrees_with_naive():
    """Symbol counts and length agree for every step up to 10."""
    print("Testing frequency mode against naive mode...")

    template, rules = example()
    naive = NaivePairInserter(rules)
    fast = PairInserter.from_template(rules, template)

    sequence = template
    for step in range(1, 11):
        sequence = naive.pair_insert(sequence)
        fast.step()
        assert fast.symbol_counts() == NaivePairInserter.count_symbols(sequence), \
            f"Step {step}: symbol counts differ"
        assert fast.length() == len(sequence)

    assert len(sequence) == 3073
    counts = fast.symbol_counts()
    assert counts["B"] == 1749 and counts["C"] == 298
    assert counts["H"] == 161 and counts["N"] == 865

    print("✓ both modes agree for 10 steps (length 3073)")


def test_acceptance_spreads():
    print("Testing spreads...")

    template, rules = example()
    inserter = PairInserter.from_template(rules, template)
    for _ in range(10):
        inserter.step()
    assert spread(inserter.symbol_counts()) == 1588

    for _ in range(30):
        inserter.step()
    assert inserter.steps == 40
    assert spread(inserter.symbol_counts()) == 2188189693529

    print("✓ 1588 @10, 2188189693529 @40")


def test_empty_and_single_symbol_template():
    print("Testing degenerate templates...")

    _, rules = example()
    assert PairInserter.from_template(rules, "") is None

    single = PairInserter.from_template(rules, "N")
    single.step()
    assert single.symbol_counts() == {"N": 1}
    assert single.length() == 1
    assert spread({}) is None

    print("✓ empty -> None, single symbol never grows")


def test_missing_rule_leaves_state():
    print("Testing missing rule...")

    rules = {("A", "B"): "C"}
    inserter = PairInserter.from_template(rules, "ABX")
    before = dict(inserter.state)

    with pytest.raises(RuleMissingError) as exc_info:
        inserter.step()
    assert exc_info.value.pair == ("B", "X")
    assert inserter.state == before, "Failed step must not change the state"
    assert inserter.steps == 0

    with pytest.raises(RuleMissingError):
        NaivePairInserter(rules).pair_insert("ABX")

    print("✓ RuleMissingError, state untouched")


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])

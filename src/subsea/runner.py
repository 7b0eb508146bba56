"""
Puzzle Runner

Maps a day number to its solver, computes both answers and the section
receipts, and renders them as JSON:

  {"day": 11, "answers": [1656, 195], "receipts": {...}}

Receipts per day:
  - input_hash: BLAKE3 of the raw input text
  - solver-specific facts (grid hashes, histograms, counts)
  - answers
"""

import argparse
import json
import sys
from typing import Dict, List, Optional, Tuple

from .core import Receipts, assert_double_run_equal, text_hash
from .growth.polymer import RuleMissingError
from .kernel.grid import ShapeError
from .parsing import ParseError
from .solvers import (
    UnsolvableError,
    bingo,
    caves,
    crabs,
    diagnostic,
    dive,
    lanternfish,
    octopus,
    origami,
    polymerization,
    segments,
    smoke_basin,
    sonar,
    syntax,
    vents,
)

DAYS = {
    1: ("sonar", sonar),
    2: ("dive", dive),
    3: ("diagnostic", diagnostic),
    4: ("bingo", bingo),
    5: ("vents", vents),
    6: ("lanternfish", lanternfish),
    7: ("crabs", crabs),
    8: ("segments", segments),
    9: ("smoke-basin", smoke_basin),
    10: ("syntax", syntax),
    11: ("octopus", octopus),
    12: ("caves", caves),
    13: ("origami", origami),
    14: ("polymerization", polymerization),
}


def build_receipts(day: int, text: str) -> Tuple[List, Receipts]:
    """
    Solve one day and collect its receipts.

    Raises:
        ValueError: If `day` has no solver.
        ParseError, ShapeError, RuleMissingError, UnsolvableError: From the solver.
    """
    if day not in DAYS:
        raise ValueError(f"No solver for day {day}; known days: {sorted(DAYS)}")
    name, module = DAYS[day]

    receipts = Receipts(f"day{day:02d}-{name}")
    receipts.put("input_hash", text_hash(text))
    answers = module.solve(text, receipts)
    receipts.put("answers", list(answers))
    return answers, receipts


def solve(day: int, text: str) -> Tuple[List, Dict]:
    """Answers and the receipts digest for `day`."""
    answers, receipts = build_receipts(day, text)
    return answers, receipts.digest()


def solve_with_determinism_check(day: int, text: str) -> Tuple[List, Dict]:
    """
    Solve twice and require identical section hashes.

    Raises:
        DeterminismError: If the two runs disagree.
    """
    assert_double_run_equal(lambda: build_receipts(day, text)[1])
    return solve(day, text)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Solve one puzzle day and print answers with receipts.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit codes:
  0  solved
  1  bad input (parse/shape/rule errors, unknown day, unreadable file)
  2  well-formed input without a consistent answer
        """
    )

    parser.add_argument(
        "day",
        type=int,
        help=f"Puzzle day ({min(DAYS)}-{max(DAYS)})"
    )

    parser.add_argument(
        "input_file",
        type=str,
        help="Path to the puzzle input text file"
    )

    parser.add_argument(
        "--determinism-check",
        action="store_true",
        help="Run double-solve determinism check. Default: False (single solve)."
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file for results JSON. Default: print to stdout."
    )

    args = parser.parse_args(argv)

    try:
        with open(args.input_file, 'r', encoding='utf-8') as f:
            text = f.read()
    except FileNotFoundError:
        print(f"Error: Input file not found: {args.input_file}", file=sys.stderr)
        sys.exit(1)
    except UnicodeDecodeError as e:
        print(f"Error: Input file is not valid UTF-8: {args.input_file} ({e})", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: Cannot read input file {args.input_file}: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.determinism_check:
            answers, receipts = solve_with_determinism_check(args.day, text)
        else:
            answers, receipts = solve(args.day, text)
    except UnsolvableError as e:
        print(f"UNSOLVABLE: {e}", file=sys.stderr)
        sys.exit(2)
    except (ParseError, ShapeError, RuleMissingError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    result = {
        "day": args.day,
        "answers": answers,
        "receipts": receipts
    }

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            json.dump(result, f, indent=2)
        print(f"Results written to: {args.output}")
    else:
        print(json.dumps(result, indent=2))

    sys.exit(0)


if __name__ == "__main__":
    main()

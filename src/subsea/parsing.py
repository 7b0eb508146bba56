"""
Text Parsing Helpers

Turns raw puzzle input into the data model's initial values: integer
lists, digit grids, blank-line separated sections and insertion rules.
Every malformed input is reported as ParseError; nothing is skipped
silently except surrounding whitespace and blank trailing lines.
"""

from typing import Dict, List, Optional, Tuple

from .kernel.grid import Grid

RULE_DELIM = " -> "
SECTION_DELIM = "\n\n"


def normalize(text: str) -> str:
    """Unify line endings and strip surrounding blank space."""
    return text.replace("\r\n", "\n").strip()


def lines(text: str) -> List[str]:
    """Non-empty, right-stripped lines."""
    return [line.rstrip() for line in normalize(text).split("\n") if line.strip()]


def parse_int(token: str, context: str = "") -> int:
    try:
        return int(token.strip())
    except ValueError:
        where = f" in '{context}'" if context else ""
        raise ParseError(f"'{token}' is not an integer{where}") from None


def parse_int_list(text: str, sep: str = ",") -> List[int]:
    """Integers separated by `sep` (and/or newlines)."""
    numbers = []
    for line in lines(text):
        for token in line.split(sep):
            if token.strip():
                numbers.append(parse_int(token, line))
    return numbers


def parse_int_lines(text: str) -> List[int]:
    """One integer per line."""
    return [parse_int(line, line) for line in lines(text)]


def parse_digit_grid(text: str) -> Grid[int]:
    """
    Rows of single decimal digits into a Grid.

    Raises:
        ParseError: If the input is empty or contains a non-digit.
        ShapeError: If rows differ in length.
    """
    rows = []
    for y, line in enumerate(lines(text)):
        row = []
        for x, c in enumerate(line.strip()):
            if not c.isdigit():
                raise ParseError(f"'{c}' at {x},{y} is not a digit")
            row.append(int(c))
        rows.append(row)
    if not rows:
        raise ParseError("No grid rows found")
    return Grid.from_rows(rows)


def split_sections(text: str, expected: Optional[int] = None) -> List[str]:
    """
    Split on blank lines.

    Raises:
        ParseError: If `expected` is given and the section count differs.
    """
    sections = [s for s in normalize(text).split(SECTION_DELIM) if s.strip()]
    if expected is not None and len(sections) != expected:
        raise ParseError(
            f"Expected {expected} blank-line separated sections, got {len(sections)}"
        )
    return sections


def split_once(line: str, delim: str) -> Tuple[str, str]:
    """
    Split `line` at the first `delim`.

    Raises:
        ParseError: If `delim` does not occur.
    """
    left, found, right = line.partition(delim)
    if not found:
        raise ParseError(f"Delimiter '{delim}' missing in line '{line}'")
    return left, right


def parse_rules(text: str) -> Dict[Tuple[str, str], str]:
    """
    Pair insertion rules, one `AB -> C` per line.

    Raises:
        ParseError: If a line lacks the delimiter or has the wrong arity.
    """
    rules = {}
    for line in lines(text):
        pair, inserted = split_once(line, RULE_DELIM)
        pair, inserted = pair.strip(), inserted.strip()
        if len(pair) != 2 or len(inserted) != 1:
            raise ParseError(
                f"Line '{line}' not recognized as rule of 2 input and 1 output chars"
            )
        rules[(pair[0], pair[1])] = inserted
    return rules


def parse_polymer(text: str) -> Tuple[str, Dict[Tuple[str, str], str]]:
    """Template line, blank line, rules."""
    template, rules = split_sections(text, expected=2)
    return template.strip(), parse_rules(rules)


class ParseError(Exception):
    """Raised when puzzle input text is malformed."""
    pass

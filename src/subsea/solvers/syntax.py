"""
Day 10: Syntax Scoring

Each line of brackets is classified as empty, corrupted (first illegal
closing character), incomplete (open chunks left over) or complete.
Corrupted lines are scored by their illegal character; incomplete lines
by their completion string, and the middle completion score wins.
"""

from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

from ..core.receipts import Receipts
from ..parsing import ParseError, normalize
from . import UnsolvableError


class OpeningToken(Enum):
    ROUND = "("
    SQUARE = "["
    CURLY = "{"
    POINTY = "<"


CLOSING_CHAR = {
    OpeningToken.ROUND: ")",
    OpeningToken.SQUARE: "]",
    OpeningToken.CURLY: "}",
    OpeningToken.POINTY: ">",
}

ILLEGAL_POINTS = {")": 3, "]": 57, "}": 1197, ">": 25137}

COMPLETION_POINTS = {
    OpeningToken.ROUND: 1,
    OpeningToken.SQUARE: 2,
    OpeningToken.CURLY: 3,
    OpeningToken.POINTY: 4,
}


class LineKind(Enum):
    EMPTY = "empty"
    CORRUPTED = "corrupted"
    INCOMPLETE = "incomplete"
    COMPLETE = "complete"


class ParsedLine(NamedTuple):
    kind: LineKind
    text: str
    # CORRUPTED: innermost open chunk and the offending character
    expected: Optional[OpeningToken] = None
    found: Optional[str] = None
    # INCOMPLETE: chunks still open, outermost first
    open_tokens: Tuple[OpeningToken, ...] = ()


def _opening_token(c: str) -> Optional[OpeningToken]:
    try:
        return OpeningToken(c)
    except ValueError:
        return None


def parse_line(s: str) -> ParsedLine:
    if not s:
        return ParsedLine(LineKind.EMPTY, s)
    first = _opening_token(s[0])
    if first is None:
        return ParsedLine(LineKind.EMPTY, s)

    open_tokens = [first]
    for c in s[1:]:
        opening = _opening_token(c)
        if opening is not None:
            open_tokens.append(opening)
        elif c not in ILLEGAL_POINTS:
            raise ParseError(f"'{c}' is not a bracket in line '{s}'")
        elif open_tokens:
            if c == CLOSING_CHAR[open_tokens[-1]]:
                open_tokens.pop()
            else:
                return ParsedLine(LineKind.CORRUPTED, s, expected=open_tokens[-1], found=c)
        # closers after every chunk is closed are ignored

    if not open_tokens:
        return ParsedLine(LineKind.COMPLETE, s)
    return ParsedLine(LineKind.INCOMPLETE, s, open_tokens=tuple(open_tokens))


def illegal_points(c: str) -> int:
    return ILLEGAL_POINTS[c]


def autocomplete_score(open_tokens: Tuple[OpeningToken, ...]) -> int:
    score = 0
    # innermost chunk closes first
    for token in reversed(open_tokens):
        score = score * 5 + COMPLETION_POINTS[token]
    return score


def completion_string(open_tokens: Tuple[OpeningToken, ...]) -> str:
    return "".join(CLOSING_CHAR[t] for t in reversed(open_tokens))


def parse_lines(text: str) -> List[ParsedLine]:
    return [parse_line(line.strip()) for line in normalize(text).split("\n")]


def syntax_error_score(parsed: List[ParsedLine]) -> int:
    return sum(illegal_points(p.found) for p in parsed if p.kind is LineKind.CORRUPTED)


def middle_autocomplete_score(parsed: List[ParsedLine]) -> int:
    """
    Raises:
        UnsolvableError: If there are no incomplete lines.
    """
    scores = sorted(autocomplete_score(p.open_tokens) for p in parsed if p.kind is LineKind.INCOMPLETE)
    if not scores:
        raise UnsolvableError("No incomplete lines to autocomplete")
    return scores[len(scores) // 2]


def part1(text: str) -> int:
    return syntax_error_score(parse_lines(text))


def part2(text: str) -> int:
    return middle_autocomplete_score(parse_lines(text))


def solve(text: str, receipts: Receipts) -> List[int]:
    parsed = parse_lines(text)
    receipts.put("line_kinds", {
        kind.value: sum(1 for p in parsed if p.kind is kind) for kind in LineKind
    })
    return [syntax_error_score(parsed), middle_autocomplete_score(parsed)]

"""
Day 13: Transparent Origami

Dots on transparent paper, folded up along horizontal lines (y=...) and
left along vertical lines (x=...). Dots below/right of the fold line are
mirrored onto the kept half; overlapping dots merge. The paper keeps its
full Grid storage and tracks the visible width and height instead.
"""

from typing import List, NamedTuple, Tuple

from ..core.bytesio import serialize_dots
from ..core.hashing import blake3_hash
from ..core.receipts import Receipts
from ..kernel.grid import Grid, ShapeError
from ..parsing import ParseError, lines, parse_int, split_once, split_sections

POINT_DELIM = ","
FOLD_PREFIX = "fold along "
FOLD_DELIM = "="


class Fold(NamedTuple):
    axis: str  # "x" or "y"
    line: int


class Paper:
    def __init__(self, grid: Grid[bool]):
        self.grid = grid
        self.columns, self.rows = grid.dimensions()

    @classmethod
    def with_points(cls, points: List[Tuple[int, int]]) -> "Paper":
        """
        Raises:
            ParseError: If there are no points or a coordinate is negative.
        """
        if not points:
            raise ParseError("Paper without dots")
        if any(x < 0 or y < 0 for x, y in points):
            raise ParseError("Dot coordinates must be non-negative")
        max_x = max(x for x, _ in points)
        max_y = max(y for _, y in points)
        paper = cls(Grid.with_default(max_x + 1, max_y + 1, False))
        for x, y in points:
            paper.grid.set(x, y, True)
        return paper

    def fold(self, fold: Fold) -> None:
        """
        Raises:
            ShapeError: If a mirrored dot would land outside the paper.
        """
        if fold.axis == "y":
            self._fold_y(fold.line)
        else:
            self._fold_x(fold.line)

    def _move(self, x: int, y: int, to_x: int, to_y: int) -> None:
        if to_x < 0 or to_y < 0:
            raise ShapeError(f"Folding moves dot {x},{y} off the paper")
        self.grid.set(to_x, to_y, True)
        self.grid.set(x, y, False)

    def _fold_y(self, pivot: int) -> None:
        for y in range(pivot + 1, self.rows):
            for x in range(self.columns):
                if self.grid.get(x, y).value:
                    self._move(x, y, x, 2 * pivot - y)
        self.rows = min(self.rows, pivot)

    def _fold_x(self, pivot: int) -> None:
        for y in range(self.rows):
            for x in range(pivot + 1, self.columns):
                if self.grid.get(x, y).value:
                    self._move(x, y, 2 * pivot - x, y)
        self.columns = min(self.columns, pivot)

    def count_dots(self) -> int:
        return sum(
            1
            for y in range(self.rows)
            for cell in self.grid.iter_row(y)
            if cell.x < self.columns and cell.value
        )

    def render(self, mark: str = "#", empty: str = ".") -> str:
        """Visible area, one text line per row."""
        out = []
        for y in range(self.rows):
            out.append("".join(
                mark if cell.value else empty
                for cell in self.grid.iter_row(y)
                if cell.x < self.columns
            ))
        return "\n".join(out)


def parse_fold(s: str) -> Fold:
    if not s.startswith(FOLD_PREFIX):
        raise ParseError(f"Fold instruction '{s}', missing prefix '{FOLD_PREFIX}'")
    axis, line = split_once(s[len(FOLD_PREFIX):], FOLD_DELIM)
    axis = axis.strip().lower()
    if axis not in ("x", "y"):
        raise ParseError(f"Unknown fold direction '{axis}' in '{s}'")
    return Fold(axis, parse_int(line, s))


def parse_manual(text: str) -> Tuple[Paper, List[Fold]]:
    points_text, folds_text = split_sections(text, expected=2)
    points = []
    for line in lines(points_text):
        x, y = split_once(line.strip(), POINT_DELIM)
        points.append((parse_int(x, line), parse_int(y, line)))
    folds = [parse_fold(line.strip()) for line in lines(folds_text)]
    return Paper.with_points(points), folds


def part1(text: str) -> int:
    paper, folds = parse_manual(text)
    if folds:
        paper.fold(folds[0])
    return paper.count_dots()


def part2(text: str) -> str:
    paper, folds = parse_manual(text)
    for fold in folds:
        paper.fold(fold)
    return paper.render()


def solve(text: str, receipts: Receipts) -> List:
    paper, folds = parse_manual(text)
    receipts.put("folds", len(folds))

    first_count = paper.count_dots()
    for i, fold in enumerate(folds):
        paper.fold(fold)
        if i == 0:
            first_count = paper.count_dots()

    receipts.put("visible", {"columns": paper.columns, "rows": paper.rows})
    receipts.put("dots_hash", blake3_hash(serialize_dots(paper.grid, paper.columns, paper.rows)))
    return [first_count, paper.render()]

"""
Day 4: Giant Squid (bingo)

Boards are 5x5 Grids of fields. A called number crosses every open field
carrying it; a board wins once any full row or column is crossed
(diagonals don't count). Score = winning number * sum of open fields.
"""

from typing import List, NamedTuple, Optional, Sequence, Tuple

from ..core.receipts import Receipts
from ..core.registry import BINGO_BOARD_SIZE
from ..kernel.grid import Grid
from ..parsing import parse_int, parse_int_list, split_sections
from . import UnsolvableError


class BingoField(NamedTuple):
    number: int
    crossed: bool = False


class BingoBoard:
    def __init__(self, data: Grid[BingoField]):
        self.data = data

    @classmethod
    def from_text(cls, text: str, size: int = BINGO_BOARD_SIZE) -> "BingoBoard":
        """
        Raises:
            ParseError: If a token is not an integer.
            ShapeError: If the numbers don't fill whole rows of `size`.
        """
        fields = [BingoField(parse_int(token, text)) for token in text.split()]
        return cls(Grid.from_flat(fields, size))

    def cross(self, number: int) -> None:
        for view in self.data.iter_mut():
            field = view.value
            if not field.crossed and field.number == number:
                view.value = field._replace(crossed=True)

    def is_bingo(self) -> bool:
        columns, rows = self.data.dimensions()
        if any(all(c.value.crossed for c in self.data.iter_row(y)) for y in range(rows)):
            return True
        return any(all(c.value.crossed for c in self.data.iter_col(x)) for x in range(columns))

    def sum_unmarked(self) -> int:
        return sum(field.number for field in self.data.iter() if not field.crossed)


class Winner(NamedTuple):
    turns: int  # index of the winning number in the called sequence
    winning_number: int
    board: BingoBoard

    def score(self) -> int:
        return self.winning_number * self.board.sum_unmarked()


class BingoGame:
    def __init__(self, boards: List[BingoBoard]):
        self.boards: List[Optional[BingoBoard]] = list(boards)

    def _play_number(self, number: int) -> Optional[int]:
        for i, board in enumerate(self.boards):
            if board is None:
                continue
            board.cross(number)
            if board.is_bingo():
                return i
        return None

    def play(self, numbers: Sequence[int]) -> Optional[Winner]:
        """
        Call numbers until some board wins; that board leaves the game.

        Returns:
            The winner, or None if nobody wins with these numbers.
        """
        for i, number in enumerate(numbers):
            idx = self._play_number(number)
            if idx is not None:
                board = self.boards[idx]
                self.boards[idx] = None
                return Winner(i, number, board)
        return None

    def play_to_end(self, numbers: Sequence[int]) -> Optional[Winner]:
        """Play until no board can win any more; returns the last winner."""
        last_winner = None
        winner = self.play(numbers)
        while winner is not None:
            last_winner = winner
            # the winning number is called again: other boards may win on it too
            numbers = numbers[winner.turns:]
            winner = self.play(numbers)
        return last_winner


def parse_game(text: str) -> Tuple[List[int], BingoGame]:
    numbers, *boards = split_sections(text)
    return parse_int_list(numbers), BingoGame([BingoBoard.from_text(b) for b in boards])


def _first_winner(numbers: List[int], game: BingoGame) -> Winner:
    winner = game.play(numbers)
    if winner is None:
        raise UnsolvableError("With these numbers, nobody wins!")
    return winner


def part1(text: str) -> int:
    numbers, game = parse_game(text)
    return _first_winner(numbers, game).score()


def part2(text: str) -> int:
    numbers, game = parse_game(text)
    last = game.play_to_end(numbers)
    if last is None:
        raise UnsolvableError("With these numbers, nobody wins!")
    return last.score()


def solve(text: str, receipts: Receipts) -> List[int]:
    numbers, game = parse_game(text)
    receipts.put("boards", len(game.boards))
    receipts.put("numbers_called", len(numbers))

    first = _first_winner(numbers, game)
    last = game.play_to_end(numbers[first.turns:]) or first

    receipts.put("first_winner", {"turns": first.turns, "number": first.winning_number})
    receipts.put("last_winner", {"number": last.winning_number})
    return [first.score(), last.score()]

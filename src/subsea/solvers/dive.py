"""
Day 2: Dive

Planned course of `forward N`, `down N`, `up N` commands, applied to a
plain submarine (down/up change depth) and to an aimed submarine
(down/up change aim, forward also dives by aim * N).
"""

from enum import Enum
from typing import Iterable, List, NamedTuple

from ..core.receipts import Receipts
from ..parsing import ParseError, lines, parse_int


class Heading(Enum):
    FORWARD = "forward"
    DOWN = "down"
    UP = "up"


class Command(NamedTuple):
    heading: Heading
    units: int


def parse_command(line: str) -> Command:
    parts = line.split()
    if len(parts) != 2:
        raise ParseError(f"Invalid command '{line}'")
    try:
        heading = Heading(parts[0])
    except ValueError:
        raise ParseError(f"Unknown heading '{parts[0]}'") from None
    return Command(heading, parse_int(parts[1], line))


def parse_course(text: str) -> List[Command]:
    return [parse_command(line) for line in lines(text)]


class Submarine:
    def __init__(self):
        self.depth = 0
        self.position = 0

    def go(self, command: Command) -> None:
        if command.heading is Heading.UP:
            self.depth -= command.units
        elif command.heading is Heading.DOWN:
            self.depth += command.units
        else:
            self.position += command.units

    def go_n(self, commands: Iterable[Command]) -> "Submarine":
        for command in commands:
            self.go(command)
        return self

    def product(self) -> int:
        return self.position * self.depth


class AimedSubmarine(Submarine):
    def __init__(self):
        super().__init__()
        self.aim = 0

    def go(self, command: Command) -> None:
        # "down" aims in the positive (deeper) direction
        if command.heading is Heading.DOWN:
            self.aim += command.units
        elif command.heading is Heading.UP:
            self.aim -= command.units
        else:
            self.position += command.units
            self.depth += self.aim * command.units


def part1(text: str) -> int:
    return Submarine().go_n(parse_course(text)).product()


def part2(text: str) -> int:
    return AimedSubmarine().go_n(parse_course(text)).product()


def solve(text: str, receipts: Receipts) -> List[int]:
    course = parse_course(text)
    plain = Submarine().go_n(course)
    aimed = AimedSubmarine().go_n(course)
    receipts.put("plain", {"position": plain.position, "depth": plain.depth})
    receipts.put("aimed", {"position": aimed.position, "depth": aimed.depth, "aim": aimed.aim})
    return [plain.product(), aimed.product()]

"""
Day 12: Passage Pathing

Count distinct paths from `start` to `end` through an undirected cave
graph. Big caves (upper case) may be visited any number of times, small
caves (lower case) at most once; in part 2 a single small cave other than
`start` may be visited twice.

Enumeration is plain recursion with a copied visited set per branch; the
cave graphs are tiny.
"""

from typing import Dict, FrozenSet, List, Tuple

from ..core.receipts import Receipts
from ..parsing import lines, split_once

EDGE_DELIMITER = "-"
START_NODE = "start"
END_NODE = "end"


def is_small_cave(name: str) -> bool:
    return name.islower()


class CaveGraph:
    def __init__(self, neighbours: Dict[str, List[str]]):
        self.neighbours = neighbours

    @classmethod
    def with_edges(cls, edges: List[Tuple[str, str]]) -> "CaveGraph":
        neighbours: Dict[str, List[str]] = {}
        for left, right in edges:
            for a, b in ((left, right), (right, left)):
                entry = neighbours.setdefault(a, [])
                if b not in entry:
                    entry.append(b)
        return cls(neighbours)

    def _traverse(self, node: str, visited: FrozenSet[str], allow_small_twice: bool) -> int:
        if node == END_NODE:
            return 1
        visited = visited | {node}
        paths = 0
        for n in self.neighbours.get(node, []):
            if n in visited and is_small_cave(n):
                if allow_small_twice and n != START_NODE:
                    paths += self._traverse(n, visited, False)
            else:
                paths += self._traverse(n, visited, allow_small_twice)
        return paths

    def count_paths(self, allow_small_twice: bool = False) -> int:
        if START_NODE not in self.neighbours:
            return 0
        return self._traverse(START_NODE, frozenset(), allow_small_twice)


def parse_edges(text: str) -> List[Tuple[str, str]]:
    edges = []
    for line in lines(text):
        left, right = split_once(line.strip(), EDGE_DELIMITER)
        edges.append((left, right))
    return edges


def part1(text: str) -> int:
    return CaveGraph.with_edges(parse_edges(text)).count_paths()


def part2(text: str) -> int:
    return CaveGraph.with_edges(parse_edges(text)).count_paths(allow_small_twice=True)


def solve(text: str, receipts: Receipts) -> List[int]:
    graph = CaveGraph.with_edges(parse_edges(text))
    receipts.put("caves", sorted(graph.neighbours))
    return [graph.count_paths(), graph.count_paths(allow_small_twice=True)]

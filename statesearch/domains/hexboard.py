from __future__ import annotations
from typing import Callable, Iterable, List, NamedTuple, Set

from statesearch.search.dfs import DFS


class Hex(NamedTuple):
    """Axial hex coordinate; the third cube coordinate s = -q - r."""
    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def __add__(self, other: "Hex") -> "Hex":
        return Hex(self.q + other.q, self.r + other.r)

    def length(self) -> int:
        return (abs(self.q) + abs(self.r) + abs(self.s)) // 2

    def distance(self, other: "Hex") -> int:
        return Hex(self.q - other.q, self.r - other.r).length()

    def neighbor(self, direction: int) -> "Hex":
        return self + DIRECTIONS[direction % 6]


# Pointy orientation: east, north east, north west, west, south west, south east.
DIRECTIONS = (Hex(1, 0), Hex(1, -1), Hex(0, -1), Hex(-1, 0), Hex(-1, 1), Hex(0, 1))


class HexBoard:
    """A set of hex cells; two cells are adjacent when they share an edge."""

    def __init__(self, cells: Iterable[Hex] = ()):
        self.cells: Set[Hex] = set(cells)

    @classmethod
    def hexagon(cls, radius: int) -> "HexBoard":
        """All cells within `radius` of the origin."""
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")
        return cls(
            Hex(q, r)
            for q in range(-radius, radius + 1)
            for r in range(max(-radius, -q - radius), min(radius, -q + radius) + 1)
        )

    def add(self, cell: Hex) -> None:
        self.cells.add(cell)

    def remove(self, cell: Hex) -> None:
        self.cells.discard(cell)

    def neighbors(self, cell: Hex) -> List[Hex]:
        if cell not in self.cells:
            return []
        return [n for n in (cell.neighbor(d) for d in range(6)) if n in self.cells]

    def connected(self) -> bool:
        """True if every cell is reachable from every other one."""
        if not self.cells:
            return True
        start = min(self.cells)
        s = DFS(start, self.neighbors, lambda cell: False)
        s.perform()
        return s.visited() == self.cells

    @staticmethod
    def distance_to(goal: Hex) -> Callable[[Hex], int]:
        """Hex distance to goal; admissible and consistent for unit moves."""
        return lambda cell: cell.distance(goal)

    def __contains__(self, cell: Hex) -> bool:
        return cell in self.cells

    def __len__(self) -> int:
        return len(self.cells)

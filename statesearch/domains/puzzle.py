from __future__ import annotations
from bisect import bisect_left
from typing import Iterator, List, Optional, Sequence, Tuple
import random

State = Tuple[int, ...]
Cell = Tuple[int, int]

# blank moves as (row, col) offsets: up, down, left, right
STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class SlidingPuzzle:
    """
    R×C sliding-tile puzzle, 0 is the blank. SlidingPuzzle(3) is the 8-puzzle,
    SlidingPuzzle(4) the 15-puzzle, SlidingPuzzle(3, 4) the 11-puzzle board.

    States are flat row-major tuples. Every move costs 1, so neighbors()
    returns bare states and plugs straight into any search driver.
    """

    def __init__(self, rows: int, cols: Optional[int] = None):
        cols = rows if cols is None else cols
        if rows < 2 or cols < 2:
            raise ValueError(f"puzzle must be at least 2x2, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.size = rows * cols
        self.GOAL: State = tuple(range(1, self.size)) + (0,)

    def is_goal(self, s: State) -> bool:
        return s == self.GOAL

    def home(self, tile: int) -> Cell:
        """Goal cell of a tile; the blank's home is the last cell."""
        return divmod((tile - 1) % self.size, self.cols)

    def neighbors(self, s: State) -> List[State]:
        z = s.index(0)
        r, c = divmod(z, self.cols)
        out = []
        for dr, dc in STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < self.rows and 0 <= nc < self.cols:
                j = nr * self.cols + nc
                board = list(s)
                board[z], board[j] = board[j], board[z]
                out.append(tuple(board))
        return out

    def scramble(self, depth: int, seed: int) -> State:
        """Seeded walk of `depth` moves from GOAL that never steps straight back."""
        rng = random.Random(seed)
        prev, s = None, self.GOAL
        for _ in range(depth):
            prev, s = s, rng.choice([n for n in self.neighbors(s) if n != prev])
        return s

    def is_solvable(self, s: State) -> bool:
        """
        A move transposes two cells and shifts the blank by one cell, so a
        state is reachable from GOAL exactly when the parity of its cell
        permutation equals the parity of the blank's distance from home.
        """
        seen = [False] * self.size
        cycles = 0
        for i in range(self.size):
            if seen[i]:
                continue
            cycles += 1
            j = i
            while not seen[j]:
                seen[j] = True
                j = (s[j] - 1) % self.size
        return (self.size - cycles) % 2 == _taxicab(divmod(s.index(0), self.cols), self.home(0)) % 2

    def unsolvable_variant(self, s: State) -> State:
        """Same board with its first two tiles exchanged; the blank stays put."""
        i, j = [k for k, tile in enumerate(s) if tile][:2]
        board = list(s)
        board[i], board[j] = board[j], board[i]
        return tuple(board)

    # ---------- heuristics ----------
    def _placed(self, s: State) -> Iterator[Tuple[Cell, Cell]]:
        """(cell, home) for every tile on the board."""
        for idx, tile in enumerate(s):
            if tile:
                yield divmod(idx, self.cols), self.home(tile)

    def manhattan(self, s: State) -> int:
        return sum(_taxicab(cell, home) for cell, home in self._placed(s))

    def linear_conflict(self, s: State) -> int:
        """
        Manhattan plus 2 for each tile that has to leave its goal row (or
        column) so the others in that line can pass each other. The tiles
        that may stay are the longest increasing run of goal positions.
        """
        in_row: List[List[int]] = [[] for _ in range(self.rows)]
        in_col: List[List[int]] = [[] for _ in range(self.cols)]
        dist = 0
        # row-major scan keeps every line in board order
        for cell, home in self._placed(s):
            dist += _taxicab(cell, home)
            (r, c), (hr, hc) = cell, home
            if r == hr:
                in_row[r].append(hc)
            if c == hc:
                in_col[c].append(hr)
        for goals in in_row + in_col:
            dist += 2 * (len(goals) - _longest_increasing(goals))
        return dist


def _taxicab(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _longest_increasing(seq: Sequence[int]) -> int:
    tails: List[int] = []
    for x in seq:
        i = bisect_left(tails, x)
        if i == len(tails):
            tails.append(x)
        else:
            tails[i] = x
    return len(tails)

from __future__ import annotations

from statesearch.search.driver import Checker, Search, State, Strategy, Successors
from statesearch.search.frontier import FIFOFrontier


class BreadthFirst(Strategy):
    """FIFO frontier; a state is admitted once, the first time it is generated."""
    name = "BFS"

    def make_frontier(self, arena):
        return FIFOFrontier()


class BFS(Search):
    def __init__(self, initial: State, successors: Successors, is_goal: Checker):
        super().__init__(initial, successors, is_goal, BreadthFirst())

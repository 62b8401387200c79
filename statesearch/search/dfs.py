from __future__ import annotations

from statesearch.search.driver import Checker, Search, State, Strategy, Successors
from statesearch.search.frontier import LIFOFrontier


class DepthFirst(Strategy):
    """LIFO frontier, same admission rule as BFS."""
    name = "DFS"

    def make_frontier(self, arena):
        return LIFOFrontier()


class DFS(Search):
    """
    Graph DFS. With an always-false goal it explores exactly the component
    reachable from the initial state, which is how Graph.connected() and
    HexBoard.connected() use it.
    """

    def __init__(self, initial: State, successors: Successors, is_goal: Checker):
        super().__init__(initial, successors, is_goal, DepthFirst())

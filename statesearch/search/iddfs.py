from __future__ import annotations

from statesearch.search.driver import Checker, Search, State, Strategy, Successors
from statesearch.search.frontier import LIFOFrontier

DEFAULT_CUTOFF = 3


class IterativeDeepening(Strategy):
    """
    Depth-bounded DFS that restarts one level deeper whenever a pass hit the
    cutoff.

    Within a pass the tracker holds the shallowest depth each state was
    admitted at. A rediscovery is admitted only when strictly shallower, and
    the deeper copy is skipped when it pops. When the frontier runs dry the
    pass is over: if some node was cut off, restart() raises the cutoff by
    one; otherwise the whole reachable space fit under the cutoff and the
    search is exhausted.
    """
    name = "IDDFS"

    def __init__(self, initial_cutoff: int = DEFAULT_CUTOFF):
        if initial_cutoff < 0:
            raise ValueError(f"initial_cutoff must be >= 0, got {initial_cutoff}")
        self.initial_cutoff = initial_cutoff
        self.cutoff = initial_cutoff
        self.needs_deepening = False

    def begin(self) -> None:
        self.cutoff = self.initial_cutoff
        self.needs_deepening = False

    def make_frontier(self, arena):
        return LIFOFrontier()

    def admit(self, node, tracker) -> bool:
        if node.depth > self.cutoff:
            self.needs_deepening = True
            return False
        previous = tracker.best(node.state)
        if previous is not None and previous <= node.depth:
            return False
        tracker.record(node.state, node.depth)
        return True

    def is_stale(self, node, tracker) -> bool:
        return tracker.best(node.state) < node.depth

    def restart(self) -> bool:
        if not self.needs_deepening:
            return False
        self.needs_deepening = False
        self.cutoff += 1
        return True


class IDDFS(Search):
    def __init__(self, initial: State, successors: Successors, is_goal: Checker,
                 initial_cutoff: int = DEFAULT_CUTOFF):
        super().__init__(initial, successors, is_goal, IterativeDeepening(initial_cutoff))

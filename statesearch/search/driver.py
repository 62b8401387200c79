from __future__ import annotations
from dataclasses import dataclass, asdict
from time import perf_counter
from typing import Any, Callable, Dict, Hashable, List, Optional, Sequence, Set, Union
import logging

from statesearch.search.frontier import FIFOFrontier, LIFOFrontier, PriorityFrontier
from statesearch.search.node import Arena, Node
from statesearch.search.tracker import Tracker

logger = logging.getLogger(__name__)

State = Hashable
Successors = Callable[[State], Sequence[State]]
Checker = Callable[[State], bool]
Frontier = Union[FIFOFrontier, LIFOFrontier, PriorityFrontier]


def unit_cost(parent: State, state: State) -> float:
    return 1


def state_cost(parent: State, state: State) -> float:
    """Step cost carried by the arriving state itself (state.cost)."""
    return state.cost


def _require_callable(name: str, fn: Any) -> None:
    if not callable(fn):
        raise ValueError(f"{name} must be callable, got {type(fn).__name__}")


class Strategy:
    """
    Policy plugged into Search: frontier discipline, node payload and
    admission rule. Subclasses override what differs.
    """
    name = "search"

    def begin(self) -> None:
        """Reset per-call state at the start of perform()."""

    def make_frontier(self, arena: Arena) -> Frontier:
        return FIFOFrontier()

    def root(self, state: State) -> Node:
        return Node(state)

    def child(self, state: State, parent: Node, parent_ref: int) -> Node:
        return Node(state, parent_ref, depth=parent.depth + 1)

    def admit(self, node: Node, tracker: Tracker) -> bool:
        if node.state in tracker:
            return False
        tracker.record(node.state)
        return True

    def is_stale(self, node: Node, tracker: Tracker) -> bool:
        return tracker.is_expanded(node.state)

    def restart(self) -> bool:
        return False

    def path_cost(self, node: Node, path: List[State]) -> float:
        return len(path) - 1


@dataclass
class SearchStats:
    algorithm: str = ""
    expanded: int = 0
    generated: int = 0
    duplicates: int = 0
    peak_open: int = 0
    peak_closed: int = 0
    peak_nodes: int = 0
    passes: int = 0
    bound_final: Optional[int] = None
    g: Optional[float] = None
    time: float = 0.0
    termination: str = ""


class Search:
    """
    Generic search driver.

    perform() seeds the frontier with the initial state, pops nodes in the
    strategy's order, stops at the first node satisfying is_goal and
    otherwise expands it through successors. Returns the path
    [initial, ..., goal] or None once the space is exhausted.

    All nodes, the frontier and the tracker live only for the duration of
    perform(). visited() and stats describe the last call.
    """

    def __init__(self, initial: State, successors: Successors, is_goal: Checker, strategy: Strategy):
        _require_callable("successors", successors)
        _require_callable("is_goal", is_goal)
        self.initial = initial
        self.successors = successors
        self.is_goal = is_goal
        self.strategy = strategy
        self.stats = SearchStats(algorithm=strategy.name)
        self.path: Optional[List[State]] = None
        self._visited: Set[State] = set()

    def visited(self) -> Set[State]:
        """States expanded during the last perform() (its final pass for IDDFS)."""
        return set(self._visited)

    def perform(self) -> Optional[List[State]]:
        strategy = self.strategy
        strategy.begin()
        self.stats = SearchStats(algorithm=strategy.name)
        self.path = None

        arena = Arena()
        tracker = Tracker()
        frontier = strategy.make_frontier(arena)
        t0 = perf_counter()
        try:
            found = self._run(arena, tracker, frontier)
            if found is not None:
                self.path = arena.path_to(found)
                self.stats.g = strategy.path_cost(arena[found], self.path)
                self.stats.termination = "ok"
            else:
                self.stats.termination = "exhausted"
        finally:
            self._visited = tracker.visited()
            self.stats.bound_final = getattr(strategy, "cutoff", None)
            self.stats.time = perf_counter() - t0
            arena.clear()
            tracker.clear()
            frontier.clear()

        logger.debug(
            "%s finished: %s after %d expansions in %d pass(es)",
            strategy.name, self.stats.termination, self.stats.expanded, self.stats.passes,
        )
        return None if self.path is None else list(self.path)

    def report(self) -> Dict[str, Any]:
        """Flat dict of the last call's statistics plus the path."""
        out = asdict(self.stats)
        out["path"] = None if self.path is None else list(self.path)
        return out

    def _seed(self, arena: Arena, tracker: Tracker, frontier: Frontier) -> None:
        root = self.strategy.root(self.initial)
        self.strategy.admit(root, tracker)
        frontier.push(arena.add(root))
        self.stats.passes += 1

    def _run(self, arena: Arena, tracker: Tracker, frontier: Frontier) -> Optional[int]:
        strategy = self.strategy
        stats = self.stats
        closed = 0
        self._seed(arena, tracker, frontier)

        while True:
            if frontier.is_empty():
                if not strategy.restart():
                    return None
                logger.debug("%s: restarting pass %d (cutoff %s)",
                             strategy.name, stats.passes + 1, getattr(strategy, "cutoff", None))
                arena.clear()
                tracker.clear()
                frontier.clear()
                closed = 0
                self._seed(arena, tracker, frontier)
                continue

            ref = frontier.pop()
            node = arena[ref]
            if strategy.is_stale(node, tracker):
                stats.duplicates += 1
                continue

            # The goal node is returned unexpanded and never enters the visited set.
            if self.is_goal(node.state):
                return ref

            tracker.mark_expanded(node.state)
            stats.expanded += 1
            closed += 1

            for state in self.successors(node.state):
                stats.generated += 1
                candidate = strategy.child(state, node, ref)
                if strategy.admit(candidate, tracker):
                    frontier.push(arena.add(candidate))
                else:
                    stats.duplicates += 1

            stats.peak_open = max(stats.peak_open, len(frontier))
            stats.peak_closed = max(stats.peak_closed, closed)
            stats.peak_nodes = max(stats.peak_nodes, len(arena))

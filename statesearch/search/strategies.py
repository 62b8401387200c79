from __future__ import annotations
from typing import Any, Callable, Dict

from statesearch.search.a_star import AStar
from statesearch.search.bfs import BFS
from statesearch.search.dfs import DFS
from statesearch.search.driver import Checker, Search, State, Successors
from statesearch.search.iddfs import IDDFS
from statesearch.search.ucs import UCS

SEARCHES: Dict[str, Callable[..., Search]] = {
    "bfs": BFS,
    "dfs": DFS,
    "ucs": UCS,
    "astar": AStar,
    "iddfs": IDDFS,
}


def make_search(name: str, initial: State, successors: Successors, is_goal: Checker, **options: Any) -> Search:
    """
    Build a driver by strategy name. options are passed to the driver
    (heuristic/step_cost for astar, step_cost for ucs, initial_cutoff for iddfs).
    """
    key = name.lower()
    if key not in SEARCHES:
        raise ValueError(f"unknown search strategy {name!r}; choose from {sorted(SEARCHES)}")
    return SEARCHES[key](initial, successors, is_goal, **options)

from __future__ import annotations
from typing import Any, Dict, Hashable, Optional, Set

State = Hashable


class Tracker:
    """
    Per-state bookkeeping for one search pass.

    best: the best admission metric seen for a state (True for BFS/DFS,
          lowest total for A*, shallowest depth for IDDFS).
    expanded: states whose successors have been generated. This is the
          set callers see through Search.visited().
    """

    def __init__(self) -> None:
        self._best: Dict[State, Any] = {}
        self._expanded: Set[State] = set()

    def __contains__(self, state: State) -> bool:
        return state in self._best

    def best(self, state: State, default: Optional[Any] = None) -> Any:
        return self._best.get(state, default)

    def record(self, state: State, value: Any = True) -> None:
        self._best[state] = value

    def mark_expanded(self, state: State) -> None:
        self._expanded.add(state)

    def is_expanded(self, state: State) -> bool:
        return state in self._expanded

    def visited(self) -> Set[State]:
        return set(self._expanded)

    def clear(self) -> None:
        self._best.clear()
        self._expanded.clear()

    def __len__(self) -> int:
        return len(self._best)

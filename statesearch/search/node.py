from __future__ import annotations
from dataclasses import dataclass
from typing import Hashable, List, Optional

State = Hashable


@dataclass
class Node:
    """
    One entry of the search tree.

    parent is an index into the Arena of the same perform() call, never a
    reference to another Node. depth/cost/total are the strategy payload;
    strategies that do not need them leave the defaults.
    """
    state: State
    parent: Optional[int] = None
    depth: int = 0
    cost: float = 0
    total: float = 0


class Arena:
    """Owns every admitted node of one search pass."""

    def __init__(self) -> None:
        self._nodes: List[Node] = []

    def add(self, node: Node) -> int:
        self._nodes.append(node)
        return len(self._nodes) - 1

    def __getitem__(self, ref: int) -> Node:
        return self._nodes[ref]

    def __len__(self) -> int:
        return len(self._nodes)

    def clear(self) -> None:
        self._nodes.clear()

    def path_to(self, ref: int) -> List[State]:
        """States from the root to nodes[ref], inclusive."""
        path: List[State] = []
        cur: Optional[int] = ref
        while cur is not None:
            node = self._nodes[cur]
            path.append(node.state)
            cur = node.parent
        path.reverse()
        return path

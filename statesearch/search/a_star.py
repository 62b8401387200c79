from __future__ import annotations
from typing import Callable, List

from statesearch.search.driver import (
    Checker, Search, State, Strategy, Successors, _require_callable, unit_cost,
)
from statesearch.search.frontier import PriorityFrontier
from statesearch.search.node import Node

Heuristic = Callable[[State], float]
StepCost = Callable[[State, State], float]


class AStarPolicy(Strategy):
    """
    Priority frontier ordered by total = cost + heuristic(state).

    The tracker keeps the lowest total admitted for each state. A state
    that is reached again before it is expanded is re-opened only when the
    new total is strictly lower; the superseded copy is skipped when it
    pops. Expanded states are never re-admitted. Admissibility of
    the heuristic is the caller's business.
    """
    name = "A*"

    def __init__(self, heuristic: Heuristic, step_cost: StepCost = unit_cost):
        _require_callable("heuristic", heuristic)
        _require_callable("step_cost", step_cost)
        self.heuristic = heuristic
        self.step_cost = step_cost

    def make_frontier(self, arena):
        return PriorityFrontier(key=lambda ref: arena[ref].total)

    def root(self, state: State) -> Node:
        return Node(state, total=self.heuristic(state))

    def child(self, state: State, parent: Node, parent_ref: int) -> Node:
        cost = parent.cost + self.step_cost(parent.state, state)
        return Node(
            state, parent_ref,
            depth=parent.depth + 1,
            cost=cost,
            total=cost + self.heuristic(state),
        )

    def admit(self, node, tracker) -> bool:
        if tracker.is_expanded(node.state):
            return False
        previous = tracker.best(node.state)
        if previous is not None and previous <= node.total:
            return False
        tracker.record(node.state, node.total)
        return True

    def path_cost(self, node: Node, path: List[State]) -> float:
        return node.cost


class AStar(Search):
    def __init__(self, initial: State, successors: Successors, is_goal: Checker,
                 heuristic: Heuristic, step_cost: StepCost = unit_cost):
        super().__init__(initial, successors, is_goal, AStarPolicy(heuristic, step_cost))

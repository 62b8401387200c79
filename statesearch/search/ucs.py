from __future__ import annotations
from typing import Callable, List

from statesearch.search.driver import (
    Checker, Search, State, Strategy, Successors, _require_callable, unit_cost,
)
from statesearch.search.frontier import PriorityFrontier
from statesearch.search.node import Node

StepCost = Callable[[State, State], float]


class UniformCost(Strategy):
    """
    Priority frontier ordered by cumulative cost.

    Any arrival at a state that has not been expanded yet is admitted; the
    cheapest copy pops first and the rest are skipped as stale. Among equal
    costs the earliest admission wins. Step costs must be non-negative.
    """
    name = "UCS"

    def __init__(self, step_cost: StepCost = unit_cost):
        _require_callable("step_cost", step_cost)
        self.step_cost = step_cost

    def make_frontier(self, arena):
        return PriorityFrontier(key=lambda ref: arena[ref].cost)

    def child(self, state: State, parent: Node, parent_ref: int) -> Node:
        return Node(
            state, parent_ref,
            depth=parent.depth + 1,
            cost=parent.cost + self.step_cost(parent.state, state),
        )

    def admit(self, node, tracker) -> bool:
        return not tracker.is_expanded(node.state)

    def path_cost(self, node: Node, path: List[State]) -> float:
        return node.cost


class UCS(Search):
    def __init__(self, initial: State, successors: Successors, is_goal: Checker,
                 step_cost: StepCost = unit_cost):
        super().__init__(initial, successors, is_goal, UniformCost(step_cost))

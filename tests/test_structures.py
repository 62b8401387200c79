"""Arena, frontiers and tracker on their own."""

import pytest

from statesearch.search.frontier import FIFOFrontier, LIFOFrontier, PriorityFrontier
from statesearch.search.node import Arena, Node
from statesearch.search.tracker import Tracker


def test_arena_path_walks_parents_back_to_root():
    arena = Arena()
    root = arena.add(Node("a"))
    b = arena.add(Node("b", root, depth=1))
    arena.add(Node("x", root, depth=1))
    c = arena.add(Node("c", b, depth=2))
    assert len(arena) == 4
    assert arena[c].state == "c"
    assert arena.path_to(c) == ["a", "b", "c"]
    assert arena.path_to(root) == ["a"]


def test_arena_clear_drops_all_nodes():
    arena = Arena()
    arena.add(Node("a"))
    arena.clear()
    assert len(arena) == 0


def test_fifo_pops_front():
    f = FIFOFrontier()
    assert f.is_empty()
    for ref in (3, 1, 2):
        f.push(ref)
    assert len(f) == 3
    assert [f.pop(), f.pop(), f.pop()] == [3, 1, 2]
    assert f.is_empty()


def test_lifo_pops_back():
    f = LIFOFrontier()
    for ref in (3, 1, 2):
        f.push(ref)
    assert [f.pop(), f.pop(), f.pop()] == [2, 1, 3]


def test_priority_pops_min_key_then_insertion_order():
    keys = {0: 5.0, 1: 1.0, 2: 3.0, 3: 1.0, 4: 3.0}
    f = PriorityFrontier(key=keys.__getitem__)
    for ref in range(5):
        f.push(ref)
    assert [f.pop() for _ in range(5)] == [1, 3, 2, 4, 0]


@pytest.mark.parametrize("frontier", [FIFOFrontier(), LIFOFrontier(), PriorityFrontier(key=float)])
def test_pop_on_empty_frontier_raises(frontier):
    frontier.push(1)
    frontier.clear()
    assert frontier.is_empty()
    with pytest.raises(IndexError):
        frontier.pop()


def test_tracker_keeps_admission_and_expansion_separately():
    t = Tracker()
    t.record("a")
    t.record("b", 4)
    assert "a" in t and "b" in t and "c" not in t
    assert t.best("b") == 4
    assert t.best("c") is None
    assert t.best("c", 9) == 9

    t.mark_expanded("a")
    assert t.is_expanded("a")
    assert not t.is_expanded("b")
    assert t.visited() == {"a"}

    # visited() is a copy
    t.visited().add("z")
    assert t.visited() == {"a"}

    t.clear()
    assert len(t) == 0
    assert t.visited() == set()

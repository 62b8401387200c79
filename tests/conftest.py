import pytest

from statesearch.domains.graph import Graph


@pytest.fixture
def diamond():
    """A-B, B-C, A-D, D-C; neighbors(A) == [B, D]."""
    return Graph.from_edges([("A", "B"), ("B", "C"), ("A", "D"), ("D", "C")])


@pytest.fixture
def weighted():
    """Cheapest S->G is S,A,B,C,G at cost 7; fewest edges is S,B,G at cost 11."""
    return Graph.from_edges([
        ("S", "A", 1), ("S", "B", 4), ("A", "B", 2), ("A", "C", 5),
        ("B", "C", 1), ("C", "G", 3), ("B", "G", 7),
    ])


@pytest.fixture
def weighted_h():
    """Exact remaining cost to G in `weighted` (admissible and consistent)."""
    exact = {"S": 7, "A": 6, "B": 4, "C": 3, "G": 0}
    return lambda v: exact[v]


@pytest.fixture
def split():
    """Two components {A, B} and {C, D}."""
    return Graph.from_edges([("A", "B"), ("C", "D")])


@pytest.fixture
def chain():
    """0-1-2-3-4-5 with dead-end branches hanging off 1 and 3."""
    return Graph.from_edges([
        (0, 1), (1, 2), (2, 3), (3, 4), (4, 5),
        (1, "x1"), ("x1", "x2"), (3, "y1"), ("y1", "y2"), ("y2", "y3"),
    ])

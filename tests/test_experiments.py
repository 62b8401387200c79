import csv
import random

import pytest

from statesearch.domains.hexboard import HexBoard
from statesearch.domains.puzzle import SlidingPuzzle
from statesearch.experiments import plot, runner, summarize


def read_rows(path):
    with open(path, newline="") as f:
        return list(csv.DictReader(f))


@pytest.fixture
def puzzle_csv(tmp_path):
    out = tmp_path / "puzzle.csv"
    runner.main(["--domain", "puzzle", "--rows", "2", "--cols", "3",
                 "--depths", "2", "4", "--per_depth", "2", "--out", str(out)])
    return out


@pytest.fixture
def hex_csv(tmp_path):
    out = tmp_path / "hex.csv"
    runner.main(["--domain", "hex", "--radius", "3", "--holes", "0",
                 "--depths", "2", "3", "--per_depth", "2", "--out", str(out)])
    return out


def test_runner_writes_one_row_per_instance_and_algorithm(puzzle_csv):
    rows = read_rows(puzzle_csv)
    assert list(rows[0]) == runner.HEADER
    assert len(rows) == 4 * 5
    assert {r["algorithm"] for r in rows} == {"BFS", "DFS", "UCS", "A*", "IDDFS"}
    assert all(r["termination"] == "ok" for r in rows)

    by_seed = {}
    for r in rows:
        by_seed.setdefault(r["seed"], {})[r["algorithm"]] = r
    for runs in by_seed.values():
        assert float(runs["A*"]["g"]) == float(runs["BFS"]["g"]) == float(runs["UCS"]["g"])
        assert runs["IDDFS"]["bound_final"] != ""
        assert runs["BFS"]["bound_final"] == ""


def test_runner_hex_boards_without_holes_solve_at_hex_distance(hex_csv):
    rows = read_rows(hex_csv)
    assert len(rows) == 4 * 5
    for r in rows:
        assert r["solvable"] == "1"
        assert r["heuristic"] == "hex_distance"
        if r["algorithm"] in ("BFS", "UCS", "A*"):
            assert float(r["g"]) == int(r["depth"])


def test_runner_algorithm_subset(tmp_path):
    out = tmp_path / "subset.csv"
    runner.main(["--rows", "2", "--cols", "3", "--depths", "3", "--per_depth", "1",
                 "--algo", "bfs", "astar", "--out", str(out)])
    assert [r["algorithm"] for r in read_rows(out)] == ["BFS", "A*"]


def test_unsolvable_puzzles_are_exhausted(tmp_path):
    out = tmp_path / "unsolvable.csv"
    runner.main(["--rows", "2", "--cols", "3", "--depths", "3", "--per_depth", "1",
                 "--algo", "bfs", "astar", "--include_unsolvable", "--out", str(out)])
    rows = read_rows(out)
    assert [(r["solvable"], r["termination"]) for r in rows] == [
        ("1", "ok"), ("1", "ok"), ("0", "exhausted"), ("0", "exhausted"),
    ]
    # half of the 6! arrangements are reachable
    assert int(rows[2]["expanded"]) == 360


def test_puzzle_instances_are_solvable_and_seeded():
    dom = SlidingPuzzle(3)
    a = runner.puzzle_instances(dom, "manhattan", [4, 8], 3)
    b = runner.puzzle_instances(dom, "manhattan", [4, 8], 3)
    assert [i.start for i in a] == [i.start for i in b]
    assert [i.depth for i in a] == [4, 4, 4, 8, 8, 8]
    assert all(dom.is_solvable(i.start) for i in a)


def test_hex_instances_reject_depths_off_the_board():
    with pytest.raises(ValueError):
        runner.hex_instances(radius=2, holes=0, depths=[5], per_depth=1)


def test_summary_markdown(puzzle_csv, hex_csv, tmp_path):
    out = tmp_path / "summary.md"
    summarize.main([str(puzzle_csv), str(hex_csv), "--out", str(out)])
    text = out.read_text(encoding="utf-8")
    assert text.startswith("# Experiment Summary")
    assert "## puzzle" in text and "## hex" in text
    assert "| A* |" in text
    assert "## Solved rate" in text


def test_summarize_groups_solved_runs(puzzle_csv):
    df = summarize.load([puzzle_csv])
    table = summarize.summarize(df)
    assert set(table["algorithm"]) == {"BFS", "DFS", "UCS", "A*", "IDDFS"}
    assert (table["n"] == 2).all()
    assert {"expanded_mean", "expanded_std", "time_sec_mean", "g_mean"} <= set(table.columns)
    rates = summarize.solved_rate(df)
    assert (rates["solved"] == 1.0).all()


def test_load_requires_files():
    with pytest.raises(ValueError):
        summarize.load([])


def test_plot_writes_png(puzzle_csv, hex_csv, tmp_path):
    out = tmp_path / "expanded.png"
    plot.main([str(puzzle_csv), str(hex_csv), "--metric", "expanded", "--log", "--out", str(out)])
    assert out.exists() and out.stat().st_size > 0


def test_instance_seed_reproduces_the_puzzle_start():
    dom = SlidingPuzzle(3)
    insts = runner.puzzle_instances(dom, "manhattan", [6], 3, start_seed=10)
    assert [i.seed for i in insts] == [10, 11, 12]
    for inst in insts:
        assert dom.scramble(inst.depth, inst.seed) == inst.start


def test_instance_seed_reproduces_the_hex_start():
    cells = sorted(HexBoard.hexagon(3).cells)
    for inst in runner.hex_instances(radius=3, holes=4, depths=[2], per_depth=3, start_seed=5):
        assert random.Random(inst.seed).choice(cells) == inst.start

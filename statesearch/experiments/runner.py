from __future__ import annotations
import argparse, csv, logging, random
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Hashable, List, Optional, Sequence

from statesearch.domains.hexboard import Hex, HexBoard
from statesearch.domains.puzzle import SlidingPuzzle
from statesearch.search.strategies import make_search

logger = logging.getLogger(__name__)

ALGOS = ["bfs", "dfs", "ucs", "astar", "iddfs"]

HEADER = [
    "algorithm", "domain", "heuristic", "depth", "seed",
    "expanded", "generated", "duplicates", "g", "time_sec",
    "peak_open", "peak_closed", "peak_nodes", "passes", "bound_final",
    "termination", "solvable",
]


@dataclass
class Instance:
    """One start/goal pair. depth is the scramble length (puzzle) or hex distance (board)."""
    seed: int
    depth: int
    start: Hashable
    is_goal: Callable[[Hashable], bool]
    successors: Callable[[Hashable], Sequence[Hashable]]
    heuristic: Callable[[Hashable], float]
    solvable: int = 1


def puzzle_instances(dom: SlidingPuzzle, heuristic: str, depths: List[int], per_depth: int,
                     start_seed: int = 0, include_unsolvable: bool = False) -> List[Instance]:
    hfun = dom.manhattan if heuristic == "manhattan" else dom.linear_conflict
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            used = seed
            s = dom.scramble(d, used)
            seed += 1
            attempts += 1
            if dom.is_solvable(s):
                out.append(Instance(used, d, s, dom.is_goal, dom.neighbors, hfun))
                if include_unsolvable:
                    out.append(Instance(used, d, dom.unsolvable_variant(s), dom.is_goal,
                                        dom.neighbors, hfun, solvable=0))
                made += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out


def hex_instances(radius: int, holes: int, depths: List[int], per_depth: int,
                  start_seed: int = 0) -> List[Instance]:
    """
    Random boards: a hexagon of `radius` with `holes` cells removed, and a
    start/goal pair `d` cells apart. Boards left disconnected are kept and
    show up as exhausted searches.
    """
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        if d > 2 * radius:
            raise ValueError(f"depth {d} does not fit on a board of radius {radius}")
        made = 0
        attempts = 0
        while made < per_depth:
            used = seed
            rng = random.Random(used)
            seed += 1
            attempts += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}.")
            board = HexBoard.hexagon(radius)
            cells = sorted(board.cells)
            start = rng.choice(cells)
            goals = [c for c in cells if c.distance(start) == d]
            if not goals:
                continue
            goal = rng.choice(goals)
            for cell in rng.sample(cells, min(holes, len(cells))):
                if cell not in (start, goal):
                    board.remove(cell)
            out.append(Instance(used, d, start, _equals(goal), board.neighbors,
                                HexBoard.distance_to(goal), solvable=int(_reachable(board, start, goal))))
            made += 1
    return out


def _equals(goal: Hex) -> Callable[[Hex], bool]:
    return lambda cell: cell == goal


def _reachable(board: HexBoard, start: Hex, goal: Hex) -> bool:
    s = make_search("bfs", start, board.neighbors, _equals(goal))
    return s.perform() is not None


def run_one(algo: str, inst: Instance, cutoff: int) -> Dict[str, Any]:
    options: Dict[str, Any] = {}
    if algo == "astar":
        options["heuristic"] = inst.heuristic
    if algo == "iddfs":
        options["initial_cutoff"] = cutoff
    s = make_search(algo, inst.start, inst.successors, inst.is_goal, **options)
    s.perform()
    return s.report()


def write_row(w, res: Dict[str, Any], domain: str, heur: str, inst: Instance) -> None:
    w.writerow([
        res.get("algorithm", ""), domain, heur, inst.depth, inst.seed,
        res.get("expanded", ""), res.get("generated", ""), res.get("duplicates", ""),
        "" if res.get("g") is None else res["g"],
        f"{res.get('time', 0.0):.6f}",
        res.get("peak_open", ""), res.get("peak_closed", ""), res.get("peak_nodes", ""),
        res.get("passes", ""), "" if res.get("bound_final") is None else res["bound_final"],
        res.get("termination", ""), inst.solvable,
    ])


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="BFS/DFS/UCS/A*/IDDFS experiment runner (sliding puzzle or hex board)")
    ap.add_argument("--algo", choices=ALGOS + ["all"], nargs="+", default=["all"])
    ap.add_argument("--domain", choices=["puzzle", "hex"], default="puzzle")
    ap.add_argument("--rows", type=int, default=3, help="Puzzle rows")
    ap.add_argument("--cols", type=int, default=None, help="Puzzle cols (defaults to rows)")
    ap.add_argument("--radius", type=int, default=6, help="Hex board radius")
    ap.add_argument("--holes", type=int, default=20, help="Cells removed from each hex board")
    ap.add_argument("--heuristic", choices=["manhattan", "linear_conflict"], default="manhattan",
                    help="Puzzle heuristic for A* (hex boards always use hex distance)")
    ap.add_argument("--depths", type=int, nargs="+", default=[4, 6, 8, 10])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--cutoff", type=int, default=3, help="Initial IDDFS cutoff")
    ap.add_argument("--include_unsolvable", action="store_true", help="Also run parity-flipped puzzles")
    ap.add_argument("--seed", type=int, default=0, help="First instance seed")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("--log-level", default="WARNING")
    return ap


def main(argv: Optional[List[str]] = None) -> Path:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    algos = ALGOS if "all" in args.algo else [a for a in ALGOS if a in args.algo]

    if args.domain == "puzzle":
        dom = SlidingPuzzle(args.rows, args.cols)
        insts = puzzle_instances(dom, args.heuristic, args.depths, args.per_depth,
                                 args.seed, args.include_unsolvable)
        heur = args.heuristic
    else:
        insts = hex_instances(args.radius, args.holes, args.depths, args.per_depth, args.seed)
        heur = "hex_distance"
    logger.info("generated %d %s instances", len(insts), args.domain)

    args.out.parent.mkdir(parents=True, exist_ok=True)
    with args.out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            for algo in algos:
                res = run_one(algo, inst, args.cutoff)
                write_row(w, res, args.domain, heur, inst)

    print(f"Wrote {args.out} ({len(insts)} instances x {len(algos)} algorithms)")
    return args.out


if __name__ == "__main__":
    main()

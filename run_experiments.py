#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("8-puzzle, all strategies", "python -m statesearch.experiments.runner --domain puzzle --depths 4 6 8 10 --per_depth 10 --out results/puzzle.csv")
    run("Hex boards, all strategies", "python -m statesearch.experiments.runner --domain hex --radius 6 --holes 20 --depths 3 6 9 --per_depth 10 --out results/hex.csv")
    run("Summary", "python -m statesearch.experiments.summarize results/puzzle.csv results/hex.csv --out results/summary.md")
    run("Expanded plot", "python -m statesearch.experiments.plot results/puzzle.csv results/hex.csv --metric expanded --log --out results/expanded.png")

if __name__ == "__main__":
    main()

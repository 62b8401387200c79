#!/usr/bin/env python3
from __future__ import annotations
import argparse, logging, os
from pathlib import Path
from typing import List, Optional

import matplotlib
# Default to a non-interactive backend; only show() with --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from statesearch.experiments.summarize import load, summarize


def plot_metric(ax, table: pd.DataFrame, metric: str, log: bool = False) -> None:
    algos = sorted(table["algorithm"].unique())
    # spread algorithms around each depth so error bars don't overlap
    offsets = np.linspace(-0.2, 0.2, num=len(algos)) if len(algos) > 1 else np.zeros(1)
    for algo, off in zip(algos, offsets):
        sub = table[table["algorithm"] == algo].sort_values("depth")
        xs = sub["depth"].to_numpy(dtype=float) + off
        ax.errorbar(xs, sub[f"{metric}_mean"], yerr=sub[f"{metric}_std"],
                    marker="o", capsize=3, label=algo)
    ax.set_xlabel("depth")
    ax.set_ylabel(metric)
    if log:
        ax.set_yscale("log")
    ax.grid(True, alpha=0.3)
    ax.legend()


def main(argv: Optional[List[str]] = None) -> Path:
    ap = argparse.ArgumentParser(description="Plot a runner metric against depth per algorithm")
    ap.add_argument("files", type=Path, nargs="+")
    ap.add_argument("--metric", choices=["expanded", "generated", "time_sec", "g"], default="expanded")
    ap.add_argument("--log", action="store_true", help="Log-scale y axis")
    ap.add_argument("--out", type=Path, default=Path("results/expanded.png"))
    ap.add_argument("--show", action="store_true")
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    table = summarize(load(args.files))
    domains = sorted(table["domain"].unique())
    fig, axes = plt.subplots(1, len(domains), figsize=(6 * len(domains), 4), squeeze=False)
    for ax, domain in zip(axes[0], domains):
        plot_metric(ax, table[table["domain"] == domain], args.metric, log=args.log)
        ax.set_title(f"{domain}: {args.metric}")
    fig.tight_layout()
    args.out.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(args.out, dpi=150)
    if args.show:
        plt.show()
    plt.close(fig)
    print(f"Saved {args.out}")
    return args.out


if __name__ == "__main__":
    main()

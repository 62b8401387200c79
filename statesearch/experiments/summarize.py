#!/usr/bin/env python3
from __future__ import annotations
import argparse, logging
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

METRICS = ("expanded", "generated", "time_sec", "g")


def load(files: Sequence[Path]) -> pd.DataFrame:
    """Concatenate runner CSVs, tagging each row with its file name."""
    frames = []
    for p in files:
        df = pd.read_csv(p)
        df["file"] = Path(p).name
        frames.append(df)
    if not frames:
        raise ValueError("no input files")
    df = pd.concat(frames, ignore_index=True)
    for m in METRICS:
        df[m] = pd.to_numeric(df[m], errors="coerce")
    return df.dropna(subset=["algorithm", "depth"])


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean/std/count of each metric per (domain, algorithm, depth), over solved runs."""
    ok = df[df["termination"] == "ok"]
    grouped = ok.groupby(["domain", "algorithm", "depth"])
    out = grouped[list(METRICS)].agg(["mean", "std"])
    out.columns = [f"{m}_{stat}" for m, stat in out.columns]
    out["n"] = grouped.size()
    return out.fillna(0.0).reset_index()


def solved_rate(df: pd.DataFrame) -> pd.DataFrame:
    rate = df.assign(solved=np.where(df["termination"] == "ok", 1.0, 0.0))
    return rate.groupby(["domain", "algorithm"])["solved"].mean().reset_index()


def write_summary_md(path: Path, df: pd.DataFrame) -> None:
    table = summarize(df)
    rates = solved_rate(df)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# Experiment Summary\n\n")
        f.write("This file was auto-generated from CSVs.\n\n")
        for domain, sub in table.groupby("domain"):
            f.write(f"## {domain}\n\n")
            f.write("| depth | algo | expanded mean | generated mean | g mean | time mean±std (s) | n |\n")
            f.write("|---:|:---|---:|---:|---:|---:|---:|\n")
            for row in sub.sort_values(["depth", "algorithm"]).itertuples(index=False):
                f.write(
                    f"| {row.depth} | {row.algorithm} | {row.expanded_mean:.1f} | {row.generated_mean:.1f} "
                    f"| {row.g_mean:.2f} | {row.time_sec_mean:.6f}±{row.time_sec_std:.6f} | {row.n} |\n"
                )
            f.write("\n")
        f.write("## Solved rate\n\n| domain | algo | solved |\n|:---|:---|---:|\n")
        for row in rates.itertuples(index=False):
            f.write(f"| {row.domain} | {row.algorithm} | {row.solved:.2%} |\n")


def main(argv: Optional[List[str]] = None) -> Path:
    ap = argparse.ArgumentParser(description="Summarize runner CSVs into a markdown table")
    ap.add_argument("files", type=Path, nargs="+")
    ap.add_argument("--out", type=Path, default=Path("results/summary.md"))
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    df = load(args.files)
    logger.info("loaded %d rows from %d file(s)", len(df), len(args.files))
    write_summary_md(args.out, df)
    print(f"Wrote {args.out}")
    return args.out


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
import argparse
from pathlib import Path
from typing import Iterable, Union

import numpy as np
import pandas as pd

METRICS = ["expanded", "generated", "duplicates", "time_sec", "peak_open", "peak_closed"]

def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1)/np.sqrt(n)

def load(paths: Iterable[Union[str, Path]]) -> pd.DataFrame:
    frames = [pd.read_csv(p) for p in paths]
    df = pd.concat(frames, ignore_index=True) if frames else pd.DataFrame(columns=["algorithm","depth"])
    if "solvable" not in df.columns:
        df["solvable"] = 1
    if "termination" not in df.columns:
        df["termination"] = "ok"
    for m in METRICS:
        if m in df.columns:
            df[m] = pd.to_numeric(df[m], errors="coerce")
    return df

def summarize(df: pd.DataFrame, metric: str = "expanded", only_ok: bool = True) -> pd.DataFrame:
    """mean/median/std/sem/min/max of one metric per (algorithm, solvable, depth)."""
    d = df[df["termination"] == "ok"] if only_ok else df
    g = (d.groupby(["algorithm", "solvable", "depth"])[metric]
          .agg(mean="mean", median="median", std="std", sem=sem, min="min", max="max", n="size")
          .reset_index())
    g["std"] = g["std"].fillna(0.0)
    return g

def termination_rates(df: pd.DataFrame) -> pd.DataFrame:
    """Share of each termination value per (algorithm, solvable)."""
    t = (df.groupby(["algorithm", "solvable"])["termination"]
           .value_counts(normalize=True)
           .rename("share")
           .reset_index())
    return t

def main():
    ap = argparse.ArgumentParser(description="Summarize runner CSVs per algorithm and depth.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--metric", choices=METRICS, default="expanded")
    ap.add_argument("--all", action="store_true", help="Include aborted/exhausted rows in the summary")
    ap.add_argument("--out", type=Path, default=None, help="Also write the summary table as CSV")
    args = ap.parse_args()

    df = load(args.csv)
    if df.empty:
        print("No rows to analyze. Are your CSVs empty?")
        return

    table = summarize(df, args.metric, only_ok=not args.all)
    print(f"=== {args.metric} by algorithm/depth ===")
    print(table.to_string(index=False, float_format=lambda v: f"{v:.3f}"))
    print("\n=== termination ===")
    print(termination_rates(df).to_string(index=False, float_format=lambda v: f"{v:.3f}"))

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"Saved: {args.out}")

if __name__ == "__main__":
    main()

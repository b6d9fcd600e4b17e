#!/usr/bin/env python3
import sys, csv, os, argparse
from pathlib import Path
from collections import defaultdict
import statistics

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

def _to_int(x):
    try: return int(x)
    except (TypeError, ValueError): return None

def _to_float(x):
    try: return float(x)
    except (TypeError, ValueError): return None

def read_rows_one(path):
    rows = []
    with open(path, newline="") as f:
        r = csv.DictReader(f)
        for row in r:
            algo = row.get("algorithm") or ""
            depth = _to_int(row.get("depth"))
            if not algo or depth is None:
                continue
            if (row.get("termination") or "ok") != "ok":
                continue
            rows.append({
                "algo": algo,
                "solvable": _to_int(row.get("solvable")) if row.get("solvable") else 1,
                "depth": depth,
                "expanded": _to_int(row.get("expanded")),
                "generated": _to_int(row.get("generated")),
                "duplicates": _to_int(row.get("duplicates")),
                "time_sec": _to_float(row.get("time_sec")),
            })
    return rows

def read_rows(paths):
    out = []
    for p in paths:
        out.extend(read_rows_one(p))
    return out

def agg_mean(rows, metric):
    buckets = defaultdict(list)  # algo -> [(depth,val)]
    for r in rows:
        v = r.get(metric)
        if v is None:
            continue
        buckets[r["algo"]].append((r["depth"], v))
    series = {}
    for key, pairs in buckets.items():
        by_depth = defaultdict(list)
        for d, v in pairs:
            by_depth[d].append(v)
        xs = sorted(by_depth.keys())
        ys = [statistics.mean(by_depth[d]) for d in xs]
        es = [statistics.pstdev(by_depth[d]) if len(by_depth[d]) > 1 else 0.0 for d in xs]
        series[key] = (xs, ys, es)
    return series

def plot_metric(ax, rows, metric):
    series = agg_mean(rows, metric)
    for algo, (xs, ys, es) in sorted(series.items()):
        ax.errorbar(xs, ys, yerr=es, marker="o", capsize=3, label=algo)
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs depth (mean ± std)")
    ax.grid(True)
    if series:
        ax.legend()

def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def plot_files(csv_paths, outdir: Path, show: bool = False):
    """Write a combined 3-panel figure plus one figure per metric; returns the saved paths."""
    rows = [r for r in read_rows(csv_paths) if r["solvable"] == 1]
    if not rows:
        return []
    base = "combo" if len(csv_paths) > 1 else Path(csv_paths[0]).stem
    saved = []

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, metric in zip(axes, ["expanded","generated","time_sec"]):
        plot_metric(ax, rows, metric)
    fig.tight_layout()
    saved.append(save_fig(fig, outdir, f"{base}_combined"))
    if not show:
        plt.close(fig)

    for metric in ["expanded","generated","duplicates","time_sec"]:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, rows, metric)
        fig.tight_layout()
        saved.append(save_fig(fig, outdir, f"{base}_{metric}"))
        plt.close(fig)

    if show:
        plt.show()
    return saved

def main():
    ap = argparse.ArgumentParser(description="Plot results CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args()

    if not plot_files(args.csv, Path(args.save), show=args.show):
        print("No rows to plot. Are your CSVs empty?")
        sys.exit(0)

if __name__ == "__main__":
    main()

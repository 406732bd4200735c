"""Visualization utilities for enumeration benchmarks.

Overview
--------
Generates PNG charts from the ``ExperimentResults`` mapping produced by
``nqueens.analysis.experiments``. Every function writes into ``out_dir`` and
returns the path of the saved figure.

Chart map
---------
- 01_solutions_vs_N.png: number of solutions per N (log scale), with the
    known sequence overlaid as reference markers.
- 02_time_vs_N_log_scale.png: mean wall-clock time per mode vs N (log).
    Error bars show the population std over repeated runs.
- 03_nodes_vs_N.png: explored nodes (eligibility tests) vs N (log) with an
    exponential fit ``nodes ~ c * g^N``; the growth factor g is in the legend.
- 04_partition_profile_N{N}.png: solutions per starting column for the
    largest N. The profile is symmetric because mirroring a solution
    left-to-right maps column c to N-1-c.
- 05_speedup_vs_N.png: sequential mean time / parallel mean time (compare
    mode only).
"""
from __future__ import annotations

import os
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from .reporting import _build_suffix
from .stats import ExperimentResults

_MARKERS = {"sequential": "o", "parallel": "s"}


def _mean_time(results: ExperimentResults, mode: str, N: int) -> float:
    mean = results[mode][N].get("all_time", {}).get("mean")
    return max(float(mean or 0.0), 1e-6)


def _save(fig, out_dir: str, name: str, description: str) -> str:
    fname = os.path.join(out_dir, f"{name}{_build_suffix()}.png")
    fig.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close(fig)
    print(f"Saved {description}: {fname}")
    return fname


def plot_solutions_vs_N(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    source = results.get("parallel") or results.get("sequential") or {}
    counts = [source[N]["count"] if N in source else 0 for N in N_values]
    known = [source[N].get("known_count") if N in source else None for N in N_values]

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.semilogy(N_values, [max(c, 0.5) for c in counts], marker="o", linewidth=2, label="Enumerated")
    known_points = [(n, k) for n, k in zip(N_values, known) if k]
    if known_points:
        xs, ys = zip(*known_points)
        ax.scatter(xs, ys, marker="x", s=80, color="black", label="Known count", zorder=3)
    for n, c in zip(N_values, counts):
        ax.annotate(str(c), (n, max(c, 0.5)), textcoords="offset points", xytext=(0, 6), ha="center", fontsize=9)
    ax.set_xlabel("N (board size)")
    ax.set_ylabel("Solutions (log scale)")
    ax.set_title("Number of N-Queens solutions vs board size")
    ax.set_xticks(N_values)
    ax.legend()
    return _save(fig, out_dir, "01_solutions_vs_N", "solutions chart")


def plot_time_vs_N(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    fig, ax = plt.subplots(figsize=(10, 6))
    for mode, per_n in results.items():
        xs = [N for N in N_values if N in per_n]
        means = [_mean_time(results, mode, N) for N in xs]
        stds = [float(per_n[N].get("all_time", {}).get("std") or 0.0) for N in xs]
        ax.errorbar(xs, means, yerr=stds, marker=_MARKERS.get(mode, "^"), linewidth=2, capsize=3, label=mode.capitalize())
    ax.set_yscale("log")
    ax.set_xlabel("N (board size)")
    ax.set_ylabel("Mean time [s] (log scale)")
    ax.set_title("Enumeration time vs board size")
    ax.set_xticks(N_values)
    ax.legend()
    return _save(fig, out_dir, "02_time_vs_N_log_scale", "execution-time chart")


def fit_exponential(N_values: List[int], nodes: List[int]) -> Optional[np.ndarray]:
    """Fit ``log(nodes) = a*N + b`` over positive samples; return ``[a, b]`` or None if under-determined."""
    points = [(n, v) for n, v in zip(N_values, nodes) if v > 0]
    if len(points) < 2:
        return None
    xs = np.array([p[0] for p in points], dtype=float)
    ys = np.log(np.array([p[1] for p in points], dtype=float))
    return np.polyfit(xs, ys, 1)


def fit_growth_factor(N_values: List[int], nodes: List[int]) -> Optional[float]:
    """Return the per-N growth factor ``exp(a)`` of the exponential fit, or None."""
    coeffs = fit_exponential(N_values, nodes)
    if coeffs is None:
        return None
    return float(np.exp(coeffs[0]))


def plot_nodes_vs_N(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    source = results.get("parallel") or results.get("sequential") or {}
    xs = [N for N in N_values if N in source]
    nodes = [source[N]["nodes"] for N in xs]

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.semilogy(xs, [max(v, 1) for v in nodes], marker="o", linewidth=2, label="Explored nodes")
    coeffs = fit_exponential(xs, nodes)
    if coeffs is not None:
        growth = float(np.exp(coeffs[0]))
        trend_x = np.linspace(min(xs), max(xs), 100)
        ax.semilogy(trend_x, np.exp(np.poly1d(coeffs)(trend_x)), linestyle="--", label=f"Fit: growth x{growth:.2f} per N")
    ax.set_xlabel("N (board size)")
    ax.set_ylabel("Eligibility tests (log scale)")
    ax.set_title("Logical search cost vs board size")
    ax.set_xticks(xs)
    ax.legend()
    return _save(fig, out_dir, "03_nodes_vs_N", "logical-cost chart")


def plot_partition_profile(results: ExperimentResults, N: int, out_dir: str) -> str:
    source = results.get("parallel") or results.get("sequential") or {}
    counts = source[N].get("partition_counts", [])

    fig, ax = plt.subplots(figsize=(10, 6))
    sns.barplot(x=list(range(len(counts))), y=counts, color="steelblue", ax=ax)
    ax.set_xlabel("Starting column of the row-0 queen")
    ax.set_ylabel("Solutions in partition")
    ax.set_title(f"Solutions per partition (N={N})")
    return _save(fig, out_dir, f"04_partition_profile_N{N}", "partition profile")


def plot_speedup(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    xs = [N for N in N_values if N in results["sequential"] and N in results["parallel"]]
    speedup = [_mean_time(results, "sequential", N) / _mean_time(results, "parallel", N) for N in xs]

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(xs, speedup, marker="o", linewidth=2, label="Sequential / parallel")
    ax.axhline(1.0, color="grey", linestyle=":", linewidth=1)
    ax.set_xlabel("N (board size)")
    ax.set_ylabel("Speedup")
    ax.set_title("Process-pool speedup vs board size\n(below 1: pool start-up dominates)")
    ax.set_xticks(xs)
    ax.legend()
    return _save(fig, out_dir, "05_speedup_vs_N", "speedup chart")


def plot_and_save(results: ExperimentResults, N_values: List[int], out_dir: str) -> List[str]:
    """Generate every chart that the available results support."""
    os.makedirs(out_dir, exist_ok=True)
    sns.set_theme(style="whitegrid")
    saved = [
        plot_solutions_vs_N(results, N_values, out_dir),
        plot_time_vs_N(results, N_values, out_dir),
        plot_nodes_vs_N(results, N_values, out_dir),
    ]
    source = results.get("parallel") or results.get("sequential") or {}
    profiled = [N for N in N_values if N in source and source[N].get("partition_counts")]
    if profiled:
        saved.append(plot_partition_profile(results, max(profiled), out_dir))
    if "sequential" in results and "parallel" in results:
        saved.append(plot_speedup(results, N_values, out_dir))
    return saved

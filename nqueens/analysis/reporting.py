"""CSV export utilities for enumeration benchmarks (aggregates, raw runs, partitions).

These helpers materialize concise per-N summaries, the full per-run raw data
and the per-partition solution profile for spreadsheet inspection or further
analysis. Filenames carry the optional run tag/date suffix configured in
``nqueens.analysis.settings``.
"""
from __future__ import annotations

import csv
import os
from typing import List

from . import settings
from .stats import ExperimentResults


def _build_suffix() -> str:
    """Return ``_<RUN_TAG>_<RUN_ID>`` according to settings, or an empty string."""
    parts: List[str] = []
    if settings.RUN_TAG:
        parts.append(str(settings.RUN_TAG))
    if settings.DATE_IN_FILENAMES and settings.RUN_ID:
        parts.append(str(settings.RUN_ID))
    return ("_" + "_".join(parts)) if parts else ""


def _fmt(value) -> str:
    return "" if value is None else str(value)


def save_results_to_csv(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Write one aggregate row per (mode, N) and return the file path.

    Columns: n, mode, solutions, known_solutions, nodes_explored, runs,
    timeouts, timeout_rate and time_* summary statistics in seconds.
    """
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"results_enumeration{_build_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([
            "n",
            "mode",
            "solutions",
            "known_solutions",
            "nodes_explored",
            "runs",
            "timeouts",
            "timeout_rate",
            "time_mean_seconds",
            "time_median_seconds",
            "time_std_seconds",
            "time_min_seconds",
            "time_max_seconds",
        ])
        for mode, per_n in results.items():
            for N in N_values:
                entry = per_n.get(N)
                if entry is None:
                    continue
                time_stats = entry.get("all_time", {})
                writer.writerow([
                    N,
                    mode,
                    entry.get("count", 0),
                    _fmt(entry.get("known_count")),
                    entry.get("nodes", 0),
                    entry.get("total_runs", 0),
                    entry.get("timeouts", 0),
                    entry.get("timeout_rate", 0.0),
                    _fmt(time_stats.get("mean")),
                    _fmt(time_stats.get("median")),
                    _fmt(time_stats.get("std")),
                    _fmt(time_stats.get("min")),
                    _fmt(time_stats.get("max")),
                ])

    print(f"Saved aggregate results: {filename}")
    return filename


def save_raw_data_to_csv(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Write every individual run (mode, N, run index, count, nodes, time, timeout)."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"raw_runs_enumeration{_build_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["n", "mode", "run", "solutions", "nodes_explored", "time_seconds", "timeout"])
        for mode, per_n in results.items():
            for N in N_values:
                entry = per_n.get(N)
                if entry is None:
                    continue
                for run_index, run in enumerate(entry.get("raw_runs", []), start=1):
                    writer.writerow([N, mode, run_index, run["count"], run["nodes"], run["time"], run["timeout"]])

    print(f"Saved raw run data: {filename}")
    return filename


def save_partition_profile(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Write the number of solutions found under each starting column.

    The profile is taken from the parallel results when present (they never
    time out), else from the sequential ones.
    """
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"partition_profile{_build_suffix()}.csv")
    source = results.get("parallel") or results.get("sequential") or {}

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["n", "start_column", "solutions", "share"])
        for N in N_values:
            entry = source.get(N)
            if entry is None:
                continue
            counts = entry.get("partition_counts", [])
            total = sum(counts)
            for column, count in enumerate(counts):
                writer.writerow([N, column, count, count / total if total else 0.0])

    print(f"Saved partition profile: {filename}")
    return filename

"""Typed result shapes and statistics helpers for the analysis pipeline.

Defines ``TypedDict`` structures for benchmark outputs and provides the
summary statistics used to aggregate repeated runs.
"""
from __future__ import annotations

from time import perf_counter
from typing import Dict, List, Optional, TypedDict

import numpy as np


class StatsSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]
    q25: Optional[float]
    q75: Optional[float]
    range: Optional[float]


class RunRecord(TypedDict):
    count: int
    nodes: int
    time: float
    timeout: bool
    partition_counts: List[int]


class BenchmarkEntry(TypedDict, total=False):
    mode: str
    count: int
    known_count: Optional[int]
    nodes: int
    total_runs: int
    timeouts: int
    timeout_rate: float
    partition_counts: List[int]
    all_time: StatsSummary
    raw_runs: List[RunRecord]


# mode ('sequential' | 'parallel') -> N -> aggregated entry
ExperimentResults = Dict[str, Dict[int, BenchmarkEntry]]


class ProgressPrinter:
    """Stdout progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Number of steps expected; values <= 0 are treated as 1.
    label : str
        Prefix printed in front of every progress line.
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label
        self.started = perf_counter()

    def update(self, index: int, detail: str = "") -> None:
        """Print ``[label] index/total (pct%) [elapsed] - detail``."""
        percent = (index / self.total) * 100
        elapsed = perf_counter() - self.started
        suffix = f" - {detail}" if detail else ""
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%) [{elapsed:.1f}s]" + suffix)


def compute_detailed_statistics(values: List[float]) -> StatsSummary:
    """Summarize a numeric sequence.

    Returns count, mean, median, population std, min, max, 25th/75th
    percentiles (linear interpolation) and range. On empty input every
    numeric field is ``None`` and ``count`` is 0, which keeps CSV rows
    rectangular.
    """
    if not values:
        return {
            "count": 0,
            "mean": None,
            "median": None,
            "std": None,
            "min": None,
            "max": None,
            "q25": None,
            "q75": None,
            "range": None,
        }

    data = np.asarray(values, dtype=float)
    q25, median, q75 = np.percentile(data, [25, 50, 75])
    return {
        "count": int(data.size),
        "mean": float(data.mean()),
        "median": float(median),
        "std": float(data.std()),
        "min": float(data.min()),
        "max": float(data.max()),
        "q25": float(q25),
        "q75": float(q75),
        "range": float(data.max() - data.min()),
    }


def aggregate_runs(mode: str, runs: List[RunRecord], known_count: Optional[int]) -> BenchmarkEntry:
    """Fold repeated runs for one (mode, N) pair into a ``BenchmarkEntry``.

    Count, nodes and partition profile come from the first completed run
    (enumeration is deterministic); timing is summarized over all runs.
    """
    completed = [run for run in runs if not run["timeout"]]
    reference = completed[0] if completed else (runs[0] if runs else None)
    timeouts = len(runs) - len(completed)
    return {
        "mode": mode,
        "count": reference["count"] if reference else 0,
        "known_count": known_count,
        "nodes": reference["nodes"] if reference else 0,
        "total_runs": len(runs),
        "timeouts": timeouts,
        "timeout_rate": timeouts / len(runs) if runs else 0.0,
        "partition_counts": list(reference["partition_counts"]) if reference else [],
        "all_time": compute_detailed_statistics([run["time"] for run in runs]),
        "raw_runs": list(runs),
    }

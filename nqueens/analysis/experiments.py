"""Enumeration benchmark runners (sequential, parallel, or both).

For each board size these routines run the full enumeration a fixed number
of times, either by draining the engines one after the other in the calling
process or by handing one partition per starting column to a process pool.

Outputs are structured dictionaries suitable for CSV export and plotting.
Validation hooks optionally check every emitted solution, the final counts
against the known sequence, and agreement between the two modes.
"""
from __future__ import annotations

from time import perf_counter
from typing import Dict, List, Optional

from .settings import PIPELINE_MODES
from .stats import (
    ExperimentResults,
    ProgressPrinter,
    RunRecord,
    aggregate_runs,
)
from nqueens.partition import SearchPartitioner
from nqueens.utils import KNOWN_SOLUTION_COUNTS, is_valid_solution


# Single runs ----------------------------------------------------------------

def run_sequential_enumeration(N: int, time_limit: Optional[float] = None, validate: bool = False) -> RunRecord:
    """Pull every solution for ``N`` in the calling process.

    The time limit is checked after each emitted solution and after each
    partition; when it is exceeded the runner stops pulling and returns the
    partial counts with ``timeout=True``.
    """
    start = perf_counter()
    partition_counts: List[int] = []
    nodes = 0
    timeout = False

    def over_limit() -> bool:
        return time_limit is not None and (perf_counter() - start) > time_limit

    for solver in SearchPartitioner(N).solvers():
        if over_limit():
            timeout = True
            break
        count = 0
        for solution in solver:
            if validate and not is_valid_solution(solution.positions):
                raise AssertionError(f"Invalid solution produced for N={N}: {solution.positions}")
            count += 1
            if over_limit():
                timeout = True
                break
        nodes += solver.nodes
        partition_counts.append(count)
        if timeout:
            break

    return {
        "count": sum(partition_counts),
        "nodes": nodes,
        "time": perf_counter() - start,
        "timeout": timeout,
        "partition_counts": partition_counts,
    }


def run_parallel_count(N: int, processes: Optional[int] = None) -> RunRecord:
    """Count solutions for ``N`` with one pool task per starting column."""
    start = perf_counter()
    results = SearchPartitioner(N).partition_results(processes)
    return {
        "count": sum(result.count for result in results),
        "nodes": sum(result.nodes for result in results),
        "time": perf_counter() - start,
        "timeout": False,
        "partition_counts": [result.count for result in results],
    }


# Batch runner ---------------------------------------------------------------

def _check_known_count(N: int, run: RunRecord, mode: str) -> None:
    expected = KNOWN_SOLUTION_COUNTS.get(N)
    if expected is not None and not run["timeout"] and run["count"] != expected:
        raise AssertionError(f"{mode} enumeration for N={N} found {run['count']} solutions, expected {expected}")


def run_enumeration_experiments(
    N_values: List[int],
    runs: int,
    mode: str = "compare",
    time_limit: Optional[float] = None,
    processes: Optional[int] = None,
    validate: bool = False,
    progress_label: Optional[str] = None,
) -> ExperimentResults:
    """Benchmark the enumeration over ``N_values``.

    Parameters
    ----------
    N_values : list[int]
        Board sizes, processed in the given order.
    runs : int
        Repetitions per N and mode (>= 1).
    mode : str
        ``"sequential"``, ``"parallel"`` or ``"compare"`` (both, and the two
        counts and partition profiles must agree).
    time_limit : float | None
        Per-run limit for sequential enumeration.
    processes : int | None
        Worker processes for parallel runs.
    validate : bool
        Check every solution and compare counts against the known sequence.
    progress_label : str | None
        When given, print one progress line per N.

    Returns
    -------
    ExperimentResults
        ``{mode: {N: BenchmarkEntry}}`` for each mode that ran.
    """
    if mode not in PIPELINE_MODES:
        raise ValueError(f"Unknown mode '{mode}'. Allowed: {', '.join(PIPELINE_MODES)}")
    if runs < 1:
        raise ValueError(f"runs must be at least 1, got {runs}")

    run_sequential = mode in ("sequential", "compare")
    run_parallel = mode in ("parallel", "compare")
    results: ExperimentResults = {}
    if run_sequential:
        results["sequential"] = {}
    if run_parallel:
        results["parallel"] = {}
    progress = ProgressPrinter(len(N_values), progress_label) if progress_label else None

    for index, N in enumerate(N_values, start=1):
        if progress:
            progress.update(index, f"N={N}")
        print(f"=== N = {N}, mode {mode} ===")
        per_mode: Dict[str, List[RunRecord]] = {}

        if run_sequential:
            seq_runs = [run_sequential_enumeration(N, time_limit=time_limit, validate=validate) for _ in range(runs)]
            if validate:
                for run in seq_runs:
                    _check_known_count(N, run, "sequential")
            per_mode["sequential"] = seq_runs

        if run_parallel:
            par_runs = [run_parallel_count(N, processes) for _ in range(runs)]
            if validate:
                for run in par_runs:
                    _check_known_count(N, run, "parallel")
            per_mode["parallel"] = par_runs

        for label, mode_runs in per_mode.items():
            entry = aggregate_runs(label, mode_runs, KNOWN_SOLUTION_COUNTS.get(N))
            results[label][N] = entry
            status = " (timeout)" if entry["timeouts"] else ""
            print(f"  {label}: {entry['count']} solutions, {entry['nodes']} nodes, mean {entry['all_time']['mean']:.4f}s{status}")

        if mode == "compare":
            seq_entry = results["sequential"][N]
            par_entry = results["parallel"][N]
            if not seq_entry["timeouts"] and seq_entry["partition_counts"] != par_entry["partition_counts"]:
                raise AssertionError(
                    f"Sequential and parallel enumeration disagree for N={N}: "
                    f"{seq_entry['partition_counts']} vs {par_entry['partition_counts']}"
                )

    return results

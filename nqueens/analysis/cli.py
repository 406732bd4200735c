"""Command-line interface and high-level pipeline for enumeration benchmarks.

This module wires together configuration loading, execution of the benchmark
suite (sequential, parallel, or both compared) and the CSV/chart outputs. It
isolates I/O, argument parsing, and progress reporting from the core search
modules so that the rest of the codebase remains easy to test
programmatically.
"""
from __future__ import annotations

import argparse
import tempfile
from pathlib import Path
from time import perf_counter
from typing import List, Optional, Tuple

from . import settings
from .experiments import run_enumeration_experiments
from .plots import plot_and_save
from .reporting import (
    save_partition_profile,
    save_raw_data_to_csv,
    save_results_to_csv,
)
from config_manager import ConfigManager
from nqueens.backtracking import BoardSearch, first_solution
from nqueens.partition import SearchPartitioner
from nqueens.utils import KNOWN_SOLUTION_COUNTS, is_valid_solution


# ------------- Utils --------------------------------------------------------

def parse_n_filters(n_args: Optional[List[str]]) -> Optional[List[int]]:
    """Normalize ``-n`` CLI inputs into a sorted list of board sizes.

    Accepts repeated flags (``-n 8 -n 10``) and comma-separated lists
    (``-n 8,10``). Returns ``None`` when no filter is provided so callers fall
    back to the configured sizes.
    """
    if not n_args:
        return None
    selected: List[int] = []
    for entry in n_args:
        for token in entry.split(","):
            token = token.strip()
            if not token:
                continue
            try:
                value = int(token)
            except ValueError as exc:
                raise ValueError(f"Invalid board size '{token}'") from exc
            if value < 0:
                raise ValueError(f"Board size must be non-negative, got {value}")
            selected.append(value)
    return sorted(set(selected)) or None


def apply_configuration(config_path: str, n_filter: Optional[List[int]] = None) -> Tuple[ConfigManager, List[int]]:
    """Load configuration into the global ``settings`` module.

    Returns the ``ConfigManager`` used and the list of board sizes selected
    after applying ``n_filter``; sizes in the filter must be configured.
    """
    config_mgr = ConfigManager(config_path)

    experiment_settings = config_mgr.get_experiment_settings()
    if experiment_settings:
        settings.N_VALUES = sorted(int(n) for n in experiment_settings.get("N_values", settings.N_VALUES))
        settings.RUNS = int(experiment_settings.get("runs", settings.RUNS))
        settings.OUT_DIR = experiment_settings.get("output_dir", settings.OUT_DIR)
        processes = experiment_settings.get("processes")
        if processes is not None:
            settings.NUM_PROCESSES = int(processes)

    if any(n < 0 for n in settings.N_VALUES):
        raise ValueError(f"N_values must be non-negative: {settings.N_VALUES}")
    if settings.RUNS < 1:
        raise ValueError(f"runs must be at least 1, got {settings.RUNS}")
    if settings.NUM_PROCESSES < 1:
        raise ValueError(f"processes must be at least 1, got {settings.NUM_PROCESSES}")

    timeout_settings = config_mgr.get_timeout_settings()
    if timeout_settings:
        settings.set_time_limit(timeout_settings.get("time_limit", settings.TIME_LIMIT))

    if n_filter:
        unknown = set(n_filter).difference(settings.N_VALUES)
        if unknown:
            raise ValueError("Board sizes not in configuration: " + ", ".join(str(n) for n in sorted(unknown)))
        selected = [n for n in settings.N_VALUES if n in n_filter]
    else:
        selected = list(settings.N_VALUES)

    if not selected:
        raise ValueError("No board sizes selected after applying filters.")

    return config_mgr, selected


# ------------- Pipeline ----------------------------------------------------

def main_pipeline(N_values: List[int], mode: str, validate: bool = False, plots: bool = True) -> None:
    """Run the benchmarks, then export CSV files and charts to ``settings.OUT_DIR``."""
    settings.CURRENT_PIPELINE_MODE = mode
    start_total = perf_counter()

    print("=" * 70)
    print(f"ENUMERATION BENCHMARK ({mode.upper()})")
    print("=" * 70)
    print(f"N values: {N_values} | runs: {settings.RUNS} | processes: {settings.NUM_PROCESSES}")

    results = run_enumeration_experiments(
        N_values,
        runs=settings.RUNS,
        mode=mode,
        time_limit=settings.TIME_LIMIT,
        processes=settings.NUM_PROCESSES,
        validate=validate,
        progress_label="Benchmarks",
    )

    print("\n" + "=" * 70)
    print("REPORTS AND CHARTS")
    print("=" * 70)
    save_results_to_csv(results, N_values, settings.OUT_DIR)
    save_raw_data_to_csv(results, N_values, settings.OUT_DIR)
    save_partition_profile(results, N_values, settings.OUT_DIR)
    if plots:
        plot_and_save(results, N_values, settings.OUT_DIR)

    total_time = perf_counter() - start_total
    print("\nPipeline completed!")
    print(f"Total time: {total_time:.1f}s ({total_time/60:.1f} minutes)")


# ------------- Quick regression -------------------------------------------

def run_quick_regression_tests() -> None:
    """Execute a fast, deterministic smoke test of the search and the pipeline.

    Verifies that:
    - Counts for N = 0..8 match the known sequence, sequentially and on a
      process pool.
    - Every N=8 solution is valid and the first one is found from column 0.
    - An exhausted engine stays exhausted.
    - The benchmark pipeline produces a non-empty CSV in a temporary folder.
    """
    print("Running quick regression tests (N <= 8)...")

    for n in range(9):
        expected = KNOWN_SOLUTION_COUNTS[n]
        partitioner = SearchPartitioner(n)
        sequential = partitioner.count()
        parallel = partitioner.count_parallel(processes=2)
        if sequential != expected or parallel != expected:
            raise AssertionError(
                f"Wrong count for N={n}: sequential={sequential}, parallel={parallel}, expected {expected}."
            )
    print("  Counts N=0..8 match (sequential and parallel)")

    invalid = [s.positions for s in SearchPartitioner(8) if not is_valid_solution(s.positions)]
    if invalid:
        raise AssertionError(f"Invalid solutions for N=8: {invalid[:3]}")
    first = first_solution(8)
    if first is None or first.positions[0] != 0:
        raise AssertionError(f"Unexpected first solution for N=8: {first}")
    print(f"  First solution for N=8: {list(first.positions)}")

    solver = BoardSearch(4, 1)
    list(solver)
    if next(solver, None) is not None:
        raise AssertionError("Exhausted engine produced another solution.")
    print("  Exhausted engines stay exhausted")

    results = run_enumeration_experiments([6, 8], runs=1, mode="compare", processes=2, validate=True)
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(save_results_to_csv(results, [6, 8], tmpdir))
        if not csv_path.exists() or csv_path.stat().st_size == 0:
            raise AssertionError("Results CSV was not generated successfully during quick tests.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser():
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(description="Benchmark lazy and partitioned N-Queens enumeration.")
    parser.add_argument(
        "--mode",
        choices=settings.PIPELINE_MODES,
        default="compare",
        help="Execution mode: sequential engines, process-pool partitions, or both compared (default).",
    )
    parser.add_argument(
        "-n",
        action="append",
        help="Filter board sizes (comma-separated values or multiple flags). Default: all configured.",
    )
    parser.add_argument("--config", default="config.json", help="Path to configuration file (default: config.json).")
    parser.add_argument("--tag", help="Run tag appended to output filenames.")
    parser.add_argument("--no-plots", action="store_true", help="Skip chart generation.")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests and exit.")
    parser.add_argument("--validate", action="store_true", help="Validate solutions and counts (extra assertions).")
    return parser


def main() -> None:
    """CLI entry point: parse arguments and run the benchmark pipeline."""
    parser = build_arg_parser()
    args = parser.parse_args()

    if args.quick_test:
        run_quick_regression_tests()
        return

    try:
        n_filter = parse_n_filters(args.n)
        _, selected_n = apply_configuration(args.config, n_filter)
    except FileNotFoundError as exc:
        print(f"Configuration file not found: {exc}")
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        raise SystemExit(1) from exc

    if args.tag:
        settings.RUN_TAG = args.tag

    try:
        main_pipeline(selected_n, args.mode, validate=args.validate, plots=not args.no_plots)
    except KeyboardInterrupt:
        print("\nExecution interrupted by user. Cleaning up workers...")
        raise SystemExit(130) from None
    except AssertionError as exc:
        print(f"Validation failed: {exc}")
        raise SystemExit(1) from exc

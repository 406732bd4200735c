"""
Analysis and orchestration package for N-Queens enumeration benchmarks.

This package contains:
- settings: global knobs and the sequential time limit
- stats: typed summaries and aggregation helpers
- experiments: sequential / process-pool benchmark runners
- reporting: CSV exports and raw-data writers
- plots: chart generation
- cli: top-level pipeline entry point and argument parser
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    StatsSummary,
    RunRecord,
    BenchmarkEntry,
    ExperimentResults,
    aggregate_runs,
    compute_detailed_statistics,
    ProgressPrinter,
)

__all__ = [
    # types
    "StatsSummary",
    "RunRecord",
    "BenchmarkEntry",
    "ExperimentResults",
    # utils
    "aggregate_runs",
    "compute_detailed_statistics",
    "ProgressPrinter",
    # settings module
    "settings",
]

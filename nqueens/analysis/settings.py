"""Global settings for the N-Queens enumeration analysis pipeline.

This module centralizes tunable constants used across the orchestration code.
Values can be overridden at runtime via the configuration loader in
`nqueens.analysis.cli.apply_configuration`.
"""
from __future__ import annotations

import multiprocessing
from typing import List, Optional
from datetime import datetime

# Board sizes to enumerate (in ascending order) for scalability analysis
N_VALUES: List[int] = [4, 5, 6, 7, 8, 9, 10, 11, 12]

# Repetitions per N; enumeration is deterministic, repeats only smooth timing noise
RUNS: int = 3

# Wall-clock limit in seconds for one sequential enumeration (None = no limit).
# Parallel runs always complete: a partition cannot be abandoned mid-flight.
TIME_LIMIT: Optional[float] = 120.0

# Output directory for CSV and charts
OUT_DIR: str = "results_nqueens_enumeration"

# Number of worker processes to use (leave one core for the OS)
NUM_PROCESSES: int = max(1, multiprocessing.cpu_count() - 1)

# Output naming policy --------------------------------------------------------

# When True, results and plots include a datestamp suffix (e.g., _20251113-142530)
# shared by every artifact produced within the same run.
DATE_IN_FILENAMES: bool = True

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")

# Optional run label appended to filenames to avoid overwriting outputs
RUN_TAG: Optional[str] = None

# Current pipeline mode: 'sequential' | 'parallel' | 'compare'
CURRENT_PIPELINE_MODE: str = 'compare'

PIPELINE_MODES: List[str] = ['sequential', 'parallel', 'compare']


def set_time_limit(time_limit: Optional[float] = 120.0) -> None:
    """Configure the per-enumeration time limit for sequential runs.

    Parameters
    - time_limit: limit in seconds (None disables the limit). When reached,
      the sequential runner stops pulling solutions and marks the run as a
      timeout.

    Side effects
    - Updates the module-level global and prints the active limit.
    """
    global TIME_LIMIT
    if time_limit is not None and time_limit <= 0:
        raise ValueError(f"Time limit must be positive, got {time_limit}")
    TIME_LIMIT = time_limit
    print(f"Sequential enumeration limit: {TIME_LIMIT}s" if TIME_LIMIT else "Sequential enumeration limit: unlimited")

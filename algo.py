"""Script launcher for the N-Queens enumeration benchmarks.

Run ``python algo.py --help`` for options; ``python algo.py --quick-test``
runs the fast regression checks.
"""
from nqueens.analysis.cli import main, run_quick_regression_tests

__all__ = ["main", "run_quick_regression_tests"]


if __name__ == "__main__":
    main()

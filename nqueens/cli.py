"""Command-line solver: print every N-Queens solution for a board size.

Usage::

    nqueens 8              # print all 92 boards and a summary line
    nqueens 8 --first      # stop after the first board
    nqueens 12 --count -j 4  # count only, partitions spread over 4 processes
    nqueens 8 -j 4         # boards gathered from 4 processes, printed in column order

Argument errors are reported by argparse on stderr with exit status 2.
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Tuple

from config_manager import ConfigManager
from .partition import SearchPartitioner, count_solutions, iter_solutions


def parse_board_size(text: str) -> int:
    """argparse ``type`` callable accepting a non-negative integer N."""
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"cannot parse N value '{text}': {exc}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError(f"cannot parse N value '{text}': N must be non-negative")
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the solver entry point."""
    parser = argparse.ArgumentParser(prog="nqueens", description="Enumerate all N-Queens solutions.")
    parser.add_argument("n", metavar="N", type=parse_board_size, help="Board size (number of queens).")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--count", action="store_true", help="Only print the number of solutions.")
    output.add_argument("--first", action="store_true", help="Print the first solution found and stop.")
    parser.add_argument(
        "--jobs",
        "-j",
        type=int,
        default=1,
        help="Worker processes, one task per starting column; boards still print in column order. Default: 1.",
    )
    parser.add_argument("--queen", help="Glyph marking a queen (default: Q).")
    parser.add_argument("--empty", help="Glyph marking an empty cell (default: _).")
    parser.add_argument("--config", help="JSON config whose render_settings provide default glyphs.")
    return parser


def resolve_glyphs(args: argparse.Namespace) -> Tuple[str, str]:
    """Pick rendering glyphs: explicit flags, then config file, then ``Q``/``_``."""
    render = {"queen": "Q", "empty": "_"}
    if args.config:
        render = ConfigManager(args.config).get_render_settings()
    queen = args.queen if args.queen is not None else render["queen"]
    empty = args.empty if args.empty is not None else render["empty"]
    return queen, empty


def print_summary(n: int, solution_count: int) -> None:
    if solution_count == 0:
        print(f"No solution for n={n}")
    else:
        print(f"Found {solution_count} solutions for n={n}")


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point: parse arguments, enumerate, print boards and totals."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if args.jobs < 1:
        parser.error("--jobs must be at least 1")
    if args.first and args.jobs > 1:
        parser.error("--first stops after one board and cannot be combined with --jobs > 1")

    try:
        queen, empty = resolve_glyphs(args)
    except (FileNotFoundError, ValueError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    parallel = args.jobs > 1
    if args.count:
        print_summary(args.n, count_solutions(args.n, processes=args.jobs, parallel=parallel))
        return 0

    if parallel:
        solutions = iter(SearchPartitioner(args.n).solutions_parallel(processes=args.jobs))
    else:
        solutions = iter_solutions(args.n)

    solution_count = 0
    for solution in solutions:
        solution_count += 1
        print(f"Got solution {solution_count} for n={solution.n}")
        solution.print_solution(queen=queen, empty=empty)
        if args.first:
            break

    print_summary(args.n, solution_count)
    return 0

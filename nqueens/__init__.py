"""Lazy N-Queens enumeration with a partitioned backtracking search."""

from .backtracking import BoardSearch, BoardSolution, first_solution, is_position_eligible
from .partition import PartitionResult, SearchPartitioner, count_solutions, iter_solutions
from .utils import KNOWN_SOLUTION_COUNTS, conflicts, is_valid_solution, render_board

__all__ = [
    "BoardSearch",
    "BoardSolution",
    "first_solution",
    "is_position_eligible",
    "PartitionResult",
    "SearchPartitioner",
    "count_solutions",
    "iter_solutions",
    "KNOWN_SOLUTION_COUNTS",
    "conflicts",
    "is_valid_solution",
    "render_board",
]

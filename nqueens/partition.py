"""Partitioned enumeration of the N-Queens search space.

Row 0 carries no constraints, so each of its N columns roots an independent
subtree. ``SearchPartitioner`` creates one ``BoardSearch`` per starting
column and either chains them into a single lazy enumeration or hands them
to a process pool, one task per column, gathering the per-partition results
once all tasks finish.

Workers are module-level functions taking ``(size, start_column)`` tuples so
they can be pickled by ``ProcessPoolExecutor``. Each worker builds its own
engine; nothing is shared between partitions.
"""

from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from itertools import chain
from typing import Iterator, List, NamedTuple, Optional, Tuple

from .backtracking import BoardSearch, BoardSolution


class PartitionResult(NamedTuple):
    start_column: int
    count: int
    nodes: int


# Reusable workers -----------------------------------------------------------

def count_partition(params: Tuple[int, int]) -> PartitionResult:
    """Worker wrapper: drain one partition and report its count and nodes."""
    size, start_column = params
    solver = BoardSearch(size, start_column)
    count = sum(1 for _ in solver)
    return PartitionResult(start_column, count, solver.nodes)


def solve_partition(params: Tuple[int, int]) -> List[Tuple[int, ...]]:
    """Worker wrapper: collect the placements of one partition."""
    size, start_column = params
    return [solution.positions for solution in BoardSearch(size, start_column)]


class SearchPartitioner:
    """Split the search for board size N by the column of the row-0 queen.

    Parameters
    ----------
    size : int
        Board dimension N (N >= 0). N = 0 has no starting columns and
        enumerates nothing.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"Board size must be non-negative, got {size}")
        self.size = size

    def _tasks(self) -> List[Tuple[int, int]]:
        return [(self.size, column) for column in range(self.size)]

    def solvers(self) -> List[BoardSearch]:
        """Return fresh, independent engines, one per starting column."""
        return [BoardSearch(self.size, column) for column in range(self.size)]

    def __iter__(self) -> Iterator[BoardSolution]:
        # Engines are created lazily too: column k is only built once k-1 is drained.
        return chain.from_iterable(
            BoardSearch(self.size, column) for column in range(self.size)
        )

    def count(self) -> int:
        """Count all solutions sequentially in the calling process."""
        return sum(count_partition(task).count for task in self._tasks())

    def partition_results(self, processes: Optional[int] = None) -> List[PartitionResult]:
        """Count every partition on a process pool.

        Parameters
        ----------
        processes : int | None
            Maximum number of worker processes (None lets the executor pick).

        Returns
        -------
        list[PartitionResult]
            One entry per starting column, in column order.
        """
        tasks = self._tasks()
        if not tasks:
            return []
        with ProcessPoolExecutor(max_workers=processes) as executor:
            return list(executor.map(count_partition, tasks))

    def count_parallel(self, processes: Optional[int] = None) -> int:
        return sum(result.count for result in self.partition_results(processes))

    def solutions_parallel(self, processes: Optional[int] = None) -> List[BoardSolution]:
        """Collect all solutions on a process pool, concatenated in column order."""
        tasks = self._tasks()
        if not tasks:
            return []
        with ProcessPoolExecutor(max_workers=processes) as executor:
            per_partition = list(executor.map(solve_partition, tasks))
        return [BoardSolution(positions) for batch in per_partition for positions in batch]


def iter_solutions(size: int) -> Iterator[BoardSolution]:
    """Lazily enumerate every solution for board size ``size``."""
    return iter(SearchPartitioner(size))


def count_solutions(size: int, processes: Optional[int] = None, parallel: bool = False) -> int:
    """Count solutions, optionally fanning partitions out to worker processes."""
    partitioner = SearchPartitioner(size)
    if parallel:
        return partitioner.count_parallel(processes)
    return partitioner.count()

"""Tests for the partitioned enumeration (sequential chaining and process pool)."""

import os
from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqueens.partition import (
    SearchPartitioner,
    count_partition,
    count_solutions,
    iter_solutions,
    solve_partition,
)
from nqueens.utils import KNOWN_SOLUTION_COUNTS, is_valid_solution


class SequentialPartitionTests(unittest.TestCase):
    def test_counts_match_known_sequence(self):
        for n in range(11):
            with self.subTest(n=n):
                self.assertEqual(SearchPartitioner(n).count(), KNOWN_SOLUTION_COUNTS[n])

    def test_one_solver_per_starting_column(self):
        solvers = SearchPartitioner(5).solvers()
        self.assertEqual([s.start_column for s in solvers], [0, 1, 2, 3, 4])
        self.assertEqual(len({id(s) for s in solvers}), 5)

    def test_solvers_are_independent(self):
        first, second = SearchPartitioner(6).solvers()[:2]
        list(first)
        self.assertTrue(first.exhausted)
        self.assertFalse(second.exhausted)
        self.assertEqual(second.cursor, (1,))

    def test_enumeration_drains_partitions_in_column_order(self):
        partitioner = SearchPartitioner(6)
        chained = [s.positions for s in partitioner]
        per_engine = [s.positions for solver in partitioner.solvers() for s in solver]
        self.assertEqual(chained, per_engine)
        self.assertEqual([p[0] for p in chained], sorted(p[0] for p in chained))

    def test_four_queens(self):
        self.assertEqual([s.positions for s in iter_solutions(4)], [(1, 3, 0, 2), (2, 0, 3, 1)])

    def test_eight_queens_are_valid(self):
        solutions = list(iter_solutions(8))
        self.assertEqual(len(solutions), 92)
        self.assertEqual(len({s.positions for s in solutions}), 92)
        self.assertTrue(all(is_valid_solution(s.positions) for s in solutions))

    def test_degenerate_sizes(self):
        self.assertEqual(list(iter_solutions(0)), [])
        self.assertEqual(SearchPartitioner(0).solvers(), [])
        self.assertEqual([s.positions for s in iter_solutions(1)], [(0,)])
        self.assertEqual(list(iter_solutions(2)), [])
        self.assertEqual(list(iter_solutions(3)), [])

    def test_negative_size_is_rejected(self):
        with self.assertRaises(ValueError):
            SearchPartitioner(-1)

    def test_consumer_may_stop_early(self):
        enumeration = iter_solutions(10)
        head = [next(enumeration) for _ in range(3)]
        self.assertEqual(len(head), 3)
        self.assertTrue(all(s.positions[0] == 0 for s in head))

    def test_workers(self):
        result = count_partition((8, 0))
        self.assertEqual((result.start_column, result.count), (0, 4))
        self.assertGreater(result.nodes, 0)
        self.assertEqual(solve_partition((4, 2)), [(2, 0, 3, 1)])


class ParallelPartitionTests(unittest.TestCase):
    def test_parallel_counts_match_sequential(self):
        for n in range(9):
            with self.subTest(n=n):
                partitioner = SearchPartitioner(n)
                self.assertEqual(partitioner.count_parallel(processes=2), partitioner.count())

    def test_partition_profile_for_eight_queens(self):
        results = SearchPartitioner(8).partition_results(processes=2)
        self.assertEqual([r.start_column for r in results], list(range(8)))
        self.assertEqual([r.count for r in results], [4, 8, 16, 18, 18, 16, 8, 4])
        self.assertTrue(all(r.nodes > 0 for r in results))

    def test_parallel_solutions_match_sequential_order(self):
        for n in (5, 6, 8):
            with self.subTest(n=n):
                partitioner = SearchPartitioner(n)
                self.assertEqual(partitioner.solutions_parallel(processes=2), list(partitioner))

    def test_empty_board_skips_the_pool(self):
        partitioner = SearchPartitioner(0)
        self.assertEqual(partitioner.partition_results(), [])
        self.assertEqual(partitioner.solutions_parallel(), [])
        self.assertEqual(count_solutions(0, parallel=True), 0)

    def test_count_solutions_helper(self):
        self.assertEqual(count_solutions(7), 40)
        self.assertEqual(count_solutions(7, processes=2, parallel=True), 40)

    def test_larger_boards(self):
        for n in (9, 10, 11, 12):
            with self.subTest(n=n):
                self.assertEqual(count_solutions(n, parallel=True), KNOWN_SOLUTION_COUNTS[n])

    @unittest.skipUnless(os.environ.get("NQUEENS_SLOW_TESTS"), "set NQUEENS_SLOW_TESTS=1 to run")
    def test_slow_boards(self):
        for n in (13, 14):
            with self.subTest(n=n):
                self.assertEqual(count_solutions(n, parallel=True), KNOWN_SOLUTION_COUNTS[n])


if __name__ == "__main__":
    unittest.main()

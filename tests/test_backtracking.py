"""Tests for the resumable backtracking engine."""

from dataclasses import FrozenInstanceError
from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqueens.backtracking import BoardSearch, BoardSolution, first_solution, is_position_eligible
from nqueens.utils import is_valid_solution


class EligibilityTests(unittest.TestCase):
    def test_first_row_is_always_eligible(self):
        for column in range(5):
            self.assertTrue(is_position_eligible(column, [column]))

    def test_same_column_is_rejected(self):
        self.assertFalse(is_position_eligible(2, [2, 0, 2]))

    def test_both_diagonals_are_rejected(self):
        self.assertFalse(is_position_eligible(1, [0, 1]))
        self.assertFalse(is_position_eligible(0, [1, 0]))
        self.assertFalse(is_position_eligible(3, [1, 0, 3]))  # two rows below column 1

    def test_safe_square_is_accepted(self):
        self.assertTrue(is_position_eligible(2, [1, 3, 0, 2]))


class BoardSearchTests(unittest.TestCase):
    def test_single_queen_board(self):
        self.assertEqual(list(BoardSearch(1, 0)), [BoardSolution((0,))])

    def test_four_queens_partitions(self):
        found = {column: [s.positions for s in BoardSearch(4, column)] for column in range(4)}
        self.assertEqual(found, {0: [], 1: [(1, 3, 0, 2)], 2: [(2, 0, 3, 1)], 3: []})

    def test_unsolvable_boards_never_emit(self):
        for n in (2, 3):
            for column in range(n):
                self.assertEqual(list(BoardSearch(n, column)), [])

    def test_exhausted_engine_stays_exhausted(self):
        solver = BoardSearch(4, 1)
        self.assertEqual(len(list(solver)), 1)
        self.assertTrue(solver.exhausted)
        for _ in range(3):
            with self.assertRaises(StopIteration):
                next(solver)
        self.assertEqual(solver.cursor, (2,))

    def test_search_suspends_after_each_solution(self):
        solver = BoardSearch(8, 0)
        first = next(solver)
        self.assertEqual(first.positions, (0, 4, 7, 5, 2, 6, 1, 3))
        # The last row has already been advanced; the next pull resumes from there.
        self.assertEqual(solver.cursor, first.positions[:-1] + (first.positions[-1] + 1,))
        self.assertFalse(solver.exhausted)
        second = next(solver)
        self.assertGreater(second.positions, first.positions)

    def test_solutions_are_valid_and_in_lexicographic_order(self):
        solutions = [s.positions for s in BoardSearch(8, 3)]
        self.assertEqual(len(solutions), 18)
        self.assertEqual(solutions, sorted(solutions))
        for positions in solutions:
            self.assertEqual(positions[0], 3)
            self.assertTrue(is_valid_solution(positions))

    def test_nodes_count_eligibility_tests(self):
        solver = BoardSearch(6, 0)
        self.assertEqual(solver.nodes, 0)
        list(solver)
        self.assertGreater(solver.nodes, 6)

    def test_start_column_outside_board_is_rejected(self):
        for size, column in ((4, 4), (4, -1), (0, 0)):
            with self.assertRaises(ValueError):
                BoardSearch(size, column)

    def test_solution_is_immutable(self):
        solution = next(BoardSearch(5, 0))
        self.assertIsInstance(solution.positions, tuple)
        self.assertEqual(solution.n, 5)
        with self.assertRaises(FrozenInstanceError):
            solution.positions = (0, 0, 0, 0, 0)


class FirstSolutionTests(unittest.TestCase):
    def test_first_solution(self):
        self.assertEqual(first_solution(1).positions, (0,))
        self.assertEqual(first_solution(4).positions, (1, 3, 0, 2))
        self.assertEqual(first_solution(8).positions, (0, 4, 7, 5, 2, 6, 1, 3))

    def test_no_solution(self):
        for n in (0, 2, 3):
            self.assertIsNone(first_solution(n))


if __name__ == "__main__":
    unittest.main()

"""Tests for validation and rendering helpers."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqueens.backtracking import BoardSolution
from nqueens.utils import conflicts, is_valid_solution, render_board


class ConflictTests(unittest.TestCase):
    def test_solution_has_no_conflicts(self):
        self.assertEqual(conflicts((1, 3, 0, 2)), 0)

    def test_counts_column_and_diagonal_pairs(self):
        self.assertEqual(conflicts((0, 0)), 1)
        self.assertEqual(conflicts((0, 1, 2, 3)), 6)  # one diagonal, 4 queens
        self.assertEqual(conflicts((0, 2, 0)), 1)


class ValidSolutionTests(unittest.TestCase):
    def test_valid(self):
        self.assertTrue(is_valid_solution((0,)))
        self.assertTrue(is_valid_solution([2, 0, 3, 1]))

    def test_invalid(self):
        self.assertFalse(is_valid_solution(()))
        self.assertFalse(is_valid_solution((0, 1)))
        self.assertFalse(is_valid_solution((1, 3, 0, 4)))
        self.assertFalse(is_valid_solution((1, 3, 0, 2.0)))


class RenderTests(unittest.TestCase):
    def test_render_board(self):
        expected = "_ Q _ _ \n_ _ _ Q \nQ _ _ _ \n_ _ Q _ "
        self.assertEqual(render_board((1, 3, 0, 2)), expected)

    def test_custom_glyphs(self):
        self.assertEqual(render_board((0,), queen="W"), "W ")
        self.assertEqual(render_board((1, 0), queen="#", empty="."), ". # \n# . ")

    def test_rendering_is_idempotent(self):
        solution = BoardSolution((2, 0, 3, 1))
        self.assertEqual(solution.render(), solution.render())
        self.assertEqual(solution.render(), render_board(solution.positions))


if __name__ == "__main__":
    unittest.main()

import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from zippath.core.puzzle import Grid, Clue, PuzzleResult
from zippath.core.validator import PuzzleValidator, ValidationResult


SNAKE_3 = [0, 1, 2, 5, 4, 3, 6, 7, 8]


class TestValidationResult(unittest.TestCase):

    def test_truthiness(self):
        result = ValidationResult()
        self.assertTrue(result)
        result.add_warning("minor")
        self.assertTrue(result)
        result.add_error("broken")
        self.assertFalse(result)

    def test_merge_carries_errors(self):
        a, b = ValidationResult(), ValidationResult()
        b.add_error("broken")
        a.merge(b)
        self.assertFalse(a)
        self.assertEqual(a.errors, ["broken"])


class TestPathValidation(unittest.TestCase):
    """Hamiltonian path checks."""

    def setUp(self):
        self.grid = Grid(3)

    def test_snake_is_valid(self):
        self.assertTrue(PuzzleValidator.validate_path(SNAKE_3, self.grid))

    def test_short_path(self):
        self.assertFalse(PuzzleValidator.validate_path(SNAKE_3[:-1], self.grid))

    def test_repeated_cell(self):
        self.assertFalse(PuzzleValidator.validate_path(SNAKE_3[:-1] + [0], self.grid))

    def test_non_adjacent_step(self):
        path = [0, 1, 2, 3, 4, 5, 6, 7, 8]  # 2 -> 3 wraps a row
        result = PuzzleValidator.validate_path(path, self.grid)
        self.assertFalse(result)
        self.assertTrue(any("not adjacent" in e for e in result.errors))

    def test_out_of_range_cell(self):
        self.assertFalse(PuzzleValidator.validate_path(SNAKE_3[:-1] + [9], self.grid))


class TestClueValidation(unittest.TestCase):

    def setUp(self):
        self.grid = Grid(3)

    def test_sequence(self):
        clues = [Clue(0, 1), Clue(4, 2), Clue(8, 3)]
        self.assertTrue(PuzzleValidator.validate_clues(clues, self.grid))

    def test_gap_in_values(self):
        clues = [Clue(0, 1), Clue(8, 3)]
        self.assertFalse(PuzzleValidator.validate_clues(clues, self.grid))
        self.assertTrue(PuzzleValidator.validate_clues(clues, self.grid, require_sequence=False))

    def test_duplicate_cell(self):
        clues = [Clue(0, 1), Clue(0, 2)]
        self.assertFalse(PuzzleValidator.validate_clues(clues, self.grid))

    def test_out_of_range(self):
        clues = [Clue(0, 1), Clue(9, 2)]
        self.assertFalse(PuzzleValidator.validate_clues(clues, self.grid))


class TestSolutionValidation(unittest.TestCase):

    def setUp(self):
        self.grid = Grid(3)
        self.clues = [Clue(0, 1), Clue(4, 2), Clue(8, 3)]

    def test_solution_obeys_clues(self):
        self.assertTrue(PuzzleValidator.validate_solution(SNAKE_3, self.clues, self.grid))

    def test_reversed_path_fails(self):
        self.assertFalse(PuzzleValidator.validate_solution(SNAKE_3[::-1], self.clues, self.grid))

    def test_out_of_order_clues(self):
        clues = [Clue(0, 1), Clue(8, 2), Clue(4, 3)]
        self.assertFalse(PuzzleValidator.validate_solution(SNAKE_3, clues, self.grid))

    def test_result_requires_last_clue_at_end(self):
        puzzle = PuzzleResult(
            clues=(Clue(0, 1), Clue(4, 2)),
            solution=tuple(SNAKE_3),
            clue_count=2,
            attempts=1,
            grid_size=3
        )
        self.assertFalse(PuzzleValidator.validate_result(puzzle))

    def test_result_valid(self):
        puzzle = PuzzleResult(
            clues=tuple(self.clues),
            solution=tuple(SNAKE_3),
            clue_count=3,
            attempts=1,
            grid_size=3
        )
        self.assertTrue(PuzzleValidator.validate_result(puzzle))


class TestExtensionRule(unittest.TestCase):
    """The drag-edit rule: clued cells only in order, unclued always."""

    def setUp(self):
        self.grid = Grid(3)
        self.clues = [Clue(0, 1), Clue(4, 2), Clue(8, 3)]

    def test_must_start_on_clue_one(self):
        self.assertTrue(PuzzleValidator.can_extend([], 0, self.clues, self.grid))
        self.assertFalse(PuzzleValidator.can_extend([], 1, self.clues, self.grid))

    def test_unclued_neighbor(self):
        self.assertTrue(PuzzleValidator.can_extend([0], 1, self.clues, self.grid))

    def test_next_clue_allowed(self):
        self.assertTrue(PuzzleValidator.can_extend([0, 1], 4, self.clues, self.grid))

    def test_later_clue_rejected(self):
        self.assertFalse(PuzzleValidator.can_extend([0, 1, 2, 5], 8, self.clues, self.grid))

    def test_visited_and_distant_rejected(self):
        self.assertFalse(PuzzleValidator.can_extend([0, 1], 0, self.clues, self.grid))
        self.assertFalse(PuzzleValidator.can_extend([0, 1], 7, self.clues, self.grid))

    def test_next_expected_value(self):
        self.assertEqual(PuzzleValidator.next_expected_value([0, 1, 4], self.clues), 3)


class TestStatistics(unittest.TestCase):

    def test_snake_statistics(self):
        puzzle = PuzzleResult(
            clues=(Clue(0, 1), Clue(4, 2), Clue(8, 3)),
            solution=tuple(SNAKE_3),
            clue_count=3,
            attempts=1,
            grid_size=3
        )
        stats = PuzzleValidator.get_puzzle_statistics(puzzle)
        self.assertEqual(stats['turns'], 4)
        self.assertEqual(stats['max_clue_gap'], 4)
        self.assertAlmostEqual(stats['avg_clue_gap'], 4.0)
        self.assertAlmostEqual(stats['clue_density'], 3 / 9)


if __name__ == '__main__':
    unittest.main()

import unittest
import sys
import os
import tempfile
from pathlib import Path

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from zippath.core.puzzle import Grid, Clue, PuzzleSpec, PuzzleResult


# Column snake on a 6x6 grid starting at the top-right corner
SNAKE_6 = [5, 11, 17, 23, 29, 35, 34, 28, 22, 16, 10, 4, 3, 9, 15, 21, 27, 33,
           32, 26, 20, 14, 8, 2, 1, 7, 13, 19, 25, 31, 30, 24, 18, 12, 6, 0]


class TestGrid(unittest.TestCase):
    """Tests for grid addressing."""

    def test_total_cells(self):
        self.assertEqual(Grid(6).total_cells, 36)

    def test_row_col_round_trip(self):
        grid = Grid(5)
        self.assertEqual(grid.row_col(13), (2, 3))
        self.assertEqual(grid.index(2, 3), 13)

    def test_corner_neighbors(self):
        self.assertEqual(Grid(6).neighbors(0), (1, 6))

    def test_interior_neighbors_ascending(self):
        self.assertEqual(Grid(6).neighbors(14), (8, 13, 15, 20))

    def test_no_wraparound(self):
        grid = Grid(6)
        self.assertFalse(grid.is_adjacent(5, 6))
        self.assertNotIn(6, grid.neighbors(5))

    def test_single_cell_grid(self):
        grid = Grid(1)
        self.assertEqual(grid.total_cells, 1)
        self.assertEqual(grid.neighbors(0), ())

    def test_invalid_size(self):
        for size in (0, -3, 2.5, True):
            with self.assertRaises(ValueError):
                Grid(size)

    def test_color_alternates(self):
        grid = Grid(3)
        self.assertEqual(grid.color(0), 0)
        self.assertEqual(grid.color(1), 1)
        self.assertEqual(grid.color(4), 0)


class TestClue(unittest.TestCase):
    """Tests for clue records."""

    def test_coerce_pair(self):
        self.assertEqual(Clue.coerce((5, 1)), Clue(5, 1))

    def test_coerce_dict(self):
        self.assertEqual(Clue.coerce({'index': 30, 'value': 2}), Clue(30, 2))

    def test_coerce_clue_is_identity(self):
        clue = Clue(3, 4)
        self.assertIs(Clue.coerce(clue), clue)

    def test_coerce_missing_key(self):
        with self.assertRaises(ValueError):
            Clue.coerce({'index': 3})

    def test_coerce_garbage(self):
        with self.assertRaises(ValueError):
            Clue.coerce(7)


class TestPuzzleSpec(unittest.TestCase):
    """Tests for materializing positions into clues."""

    def test_from_positions_numbers_in_path_order(self):
        spec = PuzzleSpec.from_positions(SNAKE_6, [30, 0], 6)
        self.assertEqual(spec.clues, (Clue(5, 1), Clue(30, 2)))

    def test_from_positions_uses_path_cells(self):
        spec = PuzzleSpec.from_positions(SNAKE_6, [0, 12, 35], 6)
        self.assertEqual([c.index for c in spec.clues], [5, 3, 0])
        self.assertEqual([c.value for c in spec.clues], [1, 2, 3])

    def test_from_positions_ignores_duplicates(self):
        spec = PuzzleSpec.from_positions(SNAKE_6, [0, 0, 35], 6)
        self.assertEqual(len(spec.clues), 2)

    def test_from_clues_sorts_by_value(self):
        spec = PuzzleSpec.from_clues([(30, 2), (5, 1)], 6)
        self.assertEqual(spec.start_cell(), 5)
        self.assertEqual(spec.clue_map(), {5: 1, 30: 2})

    def test_start_cell_missing(self):
        spec = PuzzleSpec.from_clues([(30, 2)], 6)
        self.assertIsNone(spec.start_cell())


class TestPuzzleResult(unittest.TestCase):
    """Tests for finished puzzles."""

    def setUp(self):
        self.puzzle = PuzzleResult(
            clues=(Clue(5, 1), Clue(3, 2), Clue(0, 3)),
            solution=tuple(SNAKE_6),
            clue_count=3,
            attempts=2,
            grid_size=6
        )

    def test_to_dict_keys(self):
        data = self.puzzle.to_dict()
        self.assertEqual(data['clueCount'], 3)
        self.assertEqual(data['clues'][0], {'index': 5, 'value': 1})
        self.assertEqual(data['solution'], SNAKE_6)

    def test_save_and_load(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "puzzle.json"
            self.puzzle.save(path)
            self.assertEqual(PuzzleResult.load(path), self.puzzle)

    def test_to_spec(self):
        spec = self.puzzle.to_spec()
        self.assertEqual(spec.grid_size, 6)
        self.assertEqual(spec.clues, self.puzzle.clues)

    def test_str_marks_clues(self):
        lines = str(self.puzzle).splitlines()
        self.assertEqual(len(lines), 6)
        self.assertEqual(lines[0].split(), ['3', '.', '.', '2', '.', '1'])


if __name__ == '__main__':
    unittest.main()

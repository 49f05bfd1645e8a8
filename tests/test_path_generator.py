import unittest
import sys
import os
import random

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from zippath.core.puzzle import Grid
from zippath.core.validator import PuzzleValidator
from zippath.generators.path_generator import PathGenerator, PathGeneratorConfig


class TestPathGenerator(unittest.TestCase):
    """Random Hamiltonian path construction."""

    def setUp(self):
        self.generator = PathGenerator()

    def test_paths_are_hamiltonian(self):
        rng = random.Random(3)
        for size in (2, 4, 5, 6):
            grid = Grid(size)
            for _ in range(5):
                path = self.generator.generate_path(grid, rng)
                if path is None:
                    continue
                self.assertTrue(PuzzleValidator.validate_path(path, grid))

    def test_even_grid_always_succeeds(self):
        rng = random.Random(11)
        for _ in range(10):
            self.assertIsNotNone(self.generator.generate_path(6, rng))

    def test_single_cell(self):
        self.assertEqual(self.generator.generate_path(1, random.Random(0)), [0])

    def test_same_seed_same_path(self):
        a = self.generator.generate_path(6, random.Random(42))
        b = PathGenerator().generate_path(6, random.Random(42))
        self.assertEqual(a, b)

    def test_different_seeds_vary(self):
        paths = {tuple(self.generator.generate_path(6, random.Random(seed)) or ())
                 for seed in range(8)}
        self.assertGreater(len(paths), 1)

    def test_odd_grid_rejects_minority_color_start(self):
        grid = Grid(5)
        rng = random.Random(5)
        for _ in range(30):
            path = self.generator.generate_path(grid, rng)
            if path is not None:
                self.assertEqual(grid.color(path[0]), grid.color(0))

    def test_odd_grid_without_parity_check_still_terminates(self):
        generator = PathGenerator(PathGeneratorConfig(use_parity_check=False, max_steps=5000))
        grid = Grid(3)
        for seed in range(10):
            path = generator.generate_path(grid, random.Random(seed))
            if path is not None:
                self.assertTrue(PuzzleValidator.validate_path(path, grid))
            self.assertLessEqual(generator.steps, 5001)

    def test_step_budget(self):
        generator = PathGenerator(PathGeneratorConfig(max_steps=3))
        self.assertIsNone(generator.generate_path(6, random.Random(1)))


if __name__ == '__main__':
    unittest.main()

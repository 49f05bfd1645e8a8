import unittest
import sys
import os
import logging
import random
import tempfile
from pathlib import Path

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np

from zippath.core.puzzle import Clue, PuzzleResult
from zippath.core.utils import (
    setup_logger, make_rng, memory_usage, PuzzleConverter,
    save_puzzle_batch, load_puzzle_batch
)


def _snake_puzzle():
    return PuzzleResult(
        clues=(Clue(0, 1), Clue(4, 2), Clue(8, 3)),
        solution=(0, 1, 2, 5, 4, 3, 6, 7, 8),
        clue_count=3,
        attempts=1,
        grid_size=3
    )


class TestMakeRng(unittest.TestCase):

    def test_int_seed_is_deterministic(self):
        a, b = make_rng(7), make_rng(7)
        self.assertEqual([a.random() for _ in range(3)], [b.random() for _ in range(3)])

    def test_random_instance_passes_through(self):
        rng = random.Random(1)
        self.assertIs(make_rng(rng), rng)

    def test_none_gives_fresh_generator(self):
        self.assertIsInstance(make_rng(None), random.Random)

    def test_rejects_other_types(self):
        with self.assertRaises(ValueError):
            make_rng("seed")


class TestLogger(unittest.TestCase):

    def test_handlers_not_duplicated(self):
        setup_logger("ZipTestLogger")
        logger = setup_logger("ZipTestLogger", level="DEBUG")
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)

    def test_file_handler(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "zip.log"
            logger = setup_logger("ZipFileLogger", log_file)
            logger.info("hello")
            for handler in logger.handlers:
                handler.flush()
                handler.close()
            logger.handlers = []
            self.assertIn("hello", log_file.read_text())


class TestPuzzleConverter(unittest.TestCase):

    def test_clue_grid(self):
        grid = PuzzleConverter.to_grid(_snake_puzzle())
        expected = np.array([[1, 0, 0], [0, 2, 0], [0, 0, 3]])
        np.testing.assert_array_equal(grid, expected)

    def test_solution_grid(self):
        grid = PuzzleConverter.solution_grid(_snake_puzzle())
        expected = np.array([[1, 2, 3], [6, 5, 4], [7, 8, 9]])
        np.testing.assert_array_equal(grid, expected)

    def test_to_string(self):
        text = PuzzleConverter.to_string(_snake_puzzle())
        self.assertEqual(text.splitlines()[1], ". 2 .")


class TestBatchIO(unittest.TestCase):

    def test_save_and_load_batch(self):
        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp) / "batch"
            save_puzzle_batch([_snake_puzzle(), _snake_puzzle()], directory)
            (directory / "broken.json").write_text("{not json")
            loaded = load_puzzle_batch(directory)
            self.assertEqual(loaded, [_snake_puzzle(), _snake_puzzle()])


class TestMemoryUsage(unittest.TestCase):

    def test_positive(self):
        self.assertGreater(memory_usage(), 0)


if __name__ == '__main__':
    unittest.main()

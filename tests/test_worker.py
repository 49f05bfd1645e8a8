import unittest
import sys
import os
import asyncio
from concurrent.futures import ThreadPoolExecutor

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from zippath.generators.puzzle_builder import generate_puzzle, PuzzleBuilderConfig
from zippath.worker import PuzzleWorker, generate_puzzle_async


class TestPuzzleWorker(unittest.TestCase):
    """Background generation on a thread pool."""

    def test_submit(self):
        with PuzzleWorker(max_workers=2, use_processes=False) as worker:
            puzzle = worker.submit(4, seed=3).result()
        self.assertEqual(puzzle, generate_puzzle(4, 3))

    def test_generate_many_keeps_seed_order(self):
        seeds = [1, 2, 3]
        with PuzzleWorker(max_workers=3, use_processes=False) as worker:
            results = worker.generate_many(4, seeds)
        self.assertEqual(results, [generate_puzzle(4, seed) for seed in seeds])

    def test_config_is_forwarded(self):
        config = PuzzleBuilderConfig(max_attempts=0)
        with PuzzleWorker(max_workers=1, use_processes=False, config=config) as worker:
            self.assertIsNone(worker.submit(4, seed=0).result())


class TestGeneratePuzzleAsync(unittest.TestCase):

    def test_default_executor(self):
        puzzle = asyncio.run(generate_puzzle_async(4, seed=5))
        self.assertEqual(puzzle, generate_puzzle(4, 5))

    def test_explicit_executor(self):
        async def run_two(executor):
            return await asyncio.gather(
                generate_puzzle_async(4, seed=1, executor=executor),
                generate_puzzle_async(4, seed=2, executor=executor),
            )

        with ThreadPoolExecutor(max_workers=2) as executor:
            first, second = asyncio.run(run_two(executor))
        self.assertEqual(first, generate_puzzle(4, 1))
        self.assertEqual(second, generate_puzzle(4, 2))


if __name__ == '__main__':
    unittest.main()
